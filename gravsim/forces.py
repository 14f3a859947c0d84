"""
This module implements the gravitational force law and the per-step force pass.

The force on body i due to body j is

    F_ij = G * m_i * m_j * (pos_j - pos_i) / |pos_j - pos_i|^3

and the net force on body i is the sum of F_ij over every j != i. pair_force evaluates
a single term, accumulate_body_force performs the per-body summation against every
other body (zeroing that body's accumulator first), and gravitational_force evaluates
the same sums for all bodies at once with numpy broadcasting over geometry_buffers.
ForceAccumulator wraps either kernel behind one accumulate(state) call used by the
simulation loop. Coincident bodies are not special-cased: a zero separation yields a
non-finite force, silently, and it is up to the caller to avoid or detect that case.
"""

from __future__ import annotations
import numpy as np
from numpy.typing import NDArray
from typing import TYPE_CHECKING

from .constants import G_DEFAULT
from .geometry_cache import geometry_buffers

if TYPE_CHECKING:
    from .simulation_state import SimulationState




def pair_force(
    m_i: float,
    pos_i: NDArray[np.floating],
    m_j: float,
    pos_j: NDArray[np.floating],
    G: float = G_DEFAULT,
) -> NDArray[np.floating]:
    sep = np.asarray(pos_j, dtype=np.float64) - np.asarray(pos_i, dtype=np.float64)
    d = np.sqrt(np.dot(sep, sep))
    with np.errstate(divide="ignore", invalid="ignore"):
        coeff = np.float64(G) * np.float64(m_i) * np.float64(m_j) / (d * d * d)
        return coeff * sep


def accumulate_body_force(state: "SimulationState", i: int, G: float = G_DEFAULT) -> NDArray[np.floating]:
    m = state._mass
    pos = state._pos
    f = state._force[i]
    f[:] = 0.0
    for j in range(state.n_bodies):
        if j == i:
            continue
        f += pair_force(m[i], pos[i], m[j], pos[j], G)
    return f


def gravitational_force(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float = G_DEFAULT,
) -> NDArray[np.floating]:
    pos = np.asarray(pos, dtype=float)
    mass = np.asarray(mass, dtype=float)

    if pos.shape[0] < 2 or G == 0.0:
        return np.zeros_like(pos)

    dr, _, inv_r3 = geometry_buffers(pos)
    with np.errstate(invalid="ignore"):
        F_pair = (G * mass[:, None] * mass[None, :])[..., None] * inv_r3[..., None] * dr
    return F_pair.sum(axis=1)


class ForceAccumulator:
    def __init__(self, G: float = G_DEFAULT, kernel: str = "pairwise") -> None:
        self.G = float(G)
        self.kernel = kernel

    def accumulate(self, state: "SimulationState") -> np.ndarray:
        state.clear_forces()
        if self.kernel == "vectorized":
            state._force[...] = gravitational_force(state._pos, state._mass, self.G)
        else:
            for i in range(state.n_bodies):
                accumulate_body_force(state, i, self.G)
        return state._force

    def __repr__(self) -> str:
        return f"ForceAccumulator(G={self.G}, kernel={self.kernel!r})"
