from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
	from .simulation_state import SimulationState

"""
This module implements the explicit Euler time integrator that advances body kinematics once the force pass has filled every force accumulator. Velocities are updated first from force over mass, and positions are then advanced with the already-updated velocity, all within the same call. integrate_body advances a single body and touches no other body, while step advances the whole population with numpy array arithmetic and then clears the force accumulators so that no force carries over into the next step. Any real dt is accepted, including zero (kinematics unchanged) and negative values (time reversal); overflow and NaN propagation are left to the caller. The scheme is first order and not time-reversible.

"""


class Integrator:
	def __init__(self, dt: float = 1.0) -> None:
		self.dt = float(dt)
		self.steps_taken = 0

	def _resolve_dt(self, dt: float | None) -> float:
		if dt is None:
			return self.dt
		return float(dt)

	def integrate_body(self, state: "SimulationState", i: int, dt: float | None = None) -> None:
		dt = self._resolve_dt(dt)
		state._vel[i] += dt * state._force[i] / state._mass[i]
		state._pos[i] += dt * state._vel[i]

	def step(self, state: "SimulationState", dt: float | None = None) -> None:
		dt = self._resolve_dt(dt)
		if state.n_bodies > 0:
			with np.errstate(invalid="ignore", over="ignore"):
				state._vel += dt * state._force / state._mass[:, None]
				state._pos += dt * state._vel
		state.clear_forces()
		self.steps_taken += 1

	def __repr__(self) -> str:
		return f"Integrator(dt={self.dt})"
