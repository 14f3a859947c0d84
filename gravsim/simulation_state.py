"""
This module manages the internal state representation for N-body simulations.

The SimulationState class maintains contiguous numpy arrays for masses, positions,
velocities and the per-step force accumulator, provides property accessors with
validation, handles state initialization from either a list of Body objects or raw
mass/position/velocity sequences, and produces snapshots for observers. The arrays are
allocated once by build_state, which applies the same validity checks to both input forms, and never resized afterwards; assignments through the
properties copy into the existing storage. The force array is scratch space that is
zero outside of a step.
"""

from __future__ import annotations
import numpy as np
from typing import List, TYPE_CHECKING

from .body_view import BodyView
from .simulation_validator import SimulationValidator
from .snapshot import Snapshot

if TYPE_CHECKING:
    from .body import Body




class SimulationState:

	def __init__(self):
		self.n_bodies: int = 0
		self._mass: np.ndarray = np.empty(0, dtype=np.float64)
		self._pos: np.ndarray = np.empty((0, 2), dtype=np.float64)
		self._vel: np.ndarray = np.empty((0, 2), dtype=np.float64)
		self._force: np.ndarray = np.empty((0, 2), dtype=np.float64)

	@property
	def pos(self) -> np.ndarray:
		return self._pos

	@property
	def vel(self) -> np.ndarray:
		return self._vel

	@property
	def mass(self) -> np.ndarray:
		return self._mass

	@property
	def force(self) -> np.ndarray:
		return self._force

	@pos.setter
	def pos(self, value: np.ndarray) -> None:
		arr = np.asarray(value, dtype=np.float64)
		if arr.ndim == 1:
			arr = arr.reshape(-1, 2)
		if arr.shape != self._pos.shape:
			raise ValueError(f"shape mismatch when assigning to pos: "
							 f"expected {self._pos.shape}, got {arr.shape}")
		self._pos[...] = arr

	@vel.setter
	def vel(self, value: np.ndarray) -> None:
		arr = np.asarray(value, dtype=np.float64)
		if arr.ndim == 1:
			arr = arr.reshape(-1, 2)
		if arr.shape != self._vel.shape:
			raise ValueError(f"shape mismatch when assigning to vel: "
							 f"expected {self._vel.shape}, got {arr.shape}")
		self._vel[...] = arr

	def build_state(self, bodies: List[Body] | None, masses=None, positions=None, velocities=None) -> bool:
		if bodies is None:
			if masses is None or positions is None:
				return False

			m = np.asarray(masses, dtype=np.float64).ravel()
			n = m.size
			p = np.asarray(positions, dtype=np.float64)
			if velocities is None:
				v = np.zeros((n, 2), dtype=np.float64)
			else:
				v = np.asarray(velocities, dtype=np.float64)

			if p.size != 2 * n or v.size != 2 * n:
				return False

			self.n_bodies = n
			self._mass = m.copy()
			self._pos = p.reshape(n, 2).copy()
			self._vel = v.reshape(n, 2).copy()

		else:
			self.n_bodies = len(bodies)
			self._mass = np.array([b.mass for b in bodies], dtype=np.float64)
			self._pos = np.array([(b.x, b.y) for b in bodies], dtype=np.float64).reshape(-1, 2)
			self._vel = np.array([(b.vx, b.vy) for b in bodies], dtype=np.float64).reshape(-1, 2)

		if not SimulationValidator.state_is_valid(self._mass, self._pos, self._vel):
			return False

		self._force = np.zeros_like(self._pos)
		return True

	def clear_forces(self) -> None:
		self._force.fill(0.0)

	def body(self, idx: int) -> BodyView:
		if not -self.n_bodies <= idx < self.n_bodies:
			raise IndexError(f"body index {idx} out of range for {self.n_bodies} bodies")
		return BodyView(self, idx % self.n_bodies)

	def bodies(self) -> List[BodyView]:
		return [BodyView(self, i) for i in range(self.n_bodies)]

	def momentum(self) -> np.ndarray:
		return np.sum(self._mass[:, None] * self._vel, axis=0)

	def snapshot(self, iteration: int = 0, time: float = 0.0) -> Snapshot:
		return Snapshot(
			iteration=int(iteration),
			time=float(time),
			masses=self._mass.copy(),
			positions=self._pos.copy(),
			velocities=self._vel.copy(),
		)
