"""
This module implements BodyView, a proxy class providing Body-like access to individual
bodies stored in the simulation's numpy arrays.

The class uses properties with getters and setters to map attribute access (x, y, vx,
vy, fx, fy) directly to the appropriate array indices in the parent state, maintaining
the same interface as Body while operating on the contiguous array storage. Mass is
exposed read-only because it is fixed for the lifetime of a body. The vector properties
(position, velocity, force) return writable numpy row views, so in-place arithmetic on
them updates the state. The view assumes the parent state keeps its array structures
and that the body index remains within bounds.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np
if TYPE_CHECKING:
    from .simulation_state import SimulationState




class BodyView:
	__slots__ = ("_state", "_i")

	def __init__(self, state: "SimulationState", idx: int) -> None:
		self._state = state
		self._i = int(idx)

	@property
	def index(self) -> int:
		return self._i

	@property
	def mass(self) -> float:
		return float(self._state._mass[self._i])

	@property
	def x(self) -> float:
		return float(self._state._pos[self._i, 0])
	@x.setter
	def x(self, v: float) -> None:
		self._state._pos[self._i, 0] = float(v)

	@property
	def y(self) -> float:
		return float(self._state._pos[self._i, 1])
	@y.setter
	def y(self, v: float) -> None:
		self._state._pos[self._i, 1] = float(v)

	@property
	def vx(self) -> float:
		return float(self._state._vel[self._i, 0])
	@vx.setter
	def vx(self, v: float) -> None:
		self._state._vel[self._i, 0] = float(v)

	@property
	def vy(self) -> float:
		return float(self._state._vel[self._i, 1])
	@vy.setter
	def vy(self, v: float) -> None:
		self._state._vel[self._i, 1] = float(v)

	@property
	def fx(self) -> float:
		return float(self._state._force[self._i, 0])

	@property
	def fy(self) -> float:
		return float(self._state._force[self._i, 1])

	@property
	def position(self) -> np.ndarray:
		return self._state._pos[self._i]

	@property
	def velocity(self) -> np.ndarray:
		return self._state._vel[self._i]

	@property
	def force(self) -> np.ndarray:
		return self._state._force[self._i]

	def __repr__(self) -> str:
		return (f"Body(mass={self.mass}, x={self.x}, y={self.y}, "
				f"vx={self.vx}, vy={self.vy})")
