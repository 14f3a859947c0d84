from __future__ import annotations
import itertools, math
import numpy as np
from typing import List, Tuple, TYPE_CHECKING

from .physics_utils import center_of_mass
if TYPE_CHECKING:
    from .simulation import NBodySimulation

"""
This module computes conserved quantities and system health metrics during N-body simulations. The Diagnostics class provides kinetic and potential energy, total energy, linear and angular momentum, and center of mass position and velocity for the current state of a simulation. check_finite finds bodies whose mass, position, velocity or force has become non-finite, which is how the unguarded coincident-body case shows up, and reports them through a diagnostic print that is rate limited per Diagnostics instance, so every simulation gets its own first reports. The potential energy uses the same unsoftened 1/r law as the force pass, so it is infinite for coincident bodies.

"""




class Diagnostics:
	def __init__(self, simulation: "NBodySimulation"):
		self.sim = simulation
		self._diag_counts = {}

	def kinetic_energy(self) -> float:
		s = 0.0
		for b in self.sim.bodies:
			s += 0.5 * b.mass * (b.vx * b.vx + b.vy * b.vy)
		return s

	def potential_energy(self) -> float:
		s = 0.0
		G = self.sim.G
		for a, b in itertools.combinations(self.sim.bodies, 2):
			dx = b.x - a.x
			dy = b.y - a.y
			r = math.sqrt(dx * dx + dy * dy)
			if r == 0.0:
				return -math.inf
			s -= G * a.mass * b.mass / r
		return s

	def total_energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def linear_momentum(self) -> np.ndarray:
		st = self.sim.state
		return np.sum(st.mass[:, None] * st.vel, axis=0)

	def angular_momentum(self) -> float:
		st = self.sim.state
		r = st.pos
		p = st.mass[:, None] * st.vel
		return float(np.sum(r[:, 0] * p[:, 1] - r[:, 1] * p[:, 0]))

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		st = self.sim.state
		return center_of_mass(st.mass, st.pos), center_of_mass(st.mass, st.vel)

	def non_finite_bodies(self) -> List[int]:
		st = self.sim.state
		ok = (
			np.isfinite(st.mass)
			& np.all(np.isfinite(st.pos), axis=1)
			& np.all(np.isfinite(st.vel), axis=1)
			& np.all(np.isfinite(st.force), axis=1)
		)
		return [int(i) for i in np.flatnonzero(~ok)]

	def check_finite(self) -> List[int]:
		bad = self.non_finite_bodies()
		if bad:
			self._rate_limited_diag_print(
				"non_finite_bodies",
				f"[diag] non-finite state for bodies {bad} at iteration {self.sim.iteration}",
			)
		return bad

	def summary(self) -> dict:
		com_pos, com_vel = self.center_of_mass()
		p = self.linear_momentum()
		return {
			"kinetic_energy": self.kinetic_energy(),
			"potential_energy": self.potential_energy(),
			"total_energy": self.total_energy(),
			"momentum_x": float(p[0]),
			"momentum_y": float(p[1]),
			"angular_momentum": self.angular_momentum(),
			"com_position": float(np.linalg.norm(com_pos)),
			"com_velocity": float(np.linalg.norm(com_vel)),
		}

	def _rate_limited_diag_print(self, key: str, msg: str) -> None:
		cfg = self.sim.cfg
		if not cfg.diag_prints:
			return
		limit = max(0, int(cfg.diag_print_limit))
		interval = max(1, int(cfg.diag_print_interval))

		c = self._diag_counts.get(key, 0) + 1
		self._diag_counts[key] = c

		if c <= limit:
			print(msg)
		elif c % interval == 0:
			print(f"{msg} (occurrence #{c})")

	def reset_counts(self) -> None:
		self._diag_counts.clear()
