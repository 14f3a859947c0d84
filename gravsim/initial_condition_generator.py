"""
This module generates random initial conditions for N-body simulations.

The InitialConditionGenerator class draws masses from a shifted Weibull distribution
(offset 1, shape 1, scale 2) so that every mass is strictly positive, and draws each
position component from Normal(0, 10) and each velocity component from Normal(0, 0.5),
all independently. The GeneratorConfig dataclass encapsulates these distribution
parameters together with the seed. Every generator owns a single numpy Generator seeded
once at construction; a seed of None draws fresh entropy from the operating system, so
unseeded runs are never reproducible while seeded runs always are. Methods include
generate_single for raw arrays, create_bodies for Body lists and create_simulation for
direct simulation instantiation.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from typing import Tuple, List, Optional, TYPE_CHECKING

from .body import Body
from .constants import (
	MASS_OFFSET,
	MASS_WEIBULL_SHAPE,
	MASS_WEIBULL_SCALE,
	POSITION_SIGMA,
	VELOCITY_SIGMA,
)
from .physics_utils import remove_center_of_mass_velocity

if TYPE_CHECKING:
	from .sim_config import SimConfig
	from .simulation import NBodySimulation




@dataclass
class GeneratorConfig:
	mass_offset: float = MASS_OFFSET
	mass_shape: float = MASS_WEIBULL_SHAPE
	mass_scale: float = MASS_WEIBULL_SCALE
	position_mean: float = 0.0
	position_sigma: float = POSITION_SIGMA
	velocity_mean: float = 0.0
	velocity_sigma: float = VELOCITY_SIGMA
	remove_com_velocity: bool = False
	seed: Optional[int] = None


class InitialConditionGenerator:

	def __init__(self, config: GeneratorConfig | None = None):
		self.config: GeneratorConfig = config or GeneratorConfig()
		self.rng = np.random.default_rng(self.config.seed)


	def _generate_masses(self, n: int) -> np.ndarray:
		cfg = self.config
		# numpy's weibull has unit scale
		return cfg.mass_offset + cfg.mass_scale * self.rng.weibull(cfg.mass_shape, n)

	def _generate_positions(self, n: int) -> np.ndarray:
		cfg = self.config
		return self.rng.normal(cfg.position_mean, cfg.position_sigma, (n, 2))

	def _generate_velocities(self, m: np.ndarray) -> np.ndarray:
		cfg = self.config
		vel = self.rng.normal(cfg.velocity_mean, cfg.velocity_sigma, (len(m), 2))
		if cfg.remove_com_velocity:
			vel = remove_center_of_mass_velocity(m, vel)
		return vel


	def generate_single(self, n_bodies: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		n = int(n_bodies)
		if n < 0:
			raise ValueError(f"number of bodies must be non-negative, got {n_bodies}")
		m = self._generate_masses(n)
		p = self._generate_positions(n)
		v = self._generate_velocities(m)
		return m, p, v

	def create_bodies(self, n_bodies: int) -> List[Body]:
		m, p, v = self.generate_single(n_bodies)
		return [
			Body(m[i], p[i, 0], p[i, 1], v[i, 0], v[i, 1])
			for i in range(len(m))
		]

	def create_simulation(
		self,
		n_bodies: int | None = None,
		*,
		cfg: "SimConfig" | None = None,
	) -> "NBodySimulation":
		from .simulation import NBodySimulation
		from .sim_config import SimConfig

		cfg = cfg or SimConfig()
		if n_bodies is None:
			n_bodies = cfg.n_bodies
		m, p, v = self.generate_single(n_bodies)
		return NBodySimulation(masses=m, positions=p, velocities=v, cfg=cfg)

	@classmethod
	def from_config(cls, cfg: "SimConfig") -> "InitialConditionGenerator":
		return cls(GeneratorConfig(seed=cfg.seed))
