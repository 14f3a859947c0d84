from __future__ import annotations
from dataclasses import dataclass, replace
import math

from .constants import (
	G_DEFAULT,
	N_BODIES_DEFAULT,
	ITERATIONS_DEFAULT,
	DT_DEFAULT,
	PLOT_BOUNDS,
	FRAME_DELAY,
)

"""
This central configuration module defines all run parameters through the SimConfig dataclass. Key parameters include the body count, iteration count and time step of a run, the gravitational constant, the seed of the random initial conditions, the force kernel selection, the plotting viewport and frame delay, and the limits of the rate-limited diagnostic prints. The class provides a copy method for configuration inheritance, an evolve method for overriding single fields, and a validate method that checks counts, finiteness and the force kernel against the allowed options. It serves as the single source of truth for simulation behavior, with all components referencing this configuration.

"""
_ALLOWED_KERNELS = {
	"pairwise",
	"vectorized",
}

@dataclass
class SimConfig:
	n_bodies:   int = N_BODIES_DEFAULT
	iterations: int = ITERATIONS_DEFAULT
	dt:         float = DT_DEFAULT
	G:          float = G_DEFAULT
	seed: int | None = None
	force_kernel: str = "pairwise"
	plot_bounds: float = PLOT_BOUNDS
	frame_delay: float = FRAME_DELAY
	check_finite: bool = True
	diag_prints: bool = True
	diag_print_limit: int = 3
	diag_print_interval: int = 1000

	def copy(self) -> "SimConfig":
		new = object.__new__(SimConfig)
		new.__dict__ = dict(getattr(self, "__dict__", {}))
		return new

	def evolve(self, **changes) -> "SimConfig":
		return replace(self, **changes)

	def validate(self) -> "SimConfig":
		if self.force_kernel not in _ALLOWED_KERNELS:
			raise ValueError(
				f"force_kernel must be one of {sorted(_ALLOWED_KERNELS)}, got {self.force_kernel!r}"
			)
		if int(self.n_bodies) < 0:
			raise ValueError(f"n_bodies must be non-negative, got {self.n_bodies}")
		if int(self.iterations) < 0:
			raise ValueError(f"iterations must be non-negative, got {self.iterations}")
		if not math.isfinite(float(self.dt)):
			raise ValueError(f"dt must be finite, got {self.dt}")
		if not math.isfinite(float(self.G)):
			raise ValueError(f"G must be finite, got {self.G}")
		if self.frame_delay < 0.0:
			raise ValueError(f"frame_delay must be non-negative, got {self.frame_delay}")
		return self
