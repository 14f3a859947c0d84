"""
This module implements NBodySimulation, the loop that owns the body population and
advances it through time.

Each iteration runs the full O(N^2) force pass over every body, then integrates every
body with the configured time step, then emits a Snapshot to each observer. The force
pass always completes for all bodies before any body is moved, since the integrator
reads every freshly accumulated force. A simulation moves through the states
INITIALIZED, STEPPING and FINISHED; there is no pause, resume or cancellation, and a
finished simulation cannot be stepped again. Observers are plain callables that receive
each Snapshot (the console reporter, the history recorder and the live display are all
observers); pacing delays belong to them, never to the loop.
"""

from __future__ import annotations
import enum
from typing import Callable, Iterable, List, Sequence

import numpy as np

from .body import Body
from .body_view import BodyView
from .diagnostics import Diagnostics
from .forces import ForceAccumulator
from .integrator import Integrator
from .sim_config import SimConfig
from .simulation_state import SimulationState
from .simulation_validator import SimulationValidator
from .snapshot import Snapshot


Observer = Callable[[Snapshot], None]


class Status(str, enum.Enum):
	INITIALIZED = "initialized"
	STEPPING = "stepping"
	FINISHED = "finished"


class NBodySimulation:
	def __init__(
		self,
		bodies: Sequence[Body] | None = None,
		*,
		masses=None,
		positions=None,
		velocities=None,
		cfg: SimConfig | None = None,
	) -> None:
		self.cfg = (cfg or SimConfig()).copy().validate()

		self._state = SimulationState()
		if bodies is None and masses is not None:
			if not SimulationValidator.state_is_valid(masses, positions, velocities):
				SimulationValidator.report_invalid_state(
					"NBodySimulation", masses=masses, positions=positions, velocities=velocities
				)
				raise ValueError("invalid initial state: masses must be positive and all values finite with shape (N, 2)")
		if bodies is None and masses is None:
			bodies = []
		if not self._state.build_state(
			list(bodies) if bodies is not None else None, masses, positions, velocities
		):
			bodies = list(bodies or [])
			SimulationValidator.report_invalid_state(
				"NBodySimulation",
				masses=[b.mass for b in bodies],
				positions=[b.position for b in bodies],
				velocities=[b.velocity for b in bodies],
			)
			raise ValueError("invalid initial state: masses must be positive and all values finite")

		self.forces = ForceAccumulator(self.cfg.G, self.cfg.force_kernel)
		self.integrator = Integrator(self.cfg.dt)
		self.diagnostics = Diagnostics(self)

		self.status = Status.INITIALIZED
		self.iteration = 0
		self.time = 0.0

	@property
	def state(self) -> SimulationState:
		return self._state

	@property
	def n_bodies(self) -> int:
		return self._state.n_bodies

	@property
	def G(self) -> float:
		return self.forces.G

	@property
	def dt(self) -> float:
		return self.integrator.dt

	@property
	def bodies(self) -> List[BodyView]:
		return self._state.bodies()

	@property
	def masses(self) -> np.ndarray:
		return self._state.mass

	@property
	def positions(self) -> np.ndarray:
		return self._state.pos

	@property
	def velocities(self) -> np.ndarray:
		return self._state.vel

	def snapshot(self) -> Snapshot:
		return self._state.snapshot(self.iteration, self.time)

	def compute_forces(self) -> np.ndarray:
		return self.forces.accumulate(self._state)

	def integrate(self, dt: float | None = None) -> None:
		self.integrator.step(self._state, dt)

	def step(self, dt: float | None = None) -> Snapshot:
		if self.status is Status.FINISHED:
			raise RuntimeError("cannot step a finished simulation")
		self.status = Status.STEPPING

		dt = self.dt if dt is None else float(dt)
		self.compute_forces()
		self.integrate(dt)

		self.iteration += 1
		self.time += dt

		if self.cfg.check_finite:
			self.diagnostics.check_finite()
		return self.snapshot()

	def run(
		self,
		iterations: int | None = None,
		observers: Iterable[Observer] = (),
	) -> Snapshot | None:
		if self.status is Status.FINISHED:
			raise RuntimeError("simulation has already finished")
		if iterations is None:
			iterations = self.cfg.iterations
		iterations = int(iterations)
		if iterations < 0:
			raise ValueError(f"iterations must be non-negative, got {iterations}")

		observers = list(observers)
		snap = None
		for _ in range(iterations):
			snap = self.step()
			for observer in observers:
				observer(snap)

		self.status = Status.FINISHED
		return snap

	def __repr__(self) -> str:
		return (f"NBodySimulation(n_bodies={self.n_bodies}, iteration={self.iteration}, "
				f"status={self.status.value})")
