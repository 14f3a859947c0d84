"""
This initialization file serves as the main entry point for the gravsim package,
exposing the public API through a clean namespace.

It re-exports the body containers (Body, BodyView, SimulationState, Snapshot), the
simulation loop (NBodySimulation, Status), the force law and force pass (pair_force,
accumulate_body_force, gravitational_force, ForceAccumulator), the Euler Integrator,
random initial conditions (InitialConditionGenerator, GeneratorConfig), configuration
(SimConfig), validation and diagnostics, and the console and history reporters. The
matplotlib display lives in gravsim.display and is imported on demand so that headless
use never touches a plotting backend.
"""

from .constants import G_DEFAULT
from .sim_config import SimConfig
from .simulation_validator import SimulationValidator

from .body import Body
from .body_view import BodyView
from .snapshot import Snapshot
from .simulation_state import SimulationState
from .geometry_cache import geometry_buffers
from .forces import (
	pair_force,
	accumulate_body_force,
	gravitational_force,
	ForceAccumulator,
)
from .integrator import Integrator
from .simulation import NBodySimulation, Status

from .physics_utils import center_of_mass, remove_center_of_mass_velocity
from .diagnostics import Diagnostics
from .initial_condition_generator import (
	InitialConditionGenerator,
	GeneratorConfig,
)
from .reporters import ConsoleReporter, HistoryRecorder, format_body_line


__version__ = "0.1.0"

__all__ = [
	"G_DEFAULT",
	"SimConfig",
	"SimulationValidator",
	"Body",
	"BodyView",
	"Snapshot",
	"SimulationState",
	"geometry_buffers",
	"pair_force",
	"accumulate_body_force",
	"gravitational_force",
	"ForceAccumulator",
	"Integrator",
	"NBodySimulation",
	"Status",
	"center_of_mass",
	"remove_center_of_mass_velocity",
	"Diagnostics",
	"InitialConditionGenerator",
	"GeneratorConfig",
	"ConsoleReporter",
	"HistoryRecorder",
	"format_body_line",
]
