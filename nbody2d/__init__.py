"""
This initialization file serves as the main entry point for the 2D N-body simulation
package, exposing all public APIs through a clean namespace.

It re-exports the data model (Body, BodyView, SimulationState), the brute-force force
law (accumulate_force, gravitational_force, pair_force, pair_evaluations), the explicit
Euler Integrator, the NBodySimulation loop and its read-only Snapshot, configuration
(SimConfig and its defaults), randomized initial conditions, validation, diagnostics,
trajectory recording and the console reporters.
"""

from .sim_config import (
    SimConfig,
    DEFAULT_N_BODIES,
    DEFAULT_N_ITERATIONS,
    DEFAULT_DT,
    DEFAULT_G,
    DEFAULT_MIN_SEPARATION,
)
from .simulation_validator import SimulationValidator

from .body import Body
from .body_view import BodyView
from .simulation_state import SimulationState
from .geometry_cache import geometry_buffers, CLAMP, SKIP
from .forces import accumulate_force, gravitational_force, pair_force, pair_evaluations
from .integrator import Integrator
from .snapshot import Snapshot
from .simulation import NBodySimulation
from .trajectory import Trajectory

from .physics_utils import remove_center_of_mass_velocity
from .diagnostics import Diagnostics
from .initial_condition_generator import (
    InitialConditionGenerator,
    GeneratorConfig,
)
from .reporters import format_body, print_snapshot, print_run_header, print_usage


__version__ = "0.1.0"


__all__ = [
    "SimConfig",
    "DEFAULT_N_BODIES",
    "DEFAULT_N_ITERATIONS",
    "DEFAULT_DT",
    "DEFAULT_G",
    "DEFAULT_MIN_SEPARATION",
    "SimulationValidator",
    "Body",
    "BodyView",
    "SimulationState",
    "geometry_buffers",
    "CLAMP",
    "SKIP",
    "accumulate_force",
    "gravitational_force",
    "pair_force",
    "pair_evaluations",
    "Integrator",
    "Snapshot",
    "NBodySimulation",
    "Trajectory",
    "remove_center_of_mass_velocity",
    "Diagnostics",
    "InitialConditionGenerator",
    "GeneratorConfig",
    "format_body",
    "print_snapshot",
    "print_run_header",
    "print_usage",
]
