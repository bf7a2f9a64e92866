"""
Relativistic Rocket Kinematics Package

An idealized point-mass rocket under constant proper acceleration in
special relativity. Provides closed-form solutions for travel time,
velocity and Lorentz factor, and a step integrator that tracks proper
velocity together with observer and shipboard clocks.

General relativity is not modeled, and precision is limited to 64-bit
floats. The numerical steps over-estimate time dilation because the
coordinate-time step uses the Lorentz factor after the velocity update.

Modules:
    - constants: Physical constants and simulation defaults
    - vectors: 3-vector helpers
    - kinematics: Closed-form relativistic rocket formulas
    - state: Rocket state dataclass
    - integrators: Coordinate-time and proper-time steps
    - rocket: Stateful Rocket integrator
    - config: Simulation configuration
    - validation: Known values and state checks
    - main: Simulation driver
    - plotting: Plots of a simulation log
"""

from .constants import C, G, LIGHT_YEAR, YEAR
from .kinematics import (
    coordinate_time_for_distance,
    coordinate_time_to_reach_velocity,
    coordinate_velocity_from_proper,
    lorentz_factor,
    lorentz_factor_from_accel_time,
    lorentz_factor_from_proper,
    proper_time_for_distance,
    proper_velocity_from_coordinate,
    velocity,
    velocity_with_initial,
)
from .vectors import vector3
from .state import RocketState, create_initial_state
from .rocket import Rocket
from .main import run_simulation, compare_with_closed_form, SimulationLog
from .config import SimulationConfig, create_default_config, create_test_config

__version__ = "1.0.0"

__all__ = [
    'C',
    'G',
    'LIGHT_YEAR',
    'YEAR',
    'coordinate_time_for_distance',
    'coordinate_time_to_reach_velocity',
    'coordinate_velocity_from_proper',
    'lorentz_factor',
    'lorentz_factor_from_accel_time',
    'lorentz_factor_from_proper',
    'proper_time_for_distance',
    'proper_velocity_from_coordinate',
    'velocity',
    'velocity_with_initial',
    'vector3',
    'RocketState',
    'create_initial_state',
    'Rocket',
    'run_simulation',
    'compare_with_closed_form',
    'SimulationLog',
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
]
