"""
Relativistic Rocket Kinematics - Simulation Driver

This module runs a rocket under constant proper acceleration from a
SimulationConfig with:
- Fixed-size steps on the configured clock
- Periodic data logging
- Periodic state checks
- Comparison against the closed-form hyperbolic-motion solution
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from . import constants as C
from .config import SimulationConfig, create_default_config
from .integrators import integrate
from .kinematics import (
    coordinate_time_for_proper_time,
    distance_for_coordinate_time,
    proper_time_for_distance,
    velocity,
)
from .state import RocketState, create_initial_state
from .types import ClosedFormComparison
from .validation import ValidationError, relative_error, validate_config, validate_state

# Configure module logger
logger = logging.getLogger(__name__)


@dataclass
class SimulationLog:
    """Container for logged simulation data."""
    coordinate_time: List[float] = field(default_factory=list)   # s
    proper_time: List[float] = field(default_factory=list)       # s
    coordinate_speed: List[float] = field(default_factory=list)  # m/s
    beta: List[float] = field(default_factory=list)              # v/c
    proper_speed: List[float] = field(default_factory=list)      # m/s
    lorentz_factor: List[float] = field(default_factory=list)

    def append(self, state: RocketState):
        """Log data from current step."""
        self.coordinate_time.append(state.coordinate_time)
        self.proper_time.append(state.proper_time)
        self.coordinate_speed.append(state.coordinate_speed)
        self.beta.append(state.beta)
        self.proper_speed.append(state.proper_speed)
        self.lorentz_factor.append(state.lorentz_factor)

    def __len__(self) -> int:
        return len(self.coordinate_time)


def run_simulation(config: Optional[SimulationConfig] = None,
                   initial_state: Optional[RocketState] = None,
                   verbose: Optional[bool] = None) -> Tuple[RocketState, SimulationLog, str]:
    """
    Run a constant-acceleration simulation.

    Args:
        config: Run parameters (defaults to create_default_config())
        initial_state: Starting state (defaults to rest); copied, not mutated
        verbose: Print progress table (defaults to config.verbose)

    Returns:
        Tuple of (final_state, log, termination_reason)

    Raises:
        ValidationError: If the configuration is not runnable
    """
    if config is None:
        config = create_default_config()
    if verbose is None:
        verbose = config.verbose
    validate_config(config)

    if initial_state is not None:
        state = initial_state.copy()
    else:
        state = create_initial_state()

    a = config.acceleration_vector
    delta = config.step_size
    log = SimulationLog()
    log.append(state)

    logger.info(f"Starting simulation: a={config.acceleration} m/s^2, "
                f"duration={config.duration / C.YEAR:.4f}y ({config.step_mode} time), "
                f"steps={config.steps}")
    logger.debug(f"Initial state: {state}")

    if verbose:
        print("\n" + "=" * 72)
        print(f"RELATIVISTIC ROCKET | a={config.acceleration} m/s^2 | "
              f"steps={config.steps} | mode={config.step_mode}")
        print("=" * 72)
        print(f"{'t (y)':^12} | {'tau (y)':^12} | {'v (c)':^14} | {'gamma':^12}")
        print("-" * 72)

    start_time = time.time()
    last_checked = state.copy()
    reason = f"Completed {config.steps} steps"
    print_every = max(1, config.steps // 10)

    for step in range(1, config.steps + 1):
        integrate(state, a, delta, method=config.step_mode)

        if step % config.validate_every == 0 or step == config.steps:
            try:
                validate_state(state, previous=last_checked)
            except ValidationError as e:
                logger.error(f"Validation failed at step {step}: {e}")
                reason = f"Validation failure: {e}"
                log.append(state)
                break
            last_checked = state.copy()

        if step % config.log_interval == 0 or step == config.steps:
            log.append(state)

        if verbose and step % print_every == 0:
            _print_status(state)

    elapsed = time.time() - start_time
    _log_completion(state, step, elapsed)

    return state, log, reason


def compare_with_closed_form(state: RocketState, acceleration: float,
                             step_mode: str = C.STEP_MODE_COORDINATE) -> ClosedFormComparison:
    """
    Compare an integrated state against hyperbolic motion from rest.

    In 'coordinate' mode the integrated coordinate time is the independent
    variable and proper time and speed are predicted from it. In 'proper'
    mode the integrated proper time drives the prediction instead.

    Args:
        state: Integrated state (straight-line acceleration from rest)
        acceleration: Proper acceleration magnitude used (m/s^2)
        step_mode: Clock the run was stepped on

    Returns:
        ClosedFormComparison with numerical, expected and relative errors

    Raises:
        ValueError: If step_mode is not a known step mode
    """
    if step_mode == C.STEP_MODE_PROPER:
        expected_t = float(coordinate_time_for_proper_time(state.proper_time, acceleration))
        expected_tau = state.proper_time
    elif step_mode == C.STEP_MODE_COORDINATE:
        expected_t = state.coordinate_time
        distance = distance_for_coordinate_time(acceleration, expected_t)
        expected_tau = float(proper_time_for_distance(distance, acceleration))
    else:
        raise ValueError(f"Unknown step mode: {step_mode}")
    expected_speed = float(velocity(acceleration, expected_t))

    return ClosedFormComparison(
        coordinate_time=state.coordinate_time,
        proper_time=state.proper_time,
        coordinate_speed=state.coordinate_speed,
        expected_coordinate_time=expected_t,
        expected_proper_time=expected_tau,
        expected_coordinate_speed=expected_speed,
        coordinate_time_error=relative_error(state.coordinate_time, expected_t),
        proper_time_error=relative_error(state.proper_time, expected_tau),
        coordinate_speed_error=relative_error(state.coordinate_speed, expected_speed),
    )



def _print_status(state: RocketState):
    """Print a formatted status row."""
    msg = (f"{state.coordinate_time / C.YEAR:12.6f} | {state.proper_time / C.YEAR:12.6f} | "
           f"{state.beta:14.10f} | {state.lorentz_factor:12.6f}")
    print(msg)
    logger.debug(msg)


def _log_completion(state: RocketState, steps: int, elapsed: float):
    """Log completion statistics."""
    logger.info(f"Simulation complete: {steps} steps in {elapsed:.2f}s")
    logger.info(f"Final state: {state}")
