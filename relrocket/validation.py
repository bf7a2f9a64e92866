"""
Relativistic Rocket Kinematics - Validation Checks

This module implements:
- Known-value table for constant 1 G travel (hyperbolic motion)
- Relative tolerance helpers
- State checks (finite values, time ordering, subluminal speed)
- Simulation configuration checks

State and config checks raise ValidationError on violation. The closed-form
functions themselves are never guarded.
"""

from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from . import constants as C
from .config import SimulationConfig
from .kinematics import (
    coordinate_time_for_distance,
    coordinate_velocity_from_proper,
    lorentz_factor_from_accel_time,
    proper_time_for_distance,
    proper_velocity_from_coordinate,
    velocity,
)
from .state import RocketState
from .types import KnownValueResult


class ValidationError(Exception):
    """Raised when a state or configuration check fails."""
    pass


class KnownValue(NamedTuple):
    """One row of the constant-acceleration travel table."""
    a: float  # proper acceleration (m/s^2)
    tau: float  # shipboard time (s)
    t: float  # observer time (s)
    d: float  # coordinate distance (m)
    v: float  # coordinate velocity (m/s)
    lorentz: float  # Lorentz factor


# Gibbs, "The Relativistic Rocket", table for 1 g
KNOWN_VALUES: List[KnownValue] = [
    KnownValue(C.G, 1 * C.YEAR, 1.19 * C.YEAR, 0.56 * C.LIGHT_YEAR, 0.77 * C.C, 1.58),
    KnownValue(C.G, 2 * C.YEAR, 3.75 * C.YEAR, 2.90 * C.LIGHT_YEAR, 0.97 * C.C, 3.99),
    KnownValue(C.G, 5 * C.YEAR, 83.7 * C.YEAR, 82.7 * C.LIGHT_YEAR, 0.99993 * C.C, 86.2),
    KnownValue(C.G, 8 * C.YEAR, 1840 * C.YEAR, 1839 * C.LIGHT_YEAR, 0.9999998 * C.C, 1895),
    KnownValue(C.G, 12 * C.YEAR, 113243 * C.YEAR, 113242 * C.LIGHT_YEAR, 0.99999999996 * C.C, 116641),
]


def approximately(x: float, y: float, tolerance: float = C.KNOWN_VALUE_TOLERANCE) -> bool:
    """True if x lies strictly inside the band y*(1 -/+ tolerance)."""
    return y * (1 - tolerance) < x < y * (1 + tolerance)


def relative_error(x: float, reference: float) -> float:
    """Relative deviation |x - reference| / |reference|."""
    if abs(reference) == 0.0:
        return float(abs(x))
    return float(abs(x - reference) / abs(reference))


def check_known_values(tolerance: float = C.KNOWN_VALUE_TOLERANCE) -> List[KnownValueResult]:
    """
    Evaluate the closed-form functions against KNOWN_VALUES.

    Args:
        tolerance: Relative tolerance for each comparison

    Returns:
        One KnownValueResult per table row
    """
    results = []
    for row in KNOWN_VALUES:
        round_trip = coordinate_velocity_from_proper(proper_velocity_from_coordinate(row.v))
        results.append(KnownValueResult(
            proper_time_years=row.tau / C.YEAR,
            velocity=approximately(velocity(row.a, row.t), row.v, tolerance),
            lorentz_factor=approximately(
                lorentz_factor_from_accel_time(row.a, row.t), row.lorentz, tolerance),
            proper_time=approximately(proper_time_for_distance(row.d, row.a), row.tau, tolerance),
            coordinate_time=approximately(
                coordinate_time_for_distance(row.d, row.a), row.t, tolerance),
            round_trip=approximately(round_trip, row.v, tolerance),
        ))
    return results


def check_finite_state(state: RocketState) -> bool:
    """
    Check that every state component is finite.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    vec = state.to_vector()
    if not np.all(np.isfinite(vec)):
        raise ValidationError(f"Non-finite state: {vec}")
    return True


def check_time_ordering(state: RocketState, previous: Optional[RocketState] = None) -> bool:
    """
    Check clock ordering.

    With a previous state, neither clock may run backwards and the proper
    time increment may not exceed the coordinate time increment. Without
    one, the state is taken to have started at rest with both clocks at zero.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if previous is None:
        previous = RocketState()
    dt = state.coordinate_time - previous.coordinate_time
    dtau = state.proper_time - previous.proper_time
    if dt < 0:
        raise ValidationError(
            f"Coordinate time decreased: {previous.coordinate_time:.6e}s -> "
            f"{state.coordinate_time:.6e}s"
        )
    if dtau < 0:
        raise ValidationError(
            f"Proper time decreased: {previous.proper_time:.6e}s -> "
            f"{state.proper_time:.6e}s"
        )
    # Rounding slack for equal increments at rest
    if dtau > dt + 1e-9 * max(1.0, dt):
        raise ValidationError(
            f"Proper time ran ahead of coordinate time: dtau={dtau:.6e}s, dt={dt:.6e}s"
        )
    return True


def check_subluminal(state: RocketState) -> bool:
    """
    Check the derived coordinate speed is below c.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    v = state.coordinate_speed
    if not v < C.C:
        raise ValidationError(f"Coordinate speed not below c: v={v / C.C:.12f}c")
    return True


def validate_state(state: RocketState, previous: Optional[RocketState] = None,
                   abort_on_error: bool = True) -> Tuple[bool, Optional[str]]:
    """
    Run all state checks.

    Args:
        state: State to validate
        previous: Earlier state for monotonicity checks
        abort_on_error: If True, raise exception on first error

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        check_finite_state(state)
        check_time_ordering(state, previous)
        check_subluminal(state)
        return True, None
    except ValidationError as e:
        if abort_on_error:
            raise
        return False, str(e)


def validate_config(config: SimulationConfig) -> bool:
    """
    Check a simulation configuration is runnable.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if config.steps <= 0:
        raise ValidationError(f"steps must be positive, got {config.steps}")
    if config.duration < 0:
        raise ValidationError(f"duration must be non-negative, got {config.duration}")
    if config.step_mode not in C.STEP_MODES:
        raise ValidationError(
            f"Unknown step mode: {config.step_mode} (expected one of {C.STEP_MODES})"
        )
    if config.log_interval <= 0:
        raise ValidationError(f"log_interval must be positive, got {config.log_interval}")
    if config.validate_every <= 0:
        raise ValidationError(f"validate_every must be positive, got {config.validate_every}")
    if np.linalg.norm(config.direction) <= C.NORMALIZE_EPSILON and config.acceleration != 0.0:
        raise ValidationError(f"Direction has no length: {config.direction}")
    return True
