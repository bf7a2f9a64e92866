"""
Relativistic Rocket Kinematics - Numerical Integration

This module implements the two forward-stepping schemes that advance a
RocketState under a proper-frame acceleration. Proper velocity grows
linearly with coordinate time (dw/dt = a), so the velocity update is exact;
the error lives in the proper-time bookkeeping.

Both steps mutate the given state in place and return it. Inputs are not
validated: negative deltas or non-finite accelerations propagate into the
state unchanged.
"""

import numpy as np

from . import constants as C
from . import vectors
from .state import RocketState


def coordinate_time_step(state: RocketState, a: np.ndarray, dt: float) -> RocketState:
    """
    Advance the state by dt of coordinate (observer) time.

    w   <- w + a*dt
    t   <- t + dt
    tau <- tau + dt / gamma(w_new)

    The Lorentz factor is taken from the velocity after the update, which
    over-estimates time dilation by a margin that shrinks as dt -> 0.

    Args:
        state: Rocket state, modified in place
        a: Proper-frame acceleration vector (m/s^2) [3]
        dt: Coordinate time step (s)

    Returns:
        The same state object, advanced
    """
    state.proper_velocity = vectors.add(state.proper_velocity, vectors.scale(a, dt))
    state.coordinate_time += dt
    state.proper_time += dt / state.lorentz_factor
    return state


def proper_time_step(state: RocketState, a: np.ndarray, dtau: float) -> RocketState:
    """
    Advance the state by dtau of proper (shipboard) time.

    dt  = gamma(w_old) * dtau
    w   <- w + a*dt
    t   <- t + dt
    tau <- tau + dtau

    Args:
        state: Rocket state, modified in place
        a: Proper-frame acceleration vector (m/s^2) [3]
        dtau: Proper time step (s)

    Returns:
        The same state object, advanced
    """
    dt = state.lorentz_factor * dtau
    state.proper_velocity = vectors.add(state.proper_velocity, vectors.scale(a, dt))
    state.coordinate_time += dt
    state.proper_time += dtau
    return state


def integrate(state: RocketState, a: np.ndarray, delta: float,
              method: str = C.STEP_MODE_COORDINATE) -> RocketState:
    """
    Advance the state by one step of the chosen clock.

    Args:
        state: Rocket state, modified in place
        a: Proper-frame acceleration vector (m/s^2) [3]
        delta: Step size on the chosen clock (s)
        method: 'coordinate' (delta is dt) or 'proper' (delta is dtau)

    Returns:
        The same state object, advanced

    Raises:
        ValueError: If method is not a known step mode
    """
    if method == C.STEP_MODE_COORDINATE:
        return coordinate_time_step(state, a, delta)
    elif method == C.STEP_MODE_PROPER:
        return proper_time_step(state, a, delta)
    else:
        raise ValueError(f"Unknown integration method: {method}")
