"""
Relativistic Rocket Kinematics - Type Definitions

This module provides the vector type alias and TypedDict definitions for
structured return types.
"""

from typing import TypedDict

import numpy as np
from numpy.typing import NDArray


# 3-component real vector, shape (3,), dtype float64
Vector3 = NDArray[np.float64]


class ClosedFormComparison(TypedDict):
    """Numerical integration result against the hyperbolic-motion solution."""
    coordinate_time: float  # Integrated coordinate time (s)
    proper_time: float  # Integrated proper time (s)
    coordinate_speed: float  # Integrated coordinate speed (m/s)
    expected_coordinate_time: float  # Closed-form coordinate time (s)
    expected_proper_time: float  # Closed-form proper time (s)
    expected_coordinate_speed: float  # Closed-form coordinate speed (m/s)
    coordinate_time_error: float  # Relative error (dimensionless)
    proper_time_error: float  # Relative error (dimensionless)
    coordinate_speed_error: float  # Relative error (dimensionless)


class KnownValueResult(TypedDict):
    """Return type for one row of the known-values check."""
    proper_time_years: float  # Row label: shipboard time (yr)
    velocity: bool  # velocity(a, t) matches v
    lorentz_factor: bool  # lorentz_factor_from_accel_time(a, t) matches
    proper_time: bool  # proper_time_for_distance(d, a) matches tau
    coordinate_time: bool  # coordinate_time_for_distance(d, a) matches t
    round_trip: bool  # proper -> coordinate velocity round trip matches v
