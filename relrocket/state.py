"""
Relativistic Rocket Kinematics - Rocket State

This module defines the kinematic state dataclass advanced by the
integrators. Only proper velocity and the two clocks are stored; every other
quantity is derived on demand.
"""

from dataclasses import dataclass, field
import numpy as np

from . import constants as C
from . import vectors
from .kinematics import coordinate_velocity_from_proper, lorentz_factor_from_proper


@dataclass
class RocketState:
    """
    Kinematic state of an idealized point-mass rocket.

    Attributes:
        proper_velocity: Proper velocity (celerity) vector (m/s) [3].
            Its magnitude is unbounded and may exceed c.
        coordinate_time: Elapsed observer time since creation (s)
        proper_time: Elapsed shipboard time since creation (s)
    """

    # Proper velocity (m/s)
    proper_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))

    # Observer clock (s)
    coordinate_time: float = 0.0

    # Shipboard clock (s)
    proper_time: float = 0.0

    def __post_init__(self):
        """Ensure the velocity is a float64 array and clocks are floats."""
        self.proper_velocity = np.asarray(self.proper_velocity, dtype=np.float64)
        self.coordinate_time = float(self.coordinate_time)
        self.proper_time = float(self.proper_time)

    def copy(self) -> 'RocketState':
        """Create a deep copy of the state."""
        return RocketState(
            proper_velocity=self.proper_velocity.copy(),
            coordinate_time=self.coordinate_time,
            proper_time=self.proper_time
        )

    def to_vector(self) -> np.ndarray:
        """Convert state to a flat numpy array [w(3), t, tau]."""
        return np.concatenate([
            self.proper_velocity, [self.coordinate_time, self.proper_time]
        ])

    @property
    def proper_speed(self) -> float:
        """Magnitude of proper velocity (m/s)."""
        return vectors.magnitude(self.proper_velocity)

    @property
    def coordinate_speed(self) -> float:
        """Coordinate speed derived from proper velocity (m/s), always < c."""
        return float(coordinate_velocity_from_proper(self.proper_speed))

    @property
    def coordinate_velocity(self) -> np.ndarray:
        """Coordinate velocity vector (m/s)."""
        return vectors.scale(vectors.normalized(self.proper_velocity), self.coordinate_speed)

    @property
    def lorentz_factor(self) -> float:
        """Instantaneous Lorentz factor, >= 1."""
        return float(lorentz_factor_from_proper(self.proper_speed))

    @property
    def beta(self) -> float:
        """Coordinate speed as a fraction of c."""
        return self.coordinate_speed / C.C

    def __str__(self) -> str:
        """Human-readable state summary."""
        return (
            f"RocketState(t={self.coordinate_time / C.YEAR:.4f}y, "
            f"tau={self.proper_time / C.YEAR:.4f}y, "
            f"v={self.beta:.6f}c, "
            f"gamma={self.lorentz_factor:.4f})"
        )


def create_initial_state() -> RocketState:
    """
    Create a rocket at rest with both clocks at zero.

    Returns:
        RocketState initialized to rest.
    """
    return RocketState(
        proper_velocity=np.zeros(3),
        coordinate_time=0.0,
        proper_time=0.0
    )
