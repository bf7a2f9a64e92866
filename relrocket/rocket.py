"""
Relativistic Rocket Kinematics - Rocket

A Rocket owns one RocketState and advances it with the integrators. One
instance models one rocket; instances share nothing, but a single instance
is not safe to step from several threads at once.
"""

from typing import Optional

import numpy as np

from .integrators import coordinate_time_step, proper_time_step
from .state import RocketState


class Rocket:
    """
    Stateful integrator for a rocket under proper acceleration.

    Example:
        >>> rocket = Rocket()
        >>> a = vector3(G, 0.0, 0.0)
        >>> for _ in range(1000):
        ...     rocket.step_by_proper_time(a, YEAR / 1000)
        >>> rocket.coordinate_speed / C
    """

    def __init__(self, proper_velocity: Optional[np.ndarray] = None,
                 coordinate_time: float = 0.0, proper_time: float = 0.0):
        if proper_velocity is None:
            proper_velocity = np.zeros(3)
        self._state = RocketState(
            proper_velocity=proper_velocity,
            coordinate_time=coordinate_time,
            proper_time=proper_time
        )

    @classmethod
    def from_state(cls, state: RocketState) -> 'Rocket':
        """Create a rocket starting from a copy of an existing state."""
        return cls(
            proper_velocity=state.proper_velocity.copy(),
            coordinate_time=state.coordinate_time,
            proper_time=state.proper_time
        )

    def step_by_coordinate_time(self, a: np.ndarray, dt: float) -> None:
        """Apply acceleration a (m/s^2) for dt seconds of observer time."""
        coordinate_time_step(self._state, a, dt)

    def step_by_proper_time(self, a: np.ndarray, dtau: float) -> None:
        """Apply acceleration a (m/s^2) for dtau seconds of shipboard time."""
        proper_time_step(self._state, a, dtau)

    @property
    def state(self) -> RocketState:
        """Snapshot of the current state."""
        return self._state.copy()

    @property
    def proper_velocity(self) -> np.ndarray:
        return self._state.proper_velocity.copy()

    @property
    def coordinate_time(self) -> float:
        return self._state.coordinate_time

    @property
    def proper_time(self) -> float:
        return self._state.proper_time

    @property
    def coordinate_velocity(self) -> np.ndarray:
        return self._state.coordinate_velocity

    @property
    def coordinate_speed(self) -> float:
        return self._state.coordinate_speed

    @property
    def lorentz_factor(self) -> float:
        return self._state.lorentz_factor

    def __repr__(self) -> str:
        return f"Rocket({self._state})"
