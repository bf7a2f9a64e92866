"""
Relativistic Rocket Kinematics - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
allowing different run parameters to be passed to the simulation driver
without modifying global constants.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from . import constants as C
from . import vectors


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for a constant-acceleration run.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Section grouping:
      1. Thrust profile
      2. Timing
      3. Logging / checks
    """

    # ── 1. Thrust profile ────────────────────────────────────────────────
    acceleration: float = C.G                              # m/s^2 (proper)
    direction: Tuple[float, float, float] = (1.0, 0.0, 0.0)

    # ── 2. Timing ────────────────────────────────────────────────────────
    # Span of coordinate time (step_mode='coordinate') or proper time
    # (step_mode='proper') to integrate over
    duration: float = C.DEFAULT_DURATION                   # s
    steps: int = C.DEFAULT_STEPS
    step_mode: str = C.STEP_MODE_COORDINATE

    # ── 3. Logging / checks ──────────────────────────────────────────────
    log_interval: int = C.DEFAULT_LOG_INTERVAL
    validate_every: int = C.DEFAULT_VALIDATE_EVERY
    verbose: bool = True

    @property
    def acceleration_vector(self) -> np.ndarray:
        """Acceleration along the unit direction (m/s^2) [3]."""
        return vectors.scale(vectors.normalized(np.array(self.direction, dtype=np.float64)),
                             self.acceleration)

    @property
    def step_size(self) -> float:
        """Per-step delta on the configured clock (s)."""
        return self.duration / self.steps


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(steps: int = 1000, duration: float = C.YEAR,
                       **overrides) -> SimulationConfig:
    """Create a fast config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(steps=steps, duration=duration, verbose=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
