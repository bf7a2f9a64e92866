"""
Relativistic Rocket Kinematics - Vector Operations

Small helpers for 3-component real vectors. Vectors are numpy float64
arrays of shape (3,); every function returns a new array.
"""

import numpy as np

from . import constants as C
from .types import Vector3


def vector3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Vector3:
    """Build a Vector3 from its components."""
    return np.array([x, y, z], dtype=np.float64)


def magnitude(v: Vector3) -> float:
    """Euclidean norm sqrt(x^2 + y^2 + z^2)."""
    return float(np.linalg.norm(v))


def normalized(v: Vector3) -> Vector3:
    """
    Scale a vector to unit length.

    Args:
        v: Vector to normalize

    Returns:
        Unit vector along v, or the zero vector if |v| <= NORMALIZE_EPSILON
    """
    m = magnitude(v)
    if m <= C.NORMALIZE_EPSILON:
        return np.zeros(3)
    return np.asarray(v, dtype=np.float64) / m


def add(v: Vector3, w: Vector3) -> Vector3:
    """Componentwise sum v + w."""
    return np.asarray(v, dtype=np.float64) + np.asarray(w, dtype=np.float64)


def scale(v: Vector3, s: float) -> Vector3:
    """Componentwise product v * s."""
    return np.asarray(v, dtype=np.float64) * s
