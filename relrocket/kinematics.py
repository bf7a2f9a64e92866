"""
Relativistic Rocket Kinematics - Closed-Form Solutions

This module implements the algebraic solutions for a rocket under constant
proper acceleration (hyperbolic motion) starting from rest.

Notation:
    a    proper acceleration (m/s^2)
    v    coordinate velocity (m/s)
    w    proper velocity (m/s)
    t    coordinate (observer) time (s)
    tau  proper (shipboard) time (s)
    d    coordinate distance (m)

All functions accept floats or numpy arrays. Inputs outside the physical
domain (v >= C, a <= 0 where a root or arccosh argument goes invalid)
yield NaN or inf; nothing is clamped.

Reference: P. Gibbs, "The Relativistic Rocket",
http://math.ucr.edu/home/baez/physics/Relativity/SR/Rocket/rocket.html
"""

import numpy as np

from . import constants as C


def coordinate_time_for_distance(d, a):
    """
    Coordinate time to cover distance d from rest.

    t = sqrt((d/c)^2 + 2d/a)

    Args:
        d: Coordinate distance (m)
        a: Proper acceleration (m/s^2)

    Returns:
        Coordinate time (s)
    """
    q = d / C.C
    return np.sqrt(q * q + np.divide(2.0 * d, a))


def velocity(a, t):
    """
    Coordinate velocity after accelerating from rest for coordinate time t.

    v = at / sqrt(1 + (at/c)^2)

    Args:
        a: Proper acceleration (m/s^2)
        t: Coordinate time (s)

    Returns:
        Coordinate velocity (m/s)
    """
    at = a * t
    return at / np.sqrt(1.0 + (at / C.C) ** 2)


def velocity_with_initial(a, t, v0):
    """
    Coordinate velocity after accelerating for time t starting at v0.

    The initial velocity is translated into the coordinate time needed to
    reach it from rest, and the motion continues from there.

    Args:
        a: Proper acceleration (m/s^2)
        t: Additional coordinate time (s)
        v0: Initial coordinate velocity (m/s)

    Returns:
        Coordinate velocity (m/s)
    """
    # v0 = 0 takes velocity(a, t) exactly, elementwise for arrays
    t0 = coordinate_time_to_reach_velocity(a, v0)
    return np.where(v0 == 0, velocity(a, t), velocity(a, t0 + t))[()]


def coordinate_time_to_reach_velocity(a, v):
    """
    Coordinate time to reach coordinate velocity v from rest.

    t = cv / (a sqrt(c^2 - v^2))
    """
    return (C.C * v) / (a * np.sqrt(C.C_SQUARED - v * v))


def proper_velocity_from_coordinate(v):
    """
    Convert coordinate velocity to proper velocity.

    w = v / sqrt(1 - (v/c)^2)
    """
    r = v / C.C
    return v / np.sqrt(1.0 - r * r)


def coordinate_velocity_from_proper(w):
    """
    Convert proper velocity to coordinate velocity.

    v = cw / sqrt(c^2 + w^2)

    The result is strictly below c for every finite w.
    """
    return (C.C * w) / np.sqrt(C.C_SQUARED + w * w)


def proper_time_for_distance(d, a):
    """
    Proper (shipboard) time to cover coordinate distance d from rest.

    tau = (c/a) acosh(ad/c^2 + 1)

    Args:
        d: Coordinate distance (m)
        a: Proper acceleration (m/s^2)

    Returns:
        Proper time (s)
    """
    return np.divide(C.C, a) * np.arccosh((a * d) / C.C_SQUARED + 1.0)


def lorentz_factor_from_accel_time(a, t):
    """
    Lorentz factor after accelerating from rest for coordinate time t.

    gamma = sqrt(1 + (at/c)^2)
    """
    x = (a * t) / C.C
    return np.sqrt(1.0 + x * x)


def lorentz_factor(v):
    """Lorentz factor for coordinate speed v: 1 / sqrt(1 - (v/c)^2)."""
    beta = v / C.C
    return 1.0 / np.sqrt(1.0 - beta * beta)


def lorentz_factor_from_proper(w):
    """
    Lorentz factor for proper speed w.

    gamma = sqrt(1 + (w/c)^2)

    Stays finite for every finite w, unlike going through the coordinate
    speed, which rounds to c once w is large.
    """
    x = w / C.C
    return np.sqrt(1.0 + x * x)


def distance_for_coordinate_time(a, t):
    """
    Coordinate distance covered from rest in coordinate time t.

    d = (c^2/a) (sqrt(1 + (at/c)^2) - 1)
    """
    return np.divide(C.C_SQUARED, a) * (lorentz_factor_from_accel_time(a, t) - 1.0)


def coordinate_time_for_proper_time(tau, a):
    """
    Coordinate time elapsed while tau of proper time passes, from rest.

    t = (c/a) sinh(a tau / c)
    """
    return np.divide(C.C, a) * np.sinh((a * tau) / C.C)
