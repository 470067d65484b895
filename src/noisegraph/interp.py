"""Interpolation and range helpers shared by kernels and modules."""

import math

# Coordinates at or beyond this magnitude are folded before lattice lookup.
_INT32_FOLD = 1073741824.0


def linear_interp(n0: float, n1: float, a: float) -> float:
    """Linear interpolation between n0 (a=0) and n1 (a=1)."""
    return n0 + a * (n1 - n0)


def cubic_interp(n0: float, n1: float, n2: float, n3: float, a: float) -> float:
    """Cubic interpolation between n1 (a=0) and n2 (a=1).

    Args:
        n0: Value before n1.
        n1: Value at a=0.
        n2: Value at a=1.
        n3: Value after n2.
        a: Interpolant in [0, 1].

    Returns:
        Interpolated value.
    """
    p = (n3 - n2) - (n0 - n1)
    q = (n0 - n1) - p
    r = n2 - n0
    s = n1
    return p * a * a * a + q * a * a + r * a + s


def s_curve3(a: float) -> float:
    """Cubic S-curve: 3a^2 - 2a^3"""
    return a * a * (3.0 - 2.0 * a)


def s_curve5(a: float) -> float:
    """Quintic S-curve: 6a^5 - 15a^4 + 10a^3"""
    a3 = a * a * a
    a4 = a3 * a
    a5 = a4 * a
    return (6.0 * a5) - (15.0 * a4) + (10.0 * a3)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def make_int32_range(n: float) -> float:
    """Fold a coordinate so its lattice cell fits a 32-bit integer.

    Values inside (-2^30, 2^30) are returned unchanged.
    """
    if n >= _INT32_FOLD:
        return (2.0 * math.fmod(n, _INT32_FOLD)) - _INT32_FOLD
    if n <= -_INT32_FOLD:
        return (2.0 * math.fmod(n, _INT32_FOLD)) + _INT32_FOLD
    return n
