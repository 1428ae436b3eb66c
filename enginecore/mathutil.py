"""Scalar math helpers and engine-wide numeric constants."""

from __future__ import annotations

import math

PI = 3.1415926535897932
PI_DOUBLE = math.pi
SMALL_NUMBER = 1.0e-8
KINDA_SMALL_NUMBER = 1.0e-4


def clamp(x, min_value, max_value):
    """Clamp ``x`` into the closed range ``[min_value, max_value]``."""
    upper_bounded = x if x < max_value else max_value
    return upper_bounded if min_value < upper_bounded else min_value


def lerp(a, b, alpha):
    """Linearly interpolate between ``a`` and ``b`` by ``alpha``."""
    return a * (1.0 - alpha) + b * alpha


def radians_to_degrees(rad_val):
    """Convert radians to degrees."""
    return rad_val * (180.0 / PI)


def degrees_to_radians(deg_val):
    """Convert degrees to radians."""
    return deg_val * (PI / 180.0)


def inv_sqrt(a):
    """Return the reciprocal square root of ``a``.

    Raises ``ZeroDivisionError`` for zero and ``ValueError`` for negatives.
    """
    return 1.0 / math.sqrt(a)


def ceil_to_int(value):
    """Round ``value`` up to the nearest integer."""
    return int(math.ceil(value))


def sin_cos(value):
    """Return ``(sin(value), cos(value))``."""
    return math.sin(value), math.cos(value)


def unwind_degrees(a):
    """Bring an angle in degrees into the range ``[-180, 180]``."""
    while a > 180.0:
        a -= 360.0
    while a < -180.0:
        a += 360.0
    return a