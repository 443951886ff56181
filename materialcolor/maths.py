"""Small numeric helpers shared by the colour science modules."""

from __future__ import annotations

import math
from typing import Sequence

Vector3 = tuple[float, float, float]
Matrix3 = Sequence[Sequence[float]]


def lerp(start: float, stop: float, amount: float) -> float:
    """Linearly interpolate between ``start`` and ``stop``."""
    return (1.0 - amount) * start + amount * stop


def sanitize_degrees_double(degrees: float) -> float:
    """Return the angle coterminal with ``degrees`` in the range [0, 360)."""
    result = math.fmod(degrees, 360.0)
    if result < 0.0:
        result += 360.0
    return result


def difference_degrees(a: float, b: float) -> float:
    """Return the shortest angular distance between two angles, in [0, 180]."""
    return 180.0 - abs(abs(a - b) - 180.0)


def rotation_direction(from_degrees: float, to_degrees: float) -> float:
    """Return 1.0 if the shortest rotation is counter-clockwise, else -1.0."""
    increasing_difference = sanitize_degrees_double(to_degrees - from_degrees)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def matrix_multiply(row: Sequence[float], matrix: Matrix3) -> Vector3:
    """Multiply a 3x3 matrix by a column vector given as ``row``."""
    x, y, z = row
    a, b, c = (m[0] * x + m[1] * y + m[2] * z for m in matrix)
    return (a, b, c)