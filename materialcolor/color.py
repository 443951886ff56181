"""Conversions between ARGB, linear RGB, XYZ, L*a*b* and L*.

Colours are tuples ``(alpha, red, green, blue)`` of integers in 0..255.
"""

from __future__ import annotations

import math
from typing import Sequence

from .maths import Vector3, matrix_multiply

Argb = tuple[int, int, int, int]

WHITE_POINT_D65: Vector3 = (95.047, 100.0, 108.883)

SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def _lab_f(t: float) -> float:
    if t > _EPSILON:
        return _cbrt(t)
    return (_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _EPSILON:
        return ft3
    return (116.0 * ft - 16.0) / _KAPPA


def _argb_from_rgb(red: int, green: int, blue: int) -> Argb:
    return (255, red, green, blue)


def linearized(rgb_component: int) -> float:
    """Convert an 8-bit sRGB channel to a linear channel in 0..100."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component: float) -> int:
    """Convert a linear channel in 0..100 to an 8-bit sRGB channel."""
    normalized = rgb_component / 100.0
    if math.isnan(normalized):
        return 0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    scaled = value * 255.0
    if math.isinf(scaled):
        return 255 if scaled > 0 else 0
    return max(0, min(255, math.floor(scaled + 0.5)))


def xyz_from_argb(argb: Sequence[int]) -> Vector3:
    """Convert an ARGB colour to CIE XYZ."""
    _, red, green, blue = argb
    return matrix_multiply(
        (linearized(red), linearized(green), linearized(blue)), SRGB_TO_XYZ
    )


def argb_from_xyz(xyz: Sequence[float]) -> Argb:
    """Convert CIE XYZ coordinates to an ARGB colour."""
    return argb_from_linrgb(matrix_multiply(xyz, XYZ_TO_SRGB))


def argb_from_linrgb(linrgb: Sequence[float]) -> Argb:
    """Convert linear RGB components (0..100) to an ARGB colour."""
    red, green, blue = (delinearized(c) for c in linrgb)
    return _argb_from_rgb(red, green, blue)


def y_from_lstar(lstar: float) -> float:
    """Convert an L* value to a Y value in 0..100."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Convert a Y value in 0..100 to an L* value."""
    return _lab_f(y / 100.0) * 116.0 - 16.0


def lstar_from_argb(argb: Sequence[int]) -> float:
    """Compute the L* of an ARGB colour."""
    return lstar_from_y(xyz_from_argb(argb)[1])


def argb_from_lstar(lstar: float) -> Argb:
    """Return the grey ARGB colour with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return _argb_from_rgb(component, component, component)


def lab_from_argb(argb: Sequence[int]) -> Vector3:
    """Convert an ARGB colour to CIE L*a*b*."""
    x, y, z = xyz_from_argb(argb)
    wx, wy, wz = WHITE_POINT_D65
    fx = _lab_f(x / wx)
    fy = _lab_f(y / wy)
    fz = _lab_f(z / wz)
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def argb_from_lab(l: float, a: float, b: float) -> Argb:  # noqa: E741
    """Convert CIE L*a*b* coordinates to an ARGB colour."""
    wx, wy, wz = WHITE_POINT_D65
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    return argb_from_xyz((_lab_invf(fx) * wx, _lab_invf(fy) * wy, _lab_invf(fz) * wz))