"""Viewing conditions for the CAM16 colour appearance model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence

from .color import WHITE_POINT_D65, y_from_lstar
from .maths import Vector3, lerp

XYZ_TO_CAM16RGB = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

DEFAULT_ADAPTING_LUMINANCE = 200.0 / math.pi * y_from_lstar(50.0) / 100.0


@dataclass(frozen=True)
class ViewingConditions:
    """Values of the CAM16 conversion that depend only on the environment."""

    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    n: float
    rgb_d: Vector3
    fl: float
    fl_root: float
    z: float


def make_viewing_conditions(
    white_point: Sequence[float] = WHITE_POINT_D65,
    adapting_luminance: float = DEFAULT_ADAPTING_LUMINANCE,
    background_lstar: float = 50.0,
    surround: float = 2.0,
    discounting_illuminant: bool = False,
) -> ViewingConditions:
    """Build viewing conditions from physically meaningful parameters.

    ``white_point`` is in XYZ, ``adapting_luminance`` is the luminance of the
    adapting field, ``background_lstar`` the L* of the surroundings,
    ``surround`` ranges from 0 (dark) to 2 (average), and
    ``discounting_illuminant`` says whether the eye corrects for tinted light.
    """
    r_w, g_w, b_w = (
        white_point[0] * row[0] + white_point[1] * row[1] + white_point[2] * row[2]
        for row in XYZ_TO_CAM16RGB
    )
    f = 0.8 + surround / 10.0
    if f >= 0.9:
        c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
    else:
        c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

    if discounting_illuminant:
        d = 1.0
    else:
        d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))

    rgb_d = tuple(d * (100.0 / w) + 1.0 - d for w in (r_w, g_w, b_w))

    k = 1.0 / (5.0 * adapting_luminance + 1.0)
    k4 = k * k * k * k
    k4f = 1.0 - k4
    cbrt = math.copysign(abs(5.0 * adapting_luminance) ** (1.0 / 3.0), adapting_luminance)
    fl = k4 * adapting_luminance + 0.1 * k4f * k4f * cbrt

    n = y_from_lstar(background_lstar) / white_point[1]
    z = 1.48 + math.sqrt(n)
    nbb = 0.725 / n**0.2
    ncb = nbb

    rgb_a = []
    for factor, w in zip(rgb_d, (r_w, g_w, b_w)):
        af = (fl * factor * w / 100.0) ** 0.42
        rgb_a.append(400.0 * af / (af + 27.13))
    aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

    return ViewingConditions(
        aw=aw,
        nbb=nbb,
        ncb=ncb,
        c=c,
        nc=f,
        n=n,
        rgb_d=(rgb_d[0], rgb_d[1], rgb_d[2]),
        fl=fl,
        fl_root=fl**0.25,
        z=z,
    )


@lru_cache(maxsize=None)
def default_viewing_conditions() -> ViewingConditions:
    """Return the standard sRGB viewing conditions."""
    return make_viewing_conditions(
        WHITE_POINT_D65, DEFAULT_ADAPTING_LUMINANCE, 50.0, 2.0, False
    )