"""The CAM16 colour appearance model and its CAM16-UCS coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .color import Argb, argb_from_xyz, xyz_from_argb
from .maths import matrix_multiply
from .viewing_conditions import (
    XYZ_TO_CAM16RGB,
    ViewingConditions,
    default_viewing_conditions,
)

__all__ = ["CAM16RGB_TO_XYZ", "XYZ_TO_CAM16RGB", "Cam16"]

CAM16RGB_TO_XYZ = (
    (1.8620678, -1.0112547, 0.14918678),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.01584150, -0.03412294, 1.0499644),
)


def _powf(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan if base < 0.0 else math.inf
    except OverflowError:
        return math.inf


def _signum(value: float) -> float:
    return math.copysign(1.0, value)


def _ucs(j: float, m: float, hue_radians: float) -> tuple[float, float, float]:
    jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
    mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
    return jstar, mstar * math.cos(hue_radians), mstar * math.sin(hue_radians)


def _inverse_adapt(adapted: float, fl: float) -> float:
    adapted_abs = abs(adapted)
    base = 27.13 * adapted_abs / (400.0 - adapted_abs)
    base = base if base > 0.0 else 0.0
    return _signum(adapted) * (100.0 / fl) * _powf(base, 1.0 / 0.42)


@dataclass(frozen=True)
class Cam16:
    """A colour described by CAM16 dimensions and CAM16-UCS coordinates.

    ``hue``, ``chroma``, ``j`` (lightness), ``q`` (brightness), ``m``
    (colourfulness) and ``s`` (saturation) are CAM16 dimensions; ``jstar``,
    ``astar`` and ``bstar`` are CAM16-UCS coordinates.
    """

    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    def distance(self, other: Cam16) -> float:
        """Perceptual distance to ``other`` in CAM16-UCS."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_eprime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * d_eprime**0.63

    @classmethod
    def from_argb(cls, argb: Sequence[int]) -> Cam16:
        """Create a CAM16 colour from ARGB in default viewing conditions."""
        return cls.from_argb_in_viewing_conditions(argb, default_viewing_conditions())

    @classmethod
    def from_argb_in_viewing_conditions(
        cls, argb: Sequence[int], viewing_conditions: ViewingConditions
    ) -> Cam16:
        """Create a CAM16 colour from ARGB in the given viewing conditions."""
        vc = viewing_conditions
        t = matrix_multiply(xyz_from_argb(argb), XYZ_TO_CAM16RGB)
        discounted = [rgb_d * component for rgb_d, component in zip(vc.rgb_d, t)]

        adapted = []
        for component in discounted:
            af = _powf(vc.fl * abs(component) / 100.0, 0.42)
            adapted.append(_signum(component) * 400.0 * af / (af + 27.13))
        r_a, g_a, b_a = adapted

        red_greenness = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
        yellowness_blueness = (r_a + g_a - 2.0 * b_a) / 9.0
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        hue = math.degrees(math.atan2(yellowness_blueness, red_greenness))
        if hue < 0.0:
            hue += 360.0
        elif hue >= 360.0:
            hue -= 360.0
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        lightness = 100.0 * _powf(ac / vc.aw, vc.c * vc.z)
        brightness = (
            4.0 / vc.c * math.sqrt(lightness / 100.0) * (vc.aw + 4.0) * vc.fl_root
        )

        hue_prime = hue + 360.0 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t_value = p1 * math.hypot(red_greenness, yellowness_blueness) / (u + 0.305)
        alpha = _powf(1.64 - 0.29**vc.n, 0.73) * _powf(t_value, 0.9)
        chroma = alpha * math.sqrt(lightness / 100.0)
        colorfulness = chroma * vc.fl_root
        saturation = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))

        jstar, astar, bstar = _ucs(lightness, colorfulness, hue_radians)
        return cls(
            hue=hue,
            chroma=chroma,
            j=lightness,
            q=brightness,
            m=colorfulness,
            s=saturation,
            jstar=jstar,
            astar=astar,
            bstar=bstar,
        )

    @classmethod
    def from_jch(cls, j: float, c: float, h: float) -> Cam16:
        """Create a CAM16 colour from lightness, chroma and hue."""
        return cls.from_jch_in_viewing_conditions(j, c, h, default_viewing_conditions())

    @classmethod
    def from_jch_in_viewing_conditions(
        cls, j: float, c: float, h: float, viewing_conditions: ViewingConditions
    ) -> Cam16:
        """Create a CAM16 colour from lightness, chroma and hue in given conditions."""
        vc = viewing_conditions
        root = math.sqrt(j / 100.0)
        q = 4.0 / vc.c * root * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        alpha = c / root if root != 0.0 else (math.nan if c == 0.0 else math.inf)
        s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))
        jstar, astar, bstar = _ucs(j, m, math.radians(h))
        return cls(
            hue=h, chroma=c, j=j, q=q, m=m, s=s, jstar=jstar, astar=astar, bstar=bstar
        )

    @classmethod
    def from_ucs(cls, jstar: float, astar: float, bstar: float) -> Cam16:
        """Create a CAM16 colour from CAM16-UCS coordinates."""
        return cls.from_ucs_in_viewing_conditions(
            jstar, astar, bstar, default_viewing_conditions()
        )

    @classmethod
    def from_ucs_in_viewing_conditions(
        cls,
        jstar: float,
        astar: float,
        bstar: float,
        viewing_conditions: ViewingConditions,
    ) -> Cam16:
        """Create a CAM16 colour from CAM16-UCS coordinates in given conditions."""
        m = math.hypot(astar, bstar)
        m2 = math.expm1(m * 0.0228) / 0.0228
        c = m2 / viewing_conditions.fl_root
        h = math.atan2(bstar, astar) * (180.0 / math.pi)
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * 0.007)
        return cls.from_jch_in_viewing_conditions(j, c, h, viewing_conditions)

    def to_int(self) -> Argb:
        """ARGB of this colour in default viewing conditions."""
        return self.viewed(default_viewing_conditions())

    def viewed(self, viewing_conditions: ViewingConditions) -> Argb:
        """ARGB of this colour when seen in the given viewing conditions."""
        vc = viewing_conditions
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = _powf(alpha / _powf(1.64 - 0.29**vc.n, 0.73), 1.0 / 0.9)
        h_rad = math.radians(self.hue)
        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * _powf(self.j / 100.0, 1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        unadapted = (
            _inverse_adapt(component, vc.fl) / rgb_d
            for component, rgb_d in zip((r_a, g_a, b_a), vc.rgb_d)
        )
        return argb_from_xyz(matrix_multiply(tuple(unadapted), CAM16RGB_TO_XYZ))