"""Blending colours in HCT and CAM16-UCS."""

from __future__ import annotations

from typing import Sequence

from .cam16 import Cam16
from .color import Argb, lstar_from_argb
from .hct import Hct
from .maths import difference_degrees, rotation_direction, sanitize_degrees_double

__all__ = ["harmonize", "hct_hue", "cam16ucs"]


def harmonize(design_color: Sequence[int], source_color: Sequence[int]) -> Argb:
    """Shift the hue of ``design_color`` towards that of ``source_color``.

    The shift is half the hue difference, at most 15 degrees, so the design
    colour stays recognisable.
    """
    from_hct = Hct.from_int(design_color)
    to_hct = Hct.from_int(source_color)
    rotation = min(difference_degrees(from_hct.hue, to_hct.hue) * 0.5, 15.0)
    output_hue = sanitize_degrees_double(
        from_hct.hue + rotation * rotation_direction(from_hct.hue, to_hct.hue)
    )
    return Hct.from_hct(output_hue, from_hct.chroma, from_hct.tone).to_int()


def hct_hue(from_argb: Sequence[int], to_argb: Sequence[int], amount: float) -> Argb:
    """Blend the hue of ``from_argb`` towards ``to_argb``, keeping chroma and tone."""
    ucs_cam = Cam16.from_argb(cam16ucs(from_argb, to_argb, amount))
    from_cam = Cam16.from_argb(from_argb)
    return Hct.from_hct(ucs_cam.hue, from_cam.chroma, lstar_from_argb(from_argb)).to_int()


def cam16ucs(from_argb: Sequence[int], to_argb: Sequence[int], amount: float) -> Argb:
    """Blend ``from_argb`` towards ``to_argb`` in CAM16-UCS by ``amount`` (0..1)."""
    from_cam = Cam16.from_argb(from_argb)
    to_cam = Cam16.from_argb(to_argb)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_ucs(jstar, astar, bstar).to_int()