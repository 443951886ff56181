"""Key-colour palettes from which a full scheme is built."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .hct import Hct
from .tonal_palette import TonalPalette

__all__ = ["ColorPalette", "CorePalette"]


class ColorPalette(Enum):
    """How the accent hues of a content palette are spread."""

    DEFAULT = "default"
    TRIADIC = "triadic"
    ADJACENT = "adjacent"


_ANGLES = {ColorPalette.TRIADIC: 90.0, ColorPalette.ADJACENT: 30.0}


@dataclass
class CorePalette:
    """Three accent, two neutral and one error tonal palette."""

    a1: TonalPalette
    a2: TonalPalette
    a3: TonalPalette
    n1: TonalPalette
    n2: TonalPalette
    error: TonalPalette

    @classmethod
    def from_argb(
        cls,
        argb: Sequence[int],
        is_content: bool = False,
        color_palette: ColorPalette = ColorPalette.DEFAULT,
    ) -> CorePalette:
        """Build the palettes from a key colour.

        Content palettes follow the key colour's chroma; otherwise fixed
        chromas are used.
        """
        hct = Hct.from_int(argb)
        hue = hct.hue
        chroma = hct.chroma
        palette = TonalPalette.from_hue_and_chroma
        error = palette(25.0, 84.0)

        if not is_content:
            return cls(
                a1=palette(hue, max(48.0, chroma)),
                a2=palette(hue, 16.0),
                a3=palette(hue + 60.0, 24.0),
                n1=palette(hue, 6.0),
                n2=palette(hue, 8.0),
                error=error,
            )

        angle = _ANGLES.get(color_palette)
        if angle is None:
            a2_hue, a3_hue = hue, hue + 60.0
        else:
            a2_hue, a3_hue = hue + angle, hue - angle
        return cls(
            a1=palette(hue, chroma),
            a2=palette(a2_hue, chroma / 3.0),
            a3=palette(a3_hue, chroma / 2.0),
            n1=palette(hue, min(chroma / 12.0, 6.0)),
            n2=palette(hue, min(chroma / 6.0, 8.0)),
            error=error,
        )