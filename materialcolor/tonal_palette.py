"""A palette of tones sharing one hue and chroma."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .color import Argb
from .hct import Hct

__all__ = ["TonalPalette"]


@dataclass
class TonalPalette:
    """Colours of a fixed hue and chroma, looked up by tone and cached."""

    hue: float
    chroma: float
    _cache: dict[int, Argb] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_int(cls, argb: Sequence[int]) -> TonalPalette:
        """Create a palette with the hue and chroma of an ARGB colour."""
        hct = Hct.from_int(argb)
        return cls(hct.hue, hct.chroma)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> TonalPalette:
        """Create a palette from a hue and a chroma."""
        return cls(hue, chroma)

    def tone(self, tone: int) -> Argb:
        """The ARGB colour of this palette at the given tone (0..100)."""
        if not 0 <= tone <= 255:
            raise ValueError(f"tone out of range: {tone}")
        cached = self._cache.get(tone)
        if cached is None:
            cached = Hct.from_hct(self.hue, self.chroma, float(tone)).to_int()
            self._cache[tone] = cached
        return cached