"""The HCT colour space: CAM16 hue and chroma with L* as tone."""

from __future__ import annotations

from typing import Sequence

from . import hct_solver
from .cam16 import Cam16
from .color import Argb, lstar_from_argb

__all__ = ["Hct"]


class Hct:
    """A colour described by hue, chroma and tone in default viewing conditions.

    Changing ``hue``, ``chroma`` or ``tone`` re-solves the colour; chroma may
    end up lower than requested, since its maximum depends on hue and tone.
    """

    __slots__ = ("_hue", "_chroma", "_tone", "_argb")

    def __init__(self, argb: Sequence[int]) -> None:
        self._set_internal_state(argb)

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> Hct:
        """Create a colour from hue (degrees), chroma and tone (0..100)."""
        return cls(hct_solver.solve_to_int(hue, chroma, tone))

    @classmethod
    def from_int(cls, argb: Sequence[int]) -> Hct:
        """Create a colour from an ARGB tuple."""
        return cls(argb)

    @property
    def hue(self) -> float:
        return self._hue

    @hue.setter
    def hue(self, hue: float) -> None:
        self._set_internal_state(hct_solver.solve_to_int(hue, self._chroma, self._tone))

    @property
    def chroma(self) -> float:
        return self._chroma

    @chroma.setter
    def chroma(self, chroma: float) -> None:
        self._set_internal_state(hct_solver.solve_to_int(self._hue, chroma, self._tone))

    @property
    def tone(self) -> float:
        return self._tone

    @tone.setter
    def tone(self, tone: float) -> None:
        self._set_internal_state(hct_solver.solve_to_int(self._hue, self._chroma, tone))

    def to_int(self) -> Argb:
        """The ARGB tuple of this colour."""
        return self._argb

    def _set_internal_state(self, argb: Sequence[int]) -> None:
        alpha, red, green, blue = argb
        self._argb: Argb = (int(alpha), int(red), int(green), int(blue))
        cam = Cam16.from_argb(self._argb)
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = lstar_from_argb(self._argb)

    def __repr__(self) -> str:
        return (
            f"Hct(hue={self._hue:.3f}, chroma={self._chroma:.3f}, "
            f"tone={self._tone:.3f}, argb={self._argb})"
        )