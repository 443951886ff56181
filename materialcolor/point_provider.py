"""Colour spaces in which quantizers measure and average colours."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .color import Argb, argb_from_lab, lab_from_argb
from .maths import Vector3

__all__ = ["Point", "PointProvider", "LabPointProvider"]

Point = Vector3


class PointProvider(ABC):
    """Converts colours to points of a space and measures distances there."""

    @abstractmethod
    def to_int(self, point: Sequence[float]) -> Argb:
        """Convert a point back to an ARGB colour."""

    @abstractmethod
    def from_int(self, argb: Sequence[int]) -> Point:
        """Convert an ARGB colour to a point."""

    @abstractmethod
    def distance(self, from_point: Sequence[float], to_point: Sequence[float]) -> float:
        """A distance between two points, usable for comparisons."""


class LabPointProvider(PointProvider):
    """Points in CIE L*a*b*, compared by squared Euclidean distance."""

    def to_int(self, point: Sequence[float]) -> Argb:
        """Convert L*a*b* coordinates to an ARGB colour."""
        l, a, b = point  # noqa: E741
        return argb_from_lab(l, a, b)

    def from_int(self, argb: Sequence[int]) -> Point:
        """Convert an ARGB colour to L*a*b* coordinates."""
        return lab_from_argb(argb)

    def distance(self, from_point: Sequence[float], to_point: Sequence[float]) -> float:
        """Squared CIE 1976 delta E; ordering is the same as with the square root."""
        l_diff = from_point[0] - to_point[0]
        a_diff = from_point[1] - to_point[1]
        b_diff = from_point[2] - to_point[2]
        return l_diff * l_diff + a_diff * a_diff + b_diff * b_diff