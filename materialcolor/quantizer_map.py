"""Counting identical pixels."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from .color import Argb

__all__ = ["quantize_map"]


def quantize_map(pixels: Iterable[Sequence[int]]) -> dict[Argb, int]:
    """Map each distinct ARGB colour in ``pixels`` to the number of times it occurs."""
    counts: Counter[Argb] = Counter(
        (int(a), int(r), int(g), int(b)) for a, r, g, b in pixels
    )
    return dict(counts)