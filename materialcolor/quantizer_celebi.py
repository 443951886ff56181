"""Wu quantization refined by weighted square means."""

from __future__ import annotations

from typing import Iterable, Sequence

from .color import Argb
from .quantizer_wsmeans import quantize_wsmeans
from .quantizer_wu import QuantizerWu

__all__ = ["quantize_celebi"]


def quantize_celebi(pixels: Iterable[Sequence[int]], max_colors: int) -> dict[Argb, int]:
    """Reduce ``pixels`` to at most ``max_colors`` colours.

    The Wu quantizer provides the initial centroids for K-Means. Returns a
    map from each ARGB colour to the number of pixels it represents.
    """
    pixel_list = [tuple(pixel) for pixel in pixels]
    starting_clusters = QuantizerWu().quantize(pixel_list, max_colors)
    return quantize_wsmeans(pixel_list, starting_clusters, max_colors)