"""Wu's colour quantizer: recursive variance-minimising cuts of the RGB cube."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, NamedTuple, Optional, Sequence

from .color import Argb
from .quantizer_map import quantize_map

__all__ = ["Direction", "Box", "QuantizerWu"]

# The histogram uses 5 of the 8 bits of each channel, plus one leading
# zero slot per axis for the cumulative moments.
INDEX_BITS = 5
BITS_TO_REMOVE = 8 - INDEX_BITS
SIDE_LENGTH = (1 << INDEX_BITS) + 1
TOTAL_SIZE = SIDE_LENGTH * SIDE_LENGTH * SIDE_LENGTH


class Direction(Enum):
    """Axis of the RGB cube along which a box is cut."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


@dataclass
class Box:
    """A box of the histogram cube, lower corner exclusive, upper inclusive."""

    r0: int = 0
    r1: int = 0
    g0: int = 0
    g1: int = 0
    b0: int = 0
    b1: int = 0
    vol: int = 0

    def calculate_vol(self) -> int:
        """Number of histogram cells inside the box."""
        return (self.r1 - self.r0) * (self.g1 - self.g0) * (self.b1 - self.b0)


class _Maximized(NamedTuple):
    cut_location: Optional[int]
    maximum: float


def _index(r: int, g: int, b: int) -> int:
    return (
        (r << (INDEX_BITS * 2)) + (r << (INDEX_BITS + 1)) + r + (g << INDEX_BITS) + g + b
    )


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator)


def _volume(cube: Box, moment: Sequence[int]) -> int:
    return (
        moment[_index(cube.r1, cube.g1, cube.b1)]
        - moment[_index(cube.r1, cube.g1, cube.b0)]
        - moment[_index(cube.r1, cube.g0, cube.b1)]
        + moment[_index(cube.r1, cube.g0, cube.b0)]
        - moment[_index(cube.r0, cube.g1, cube.b1)]
        + moment[_index(cube.r0, cube.g1, cube.b0)]
        + moment[_index(cube.r0, cube.g0, cube.b1)]
        - moment[_index(cube.r0, cube.g0, cube.b0)]
    )


def _bottom(cube: Box, direction: Direction, moment: Sequence[int]) -> int:
    if direction is Direction.RED:
        return (
            moment[_index(cube.r0, cube.g1, cube.b0)]
            + moment[_index(cube.r0, cube.g0, cube.b1)]
            - moment[_index(cube.r0, cube.g0, cube.b0)]
            - moment[_index(cube.r0, cube.g1, cube.b1)]
        )
    if direction is Direction.GREEN:
        return (
            moment[_index(cube.r1, cube.g0, cube.b0)]
            + moment[_index(cube.r0, cube.g0, cube.b1)]
            - moment[_index(cube.r0, cube.g0, cube.b0)]
            - moment[_index(cube.r1, cube.g0, cube.b1)]
        )
    return (
        moment[_index(cube.r1, cube.g0, cube.b0)]
        + moment[_index(cube.r0, cube.g1, cube.b0)]
        - moment[_index(cube.r0, cube.g0, cube.b0)]
        - moment[_index(cube.r1, cube.g1, cube.b0)]
    )


def _top(cube: Box, direction: Direction, position: int, moment: Sequence[int]) -> int:
    if direction is Direction.RED:
        return (
            moment[_index(position, cube.g1, cube.b1)]
            - moment[_index(position, cube.g1, cube.b0)]
            - moment[_index(position, cube.g0, cube.b1)]
            + moment[_index(position, cube.g0, cube.b0)]
        )
    if direction is Direction.GREEN:
        return (
            moment[_index(cube.r1, position, cube.b1)]
            - moment[_index(cube.r1, position, cube.b0)]
            - moment[_index(cube.r0, position, cube.b1)]
            + moment[_index(cube.r0, position, cube.b0)]
        )
    return (
        moment[_index(cube.r1, cube.g1, position)]
        - moment[_index(cube.r1, cube.g0, position)]
        - moment[_index(cube.r0, cube.g1, position)]
        + moment[_index(cube.r0, cube.g0, position)]
    )


class QuantizerWu:
    """Divides pixels into clusters by recursively cutting the RGB cube.

    Each cut is placed where it maximises the variance between the two
    resulting boxes, weighted by the pixels inside them.
    """

    def __init__(self) -> None:
        self._reset_histogram()
        self.cubes: list[Box] = []

    def _reset_histogram(self) -> None:
        self.weights = [0] * TOTAL_SIZE
        self.moments_r = [0] * TOTAL_SIZE
        self.moments_g = [0] * TOTAL_SIZE
        self.moments_b = [0] * TOTAL_SIZE
        self.moments = [0] * TOTAL_SIZE

    def quantize(self, pixels: Iterable[Sequence[int]], max_colors: int) -> list[Argb]:
        """Reduce ``pixels`` to at most ``max_colors`` representative colours."""
        if max_colors < 1:
            raise ValueError(f"max_colors must be at least 1, got {max_colors}")
        self._construct_histogram(pixels)
        self._compute_moments()
        result_count = self._create_boxes(max_colors)
        return self._create_result(result_count)

    def _construct_histogram(self, pixels: Iterable[Sequence[int]]) -> None:
        self._reset_histogram()
        for (_, red, green, blue), count in quantize_map(pixels).items():
            index = _index(
                (red >> BITS_TO_REMOVE) + 1,
                (green >> BITS_TO_REMOVE) + 1,
                (blue >> BITS_TO_REMOVE) + 1,
            )
            self.weights[index] += count
            self.moments_r[index] += count * red
            self.moments_g[index] += count * green
            self.moments_b[index] += count * blue
            self.moments[index] += count * (red * red + green * green + blue * blue)

    def _compute_moments(self) -> None:
        tables = (self.weights, self.moments_r, self.moments_g, self.moments_b, self.moments)
        for r in range(1, SIDE_LENGTH):
            areas = [[0] * SIDE_LENGTH for _ in tables]
            for g in range(1, SIDE_LENGTH):
                lines = [0] * len(tables)
                for b in range(1, SIDE_LENGTH):
                    index = _index(r, g, b)
                    previous_index = _index(r - 1, g, b)
                    for k, table in enumerate(tables):
                        lines[k] += table[index]
                        areas[k][b] += lines[k]
                        table[index] = table[previous_index] + areas[k][b]

    def _create_boxes(self, max_colors: int) -> int:
        self.cubes = [Box() for _ in range(max_colors)]
        volume_variance = [0.0] * max_colors
        max_index = SIDE_LENGTH - 1
        first = self.cubes[0]
        first.r1 = first.g1 = first.b1 = max_index

        generated_color_count = max_colors
        next_index = 0
        index = 1
        while index < max_colors:
            if self._cut(next_index, index):
                next_cube = self.cubes[next_index]
                volume_variance[next_index] = (
                    self._variance(next_cube) if next_cube.vol > 1 else 0.0
                )
                current_cube = self.cubes[index]
                volume_variance[index] = (
                    self._variance(current_cube) if current_cube.vol > 1 else 0.0
                )
            else:
                volume_variance[next_index] = 0.0
                index -= 1

            next_index = 0
            temp = volume_variance[0]
            for j in range(1, index + 1):
                if volume_variance[j] > temp:
                    temp = volume_variance[j]
                    next_index = j
            if temp <= 0.0:
                generated_color_count = index + 1
                break
            index += 1

        return generated_color_count

    def _create_result(self, color_count: int) -> list[Argb]:
        result: list[Argb] = []
        for cube in self.cubes[:color_count]:
            weight = _volume(cube, self.weights)
            if weight == 0:
                continue
            r = _volume(cube, self.moments_r) // weight
            g = _volume(cube, self.moments_g) // weight
            b = _volume(cube, self.moments_b) // weight
            result.append((0xFF, r & 0xFF, g & 0xFF, b & 0xFF))
        return result

    def _variance(self, cube: Box) -> float:
        dr = float(_volume(cube, self.moments_r))
        dg = float(_volume(cube, self.moments_g))
        db = float(_volume(cube, self.moments_b))
        xx = float(_volume(cube, self.moments))
        hypotenuse = dr * dr + dg * dg + db * db
        return xx - _divide(hypotenuse, float(_volume(cube, self.weights)))

    def _cut(self, next_index: int, current_index: int) -> bool:
        one = replace(self.cubes[next_index])
        two = replace(self.cubes[current_index])

        whole = (
            _volume(one, self.moments_r),
            _volume(one, self.moments_g),
            _volume(one, self.moments_b),
            _volume(one, self.weights),
        )
        max_r = self._maximize(one, Direction.RED, one.r0 + 1, one.r1, whole)
        max_g = self._maximize(one, Direction.GREEN, one.g0 + 1, one.g1, whole)
        max_b = self._maximize(one, Direction.BLUE, one.b0 + 1, one.b1, whole)

        if max_r.maximum >= max_g.maximum and max_r.maximum >= max_b.maximum:
            if max_r.cut_location is None:
                return False
            direction = Direction.RED
        elif max_g.maximum >= max_r.maximum and max_g.maximum >= max_b.maximum:
            direction = Direction.GREEN
        else:
            direction = Direction.BLUE

        two.r1, two.g1, two.b1 = one.r1, one.g1, one.b1

        if direction is Direction.RED:
            one.r1 = max_r.cut_location or 0
            two.r0, two.g0, two.b0 = one.r1, one.g0, one.b0
        elif direction is Direction.GREEN:
            one.g1 = max_g.cut_location or 0
            two.r0, two.g0, two.b0 = one.r0, one.g1, one.b0
        else:
            one.b1 = max_b.cut_location or 0
            two.r0, two.g0, two.b0 = one.r0, one.g0, one.b1

        one.vol = one.calculate_vol()
        two.vol = two.calculate_vol()
        self.cubes[next_index] = one
        self.cubes[current_index] = two
        return True

    def _maximize(
        self,
        cube: Box,
        direction: Direction,
        first: int,
        last: int,
        whole: tuple[int, int, int, int],
    ) -> _Maximized:
        tables = (self.moments_r, self.moments_g, self.moments_b, self.weights)
        bottoms = [_bottom(cube, direction, table) for table in tables]

        maximum = 0.0
        cut: Optional[int] = None
        for position in range(first, last):
            half_r, half_g, half_b, half_w = (
                bottom + _top(cube, direction, position, table)
                for bottom, table in zip(bottoms, tables)
            )
            if half_w == 0:
                continue
            temp = (
                float(half_r) ** 2 + float(half_g) ** 2 + float(half_b) ** 2
            ) / float(half_w)

            half_r = whole[0] - half_r
            half_g = whole[1] - half_g
            half_b = whole[2] - half_b
            half_w = whole[3] - half_w
            if half_w == 0:
                continue
            temp += (
                float(half_r) ** 2 + float(half_g) ** 2 + float(half_b) ** 2
            ) / float(half_w)

            if temp > maximum:
                maximum = temp
                cut = position

        return _Maximized(cut, maximum)