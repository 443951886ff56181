"""Weighted square means: a K-Means colour quantizer over deduplicated pixels."""

from __future__ import annotations

import math
import random
from typing import Iterable, Sequence

from .color import Argb
from .point_provider import LabPointProvider, Point

__all__ = ["quantize_wsmeans"]

MAX_ITERATIONS = 10
MIN_MOVEMENT_DISTANCE = 3.0


def _random_point() -> Point:
    l = random.random() * 100.0  # noqa: E741
    a = random.random() * (100.0 - (-100.0) + 1.0) + -100.0
    b = random.random() * (100.0 - (-100.0) + 1.0) + -100.0
    return (l, a, b)


def quantize_wsmeans(
    input_pixels: Iterable[Sequence[int]],
    starting_clusters: Sequence[Sequence[int]],
    max_colors: int,
) -> dict[Argb, int]:
    """Cluster ``input_pixels`` into at most ``max_colors`` colours.

    ``starting_clusters`` sets the initial centroids; when empty, random
    centroids are used. Returns a map from each resulting ARGB colour to the
    population assigned to it.
    """
    if max_colors < 1:
        raise ValueError(f"max_colors must be at least 1, got {max_colors}")

    provider = LabPointProvider()
    pixel_to_count: dict[Argb, int] = {}
    for a, r, g, b in input_pixels:
        pixel = (int(a), int(r), int(g), int(b))
        pixel_to_count[pixel] = pixel_to_count.get(pixel, 0) + 1

    pixels = list(pixel_to_count)
    points = [provider.from_int(pixel) for pixel in pixels]
    counts = [pixel_to_count[pixel] for pixel in pixels]
    point_count = len(points)

    cluster_count = min(max_colors, point_count)
    if starting_clusters:
        cluster_count = min(cluster_count, len(starting_clusters))

    clusters: list[Point] = [provider.from_int(cluster) for cluster in starting_clusters]
    if not starting_clusters:
        clusters.extend(_random_point() for _ in range(cluster_count))

    cluster_indices = [
        min(math.floor(random.random() * cluster_count), max(cluster_count - 1, 0))
        for _ in range(point_count)
    ]

    pixel_count_sums = [0] * cluster_count
    for iteration in range(MAX_ITERATIONS):
        cluster_distances = [
            [provider.distance(clusters[i], clusters[j]) for j in range(cluster_count)]
            for i in range(cluster_count)
        ]

        points_moved = 0
        for i, point in enumerate(points):
            previous_index = cluster_indices[i]
            previous_distance = provider.distance(point, clusters[previous_index])
            minimum_distance = previous_distance
            new_index = None
            for j, between in enumerate(cluster_distances[previous_index]):
                if between >= 4.0 * previous_distance:
                    continue
                distance = provider.distance(point, clusters[j])
                if distance < minimum_distance:
                    minimum_distance = distance
                    new_index = j
            if new_index is not None:
                change = abs(math.sqrt(minimum_distance) - math.sqrt(previous_distance))
                if change > MIN_MOVEMENT_DISTANCE:
                    points_moved += 1
                    cluster_indices[i] = new_index

        if points_moved == 0 and iteration != 0:
            break

        component_sums = [[0.0, 0.0, 0.0] for _ in range(cluster_count)]
        for cluster_index, point, count in zip(cluster_indices, points, counts):
            pixel_count_sums[cluster_index] += count
            sums = component_sums[cluster_index]
            sums[0] += point[0] * count
            sums[1] += point[1] * count
            sums[2] += point[2] * count

        for i, (count, sums) in enumerate(zip(pixel_count_sums, component_sums)):
            if count == 0:
                clusters[i] = (0.0, 0.0, 0.0)
            else:
                clusters[i] = (sums[0] / count, sums[1] / count, sums[2] / count)

    argb_to_population: dict[Argb, int] = {}
    for cluster, count in zip(clusters, pixel_count_sums):
        if count == 0:
            continue
        argb = provider.to_int(cluster)
        argb_to_population.setdefault(argb, count)
    return argb_to_population