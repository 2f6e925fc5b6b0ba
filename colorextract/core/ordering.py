# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Similarity ordering for swatch layout.

Places visually similar colors next to each other:

1. Colors whose canonical key is not hex (OKLCH-origin) are set aside and
   appended at the end, in input order.
2. The rest are sorted by hue (max-channel formula on normalized RGB) to pick
   a starting color.
3. A greedy nearest-neighbor walk from that start repeatedly takes the
   closest remaining color by squared Euclidean distance in the RGB cube.

The walk is a heuristic for the shortest visual path, not an optimal tour.
It is O(n²), which is fine for swatch grids of tens of colors.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from colorextract.core.colorspace import rgb_to_hue
from colorextract.core.parser import parse_hex
from colorextract.schema import ExtractedColor


def nearest_neighbor_path(rgb: NDArray[np.float64], start: int = 0) -> list[int]:
    """
    Greedy nearest-neighbor tour over points in RGB space.

    Args:
        rgb: Array of shape (N, 3) with channels in [0, 1]
        start: Index of the first point

    Returns:
        Permutation of range(N). Ties go to the lowest index.
    """
    n = len(rgb)
    if n == 0:
        return []

    visited = np.zeros(n, dtype=bool)
    path = [start]
    visited[start] = True

    for _ in range(n - 1):
        current = rgb[path[-1]]
        distances = np.sum((rgb - current) ** 2, axis=-1)
        distances[visited] = np.inf
        nearest = int(np.argmin(distances))
        path.append(nearest)
        visited[nearest] = True

    return path


def order_for_layout(colors: Sequence[ExtractedColor]) -> list[ExtractedColor]:
    """
    Reorder colors so that similar colors sit next to each other.

    Args:
        colors: Extracted colors, typically already deduplicated

    Returns:
        The same records, permuted. Non-hex colors come last, unordered.
    """
    rgb_colors: list[ExtractedColor] = []
    channels: list[tuple[float, float, float]] = []
    trailing: list[ExtractedColor] = []

    for color in colors:
        parsed = parse_hex(color.canonical_key)
        if parsed is None:
            trailing.append(color)
        else:
            rgb_colors.append(color)
            channels.append(parsed.channels())

    if not rgb_colors:
        return trailing

    rgb = np.array(channels, dtype=np.float64)

    # Stable sort keeps input order among equal hues
    by_hue = np.argsort(rgb_to_hue(rgb), kind="stable")
    rgb_sorted = rgb[by_hue]

    path = nearest_neighbor_path(rgb_sorted, start=0)
    ordered = [rgb_colors[int(by_hue[i])] for i in path]

    return ordered + trailing
