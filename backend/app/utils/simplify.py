"""Path simplification — Ramer-Douglas-Peucker over a freehand stroke."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

import numpy as np

from app.utils.geometry import as_array, segment_distances

P = TypeVar("P", bound=Sequence[float])

# Tolerance used when a stroke is only being smoothed, not classified.
SMOOTH_TOLERANCE = 5.0


def simplify_path(points: Sequence[P], tolerance: float) -> list[P]:
    """Ramer-Douglas-Peucker line simplification.

    Keeps the first and last point and every point whose distance to the
    chord of its enclosing sub-range exceeds ``tolerance``. Returned points
    are the caller's own objects, in input order.
    """
    n = len(points)
    if n <= 2:
        return list(points)

    arr = as_array(points)
    keep = {0, n - 1}
    # Explicit stack: strokes are unbounded and a spiral would recurse per point
    ranges = [(0, n - 1)]

    while ranges:
        start, end = ranges.pop()
        if end - start < 2:
            continue

        dists = segment_distances(arr[start + 1 : end], arr[start], arr[end])
        offset = int(np.argmax(dists))
        if dists[offset] > tolerance:
            split = start + 1 + offset
            keep.add(split)
            ranges.append((start, split))
            ranges.append((split, end))

    return [points[i] for i in sorted(keep)]


def smooth_path(points: Sequence[P], tolerance: float = SMOOTH_TOLERANCE) -> list[P]:
    """Light simplification for display smoothing."""
    return simplify_path(points, tolerance)
