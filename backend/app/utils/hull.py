"""Convex hull by pivot + polar-angle sweep.

Screen space: y grows downward, so the pivot is the point with the largest y.
This is a greedy hull tuned for triangle detection. Points collinear with the
pivot (same polar angle, or exactly level with it on the left) are not
re-ordered by distance, so adversarial input can lose hull vertices. Triangle
acceptance depends on this behavior; do not swap in a textbook hull.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from app.utils.geometry import cross

P = TypeVar("P", bound=Sequence[float])


def convex_hull(points: Sequence[P]) -> list[P]:
    """Return hull vertices starting at the pivot, in sweep order."""
    if len(points) < 3:
        return list(points)

    # First point with the strictly largest y
    pivot_idx = 0
    for i, p in enumerate(points):
        if p[1] > points[pivot_idx][1]:
            pivot_idx = i
    pivot = points[pivot_idx]

    others = [p for i, p in enumerate(points) if i != pivot_idx]
    others.sort(key=lambda p: math.atan2(p[1] - pivot[1], p[0] - pivot[0]))

    hull = [pivot]
    for p in others:
        while len(hull) > 1 and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    return hull
