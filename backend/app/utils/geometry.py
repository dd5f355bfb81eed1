"""Leaf-node geometry helpers. No engine imports.

Points are anything indexable as ``(x, y)``; sequences of points are converted
to Nx2 float arrays with :func:`as_array` before vectorized work.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

PointLike = Sequence[float]


def as_array(points: Sequence[PointLike]) -> NDArray[np.float64]:
    """Convert a point sequence to an Nx2 float array."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def distance(p1: PointLike, p2: PointLike) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def segment_distances(
    points: NDArray[np.float64],
    start: NDArray[np.float64],
    end: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Distance from each point to the segment (start, end).

    The projection parameter is clamped to [0, 1]; a zero-length segment
    degrades to plain distance from ``start``.
    """
    if len(points) == 0:
        return np.empty(0)

    seg = end - start
    len_sq = float(np.dot(seg, seg))
    rel = points - start

    if len_sq == 0.0:
        return np.sqrt(np.sum(rel**2, axis=1))

    t = np.clip(rel @ seg / len_sq, 0.0, 1.0)
    closest = start + np.outer(t, seg)
    return np.sqrt(np.sum((points - closest) ** 2, axis=1))


def interior_angle(p1: PointLike, p2: PointLike, p3: PointLike) -> float:
    """Angle at ``p2`` in degrees, from the law of cosines.

    Returns 0.0 when either side adjacent to ``p2`` has zero length.
    """
    a = distance(p2, p3)
    b = distance(p1, p3)
    c = distance(p1, p2)
    if a < 1e-12 or c < 1e-12:
        return 0.0
    cos_val = (a * a + c * c - b * b) / (2 * a * c)
    # Float noise can push collinear configurations just past +/-1
    cos_val = max(-1.0, min(1.0, cos_val))
    return math.degrees(math.acos(cos_val))


def cross(o: PointLike, a: PointLike, b: PointLike) -> float:
    """Z component of (a - o) x (b - o). Positive = left turn in y-up space."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def centroid_distances(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Distance from centroid to each boundary point."""
    cx, cy = centroid(points)
    return np.sqrt((points[:, 0] - cx) ** 2 + (points[:, 1] - cy) ** 2)
