"""Circle test.

Centroid-distance statistics: the RMS deviation of each point's radius from
the mean radius must stay under ``circle_radius_variance_ratio`` of the mean,
and the stroke must close (start-end gap under ``circle_closure_ratio`` of the
mean radius).
"""

from __future__ import annotations

import numpy as np

from app.engine.config import RecognitionConfig
from app.engine.registry import classifier
from app.engine.shapes import Detection, Point, ShapeKind
from app.utils.geometry import as_array, centroid, centroid_distances, distance


@classifier(
    id="circle",
    kind=ShapeKind.CIRCLE,
    priority=2,
    description="Closed stroke with near-constant centroid distance",
)
def detect_circle(points: list[Point], config: RecognitionConfig) -> Detection | None:
    if len(points) < config.circle_min_points:
        return None

    arr = as_array(points)
    cx, cy = centroid(arr)
    radii = centroid_distances(arr)
    mean_radius = float(np.mean(radii))
    if mean_radius < 1e-10:
        return None

    radius_variance = float(np.sqrt(np.mean((radii - mean_radius) ** 2)))
    closed = distance(points[0], points[-1]) < mean_radius * config.circle_closure_ratio

    if not (radius_variance < mean_radius * config.circle_radius_variance_ratio and closed):
        return None

    confidence = max(config.min_confidence, 1.0 - radius_variance / mean_radius)
    return Detection(
        kind=ShapeKind.CIRCLE,
        points=(Point(cx, cy), Point(cx + mean_radius, cy)),
        confidence=confidence,
    )
