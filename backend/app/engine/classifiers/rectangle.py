"""Rectangle test.

Axis-aligned only. Each point scores the smaller of its distance to the
nearest bounding-box corner and to the nearest bounding-box edge; the mean
score must be under ``rect_distance_ratio`` of the shorter side.
"""

from __future__ import annotations

import numpy as np

from app.engine.config import RecognitionConfig
from app.engine.registry import classifier
from app.engine.shapes import Detection, Point, ShapeKind
from app.utils.geometry import as_array, bbox


@classifier(
    id="rectangle",
    kind=ShapeKind.RECTANGLE,
    priority=3,
    description="Points hug the bounding box corners and edges",
)
def detect_rectangle(points: list[Point], config: RecognitionConfig) -> Detection | None:
    if len(points) < config.rect_min_points:
        return None

    arr = as_array(points)
    xmin, ymin, xmax, ymax = bbox(arr)
    corners = np.array([[xmin, ymin], [xmax, ymin], [xmax, ymax], [xmin, ymax]])

    # (N, 4) distances to each corner
    corner_dists = np.sqrt(np.sum((arr[:, None, :] - corners[None, :, :]) ** 2, axis=2))
    edge_dists = np.column_stack([
        np.abs(arr[:, 0] - xmin),
        np.abs(arr[:, 0] - xmax),
        np.abs(arr[:, 1] - ymin),
        np.abs(arr[:, 1] - ymax),
    ])
    scores = np.minimum(corner_dists.min(axis=1), edge_dists.min(axis=1))
    avg_distance = float(np.mean(scores))

    width = xmax - xmin
    height = ymax - ymin
    if not (
        avg_distance < min(width, height) * config.rect_distance_ratio
        and width > config.rect_min_side
        and height > config.rect_min_side
    ):
        return None

    confidence = max(config.min_confidence, 1.0 - avg_distance / config.rect_confidence_scale)
    return Detection(
        kind=ShapeKind.RECTANGLE,
        points=tuple(Point(float(x), float(y)) for x, y in corners),
        confidence=confidence,
    )
