"""Triangle test.

The convex hull of the simplified stroke must have exactly 3 vertices, every
side longer than ``triangle_min_side``, and interior angles (law of cosines)
summing to within ``triangle_angle_tolerance`` degrees of 180.
"""

from __future__ import annotations

from app.engine.config import RecognitionConfig
from app.engine.registry import classifier
from app.engine.shapes import Detection, Point, ShapeKind
from app.utils.geometry import distance, interior_angle
from app.utils.hull import convex_hull


def triangle_angles(a: Point, b: Point, c: Point) -> tuple[float, float, float]:
    """Interior angles at a, b, c in degrees."""
    return (
        interior_angle(c, a, b),
        interior_angle(a, b, c),
        interior_angle(b, c, a),
    )


@classifier(
    id="triangle",
    kind=ShapeKind.TRIANGLE,
    priority=4,
    description="Three-vertex hull with a valid angle sum",
)
def detect_triangle(points: list[Point], config: RecognitionConfig) -> Detection | None:
    if len(points) < config.triangle_min_points:
        return None

    hull = convex_hull(points)
    if len(hull) != 3:
        return None

    a, b, c = hull
    sides = (distance(a, b), distance(b, c), distance(c, a))
    if not all(s > config.triangle_min_side for s in sides):
        return None

    angle_sum = sum(triangle_angles(a, b, c))
    if abs(angle_sum - 180.0) >= config.triangle_angle_tolerance:
        return None

    return Detection(
        kind=ShapeKind.TRIANGLE,
        points=(a, b, c),
        confidence=config.triangle_confidence,
    )
