"""Line test.

Every interior point of the simplified stroke lies within
``line_max_deviation`` of the first-to-last chord.
"""

from __future__ import annotations

from app.engine.config import RecognitionConfig
from app.engine.registry import classifier
from app.engine.shapes import Detection, Point, ShapeKind
from app.utils.geometry import as_array, segment_distances


@classifier(
    id="line",
    kind=ShapeKind.LINE,
    priority=1,
    description="Max chord deviation below threshold",
)
def detect_line(points: list[Point], config: RecognitionConfig) -> Detection | None:
    if len(points) < 2:
        return None

    arr = as_array(points)
    interior = segment_distances(arr[1:-1], arr[0], arr[-1])
    max_dev = float(interior.max()) if len(interior) else 0.0

    if max_dev >= config.line_max_deviation:
        return None

    return Detection(
        kind=ShapeKind.LINE,
        points=(points[0], points[-1]),
        confidence=config.line_confidence,
    )
