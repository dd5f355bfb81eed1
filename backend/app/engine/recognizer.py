"""Recognizer — runs shape classifiers in priority order over one completed stroke."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from app.engine.config import RecognitionConfig
from app.engine.registry import ClassifierRegistry, load_classifiers
from app.engine.shapes import (
    Detection,
    Point,
    RecognizedShape,
    ShapeKind,
    ShapeStyle,
    new_shape_id,
)
from app.utils.geometry import PointLike
from app.utils.simplify import simplify_path

logger = logging.getLogger(__name__)

SHAPE_NAMES: dict[ShapeKind, str] = {
    ShapeKind.LINE: "line",
    ShapeKind.CIRCLE: "circle",
    ShapeKind.RECTANGLE: "rectangle",
    ShapeKind.TRIANGLE: "triangle",
    ShapeKind.CURVE: "curve",
}


def describe(shape: RecognizedShape) -> str:
    """User-facing summary, e.g. ``Recognized as circle (confidence: 92%)``."""
    name = SHAPE_NAMES.get(shape.kind, "unknown shape")
    return f"Recognized as {name} (confidence: {shape.confidence * 100:.0f}%)"


class Recognizer:
    """Classifies raw strokes into RecognizedShapes.

    Order: short-stroke fallback → simplify → registered classifiers by
    priority → curve fallback. Pure apart from id generation.
    """

    def __init__(
        self,
        registry: ClassifierRegistry | None = None,
        config: RecognitionConfig | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.registry = registry or load_classifiers()
        self.config = config or RecognitionConfig()
        self.id_factory = id_factory or new_shape_id

    def classify(self, stroke: Sequence[PointLike], style: ShapeStyle | None = None) -> RecognizedShape:
        """Classify one completed stroke using the style captured at completion."""
        style = style or ShapeStyle()
        points = [Point(float(p[0]), float(p[1])) for p in stroke]
        start = time.perf_counter()

        detection = self._detect(points)
        shape = RecognizedShape.from_detection(detection, style, shape_id=self.id_factory())

        logger.info(
            "Recognized %s (confidence %.2f) from %d points in %.1fms",
            shape.kind.value,
            shape.confidence,
            len(points),
            (time.perf_counter() - start) * 1000,
        )
        return shape

    def _detect(self, points: list[Point]) -> Detection:
        cfg = self.config

        if len(points) < cfg.min_stroke_points:
            logger.debug("Short stroke (%d points), kept raw", len(points))
            return Detection(ShapeKind.CURVE, tuple(points), cfg.short_stroke_confidence)

        simplified = simplify_path(points, cfg.simplify_tolerance)
        logger.debug("Simplified %d → %d points", len(points), len(simplified))

        for spec in self.registry.ordered():
            t0 = time.perf_counter()
            detection = spec.fn(simplified, cfg)
            elapsed = (time.perf_counter() - t0) * 1000
            if detection is not None:
                logger.debug("  %s matched in %.2fms", spec.id, elapsed)
                return detection
            logger.debug("  %s rejected in %.2fms", spec.id, elapsed)

        return Detection(ShapeKind.CURVE, tuple(simplified), cfg.curve_confidence)


def create_recognizer(config: RecognitionConfig | None = None) -> Recognizer:
    """Factory function for creating a recognizer with all classifiers loaded."""
    return Recognizer(config=config)
