"""Style-aware bounding box over a scene."""

from __future__ import annotations

from collections.abc import Iterable

from app.engine.shapes import Bounds, RecognizedShape, ShapeKind
from app.utils.geometry import as_array, bbox


def shape_extent(shape: RecognizedShape) -> Bounds:
    """Geometric extent of one shape, ignoring stroke width."""
    if shape.kind is ShapeKind.CIRCLE:
        cx, cy = shape.center
        r = shape.radius
        return Bounds(cx - r, cy - r, cx + r, cy + r)
    return Bounds(*bbox(as_array(shape.points)))


def shape_bounds(shape: RecognizedShape) -> Bounds:
    """Extent grown by half the stroke width on every side."""
    return shape_extent(shape).expand(shape.stroke_width / 2)


def compute_bounds(shapes: Iterable[RecognizedShape]) -> Bounds | None:
    """Union of all shape bounds, or None for an empty scene."""
    result: Bounds | None = None
    for shape in shapes:
        b = shape_bounds(shape)
        result = b if result is None else result.union(b)
    return result
