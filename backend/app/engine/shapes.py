"""Recognized-shape value types.

Per-kind ``points`` encoding:
  line      → [start, end]
  circle    → [center, point_on_circumference]
  rectangle → 4 bounding-box corners, clockwise from top-left
  triangle  → 3 hull vertices
  curve     → simplified stroke, 2+ points (raw stroke for short strokes)
"""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from typing import NamedTuple

from app.utils.geometry import distance


class Point(NamedTuple):
    x: float
    y: float


class ShapeKind(str, enum.Enum):
    LINE = "line"
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    CURVE = "curve"


# Exact point counts; curves only have a lower bound.
_POINT_COUNTS: dict[ShapeKind, int] = {
    ShapeKind.LINE: 2,
    ShapeKind.CIRCLE: 2,
    ShapeKind.RECTANGLE: 4,
    ShapeKind.TRIANGLE: 3,
}

# Fill values that mean "no fill" even when ``filled`` is set.
TRANSPARENT_FILLS = frozenset({"#transparent", "transparent"})
NO_FILL = "none"


@dataclass(frozen=True)
class ShapeStyle:
    """Style captured at stroke-completion time."""

    stroke_color: str = "#000000"
    fill_color: str = "#transparent"
    stroke_width: float = 2.0
    filled: bool = False

    def __post_init__(self) -> None:
        if self.stroke_width < 0:
            raise ValueError(f"stroke_width must be >= 0, got {self.stroke_width}")

    @property
    def paints_fill(self) -> bool:
        return self.filled and self.fill_color not in TRANSPARENT_FILLS

    @property
    def fill_value(self) -> str:
        """Fill as written to markup: the color, or ``none``."""
        return self.fill_color if self.paints_fill else NO_FILL


@dataclass(frozen=True)
class Detection:
    """A positive classifier result, before style and id are attached."""

    kind: ShapeKind
    points: tuple[Point, ...]
    confidence: float


def new_shape_id() -> str:
    return uuid.uuid4().hex[:9]


@dataclass(frozen=True)
class RecognizedShape:
    """One classified stroke. Immutable once created."""

    kind: ShapeKind
    points: tuple[Point, ...]
    confidence: float
    stroke_color: str = "#000000"
    fill_color: str = "#transparent"
    stroke_width: float = 2.0
    filled: bool = False
    id: str = field(default_factory=new_shape_id)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(Point(float(p[0]), float(p[1])) for p in self.points))

        expected = _POINT_COUNTS.get(self.kind)
        if expected is not None and len(self.points) != expected:
            raise ValueError(
                f"{self.kind.value} requires {expected} points, got {len(self.points)}"
            )
        if self.kind is ShapeKind.CURVE and len(self.points) < 1:
            raise ValueError("curve requires at least 1 point")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be in [0, 1], got {self.confidence}")
        if self.stroke_width < 0:
            raise ValueError(f"stroke_width must be >= 0, got {self.stroke_width}")

    @classmethod
    def from_detection(
        cls,
        detection: Detection,
        style: ShapeStyle,
        shape_id: str | None = None,
    ) -> RecognizedShape:
        return cls(
            kind=detection.kind,
            points=detection.points,
            confidence=detection.confidence,
            stroke_color=style.stroke_color,
            fill_color=style.fill_color,
            stroke_width=style.stroke_width,
            filled=style.filled,
            id=shape_id or new_shape_id(),
        )

    @property
    def style(self) -> ShapeStyle:
        return ShapeStyle(
            stroke_color=self.stroke_color,
            fill_color=self.fill_color,
            stroke_width=self.stroke_width,
            filled=self.filled,
        )

    @property
    def center(self) -> Point:
        return self.points[0]

    @property
    def radius(self) -> float:
        """Circle radius. Only meaningful for circles."""
        return distance(self.points[0], self.points[1])


@dataclass(frozen=True)
class Bounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def union(self, other: Bounds) -> Bounds:
        return Bounds(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def expand(self, margin: float) -> Bounds:
        return Bounds(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin,
        )
