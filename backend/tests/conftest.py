"""Shared test fixtures — synthetic freehand strokes."""

from __future__ import annotations

import math

import pytest

from app.engine.recognizer import Recognizer
from app.engine.shapes import Point


def polyline(vertices: list[tuple[float, float]], steps: int = 10) -> list[Point]:
    """Densely sample a polyline through ``vertices``; each vertex is kept exactly."""
    out: list[Point] = []
    for (x0, y0), (x1, y1) in zip(vertices, vertices[1:]):
        for k in range(steps):
            t = k / steps
            out.append(Point(x0 + (x1 - x0) * t, y0 + (y1 - y0) * t))
    out.append(Point(*vertices[-1]))
    return out


def circle_stroke(cx: float = 100, cy: float = 100, r: float = 50, n: int = 36) -> list[Point]:
    return [
        Point(cx + r * math.cos(2 * math.pi * i / n), cy + r * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


def bowed_inward(vertices: list[tuple[float, float]], inset: float) -> list[tuple[float, float]]:
    """Closed outline with each edge midpoint pushed ``inset`` units toward the centroid side."""
    gx = sum(v[0] for v in vertices) / len(vertices)
    gy = sum(v[1] for v in vertices) / len(vertices)
    out: list[tuple[float, float]] = []
    for (x0, y0), (x1, y1) in zip(vertices, vertices[1:] + vertices[:1]):
        mx, my = (x0 + x1) / 2, (y0 + y1) / 2
        length = math.hypot(x1 - x0, y1 - y0)
        nx, ny = -(y1 - y0) / length, (x1 - x0) / length
        if nx * (gx - mx) + ny * (gy - my) < 0:
            nx, ny = -nx, -ny
        out.append((x0, y0))
        out.append((mx + nx * inset, my + ny * inset))
    out.append(vertices[0])
    return out


# 20 points on y = 50, x from 0 to 200
LINE_STROKE = [Point(200 * i / 19, 50) for i in range(20)]

# 36 points evenly spaced on a circle of center (100, 100), radius 50
CIRCLE_STROKE = circle_stroke()

# 200x100 rectangle traced by hand: edges sag 9 units inward at their middles
RECT_CORNERS = [(100.0, 100.0), (300.0, 100.0), (300.0, 200.0), (100.0, 200.0)]
RECT_STROKE = polyline(bowed_inward(RECT_CORNERS, 9))

# Triangle with no edge level with its lowest vertex; edges sag 10 units inward
TRIANGLE_CORNERS = [(100.0, 20.0), (190.0, 170.0), (20.0, 140.0)]
TRIANGLE_STROKE = polyline(bowed_inward(TRIANGLE_CORNERS, 10))

# Open half circle: not closed, too few corners for a polygon
ARC_STROKE = [
    Point(100 + 50 * math.cos(math.pi * i / 18), 100 + 50 * math.sin(math.pi * i / 18))
    for i in range(19)
]

ZIGZAG = [Point(0, 0), Point(10, 10), Point(20, 0), Point(30, 10), Point(40, 0)]


@pytest.fixture
def recognizer() -> Recognizer:
    counter = iter(range(1_000_000))
    return Recognizer(id_factory=lambda: f"shape{next(counter)}")
