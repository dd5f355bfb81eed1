"""Rasterization utilities — scene to pixel grid, grid to text.

Used for the canvas preview: every shape plus the in-progress stroke is
redrawn from scratch on each call, so rendering never touches scene state.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray
from skimage.draw import ellipse, ellipse_perimeter, line, polygon

from app.engine.shapes import RecognizedShape, ShapeKind
from app.utils.geometry import PointLike, as_array
from app.utils.simplify import SMOOTH_TOLERANCE, smooth_path


def grid_shape(canvas_w: float, canvas_h: float, resolution: int) -> tuple[int, int]:
    """(rows, cols) keeping the canvas aspect ratio; ``resolution`` columns."""
    rows = max(1, int(round(resolution * canvas_h / canvas_w)))
    return rows, resolution


def _to_grid(points: NDArray[np.float64], canvas_w: float, canvas_h: float, shape: tuple[int, int]):
    rows, cols = shape
    c = points[:, 0] / canvas_w * cols
    r = points[:, 1] / canvas_h * rows
    return r, c


def _set(grid: NDArray[np.int8], rr: NDArray, cc: NDArray) -> None:
    mask = (rr >= 0) & (rr < grid.shape[0]) & (cc >= 0) & (cc < grid.shape[1])
    grid[rr[mask], cc[mask]] = 1


def _clip_segment(
    r0: float, c0: float, r1: float, c1: float, rows: int, cols: int
) -> tuple[float, float, float, float] | None:
    """Liang-Barsky clip to the grid padded by one cell; None if fully outside."""
    dr, dc = r1 - r0, c1 - c0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dr, r0 + 1), (dr, rows - r0), (-dc, c0 + 1), (dc, cols - c0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return r0 + t0 * dr, c0 + t0 * dc, r0 + t1 * dr, c0 + t1 * dc


def _draw_polyline(
    grid: NDArray[np.int8],
    points: Sequence[PointLike],
    canvas_w: float,
    canvas_h: float,
    closed: bool = False,
) -> None:
    pts = as_array(points)
    pts = pts[np.isfinite(pts).all(axis=1)]
    if len(pts) == 0:
        return
    rows, cols = grid.shape
    r, c = _to_grid(pts, canvas_w, canvas_h, grid.shape)

    if len(pts) == 1:
        rr = np.floor(np.clip(r, -1, rows)).astype(int)
        cc = np.floor(np.clip(c, -1, cols)).astype(int)
        _set(grid, rr, cc)
        return

    n = len(pts) if closed else len(pts) - 1
    for i in range(n):
        j = (i + 1) % len(pts)
        clipped = _clip_segment(r[i], c[i], r[j], c[j], rows, cols)
        if clipped is None:
            continue
        r0, c0, r1, c1 = (int(math.floor(v)) for v in clipped)
        rr, cc = line(r0, c0, r1, c1)
        _set(grid, rr, cc)


def _fill_polygon(
    grid: NDArray[np.int8],
    points: Sequence[PointLike],
    canvas_w: float,
    canvas_h: float,
) -> None:
    pts = as_array(points)
    if not np.isfinite(pts).all():
        return
    r, c = _to_grid(pts, canvas_w, canvas_h, grid.shape)
    # polygon() only scans the part of the bounding box inside ``shape``
    rr, cc = polygon(r, c, shape=grid.shape)
    grid[rr, cc] = 1


def _circle_outline(shape: RecognizedShape, samples: int = 72) -> list[tuple[float, float]]:
    cx, cy = shape.center
    radius = shape.radius
    return [
        (cx + radius * math.cos(a), cy + radius * math.sin(a))
        for a in np.linspace(0.0, 2 * math.pi, samples, endpoint=False)
    ]


def _draw_circle(grid: NDArray[np.int8], shape: RecognizedShape, canvas_w: float, canvas_h: float) -> None:
    rows, cols = grid.shape
    cx, cy = shape.center
    radius = shape.radius
    r_c = cy / canvas_h * rows
    c_c = cx / canvas_w * cols
    r_rad = radius / canvas_h * rows
    c_rad = radius / canvas_w * cols
    if not np.isfinite([r_c, c_c, r_rad, c_rad]).all():
        return

    # ellipse_perimeter allocates per perimeter pixel; past this reach the
    # circle is drawn as a clipped polygon instead
    reach = rows + cols
    near = (
        -reach <= r_c <= rows + reach
        and -reach <= c_c <= cols + reach
        and r_rad <= reach
        and c_rad <= reach
    )
    if not near:
        outline = _circle_outline(shape)
        if shape.style.paints_fill:
            _fill_polygon(grid, outline, canvas_w, canvas_h)
        _draw_polyline(grid, outline, canvas_w, canvas_h, closed=True)
        return

    if shape.style.paints_fill and r_rad > 0 and c_rad > 0:
        rr, cc = ellipse(r_c, c_c, r_rad, c_rad, shape=grid.shape)
        grid[rr, cc] = 1
    rr, cc = ellipse_perimeter(
        int(r_c), int(c_c), max(int(round(r_rad)), 0), max(int(round(c_rad)), 0), shape=grid.shape
    )
    grid[rr, cc] = 1


def _draw_shape(grid: NDArray[np.int8], shape: RecognizedShape, canvas_w: float, canvas_h: float) -> None:
    if shape.kind is ShapeKind.CIRCLE:
        _draw_circle(grid, shape, canvas_w, canvas_h)
        return

    if shape.kind in (ShapeKind.RECTANGLE, ShapeKind.TRIANGLE):
        if shape.style.paints_fill:
            _fill_polygon(grid, shape.points, canvas_w, canvas_h)
        _draw_polyline(grid, shape.points, canvas_w, canvas_h, closed=True)
        return

    # Lines and curves are open strokes, never filled
    _draw_polyline(grid, shape.points, canvas_w, canvas_h)


def render_scene(
    shapes: Sequence[RecognizedShape],
    in_progress: Sequence[PointLike] = (),
    canvas_w: float = 800.0,
    canvas_h: float = 600.0,
    resolution: int = 48,
) -> NDArray[np.int8]:
    """Rasterize shapes (in paint order) and the in-progress stroke.

    Returns:
        Grid array where 1 = ink, 0 = empty.
    """
    grid = np.zeros(grid_shape(canvas_w, canvas_h, resolution), dtype=np.int8)
    for shape in shapes:
        _draw_shape(grid, shape, canvas_w, canvas_h)
    # A single-point stroke is not drawn until it has a segment
    if len(in_progress) > 1:
        _draw_polyline(grid, in_progress, canvas_w, canvas_h)
    return grid


def grid_to_text(
    grid: NDArray[np.int8],
    filled: str = "X",
    empty: str = ".",
) -> str:
    """Convert a grid to a text representation."""
    rows = []
    for row in grid:
        rows.append(" ".join(filled if cell else empty for cell in row))
    return "\n".join(rows)


class CanvasPreview:
    """Redraw hook: re-renders a session's canvas after every mutation.

    Holds the most recent grid; the session is only read, never modified.
    The in-progress stroke is drawn smoothed.
    """

    def __init__(self, resolution: int = 48, smooth_tolerance: float = SMOOTH_TOLERANCE) -> None:
        self.resolution = resolution
        self.smooth_tolerance = smooth_tolerance
        self.grid: NDArray[np.int8] | None = None
        self.redraws = 0

    def __call__(self, session) -> None:
        self.grid = render_scene(
            session.scene.snapshot(),
            smooth_path(session.current_stroke, self.smooth_tolerance),
            session.canvas_width,
            session.canvas_height,
            self.resolution,
        )
        self.redraws += 1

    @property
    def text(self) -> str:
        return grid_to_text(self.grid) if self.grid is not None else ""
