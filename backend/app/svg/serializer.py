"""Write SVG markup from a scene of recognized shapes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from app.engine.bounds import compute_bounds
from app.engine.config import RecognitionConfig
from app.engine.shapes import NO_FILL, Bounds, RecognizedShape, ShapeKind

_SVG_NS = "http://www.w3.org/2000/svg"
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Viewport:
    x: float
    y: float
    width: float
    height: float
    # Declared width/height attributes on the <svg> element
    svg_width: int
    svg_height: int


def _f2(value: float) -> str:
    """Two decimals, exact halves rounded away from zero."""
    if not math.isfinite(value):
        return str(value)
    return str(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def _num(value: float) -> str:
    """Shortest round-tripping form: 2.0 → "2", 2.5 → "2.5"."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_viewport(
    bounds: Bounds | None,
    canvas_w: float,
    canvas_h: float,
    auto_trim: bool,
    config: RecognitionConfig | None = None,
) -> Viewport:
    """Full canvas, or the padded scene bounds clipped to the canvas when trimming."""
    if not auto_trim or bounds is None:
        return Viewport(0.0, 0.0, canvas_w, canvas_h, _round_half_up(canvas_w), _round_half_up(canvas_h))

    cfg = config or RecognitionConfig()
    pad = cfg.trim_padding

    x = max(0.0, bounds.min_x - pad)
    y = max(0.0, bounds.min_y - pad)
    width = min(canvas_w - x, bounds.max_x + pad - x)
    height = min(canvas_h - y, bounds.max_y + pad - y)

    width = max(width, cfg.min_viewport)
    height = max(height, cfg.min_viewport)

    return Viewport(x, y, width, height, _round_half_up(width), _round_half_up(height))


def shape_to_element(shape: RecognizedShape) -> dict[str, Any] | None:
    """Element definition (tag + attributes) for one shape; None if nothing to draw."""
    stroke = {"stroke": shape.stroke_color, "stroke-width": _num(shape.stroke_width)}
    fill = shape.style.fill_value
    pts = shape.points

    if shape.kind is ShapeKind.LINE:
        return {
            "tag": "line",
            "x1": _f2(pts[0].x),
            "y1": _f2(pts[0].y),
            "x2": _f2(pts[1].x),
            "y2": _f2(pts[1].y),
            **stroke,
        }

    if shape.kind is ShapeKind.CIRCLE:
        return {
            "tag": "circle",
            "cx": _f2(shape.center.x),
            "cy": _f2(shape.center.y),
            "r": _f2(shape.radius),
            **stroke,
            "fill": fill,
        }

    if shape.kind is ShapeKind.RECTANGLE:
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return {
            "tag": "rect",
            "x": _f2(min(xs)),
            "y": _f2(min(ys)),
            "width": _f2(max(xs) - min(xs)),
            "height": _f2(max(ys) - min(ys)),
            **stroke,
            "fill": fill,
        }

    if shape.kind is ShapeKind.TRIANGLE:
        return {
            "tag": "polygon",
            "points": " ".join(f"{_f2(p.x)},{_f2(p.y)}" for p in pts),
            **stroke,
            "fill": fill,
        }

    if shape.kind is ShapeKind.CURVE:
        if len(pts) < 2:
            return None
        d = " ".join(
            f"{'M' if i == 0 else 'L'} {_f2(p.x)} {_f2(p.y)}" for i, p in enumerate(pts)
        )
        return {
            "tag": "path",
            "d": d,
            **stroke,
            "fill": NO_FILL,
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
        }

    raise ValueError(f"Unknown shape kind: {shape.kind}")


def serialize_scene(
    shapes: Sequence[RecognizedShape],
    canvas_w: float,
    canvas_h: float,
    auto_trim: bool = True,
    config: RecognitionConfig | None = None,
) -> str:
    """Generate SVG markup for the scene. Empty scene → empty string."""
    if not shapes:
        return ""

    vp = compute_viewport(compute_bounds(shapes), canvas_w, canvas_h, auto_trim, config)

    lines = [
        f'<svg width="{vp.svg_width}" height="{vp.svg_height}"'
        f' viewBox="{_f2(vp.x)} {_f2(vp.y)} {_f2(vp.width)} {_f2(vp.height)}"'
        f' xmlns="{_SVG_NS}">',
    ]

    # Scene order is paint order
    for shape in shapes:
        elem = shape_to_element(shape)
        if elem is None:
            continue
        tag = elem["tag"]
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str}/>")

    lines.append("</svg>")
    return "\n".join(lines)
