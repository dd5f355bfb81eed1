"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.engine.shapes import RecognizedShape, ShapeKind, ShapeStyle
from app.models.requests import PointModel, StyleModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    classifiers_registered: int = 0


class ShapeResponse(BaseModel):
    id: str
    kind: ShapeKind
    points: list[PointModel]
    stroke_color: str
    fill_color: str
    stroke_width: float
    filled: bool
    confidence: float

    @classmethod
    def from_shape(cls, shape: RecognizedShape) -> ShapeResponse:
        return cls(
            id=shape.id,
            kind=shape.kind,
            points=[PointModel(x=p.x, y=p.y) for p in shape.points],
            stroke_color=shape.stroke_color,
            fill_color=shape.fill_color,
            stroke_width=shape.stroke_width,
            filled=shape.filled,
            confidence=shape.confidence,
        )


def style_model(style: ShapeStyle) -> StyleModel:
    return StyleModel(
        stroke_color=style.stroke_color,
        fill_color=style.fill_color,
        stroke_width=style.stroke_width,
        filled=style.filled,
    )


class RecognizeResponse(BaseModel):
    shape: ShapeResponse
    message: str


class SessionResponse(BaseModel):
    session_id: str
    canvas_width: float
    canvas_height: float
    style: StyleModel
    auto_trim: bool
    shapes: list[ShapeResponse] = Field(default_factory=list)
    last_recognition: str = ""


class StrokeResponse(BaseModel):
    shape: ShapeResponse | None = None
    discarded: bool = False
    message: str = ""
    shape_count: int = 0


class SvgResponse(BaseModel):
    svg: str
    empty: bool


class PreviewResponse(BaseModel):
    text: str
    rows: int
    cols: int
