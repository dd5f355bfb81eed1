"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from app.config import settings

_HEX_COLOR = r"^#[0-9a-fA-F]{3,8}$"
_FILL_COLOR = r"^(#[0-9a-fA-F]{3,8}|#?transparent)$"


class PointModel(BaseModel):
    x: float
    y: float


class StrokePointModel(PointModel):
    """Incoming stroke sample: finite and within +-max_coordinate."""

    x: float = Field(allow_inf_nan=False, ge=-settings.max_coordinate, le=settings.max_coordinate)
    y: float = Field(allow_inf_nan=False, ge=-settings.max_coordinate, le=settings.max_coordinate)


class StyleModel(BaseModel):
    stroke_color: str = Field(default="#000000", pattern=_HEX_COLOR)
    fill_color: str = Field(
        default="#transparent",
        pattern=_FILL_COLOR,
        description="Hex color, or '#transparent' for no fill",
    )
    stroke_width: float = Field(default=2.0, ge=0, allow_inf_nan=False)
    filled: bool = False


def _check_stroke_length(points: list[StrokePointModel]) -> list[StrokePointModel]:
    if len(points) > settings.max_stroke_points:
        raise ValueError(f"stroke has {len(points)} points, limit is {settings.max_stroke_points}")
    return points


class RecognizeRequest(BaseModel):
    points: list[StrokePointModel] = Field(..., min_length=1, description="Raw stroke in canvas units")
    style: StyleModel = Field(default_factory=StyleModel)

    @field_validator("points")
    @classmethod
    def check_stroke_length(cls, points: list[StrokePointModel]) -> list[StrokePointModel]:
        return _check_stroke_length(points)


class CreateSessionRequest(BaseModel):
    canvas_width: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    canvas_height: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    style: StyleModel = Field(default_factory=StyleModel)
    auto_trim: bool = True


class StrokeRequest(BaseModel):
    points: list[StrokePointModel] = Field(..., description="One completed stroke, pointer down to up")

    @field_validator("points")
    @classmethod
    def check_stroke_length(cls, points: list[StrokePointModel]) -> list[StrokePointModel]:
        return _check_stroke_length(points)


class StyleUpdateRequest(BaseModel):
    stroke_color: str | None = Field(default=None, pattern=_HEX_COLOR)
    fill_color: str | None = Field(default=None, pattern=_FILL_COLOR)
    stroke_width: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    filled: bool | None = None
    auto_trim: bool | None = None
