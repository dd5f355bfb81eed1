"""Drawing sessions — stroke-by-stroke scene building and SVG export."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from app.config import Settings
from app.dependencies import get_session, get_session_store, get_settings
from app.engine.session import DrawingSession, SessionStore
from app.engine.shapes import ShapeStyle
from app.models.requests import CreateSessionRequest, StrokeRequest, StyleUpdateRequest
from app.models.responses import (
    PreviewResponse,
    SessionResponse,
    ShapeResponse,
    StrokeResponse,
    SvgResponse,
    style_model,
)

router = APIRouter(prefix="/sessions")


def _session_response(session: DrawingSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.id,
        canvas_width=session.canvas_width,
        canvas_height=session.canvas_height,
        style=style_model(session.style),
        auto_trim=session.auto_trim,
        shapes=[ShapeResponse.from_shape(s) for s in session.scene],
        last_recognition=session.last_recognition,
    )


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(
    req: CreateSessionRequest,
    store: SessionStore = Depends(get_session_store),
    cfg: Settings = Depends(get_settings),
) -> SessionResponse:
    session = store.create(
        canvas_width=req.canvas_width or cfg.canvas_width,
        canvas_height=req.canvas_height or cfg.canvas_height,
        style=ShapeStyle(**req.style.model_dump()),
        auto_trim=req.auto_trim,
    )
    return _session_response(session)


@router.get("/{session_id}", response_model=SessionResponse)
async def read_session(session: DrawingSession = Depends(get_session)) -> SessionResponse:
    return _session_response(session)


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session: DrawingSession = Depends(get_session),
    store: SessionStore = Depends(get_session_store),
) -> Response:
    store.delete(session.id)
    return Response(status_code=204)


@router.put("/{session_id}/style", response_model=SessionResponse)
async def update_style(
    req: StyleUpdateRequest,
    session: DrawingSession = Depends(get_session),
) -> SessionResponse:
    session.set_style(**req.model_dump())
    return _session_response(session)


@router.post("/{session_id}/strokes", response_model=StrokeResponse)
async def add_stroke(
    req: StrokeRequest,
    session: DrawingSession = Depends(get_session),
) -> StrokeResponse:
    shape = session.submit_stroke([(p.x, p.y) for p in req.points])
    if shape is None:
        return StrokeResponse(discarded=True, shape_count=len(session.scene))
    return StrokeResponse(
        shape=ShapeResponse.from_shape(shape),
        message=session.last_recognition,
        shape_count=len(session.scene),
    )


@router.delete("/{session_id}/shapes", response_model=SessionResponse)
async def clear_shapes(session: DrawingSession = Depends(get_session)) -> SessionResponse:
    session.clear()
    return _session_response(session)


@router.get("/{session_id}/svg", response_model=SvgResponse)
async def export_svg(
    auto_trim: bool | None = None,
    session: DrawingSession = Depends(get_session),
) -> SvgResponse:
    svg = session.generate(auto_trim=auto_trim)
    return SvgResponse(svg=svg, empty=not svg)


@router.post("/{session_id}/apply")
async def apply_svg(session: DrawingSession = Depends(get_session)) -> Response:
    """Markup for the editor surface; 204 when there is nothing to apply."""
    applied: list[str] = []
    if not session.apply(applied.append):
        return Response(status_code=204)
    return Response(content=applied[0], media_type="image/svg+xml")


@router.get("/{session_id}/preview", response_model=PreviewResponse)
async def preview(
    session: DrawingSession = Depends(get_session),
    store: SessionStore = Depends(get_session_store),
) -> PreviewResponse:
    canvas = store.preview(session.id)
    rows, cols = canvas.grid.shape
    return PreviewResponse(text=canvas.text, rows=rows, cols=cols)
