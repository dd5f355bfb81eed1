"""DrawingSession — stroke buffer, style, and scene for one drawing surface.

Single-threaded and synchronous: pointer events mutate the stroke buffer,
stroke completion classifies and appends in one step, and the redraw hook
runs after every mutation before control returns to the caller.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Sequence
from dataclasses import replace

from app.engine.recognizer import Recognizer, create_recognizer, describe
from app.engine.scene import Scene
from app.engine.shapes import Point, RecognizedShape, ShapeStyle
from app.svg.serializer import serialize_scene
from app.utils.geometry import PointLike
from app.utils.rasterizer import CanvasPreview

logger = logging.getLogger(__name__)

RedrawHook = Callable[["DrawingSession"], None]


class DrawingSession:
    def __init__(
        self,
        canvas_width: float = 800.0,
        canvas_height: float = 600.0,
        style: ShapeStyle | None = None,
        auto_trim: bool = True,
        recognizer: Recognizer | None = None,
        on_redraw: RedrawHook | None = None,
    ) -> None:
        self.id = uuid.uuid4().hex
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.style = style or ShapeStyle()
        self.auto_trim = auto_trim
        self.recognizer = recognizer or create_recognizer()
        self.on_redraw = on_redraw
        self.scene = Scene()
        self.last_recognition = ""
        self._stroke: list[Point] = []
        self._drawing = False

    @property
    def drawing(self) -> bool:
        return self._drawing

    @property
    def current_stroke(self) -> tuple[Point, ...]:
        return tuple(self._stroke)

    def _redraw(self) -> None:
        if self.on_redraw is not None:
            self.on_redraw(self)

    # --- input collaborator ---

    def pointer_down(self, point: PointLike) -> None:
        self._drawing = True
        self._stroke = [Point(float(point[0]), float(point[1]))]
        self._redraw()

    def pointer_move(self, point: PointLike) -> None:
        if not self._drawing:
            return
        self._stroke.append(Point(float(point[0]), float(point[1])))
        self._redraw()

    def pointer_up(self) -> RecognizedShape | None:
        """Finish the stroke. Returns the new shape, or None if it was discarded."""
        stroke = self._stroke
        was_drawing = self._drawing
        self._drawing = False
        self._stroke = []

        shape = None
        if was_drawing:
            shape = self._complete(stroke)
        self._redraw()
        return shape

    def pointer_leave(self) -> RecognizedShape | None:
        return self.pointer_up()

    def submit_stroke(self, points: Sequence[PointLike]) -> RecognizedShape | None:
        """Complete stroke delivered at once. Redraws only on completion."""
        if not points:
            return None
        self._drawing = True
        self._stroke = [Point(float(p[0]), float(p[1])) for p in points]
        return self.pointer_up()

    def _complete(self, stroke: list[Point]) -> RecognizedShape | None:
        if len(stroke) < self.recognizer.config.min_stroke_points:
            logger.debug("Discarded stroke with %d points", len(stroke))
            return None

        shape = self.recognizer.classify(stroke, self.style)
        self.scene.append(shape)
        self.last_recognition = describe(shape)
        return shape

    # --- style collaborator ---

    def set_style(
        self,
        stroke_color: str | None = None,
        fill_color: str | None = None,
        stroke_width: float | None = None,
        filled: bool | None = None,
        auto_trim: bool | None = None,
    ) -> ShapeStyle:
        changes = {
            k: v
            for k, v in {
                "stroke_color": stroke_color,
                "fill_color": fill_color,
                "stroke_width": stroke_width,
                "filled": filled,
            }.items()
            if v is not None
        }
        self.style = replace(self.style, **changes)
        if auto_trim is not None:
            self.auto_trim = auto_trim
        return self.style

    # --- scene ---

    def clear(self) -> None:
        self.scene.clear()
        self._stroke = []
        self._drawing = False
        self.last_recognition = ""
        logger.info("Session %s cleared", self.id)
        self._redraw()

    # --- output collaborator ---

    def generate(self, auto_trim: bool | None = None) -> str:
        trim = self.auto_trim if auto_trim is None else auto_trim
        return serialize_scene(
            self.scene.snapshot(),
            self.canvas_width,
            self.canvas_height,
            auto_trim=trim,
            config=self.recognizer.config,
        )

    def apply(self, on_generated: Callable[[str], None]) -> bool:
        """Hand the markup to the editor. Empty markup means nothing to apply."""
        markup = self.generate()
        if not markup:
            return False
        on_generated(markup)
        return True


class SessionStore:
    """In-process session registry with a canvas preview per session.

    Nothing is persisted; sessions live as long as the store.
    """

    def __init__(self, preview_resolution: int = 48) -> None:
        self.preview_resolution = preview_resolution
        self._sessions: dict[str, DrawingSession] = {}
        self._previews: dict[str, CanvasPreview] = {}

    def create(self, **kwargs) -> DrawingSession:
        session = DrawingSession(**kwargs)
        preview = CanvasPreview(self.preview_resolution, session.recognizer.config.smooth_tolerance)
        session.on_redraw = preview
        preview(session)
        self._sessions[session.id] = session
        self._previews[session.id] = preview
        logger.info("Session %s created (%d active)", session.id, len(self._sessions))
        return session

    def get(self, session_id: str) -> DrawingSession | None:
        return self._sessions.get(session_id)

    def preview(self, session_id: str) -> CanvasPreview | None:
        return self._previews.get(session_id)

    def delete(self, session_id: str) -> bool:
        self._previews.pop(session_id, None)
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
