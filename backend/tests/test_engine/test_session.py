"""Tests for the drawing session — pointer events, redraw, apply."""

import pytest

from app.engine.session import DrawingSession, SessionStore
from app.engine.shapes import ShapeKind, ShapeStyle
from tests.conftest import CIRCLE_STROKE, LINE_STROKE


class _Redraws:
    def __init__(self):
        self.count = 0
        self.scene_sizes = []

    def __call__(self, session):
        self.count += 1
        self.scene_sizes.append(len(session.scene))


def _draw(session, stroke):
    session.pointer_down(stroke[0])
    for p in stroke[1:]:
        session.pointer_move(p)
    return session.pointer_up()


def test_stroke_classified_and_appended():
    session = DrawingSession()
    shape = _draw(session, LINE_STROKE)
    assert shape.kind is ShapeKind.LINE
    assert session.scene.snapshot() == (shape,)
    assert session.last_recognition == "Recognized as line (confidence: 90%)"
    assert session.current_stroke == ()


def test_short_stroke_discarded():
    session = DrawingSession()
    assert _draw(session, LINE_STROKE[:2]) is None
    assert len(session.scene) == 0
    assert session.last_recognition == ""


def test_move_without_down_is_ignored():
    session = DrawingSession()
    session.pointer_move((5, 5))
    assert session.current_stroke == ()
    assert session.pointer_up() is None


def test_pointer_leave_finishes_stroke():
    session = DrawingSession()
    session.pointer_down(CIRCLE_STROKE[0])
    for p in CIRCLE_STROKE[1:]:
        session.pointer_move(p)
    shape = session.pointer_leave()
    assert shape.kind is ShapeKind.CIRCLE
    assert not session.drawing


def test_redraw_after_every_mutation():
    redraws = _Redraws()
    session = DrawingSession(on_redraw=redraws)
    _draw(session, LINE_STROKE)
    # down + 19 moves + up
    assert redraws.count == 21
    assert redraws.scene_sizes[-1] == 1
    session.clear()
    assert redraws.count == 22
    assert redraws.scene_sizes[-1] == 0


def test_style_read_at_completion():
    session = DrawingSession()
    session.pointer_down(LINE_STROKE[0])
    for p in LINE_STROKE[1:]:
        session.pointer_move(p)
    session.set_style(stroke_color="#123456", stroke_width=5)
    shape = session.pointer_up()
    assert shape.stroke_color == "#123456"
    assert shape.stroke_width == 5


def test_set_style_keeps_unspecified_fields():
    session = DrawingSession(style=ShapeStyle(fill_color="#abcdef", filled=True))
    session.set_style(stroke_width=3, auto_trim=False)
    assert session.style.fill_color == "#abcdef"
    assert session.style.filled is True
    assert session.auto_trim is False


def test_set_style_rejects_negative_width():
    with pytest.raises(ValueError):
        DrawingSession().set_style(stroke_width=-1)


def test_submit_stroke_redraws_once():
    redraws = _Redraws()
    session = DrawingSession(on_redraw=redraws)
    shape = session.submit_stroke(CIRCLE_STROKE)
    assert shape.kind is ShapeKind.CIRCLE
    assert redraws.count == 1


def test_apply_skips_empty_scene():
    received = []
    assert DrawingSession().apply(received.append) is False
    assert received == []


def test_apply_hands_markup_to_editor():
    session = DrawingSession()
    session.submit_stroke(LINE_STROKE)
    received = []
    assert session.apply(received.append) is True
    assert received[0].startswith("<svg")
    assert "<line" in received[0]


def test_clear_resets_scene_and_message():
    session = DrawingSession()
    session.submit_stroke(LINE_STROKE)
    session.clear()
    assert len(session.scene) == 0
    assert session.last_recognition == ""
    assert session.generate() == ""


def test_store_create_get_delete():
    store = SessionStore(preview_resolution=16)
    session = store.create(canvas_width=400, canvas_height=300)
    assert store.get(session.id) is session
    assert store.preview(session.id).grid.shape == (12, 16)
    assert store.delete(session.id) is True
    assert store.get(session.id) is None
    assert store.delete(session.id) is False


def test_store_preview_uses_recognizer_smoothing():
    store = SessionStore()
    session = store.create()
    preview = store.preview(session.id)
    assert session.on_redraw is preview
    assert preview.smooth_tolerance == session.recognizer.config.smooth_tolerance
    session.pointer_down((10, 10))
    session.pointer_move((400, 300))
    assert preview.redraws == 3
    assert "X" in preview.text


def test_far_off_canvas_stroke_keeps_session_usable():
    store = SessionStore()
    session = store.create()
    shape = session.submit_stroke([(0, 0), (1e12, 0), (2e12, 5)])
    assert shape is not None
    assert len(session.scene) == 1
    session.submit_stroke(LINE_STROKE)
    assert len(session.scene) == 2
    assert store.preview(session.id).redraws == 3
