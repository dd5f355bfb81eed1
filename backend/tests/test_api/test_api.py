"""Tests for API endpoints — recognition, sessions, export."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import app
from tests.conftest import CIRCLE_STROKE, LINE_STROKE, RECT_STROKE

client = TestClient(app)


def _points(stroke):
    return [{"x": p.x, "y": p.y} for p in stroke]


def _new_session(**body):
    response = client.post("/api/sessions", json=body)
    assert response.status_code == 201
    return response.json()["session_id"]


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["classifiers_registered"] == 4


def test_recognize_line():
    response = client.post("/api/recognize", json={"points": _points(LINE_STROKE)})
    assert response.status_code == 200
    data = response.json()
    assert data["shape"]["kind"] == "line"
    assert data["shape"]["confidence"] >= 0.9
    assert data["message"] == "Recognized as line (confidence: 90%)"


def test_recognize_applies_style():
    body = {
        "points": _points(RECT_STROKE),
        "style": {"stroke_color": "#336699", "fill_color": "#ffcc00", "stroke_width": 3, "filled": True},
    }
    data = client.post("/api/recognize", json=body).json()
    assert data["shape"]["kind"] == "rectangle"
    assert data["shape"]["stroke_color"] == "#336699"
    assert data["shape"]["filled"] is True


def test_recognize_rejects_bad_input():
    assert client.post("/api/recognize", json={"points": []}).status_code == 422
    bad_color = {"points": _points(LINE_STROKE), "style": {"stroke_color": "red"}}
    assert client.post("/api/recognize", json=bad_color).status_code == 422
    bad_width = {"points": _points(LINE_STROKE), "style": {"stroke_width": -1}}
    assert client.post("/api/recognize", json=bad_width).status_code == 422


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", "1e12"])
def test_recognize_rejects_non_finite_or_huge_coordinates(value):
    body = f'{{"points": [{{"x": {value}, "y": 0}}, {{"x": 1, "y": 1}}, {{"x": 2, "y": 5}}]}}'
    response = client.post("/api/recognize", content=body, headers={"content-type": "application/json"})
    assert response.status_code == 422


def test_stroke_with_huge_coordinates_leaves_scene_untouched():
    sid = _new_session()
    body = {"points": [{"x": 0, "y": 0}, {"x": 1e12, "y": 0}, {"x": 2e12, "y": 5}]}
    assert client.post(f"/api/sessions/{sid}/strokes", json=body).status_code == 422
    assert client.get(f"/api/sessions/{sid}").json()["shapes"] == []
    assert client.get(f"/api/sessions/{sid}/preview").status_code == 200


def test_session_flow():
    sid = _new_session()

    r = client.post(f"/api/sessions/{sid}/strokes", json={"points": _points(CIRCLE_STROKE)})
    assert r.status_code == 200
    assert r.json()["shape"]["kind"] == "circle"
    assert r.json()["shape_count"] == 1

    r = client.post(f"/api/sessions/{sid}/strokes", json={"points": _points(LINE_STROKE)})
    assert r.json()["shape_count"] == 2

    svg = client.get(f"/api/sessions/{sid}/svg").json()
    assert svg["empty"] is False
    assert svg["svg"].index("<circle") < svg["svg"].index("<line")

    full = client.get(f"/api/sessions/{sid}/svg", params={"auto_trim": False}).json()
    assert 'viewBox="0.00 0.00 800.00 600.00"' in full["svg"]

    applied = client.post(f"/api/sessions/{sid}/apply")
    assert applied.status_code == 200
    assert applied.headers["content-type"].startswith("image/svg+xml")
    assert applied.text == svg["svg"]

    session = client.get(f"/api/sessions/{sid}").json()
    assert [s["kind"] for s in session["shapes"]] == ["circle", "line"]
    assert session["last_recognition"].startswith("Recognized as line")


def test_short_stroke_discarded():
    sid = _new_session()
    r = client.post(f"/api/sessions/{sid}/strokes", json={"points": _points(LINE_STROKE[:2])})
    assert r.json()["discarded"] is True
    assert r.json()["shape_count"] == 0


def test_clear_then_apply_is_no_content():
    sid = _new_session()
    client.post(f"/api/sessions/{sid}/strokes", json={"points": _points(LINE_STROKE)})
    cleared = client.delete(f"/api/sessions/{sid}/shapes").json()
    assert cleared["shapes"] == []
    assert client.post(f"/api/sessions/{sid}/apply").status_code == 204
    assert client.get(f"/api/sessions/{sid}/svg").json() == {"svg": "", "empty": True}


def test_style_update_used_for_next_stroke():
    sid = _new_session()
    r = client.put(f"/api/sessions/{sid}/style", json={"stroke_color": "#ff0000", "auto_trim": False})
    assert r.status_code == 200
    assert r.json()["auto_trim"] is False
    shape = client.post(f"/api/sessions/{sid}/strokes", json={"points": _points(LINE_STROKE)}).json()["shape"]
    assert shape["stroke_color"] == "#ff0000"


def test_custom_canvas_size():
    sid = _new_session(canvas_width=400, canvas_height=300, auto_trim=False)
    client.post(f"/api/sessions/{sid}/strokes", json={"points": _points(LINE_STROKE)})
    svg = client.get(f"/api/sessions/{sid}/svg").json()["svg"]
    assert 'width="400" height="300"' in svg


def test_preview_reflects_strokes():
    sid = _new_session()
    before = client.get(f"/api/sessions/{sid}/preview").json()
    assert "X" not in before["text"]
    client.post(f"/api/sessions/{sid}/strokes", json={"points": _points(LINE_STROKE)})
    after = client.get(f"/api/sessions/{sid}/preview").json()
    assert "X" in after["text"]
    assert after["rows"] * after["cols"] > 0


def test_unknown_session_404():
    assert client.get("/api/sessions/nope").status_code == 404
    assert client.post("/api/sessions/nope/strokes", json={"points": []}).status_code == 404


def test_delete_session():
    sid = _new_session()
    assert client.delete(f"/api/sessions/{sid}").status_code == 204
    assert client.get(f"/api/sessions/{sid}").status_code == 404
