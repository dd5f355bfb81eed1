"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import HTTPException

from app.config import settings
from app.engine.session import DrawingSession, SessionStore

_store = SessionStore(preview_resolution=settings.preview_resolution)


def get_settings():
    return settings


def get_session_store() -> SessionStore:
    return _store


def get_session(session_id: str) -> DrawingSession:
    session = _store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return session
