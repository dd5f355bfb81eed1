"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sketchshape_env: str = "development"
    sketchshape_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Drawing surface
    canvas_width: float = 800.0
    canvas_height: float = 600.0
    preview_resolution: int = 48
    max_stroke_points: int = 20000
    # Absolute bound on accepted stroke coordinates, in canvas units
    max_coordinate: float = 1_000_000.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
