"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    fukuda_env: str = "development"
    fukuda_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Default layout
    default_scheme: str = "fan"
    default_strip_width: int = 10
    default_num_strips: int = 50
    default_pct_min: float = 10
    default_pct_max: float = 100
    default_angle_start: float = -90
    default_angle_end: float = 90
    default_step_size: float = 1.0
    default_solid_color: bool = True

    # Frame renderer: blue-ish 2px strokes on a cream background
    stroke_color: str = "#1478d2"
    stroke_width: float = 2.0
    background_color: str = "#ffffdc"

    # Request limits
    max_image_pixels: int = 2048 * 2048
    max_frames: int = 120

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
