"""FastAPI dependency injection."""

from __future__ import annotations

from fukuda.config import settings
from fukuda.engine.pipeline import TilingPipeline, create_pipeline


def get_settings():
    return settings


def get_pipeline() -> TilingPipeline:
    return create_pipeline()
