"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    schemes_registered: int = 0


class SchemeInfo(BaseModel):
    id: str
    description: str = ""


class SweepInfo(BaseModel):
    name: str
    parameter: str
    step: float
    description: str = ""


class SchemesResponse(BaseModel):
    schemes: list[SchemeInfo] = Field(default_factory=list)
    sweeps: list[SweepInfo] = Field(default_factory=list)


class SegmentModel(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float
    color: tuple[int, int, int] | None = None


class TileResponse(BaseModel):
    width: int
    height: int
    scheme: str
    segment_count: int = 0
    segments: list[SegmentModel] = Field(default_factory=list)
    svg: str | None = None
    processing_time_ms: float = 0.0


class FrameModel(BaseModel):
    index: int
    params: dict[str, float | int | str | bool] = Field(default_factory=dict)
    segment_count: int = 0
    svg: str = ""
    elapsed_ms: float = 0.0


class AnimateResponse(BaseModel):
    width: int
    height: int
    frames: list[FrameModel] = Field(default_factory=list)
