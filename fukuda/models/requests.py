"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class LayoutOverrides(BaseModel):
    """Per-request layout settings. Unset fields fall back to the defaults."""

    scheme: str | None = Field(default=None, description="Layout scheme (rectangular, fan)")
    strip_width: int | None = Field(default=None, description="Rectangular strip pitch in pixels")
    num_strips: int | None = Field(default=None, description="Number of fan slices")
    pct_min: float | None = Field(default=None, description="Minimum width percentage")
    pct_max: float | None = Field(default=None, description="Maximum width percentage")
    angle_start: float | None = Field(default=None, description="Fan start angle in degrees")
    angle_end: float | None = Field(default=None, description="Fan end angle in degrees")
    step_size: float | None = Field(default=None, description="Anchor spacing along a strip")
    solid_color: bool | None = Field(default=None, description="False colours segments from the image")


class TileRequest(BaseModel):
    image: str = Field(..., description="Base64-encoded image (PNG, JPEG, ...), data: URLs accepted")
    layout: LayoutOverrides = Field(default_factory=LayoutOverrides)
    output: Literal["segments", "svg", "both"] = Field(default="both", description="What to return")


class AnimateRequest(BaseModel):
    image: str = Field(..., description="Base64-encoded image")
    layout: LayoutOverrides = Field(default_factory=LayoutOverrides)
    sweeps: list[str] = Field(
        default_factory=list,
        description="Enabled sweeps (evolve, breathe, unfurl, pulse)",
    )
    frames: int = Field(default=10, ge=1, description="Number of animation ticks to render")
