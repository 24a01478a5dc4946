"""POST /api/tile — one tiling pass over an uploaded image."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from fukuda.config import Settings
from fukuda.dependencies import get_pipeline, get_settings
from fukuda.engine.config import LayoutParams
from fukuda.engine.pipeline import TilingPipeline
from fukuda.models.requests import LayoutOverrides, TileRequest
from fukuda.models.responses import SegmentModel, TileResponse
from fukuda.svg.serializer import segments_to_svg
from fukuda.utils.image_io import decode_base64_image

router = APIRouter()


def build_params(layout: LayoutOverrides, settings: Settings) -> LayoutParams:
    """Merge request overrides onto the configured defaults and validate."""
    return LayoutParams.from_settings(settings, **layout.model_dump()).validate()


@router.post("/tile", response_model=TileResponse)
def tile(
    req: TileRequest,
    settings: Settings = Depends(get_settings),
    pipeline: TilingPipeline = Depends(get_pipeline),
) -> TileResponse:
    start = time.perf_counter()

    raster = decode_base64_image(req.image, max_pixels=settings.max_image_pixels)
    params = build_params(req.layout, settings)
    segments = pipeline.run(raster, params)

    svg = None
    if req.output in ("svg", "both"):
        svg = segments_to_svg(
            segments,
            raster.width,
            raster.height,
            stroke=settings.stroke_color,
            stroke_width=settings.stroke_width,
            background=settings.background_color,
        )

    models: list[SegmentModel] = []
    if req.output in ("segments", "both"):
        models = [
            SegmentModel(x1=s.x1, y1=s.y1, x2=s.x2, y2=s.y2, color=s.color)
            for s in segments
        ]

    elapsed = (time.perf_counter() - start) * 1000
    return TileResponse(
        width=raster.width,
        height=raster.height,
        scheme=params.scheme,
        segment_count=len(segments),
        segments=models,
        svg=svg,
        processing_time_ms=round(elapsed, 1),
    )
