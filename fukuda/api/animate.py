"""POST /api/animate — render a sequence of swept frames.

``/animate`` returns every frame at once; ``/animate/stream`` sends each frame
as a server-sent event as soon as it is tiled.
"""

from __future__ import annotations

import json
from collections.abc import Iterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from fukuda.api.tile import build_params
from fukuda.config import Settings
from fukuda.dependencies import get_pipeline, get_settings
from fukuda.engine.errors import InvalidParameter
from fukuda.engine.pipeline import FrameResult, TilingPipeline
from fukuda.engine.raster import Raster
from fukuda.engine.sweep import AnimationState
from fukuda.models.requests import AnimateRequest
from fukuda.models.responses import AnimateResponse, FrameModel
from fukuda.svg.serializer import segments_to_svg
from fukuda.utils.image_io import decode_base64_image

router = APIRouter(prefix="/animate")


def _prepare(req: AnimateRequest, settings: Settings) -> tuple[Raster, AnimationState]:
    if req.frames > settings.max_frames:
        raise InvalidParameter(f"frames ({req.frames}) exceeds the limit of {settings.max_frames}")
    raster = decode_base64_image(req.image, max_pixels=settings.max_image_pixels)
    params = build_params(req.layout, settings)
    return raster, AnimationState.start(params, req.sweeps)


def _frame_model(frame: FrameResult, raster: Raster, settings: Settings) -> FrameModel:
    return FrameModel(
        index=frame.index,
        params=frame.params.as_dict(),
        segment_count=frame.segment_count,
        svg=segments_to_svg(
            frame.segments,
            raster.width,
            raster.height,
            stroke=settings.stroke_color,
            stroke_width=settings.stroke_width,
            background=settings.background_color,
        ),
        elapsed_ms=frame.elapsed_ms,
    )


@router.post("", response_model=AnimateResponse)
def animate(
    req: AnimateRequest,
    settings: Settings = Depends(get_settings),
    pipeline: TilingPipeline = Depends(get_pipeline),
) -> AnimateResponse:
    raster, state = _prepare(req, settings)
    frames = [
        _frame_model(frame, raster, settings)
        for frame in pipeline.run_streaming(raster, state, req.frames)
    ]
    return AnimateResponse(width=raster.width, height=raster.height, frames=frames)


@router.post("/stream")
def animate_stream(
    req: AnimateRequest,
    settings: Settings = Depends(get_settings),
    pipeline: TilingPipeline = Depends(get_pipeline),
) -> StreamingResponse:
    # Decode and validate before the stream opens so bad input still gets a 4xx.
    raster, state = _prepare(req, settings)

    def _events() -> Iterator[str]:
        for frame in pipeline.run_streaming(raster, state, req.frames):
            data = json.dumps(_frame_model(frame, raster, settings).model_dump())
            yield f"event: frame\ndata: {data}\n\n"
        yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"

    return StreamingResponse(_events(), media_type="text/event-stream")
