"""Fukuda-style tiling engine."""

from fukuda.engine.registry import scheme, get_registry
from fukuda.engine.config import LayoutParams, SCHEME_FAN, SCHEME_RECTANGULAR
from fukuda.engine.errors import FukudaError, ImageDecodeError, InvalidParameter, OutOfBounds
from fukuda.engine.geometry import Segment, Strip
from fukuda.engine.raster import Raster
from fukuda.engine.sweep import AnimationState, advance
from fukuda.engine.pipeline import TilingPipeline, FrameResult, create_pipeline

__all__ = [
    "scheme",
    "get_registry",
    "LayoutParams",
    "SCHEME_FAN",
    "SCHEME_RECTANGULAR",
    "FukudaError",
    "ImageDecodeError",
    "InvalidParameter",
    "OutOfBounds",
    "Segment",
    "Strip",
    "Raster",
    "AnimationState",
    "advance",
    "TilingPipeline",
    "FrameResult",
    "create_pipeline",
]
