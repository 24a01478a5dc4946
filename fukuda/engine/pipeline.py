"""Pipeline orchestrator — one tiling pass per frame, optional sweep between frames."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator, Iterator
from dataclasses import dataclass, field

from fukuda.engine.config import LayoutParams
from fukuda.engine.geometry import Segment
from fukuda.engine.raster import Raster
from fukuda.engine.registry import SchemeRegistry, get_registry
from fukuda.engine.sweep import AnimationState, advance

logger = logging.getLogger(__name__)


@dataclass
class FrameResult:
    """Output of one animation tick."""

    index: int
    params: LayoutParams
    segments: list[Segment] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def segment_count(self) -> int:
        return len(self.segments)


class TilingPipeline:
    """Runs layout schemes over a raster."""

    def __init__(self, registry: SchemeRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def iter_segments(self, raster: Raster, params: LayoutParams) -> Iterator[Segment]:
        """Lazy segment stream for one pass. Parameters are checked up front."""
        params.validate()
        spec = self.registry.get(params.scheme)
        return spec.fn(raster, params)

    def run(self, raster: Raster, params: LayoutParams) -> list[Segment]:
        """Run one full pass and collect its segments."""
        start = time.perf_counter()
        segments = list(self.iter_segments(raster, params))
        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Tiling pass (%s) on %dx%d: %d segments in %.0fms",
            params.scheme,
            raster.width,
            raster.height,
            len(segments),
            total,
        )
        return segments

    def run_streaming(
        self,
        raster: Raster,
        state: AnimationState,
        frames: int,
    ) -> Generator[FrameResult, None, AnimationState]:
        """Yield ``frames`` animation frames, ticking the sweeps before each.

        The generator's return value is the state after the last tick, so a
        caller can resume the animation where it stopped.
        """
        for i in range(frames):
            state = advance(state)
            t0 = time.perf_counter()
            segments = self.run(raster, state.params)
            elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)
            yield FrameResult(index=i, params=state.params, segments=segments, elapsed_ms=elapsed_ms)
        return state


def create_pipeline() -> TilingPipeline:
    """Create a pipeline bound to the global scheme registry."""
    return TilingPipeline()
