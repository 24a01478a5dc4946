"""Radial-fan scheme — strips radiate from the centre of the bottom edge.

The fan between angle_start and angle_end is split into num_strips slices.
Each strip walks outward from the origin until it leaves the image; at every
anchor the 3×3 neighbourhood is averaged, smoothed over the last five anchors
and scaled to the slice's width at that radius.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from fukuda.engine.config import SCHEME_FAN, LayoutParams
from fukuda.engine.errors import OutOfBounds
from fukuda.engine.geometry import Segment, Strip, fan_vectors
from fukuda.engine.modulator import SmoothingWindow
from fukuda.engine.raster import Raster
from fukuda.engine.registry import scheme
from fukuda.engine.sampler import neighborhood_intensity
from fukuda.utils.geometry import Vec2, fan_slice_width

logger = logging.getLogger(__name__)


def fan_origin(raster: Raster) -> Vec2:
    """Apex of the fan: middle of the image's bottom row."""
    return (raster.width / 2, raster.height - 1)


def fan_angles(params: LayoutParams) -> tuple[list[float], float]:
    """Strip angles in radians (both ends included) and the slice angle."""
    start = math.radians(params.angle_start)
    end = math.radians(params.angle_end)
    inc = (end - start) / params.num_strips
    return [start + i * inc for i in range(params.num_strips + 1)], inc


@scheme(
    id=SCHEME_FAN,
    description="Radial fan from the bottom-centre, smoothed along each strip",
)
def fan(raster: Raster, params: LayoutParams) -> Iterator[Segment]:
    origin = fan_origin(raster)
    angles, inc = fan_angles(params)
    for angle in angles:
        yield from fan_strip(raster, params, angle, inc, origin)


def fan_strip(
    raster: Raster,
    params: LayoutParams,
    angle: float,
    angle_inc: float,
    origin: Vec2,
) -> Iterator[Segment]:
    """Segments of a single strip, from the origin outward."""
    direction, spread = fan_vectors(angle)
    window = SmoothingWindow()

    x, y = origin
    while raster.contains(x, y):
        # Sample one row above the anchor so the bottom-edge origin has a
        # complete 3×3 block.
        cx = math.floor(x)
        cy = math.floor(y) - 1
        try:
            intensity = neighborhood_intensity(raster, cx, cy)
        except OutOfBounds as e:
            logger.debug("Fan strip %.1f° stopped at (%.1f, %.1f): %s", math.degrees(angle), x, y, e)
            return

        avg = window.push(intensity, params.pct_min, params.pct_max)
        strip = Strip(
            anchor=(x, y),
            direction=direction,
            spread=spread,
            half_width=fan_slice_width((x, y), origin, angle_inc) / 2 * avg,
        )
        color = None if params.solid_color else raster.rgb_at(cx, cy)
        yield strip.to_segment(color)

        x += direction[0] * params.step_size
        y += direction[1] * params.step_size
