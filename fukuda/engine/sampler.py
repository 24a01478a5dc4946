"""Intensity sampling around an anchor point.

Two footprints:
  - cross-section: one row of ``strip_width`` pixels across a vertical strip
  - neighborhood: the 3×3 block centred on the sample point

Nothing here clamps to the raster. A footprint that leaves the image raises
OutOfBounds from the accessor; the scheme decides what that means.
"""

from __future__ import annotations

import math

from fukuda.engine.raster import MAX_INTENSITY, Raster

# 3×3 block: 8 neighbours + the centre.
NEIGHBORHOOD_SIZE = 9


def cross_section_columns(x: float, strip_width: int) -> list[int]:
    """Columns covered by a strip of ``strip_width`` pixels centred on ``x``.

    Offsets run from -w/2 to +w/2 (exclusive) in unit steps, so exactly
    ``strip_width`` columns come back, possibly outside the raster.
    """
    half = strip_width / 2
    return [math.floor(x - half + k) for k in range(strip_width)]


def cross_section_sum(raster: Raster, columns: list[int], row: int) -> int:
    """Sum of R+G+B over ``columns`` on a single row."""
    return sum(raster.intensity_at(col, row) for col in columns)


def cross_section_intensity(raster: Raster, columns: list[int], row: int) -> float:
    """Mean cross-section intensity normalized to [0, 1]."""
    if not columns:
        return 0.0
    return cross_section_sum(raster, columns, row) / len(columns) / MAX_INTENSITY


def neighborhood_intensity(raster: Raster, cx: int, cy: int) -> float:
    """Mean intensity of the 3×3 block around (cx, cy), normalized to [0, 1]."""
    total = raster.block_sum(cx - 1, cy - 1, cx + 2, cy + 2)
    return total / NEIGHBORHOOD_SIZE / MAX_INTENSITY
