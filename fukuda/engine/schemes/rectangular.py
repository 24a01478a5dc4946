"""Rectangular scheme — vertical bands scanned column by column.

Each band is ``strip_width`` pixels wide. Down the band, every ``step_size``
pixels, the row of pixels across the band is averaged and a horizontal
segment of the modulated width is drawn centred on the band.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from fukuda.engine.config import SCHEME_RECTANGULAR, LayoutParams
from fukuda.engine.geometry import HORIZONTAL_SPREAD, VERTICAL_DIRECTION, Segment, Strip
from fukuda.engine.modulator import modulate
from fukuda.engine.raster import Raster
from fukuda.engine.registry import scheme
from fukuda.engine.sampler import cross_section_columns, cross_section_intensity


@scheme(
    id=SCHEME_RECTANGULAR,
    description="Parallel vertical bands, width modulated across each band",
)
def rectangular(raster: Raster, params: LayoutParams) -> Iterator[Segment]:
    pitch = params.strip_width
    half_pitch = pitch / 2

    column = 0
    x = half_pitch
    # A band is drawn as long as it starts inside the image.
    while x - half_pitch < raster.width:
        # The last band may hang over the right edge; average its visible part.
        columns = [c for c in cross_section_columns(x, pitch) if 0 <= c < raster.width]
        color_col = min(math.floor(x), raster.width - 1)

        k = 0
        y = 0.0
        while y < raster.height:
            row = math.floor(y)
            intensity = cross_section_intensity(raster, columns, row)
            fraction = modulate(intensity, params.pct_min, params.pct_max)
            strip = Strip(
                anchor=(x, y),
                direction=VERTICAL_DIRECTION,
                spread=HORIZONTAL_SPREAD,
                half_width=pitch * fraction / 2,
            )
            color = None if params.solid_color else raster.rgb_at(color_col, row)
            yield strip.to_segment(color)

            k += 1
            y = k * params.step_size

        column += 1
        x = half_pitch + column * pitch
