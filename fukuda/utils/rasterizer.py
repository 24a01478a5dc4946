"""Rasterize a segment stream to a PNG with Pillow."""

from __future__ import annotations

import io
from collections.abc import Iterable

from PIL import Image, ImageColor, ImageDraw

from fukuda.engine.geometry import Segment


def render_image(
    segments: Iterable[Segment],
    width: int,
    height: int,
    stroke: str = "#1478d2",
    stroke_width: float = 2.0,
    background: str = "#ffffdc",
) -> Image.Image:
    """Paint the background, then draw every segment as a straight line."""
    img = Image.new("RGB", (width, height), ImageColor.getrgb(background))
    draw = ImageDraw.Draw(img)
    default = ImageColor.getrgb(stroke)
    line_width = max(1, round(stroke_width))
    for seg in segments:
        draw.line(
            [(seg.x1, seg.y1), (seg.x2, seg.y2)],
            fill=seg.color if seg.color is not None else default,
            width=line_width,
        )
    return img


def render_png(
    segments: Iterable[Segment],
    width: int,
    height: int,
    stroke: str = "#1478d2",
    stroke_width: float = 2.0,
    background: str = "#ffffdc",
) -> bytes:
    img = render_image(segments, width, height, stroke, stroke_width, background)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
