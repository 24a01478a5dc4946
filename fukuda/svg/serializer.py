"""Write SVG markup for a pass's segments."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from fukuda.engine.geometry import RGB, Segment


def rgb_to_hex(color: RGB) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
    styles: dict[str, str] | None = None,
) -> str:
    """Generate SVG markup from element definitions."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w} {canvas_h}" width="{canvas_w}" height="{canvas_h}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{title}</title>")

    if styles:
        lines.append("  <style>")
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  </style>")

    for elem in elements:
        tag = elem.get("tag", "line")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def segments_to_svg(
    segments: Iterable[Segment],
    canvas_w: float,
    canvas_h: float,
    stroke: str = "#1478d2",
    stroke_width: float = 2.0,
    background: str | None = "#ffffdc",
    title: str = "",
) -> str:
    """Render a segment stream as one <line> per segment.

    The default stroke comes from a ``line`` style rule; segments carrying a
    colour override get their own ``stroke`` attribute.
    """
    elements: list[dict[str, Any]] = []
    if background:
        elements.append({
            "tag": "rect",
            "x": 0,
            "y": 0,
            "width": canvas_w,
            "height": canvas_h,
            "fill": background,
        })

    for seg in segments:
        elem: dict[str, Any] = {
            "x1": f"{seg.x1:.2f}",
            "y1": f"{seg.y1:.2f}",
            "x2": f"{seg.x2:.2f}",
            "y2": f"{seg.y2:.2f}",
        }
        if seg.color is not None:
            elem["stroke"] = rgb_to_hex(seg.color)
        elements.append(elem)

    styles = {"line": f"stroke: {stroke}; stroke-width: {stroke_width}; stroke-linecap: butt"}
    return serialize_svg(elements, canvas_w, canvas_h, title=title, styles=styles)
