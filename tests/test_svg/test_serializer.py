"""Tests for SVG output."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from fukuda.engine.geometry import Segment
from fukuda.svg.serializer import rgb_to_hex, segments_to_svg, serialize_svg

_NS = "{http://www.w3.org/2000/svg}"


def test_rgb_to_hex():
    assert rgb_to_hex((20, 120, 210)) == "#1478d2"
    assert rgb_to_hex((0, 0, 0)) == "#000000"


def test_serialize_svg_elements():
    svg = serialize_svg([{"tag": "circle", "cx": 1, "cy": 2, "r": 3}], 10, 20, title="t")
    assert '<circle cx="1" cy="2" r="3" />' in svg
    assert 'viewBox="0 0 10 20"' in svg
    assert "<title>t</title>" in svg


def test_segments_to_svg_is_well_formed():
    segments = [Segment(0, 1, 2, 1), Segment(3.333, 4, 5, 6, (10, 20, 30))]
    svg = segments_to_svg(segments, 40, 30)
    root = ET.fromstring(svg.split("\n", 1)[1])
    lines = root.findall(f"{_NS}line")
    assert len(lines) == 2
    assert lines[0].get("x1") == "0.00"
    assert lines[1].get("x1") == "3.33"
    assert lines[0].get("stroke") is None
    assert lines[1].get("stroke") == "#0a141e"


def test_background_and_default_stroke():
    svg = segments_to_svg([], 40, 30, stroke="#123456", stroke_width=3, background="#ffffdc")
    assert 'fill="#ffffdc"' in svg
    assert "stroke: #123456; stroke-width: 3" in svg


def test_no_background():
    svg = segments_to_svg([Segment(0, 0, 1, 1)], 4, 4, background=None)
    assert "<rect" not in svg
