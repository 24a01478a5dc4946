"""Tests for strip geometry and the fan's direction lookup."""

from __future__ import annotations

import math

import pytest

from fukuda.engine.geometry import Segment, Strip, fan_vectors
from fukuda.utils.geometry import dot, fan_slice_width


def test_angle_zero_points_right():
    direction, spread = fan_vectors(0.0)
    assert direction == pytest.approx((1.0, 0.0))
    assert dot(direction, spread) == pytest.approx(0.0, abs=1e-12)


def test_straight_up_at_both_ends():
    up_left, _ = fan_vectors(-math.pi / 2)
    up_right, _ = fan_vectors(math.pi / 2)
    assert up_left == pytest.approx((0.0, -1.0), abs=1e-12)
    assert up_right == pytest.approx((0.0, -1.0), abs=1e-12)


@pytest.mark.parametrize("degrees", [-90, -75, -45, -30, -1, 0, 1, 30, 45, 60, 89, 90])
def test_unit_orthogonal_and_into_image(degrees):
    direction, spread = fan_vectors(math.radians(degrees))
    assert math.hypot(*direction) == pytest.approx(1.0)
    assert math.hypot(*spread) == pytest.approx(1.0)
    assert dot(direction, spread) == pytest.approx(0.0, abs=1e-12)
    # Origin sits on the bottom row: strips never head down out of the image.
    assert direction[1] <= 1e-12


def test_negative_angles_sweep_left_half():
    direction, _ = fan_vectors(math.radians(-30))
    assert direction[0] < 0
    direction, _ = fan_vectors(math.radians(30))
    assert direction[0] > 0


def test_strip_to_segment():
    strip = Strip(anchor=(10.0, 5.0), direction=(0.0, 1.0), spread=(1.0, 0.0), half_width=2.0)
    seg = strip.to_segment()
    assert seg == Segment(8.0, 5.0, 12.0, 5.0, None)
    assert seg.length == pytest.approx(4.0)
    assert seg.midpoint == (10.0, 5.0)


def test_strip_carries_color():
    strip = Strip(anchor=(0.0, 0.0), direction=(1.0, 0.0), spread=(0.0, -1.0), half_width=1.0)
    assert strip.to_segment((1, 2, 3)).color == (1, 2, 3)


def test_fan_slice_width():
    inc = math.radians(10)
    assert fan_slice_width((3.0, 4.0), (0.0, 0.0), inc) == pytest.approx(10 * math.tan(inc / 2))
    assert fan_slice_width((1.0, 1.0), (1.0, 1.0), inc) == 0.0
