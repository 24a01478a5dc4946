"""Tests for intensity sampling."""

from __future__ import annotations

import numpy as np
import pytest

from fukuda.engine.errors import OutOfBounds
from fukuda.engine.raster import Raster
from fukuda.engine.sampler import (
    cross_section_columns,
    cross_section_intensity,
    cross_section_sum,
    neighborhood_intensity,
)


class TestCrossSection:
    def test_even_width_columns(self):
        assert cross_section_columns(5, 10) == list(range(0, 10))

    def test_odd_width_columns(self):
        assert cross_section_columns(3.5, 7) == list(range(0, 7))

    @pytest.mark.parametrize("width", [1, 2, 5, 10, 33])
    def test_sample_count_matches_width(self, width):
        assert len(cross_section_columns(100.0, width)) == width

    def test_sum(self):
        r = Raster(2, 1, bytes([1, 2, 3, 4, 10, 20, 30, 40]))
        assert cross_section_sum(r, [0, 1], 0) == 66

    def test_white_normalizes_to_one(self, white_raster):
        assert cross_section_intensity(white_raster, cross_section_columns(5, 10), 3) == 1.0

    def test_black_normalizes_to_zero(self, black_raster):
        assert cross_section_intensity(black_raster, cross_section_columns(5, 10), 3) == 0.0

    def test_no_clamping(self, white_raster):
        with pytest.raises(OutOfBounds):
            cross_section_sum(white_raster, cross_section_columns(0, 10), 0)


class TestNeighborhood:
    def test_white(self, white_raster):
        assert neighborhood_intensity(white_raster, 5, 5) == pytest.approx(1.0)

    def test_single_bright_pixel(self):
        arr = np.zeros((3, 3, 4), dtype=np.uint8)
        arr[1, 1, :3] = 255
        r = Raster.from_array(arr)
        assert neighborhood_intensity(r, 1, 1) == pytest.approx(1 / 9)

    @pytest.mark.parametrize("cx, cy", [(0, 5), (5, 0), (39, 5), (5, 29)])
    def test_edge_footprint_raises(self, white_raster, cx, cy):
        with pytest.raises(OutOfBounds):
            neighborhood_intensity(white_raster, cx, cy)
