"""Tests for layout parameter validation."""

from __future__ import annotations

import pytest

from fukuda.config import Settings
from fukuda.engine.config import LayoutParams
from fukuda.engine.errors import InvalidParameter


def test_defaults_are_valid():
    assert LayoutParams().validate() == LayoutParams()


@pytest.mark.parametrize(
    "overrides",
    [
        {"pct_min": 50, "pct_max": 50},
        {"pct_min": 60, "pct_max": 40},
        {"pct_max": 120},
        {"pct_min": -1},
        {"num_strips": 0},
        {"strip_width": 0},
        {"step_size": 0},
        {"step_size": -1.0},
        {"angle_start": 10, "angle_end": 10},
        {"angle_start": 30, "angle_end": -30},
        {"angle_end": 95},
        {"angle_start": -100},
        {"scheme": ""},
    ],
)
def test_rejects_invalid(overrides):
    with pytest.raises(InvalidParameter):
        LayoutParams(**overrides).validate()


def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError):
        LayoutParams(num_strips=-3).validate()


def test_from_settings_applies_overrides():
    settings = Settings(default_scheme="rectangular", default_strip_width=12)
    params = LayoutParams.from_settings(settings, pct_max=70, num_strips=None)
    assert params.scheme == "rectangular"
    assert params.strip_width == 12
    assert params.pct_max == 70
    assert params.num_strips == settings.default_num_strips


def test_as_dict_round_trips():
    params = LayoutParams(scheme="rectangular", strip_width=7)
    assert LayoutParams(**params.as_dict()) == params
