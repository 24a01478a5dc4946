"""Shared test fixtures."""

from __future__ import annotations

import base64
import io

import numpy as np
import pytest
from PIL import Image

from fukuda.engine.raster import Raster

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def png_bytes(width: int, height: int, rgb: tuple[int, int, int] = WHITE, mode: str = "RGB") -> bytes:
    img = Image.new("RGB", (width, height), rgb)
    if mode != "RGB":
        img = img.convert(mode)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def png_base64(width: int, height: int, rgb: tuple[int, int, int] = WHITE) -> str:
    return base64.b64encode(png_bytes(width, height, rgb)).decode("ascii")


@pytest.fixture
def white_raster() -> Raster:
    return Raster.uniform(40, 30, WHITE)


@pytest.fixture
def black_raster() -> Raster:
    return Raster.uniform(40, 30, BLACK)


@pytest.fixture
def square_white() -> Raster:
    return Raster.uniform(41, 41, WHITE)


@pytest.fixture
def square_black() -> Raster:
    return Raster.uniform(41, 41, BLACK)


@pytest.fixture
def gradient_raster() -> Raster:
    """Dark on the left, bright on the right, 64×16."""
    ramp = np.linspace(0, 255, 64).astype(np.uint8)
    arr = np.zeros((16, 64, 4), dtype=np.uint8)
    arr[:, :, 0] = ramp
    arr[:, :, 1] = ramp
    arr[:, :, 2] = ramp
    arr[:, :, 3] = 255
    return Raster.from_array(arr)
