"""Image loading — decode files or bytes into a Raster with Pillow."""

from __future__ import annotations

import base64
import binascii
import io
import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from fukuda.engine.errors import ImageDecodeError
from fukuda.engine.raster import Raster

logger = logging.getLogger(__name__)


def image_to_raster(img: Image.Image) -> Raster:
    """Convert any Pillow image to an RGBA raster."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return Raster.from_array(np.asarray(img, dtype=np.uint8))


def load_raster(source: bytes | str | Path, max_pixels: int | None = None) -> Raster:
    """Decode an encoded image (PNG, JPEG, ...) from bytes or a file path."""
    try:
        if isinstance(source, bytes):
            img = Image.open(io.BytesIO(source))
        else:
            img = Image.open(Path(source))
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageDecodeError(f"Could not decode image: {e}") from e

    # Size comes from the header; refuse before decoding any pixel data.
    w, h = img.size
    if max_pixels is not None and w * h > max_pixels:
        raise ImageDecodeError(f"Image {w}x{h} exceeds the {max_pixels}-pixel limit")

    try:
        img.load()
    except (Image.DecompressionBombError, OSError) as e:
        raise ImageDecodeError(f"Could not decode image: {e}") from e

    raster = image_to_raster(img)
    logger.info("Loaded image: %dx%d (%s)", w, h, img.mode)
    return raster


def decode_base64_image(data: str, max_pixels: int | None = None) -> Raster:
    """Decode a base64 string (optionally a ``data:`` URL) into a Raster."""
    if data.startswith("data:"):
        _, _, data = data.partition(",")
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"Invalid base64 image payload: {e}") from e
    return load_raster(raw, max_pixels=max_pixels)
