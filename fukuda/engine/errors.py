"""Engine error kinds. No engine imports."""

from __future__ import annotations


class FukudaError(Exception):
    """Base class for every error raised by the tiling engine."""


class OutOfBounds(FukudaError, IndexError):
    """A sampling footprint reached outside the raster."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) outside raster {width}x{height}")
        self.x = x
        self.y = y


class InvalidParameter(FukudaError, ValueError):
    """Configuration rejected before a pass starts."""


class ImageDecodeError(FukudaError):
    """The image loader could not produce a raster."""
