"""Raster accessor — read-only view over a packed RGBA pixel buffer.

Each pixel is 4 consecutive bytes (R, G, B, A), rows are ``4 * width`` bytes.
Intensity is the plain R+G+B sum in [0, 765]; alpha never contributes.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from fukuda.engine.errors import InvalidParameter, OutOfBounds

# Bytes per pixel in the packed buffer (R, G, B, A).
BYTES_PER_PIXEL = 4

# Largest R+G+B sum a single pixel can reach.
MAX_INTENSITY = 3 * 255


class Raster:
    """Immutable decoded image borrowed by the engine for one pass."""

    __slots__ = ("width", "height", "_rgba", "_intensity")

    def __init__(self, width: int, height: int, pixels: bytes | bytearray | NDArray[np.uint8]) -> None:
        if width <= 0 or height <= 0:
            raise InvalidParameter(f"Raster dimensions must be positive, got {width}x{height}")

        if isinstance(pixels, np.ndarray):
            buf = pixels.reshape(-1)
        else:
            buf = np.frombuffer(bytes(pixels), dtype=np.uint8)
        expected = BYTES_PER_PIXEL * width * height
        if buf.size != expected:
            raise InvalidParameter(
                f"Pixel buffer holds {buf.size} bytes, expected {expected} for {width}x{height} RGBA"
            )

        rgba = np.array(buf, dtype=np.uint8).reshape(height, width, BYTES_PER_PIXEL)
        rgba.setflags(write=False)
        intensity = rgba[:, :, :3].sum(axis=2, dtype=np.int32)
        intensity.setflags(write=False)

        self.width = width
        self.height = height
        self._rgba = rgba
        self._intensity = intensity

    @classmethod
    def from_array(cls, rgba: NDArray[np.uint8]) -> Raster:
        """Build from an H×W×4 array (e.g. ``np.asarray(pil_image)``)."""
        arr = np.asarray(rgba)
        if arr.ndim != 3 or arr.shape[2] != BYTES_PER_PIXEL:
            raise InvalidParameter(f"Expected an HxWx4 array, got shape {arr.shape}")
        h, w = arr.shape[:2]
        return cls(w, h, arr.astype(np.uint8, copy=False).reshape(-1))

    @classmethod
    def uniform(cls, width: int, height: int, rgb: tuple[int, int, int], alpha: int = 255) -> Raster:
        """Single-colour raster. Handy for calibration and tests."""
        if width <= 0 or height <= 0:
            raise InvalidParameter(f"Raster dimensions must be positive, got {width}x{height}")
        arr = np.empty((height, width, BYTES_PER_PIXEL), dtype=np.uint8)
        arr[:, :, :3] = rgb
        arr[:, :, 3] = alpha
        return cls.from_array(arr)

    @property
    def stride(self) -> int:
        return BYTES_PER_PIXEL * self.width

    @property
    def pixels(self) -> bytes:
        return self._rgba.tobytes()

    def contains(self, x: float, y: float) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(x, y, self.width, self.height)

    def intensity_at(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self._intensity[y, x])

    def rgb_at(self, x: int, y: int) -> tuple[int, int, int]:
        self._check(x, y)
        r, g, b = self._rgba[y, x, :3]
        return (int(r), int(g), int(b))

    def block_sum(self, x0: int, y0: int, x1: int, y1: int) -> int:
        """Sum of intensities over the half-open box [x0, x1) × [y0, y1).

        Both corners must lie inside the raster; nothing is clipped.
        """
        self._check(x0, y0)
        self._check(x1 - 1, y1 - 1)
        return int(self._intensity[y0:y1, x0:x1].sum())

    def __repr__(self) -> str:
        return f"Raster({self.width}x{self.height})"
