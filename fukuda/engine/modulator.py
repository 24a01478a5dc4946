"""Width modulation — normalized intensity → fraction of the strip's pitch."""

from __future__ import annotations

from collections import deque

# Moving-average length along a fan strip.
SMOOTHING_WINDOW = 5


def _bounds(pct_min: float, pct_max: float) -> tuple[float, float]:
    return pct_min / 100, pct_max / 100


def modulate(intensity: float, pct_min: float, pct_max: float) -> float:
    """Rectangular-scheme width fraction for a normalized intensity.

    ``intensity / (max - min) + min`` overshoots ``max`` for bright input
    (white gives ~1.21 of the pitch at 10%/100%). The result is clamped to
    [min, max] so a strip never grows wider than ``pct_max`` of its pitch.
    Requires ``pct_max > pct_min``.
    """
    lo, hi = _bounds(pct_min, pct_max)
    fraction = intensity / (hi - lo) + lo
    return min(max(fraction, lo), hi)


class SmoothingWindow:
    """Moving average of the last five clamped samples along one fan strip.

    Starts full of zeros, so the first four anchors of every strip fade in.
    """

    __slots__ = ("_samples",)

    def __init__(self, size: int = SMOOTHING_WINDOW) -> None:
        self._samples: deque[float] = deque([0.0] * size, maxlen=size)

    def push(self, intensity: float, pct_min: float, pct_max: float) -> float:
        lo, hi = _bounds(pct_min, pct_max)
        # Upper clamp first: an inverted range pins every sample to lo.
        self._samples.append(max(min(intensity, hi), lo))
        return self.average

    @property
    def average(self) -> float:
        return sum(self._samples) / len(self._samples)

    def __len__(self) -> int:
        return len(self._samples)
