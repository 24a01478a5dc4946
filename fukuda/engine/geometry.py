"""Strip and segment records, plus the fan's direction/spread lookup."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fukuda.utils.geometry import Vec2

RGB = tuple[int, int, int]

# Rectangular strips run down the image; their width is laid out horizontally.
VERTICAL_DIRECTION: Vec2 = (0.0, 1.0)
HORIZONTAL_SPREAD: Vec2 = (1.0, 0.0)


@dataclass(frozen=True)
class Segment:
    """One draw command for the frame renderer."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: RGB | None = None

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    @property
    def midpoint(self) -> Vec2:
        return ((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)


@dataclass(frozen=True)
class Strip:
    """Anchor sample on a strip's centerline with its modulated half-width."""

    anchor: Vec2
    direction: Vec2
    spread: Vec2
    half_width: float

    def to_segment(self, color: RGB | None = None) -> Segment:
        x, y = self.anchor
        dx = self.spread[0] * self.half_width
        dy = self.spread[1] * self.half_width
        return Segment(x - dx, y - dy, x + dx, y + dy, color)


# Angle bands (lower bound inclusive, radians) → sign multipliers for
# direction = (a·cos, b·sin) and spread = (c·sin, d·cos).
# The two bands above zero are identical; both are listed so the table keeps
# one row per half-quadrant.
_FAN_BANDS: list[tuple[float, tuple[int, int], tuple[int, int]]] = [
    (-math.pi / 2, (-1, +1), (+1, +1)),
    (-math.pi / 4, (-1, +1), (-1, -1)),
    (0.0, (+1, -1), (-1, -1)),
    (math.pi / 4, (+1, -1), (-1, -1)),
]


def _band_for(angle: float) -> tuple[tuple[int, int], tuple[int, int]]:
    # Below -π/2 falls back to the first band; π/2 and above stay in the last.
    _, direction, spread = _FAN_BANDS[0]
    for lower, d, s in _FAN_BANDS:
        if angle >= lower:
            direction, spread = d, s
    return direction, spread


def fan_vectors(angle: float) -> tuple[Vec2, Vec2]:
    """Direction and spread unit vectors for a fan strip at ``angle`` radians.

    Direction points from the bottom-centre origin into the image: 0 rad is
    straight right, ±π/2 straight up, negative angles sweep the left half.
    Spread is perpendicular to direction.
    """
    c = math.cos(angle)
    s = math.sin(angle)
    (dc, ds), (sc, ss) = _band_for(angle)
    return (dc * c, ds * s), (sc * s, ss * c)
