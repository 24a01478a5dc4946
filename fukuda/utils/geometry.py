"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

Vec2 = tuple[float, float]


def distance(p: Vec2, q: Vec2) -> float:
    return math.hypot(p[0] - q[0], p[1] - q[1])


def dot(u: Vec2, v: Vec2) -> float:
    return u[0] * v[0] + u[1] * v[1]


def fan_slice_width(anchor: Vec2, origin: Vec2, angle_inc: float) -> float:
    """Width of one fan slice at the anchor's radius.

    A slice enclosing angle A at distance D from the apex is W = 2·D·tan(A/2).
    """
    return 2 * distance(anchor, origin) * math.tan(angle_inc / 2)
