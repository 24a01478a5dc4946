"""Parameter sweeps — triangle-wave animation of layout parameters.

Each sweep bounces one LayoutParams field between two limits. Sweeps are
independent; a tick advances every enabled sweep once and produces a new
LayoutParams.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable

from fukuda.engine.config import LayoutParams
from fukuda.engine.errors import InvalidParameter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sweep:
    value: float
    delta: float
    low: float
    high: float


def advance_sweep(sweep: Sweep) -> Sweep:
    """One tick of the triangle wave.

    Inside [low, high] the direction flips before a step that would cross a
    limit, and the step is cut short at the limit when the range is narrower
    than one step. A value outside the range heads back towards it.
    """
    if sweep.low > sweep.high:
        raise InvalidParameter(f"Empty sweep range [{sweep.low}, {sweep.high}]")

    value, delta = sweep.value, sweep.delta
    if value > sweep.high:
        delta = -abs(delta)
    elif value < sweep.low:
        delta = abs(delta)
    else:
        if value + delta > sweep.high:
            delta = -abs(delta)
        if value + delta < sweep.low:
            delta = abs(delta)

    nxt = value + delta
    if value <= sweep.high:
        nxt = min(nxt, sweep.high)
    if value >= sweep.low:
        nxt = max(nxt, sweep.low)
    return replace(sweep, value=nxt, delta=delta)


@dataclass(frozen=True)
class SweepSpec:
    """How one named sweep reads, bounds and writes its parameter."""

    name: str
    attr: str
    step: float
    bounds: Callable[[LayoutParams], tuple[float, float]]
    description: str = ""


# Sweeps from the original sketches:
#   evolve  - strip count, evolving image
#   breathe - max width, breathing image
#   unfurl  - fan end angle, unfurling image
#   pulse   - rectangular pitch
SWEEPS: dict[str, SweepSpec] = {
    s.name: s
    for s in (
        SweepSpec(
            name="evolve",
            attr="num_strips",
            step=1,
            bounds=lambda p: (5, 50),
            description="Vary the number of fan strips",
        ),
        SweepSpec(
            name="breathe",
            attr="pct_max",
            step=5,
            # Strictly above pct_min: the rectangular formula divides by the gap.
            bounds=lambda p: (p.pct_min + 1, 90),
            description="Vary the maximum strip width",
        ),
        SweepSpec(
            name="unfurl",
            attr="angle_end",
            step=5,
            # Keep at least one step of fan open.
            bounds=lambda p: (max(-80, p.angle_start + 5), 90),
            description="Vary the fan's end angle",
        ),
        SweepSpec(
            name="pulse",
            attr="strip_width",
            step=1,
            bounds=lambda p: (5, 150),
            description="Vary the rectangular strip pitch",
        ),
    )
}


@dataclass(frozen=True)
class AnimationState:
    """Layout parameters plus the direction of every enabled sweep."""

    params: LayoutParams
    # name -> current signed delta
    deltas: dict[str, float] = field(default_factory=dict)

    @classmethod
    def start(cls, params: LayoutParams, enabled: list[str] | tuple[str, ...] = ()) -> AnimationState:
        unknown = [name for name in enabled if name not in SWEEPS]
        if unknown:
            raise InvalidParameter(f"Unknown sweep(s): {', '.join(unknown)} (known: {', '.join(SWEEPS)})")
        for name in enabled:
            low, high = SWEEPS[name].bounds(params)
            if low > high:
                raise InvalidParameter(
                    f"Sweep '{name}' has no room to move: {SWEEPS[name].attr} bounds [{low}, {high}]"
                )
        return cls(params=params, deltas={name: SWEEPS[name].step for name in enabled})

    @property
    def enabled(self) -> list[str]:
        return list(self.deltas)


def advance(state: AnimationState) -> AnimationState:
    """Advance every enabled sweep by one tick. Pure."""
    params = state.params
    deltas: dict[str, float] = {}
    for name, delta in state.deltas.items():
        spec = SWEEPS[name]
        low, high = spec.bounds(params)
        current = getattr(params, spec.attr)
        swept = advance_sweep(Sweep(value=current, delta=delta, low=low, high=high))
        value = type(current)(swept.value)
        params = replace(params, **{spec.attr: value})
        deltas[name] = swept.delta
    if deltas:
        logger.debug(
            "Sweep tick: %s",
            ", ".join(f"{SWEEPS[n].attr}={getattr(params, SWEEPS[n].attr)}" for n in deltas),
        )
    return AnimationState(params=params, deltas=deltas)
