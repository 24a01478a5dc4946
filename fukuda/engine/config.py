"""Layout parameters — the state one tiling pass reads and a sweep rewrites."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from fukuda.engine.errors import InvalidParameter

if TYPE_CHECKING:
    from fukuda.config import Settings

SCHEME_RECTANGULAR = "rectangular"
SCHEME_FAN = "fan"

# Fan angles are measured from the horizontal through the bottom-centre origin.
MIN_ANGLE = -90.0
MAX_ANGLE = 90.0


@dataclass(frozen=True)
class LayoutParams:
    """Controls how the image is cut into strips.

    Angles are in degrees, percentages in [0, 100].
    """

    scheme: str = SCHEME_FAN

    # Rectangular: pitch of each vertical strip, in pixels
    strip_width: int = 10
    # Fan: number of angular slices between angle_start and angle_end
    num_strips: int = 50

    # Width modulation range as a percentage of the available width
    pct_min: float = 10
    pct_max: float = 100

    # Fan extent
    angle_start: float = -90
    angle_end: float = 90

    # Distance between consecutive anchors along a strip
    step_size: float = 1.0

    # False → every segment takes its anchor pixel's colour
    solid_color: bool = True

    def validate(self) -> LayoutParams:
        """Reject unusable parameters. Returns self so calls can chain."""
        if not self.scheme:
            raise InvalidParameter("scheme must be set")
        if self.strip_width <= 0:
            raise InvalidParameter(f"strip_width must be positive, got {self.strip_width}")
        if self.num_strips <= 0:
            raise InvalidParameter(f"num_strips must be positive, got {self.num_strips}")
        if self.step_size <= 0:
            raise InvalidParameter(f"step_size must be positive, got {self.step_size}")
        if not (0 <= self.pct_min <= 100 and 0 <= self.pct_max <= 100):
            raise InvalidParameter(
                f"pct_min/pct_max must lie in [0, 100], got {self.pct_min}/{self.pct_max}"
            )
        if self.pct_max <= self.pct_min:
            raise InvalidParameter(
                f"pct_max ({self.pct_max}) must be greater than pct_min ({self.pct_min})"
            )
        if not (MIN_ANGLE <= self.angle_start <= MAX_ANGLE and MIN_ANGLE <= self.angle_end <= MAX_ANGLE):
            raise InvalidParameter(
                f"angles must lie in [{MIN_ANGLE:.0f}, {MAX_ANGLE:.0f}], "
                f"got {self.angle_start}..{self.angle_end}"
            )
        if self.angle_start >= self.angle_end:
            raise InvalidParameter(
                f"angle_start ({self.angle_start}) must be below angle_end ({self.angle_end})"
            )
        return self

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> LayoutParams:
        """Defaults from application settings, with per-call overrides."""
        values: dict[str, Any] = {
            "scheme": settings.default_scheme,
            "strip_width": settings.default_strip_width,
            "num_strips": settings.default_num_strips,
            "pct_min": settings.default_pct_min,
            "pct_max": settings.default_pct_max,
            "angle_start": settings.default_angle_start,
            "angle_end": settings.default_angle_end,
            "step_size": settings.default_step_size,
            "solid_color": settings.default_solid_color,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
