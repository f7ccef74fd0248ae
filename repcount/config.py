"""Shared configuration used by the repetition counter and its hosts."""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict


@dataclass(frozen=True)
class Thresholds:
    """Angle and confidence limits for the overhead-press counter.

    Attributes:
        up_angle_deg: Both elbows must open wider than this (degrees) for the
            arms to count as raised.
        down_angle_deg: Both elbows must close tighter than this (degrees) for
            the arms to count as lowered.
        min_confidence: Minimum per-joint confidence in ``[0, 1]`` for a frame
            to be trusted.

    ``down_angle_deg < up_angle_deg`` is a precondition. The counter itself
    does not check it; loaders call :meth:`validate` before building one.
    """

    up_angle_deg: float = 160.0
    down_angle_deg: float = 70.0
    min_confidence: float = 0.5

    def validate(self) -> "Thresholds":
        """Raise ``ValueError`` when the limits cannot produce a hysteresis band."""
        for name in ("up_angle_deg", "down_angle_deg"):
            value = getattr(self, name)
            if not 0.0 <= value <= 180.0:
                raise ValueError(f"{name} must be within [0, 180], got {value}")
        if self.down_angle_deg >= self.up_angle_deg:
            raise ValueError(
                f"down_angle_deg ({self.down_angle_deg}) must be below "
                f"up_angle_deg ({self.up_angle_deg})"
            )
        if not 0.0 <= self.min_confidence <= 1.0:
            raise ValueError(f"min_confidence must be within [0, 1], got {self.min_confidence}")
        return self

    def with_overrides(self, **overrides: Any) -> "Thresholds":
        """Return a copy with the given fields replaced; ``None`` values are ignored."""
        changes = {key: float(value) for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)
