"""Frame gating ahead of angle computation.

Transient tracking loss is the normal case for camera input, so a frame that
fails a check is reported with a reason and skipped by the caller rather than
raising.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from repcount.vision.landmarks import (
    LEFT_ELBOW,
    LEFT_SHOULDER,
    LEFT_WRIST,
    RIGHT_ELBOW,
    RIGHT_SHOULDER,
    RIGHT_WRIST,
    Frame,
)

REQUIRED_JOINTS = (
    LEFT_SHOULDER,
    LEFT_ELBOW,
    LEFT_WRIST,
    RIGHT_SHOULDER,
    RIGHT_ELBOW,
    RIGHT_WRIST,
)


class SkipReason(str, Enum):
    INCOMPLETE_INPUT = "incomplete_input"
    LOW_CONFIDENCE = "low_confidence"


def gate_frame(frame: Frame, min_confidence: float) -> Optional[SkipReason]:
    """Return why ``frame`` must be skipped, or ``None`` if it can be trusted.

    Availability is checked before confidence. A joint whose confidence equals
    ``min_confidence`` passes.
    """

    joints = [frame.get(name) for name in REQUIRED_JOINTS]
    if any(joint is None for joint in joints):
        return SkipReason.INCOMPLETE_INPUT
    # NaN confidence compares false both ways and must not pass.
    if any(not joint.confidence >= min_confidence for joint in joints):
        return SkipReason.LOW_CONFIDENCE
    return None
