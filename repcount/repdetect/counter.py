"""Repetition state machine for bilateral overhead presses.

Posture is classified from both elbow angles with two thresholds. Angles
between them (or arms that disagree) leave the state untouched, and that band
is what keeps noise around a single cutoff from producing extra counts:

    NEUTRAL --up--> UP   (+1)
    DOWN    --up--> UP   (+1)
    UP    --down--> DOWN

Every other (state, posture) pair is a self-loop. There is no terminal state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from repcount.config import Thresholds
from repcount.quality.failures import SkipReason, gate_frame
from repcount.repdetect.notifier import CountListener, CountNotifier
from repcount.signals.kinematics import elbow_angles
from repcount.vision.landmarks import Frame

logger = logging.getLogger(__name__)


class PostureState(str, Enum):
    NEUTRAL = "neutral"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class FrameOutcome:
    """What a single ``process_frame`` call did.

    Attributes:
        counted: True when this frame completed a repetition.
        state: Posture state after the frame.
        skipped: Why the frame was ignored, or ``None`` if it was evaluated.
        left_angle: Left elbow angle in degrees (``None`` when skipped).
        right_angle: Right elbow angle in degrees (``None`` when skipped).
    """

    counted: bool
    state: PostureState
    skipped: Optional[SkipReason] = None
    left_angle: Optional[float] = None
    right_angle: Optional[float] = None


def classify_posture(left: float, right: float, thresholds: Thresholds) -> Optional[PostureState]:
    """Return UP or DOWN when both arms agree past a threshold, else ``None``."""
    if left > thresholds.up_angle_deg and right > thresholds.up_angle_deg:
        return PostureState.UP
    if left < thresholds.down_angle_deg and right < thresholds.down_angle_deg:
        return PostureState.DOWN
    return None


class RepetitionCounter:
    """Counts overhead-press repetitions from a stream of pose frames.

    Not thread-safe: the host must not run ``process_frame`` or ``reset``
    concurrently. Listeners registered with :meth:`add_listener` are called
    synchronously, once per change of the count.
    """

    def __init__(self, thresholds: Optional[Thresholds] = None) -> None:
        self.thresholds = thresholds or Thresholds()
        self._state = PostureState.NEUTRAL
        self._reps = CountNotifier(0)

    @property
    def count(self) -> int:
        return self._reps.value

    @property
    def state(self) -> PostureState:
        return self._state

    def add_listener(self, listener: CountListener) -> None:
        self._reps.add_listener(listener)

    def remove_listener(self, listener: CountListener) -> None:
        self._reps.remove_listener(listener)

    def process_frame(self, frame: Frame) -> FrameOutcome:
        skipped = gate_frame(frame, self.thresholds.min_confidence)
        if skipped is not None:
            logger.debug("Skipping frame: %s", skipped.value)
            return FrameOutcome(counted=False, state=self._state, skipped=skipped)

        left, right = elbow_angles(frame)
        posture = classify_posture(left, right, self.thresholds)

        counted = False
        if posture is PostureState.UP and self._state is not PostureState.UP:
            self._state = PostureState.UP
            self._reps.value += 1
            counted = True
            logger.info("Repetition %d counted (left=%.1f, right=%.1f)", self._reps.value, left, right)
        elif posture is PostureState.DOWN and self._state is PostureState.UP:
            self._state = PostureState.DOWN

        return FrameOutcome(
            counted=counted,
            state=self._state,
            left_angle=left,
            right_angle=right,
        )

    def reset(self) -> None:
        """Zero the count and return to NEUTRAL, whatever the current state."""
        self._state = PostureState.NEUTRAL
        self._reps.value = 0

    def dispose(self) -> None:
        """Drop all listeners. The counter itself keeps working."""
        self._reps.dispose()
