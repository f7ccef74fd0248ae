"""Recording toggle around a repetition counter.

Frames only reach the counter while recording. Stopping a recording resets
the counter so the next one starts from zero.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from repcount.config import Thresholds
from repcount.repdetect.counter import FrameOutcome, RepetitionCounter
from repcount.vision.landmarks import Frame

logger = logging.getLogger(__name__)


class RecordingSession:
    def __init__(
        self,
        counter: Optional[RepetitionCounter] = None,
        thresholds: Optional[Thresholds] = None,
    ) -> None:
        self.counter = counter or RepetitionCounter(thresholds)
        self._recording = False

    @property
    def recording(self) -> bool:
        return self._recording

    def start(self) -> None:
        if not self._recording:
            logger.info("Recording started")
        self._recording = True

    def stop(self) -> None:
        if self._recording:
            logger.info("Recording stopped after %d repetitions", self.counter.count)
        self._recording = False
        self.counter.reset()

    def toggle(self) -> bool:
        """Flip the recording flag and return the new value."""
        if self._recording:
            self.stop()
        else:
            self.start()
        return self._recording

    def submit(self, frame: Frame) -> Optional[FrameOutcome]:
        """Forward ``frame`` to the counter; ``None`` while not recording."""
        if not self._recording:
            return None
        return self.counter.process_frame(frame)

    def submit_poses(self, poses: Sequence[Frame]) -> Optional[FrameOutcome]:
        """Forward the first detected pose; extra people in view are ignored."""
        if not poses:
            return None
        return self.submit(poses[0])

    @contextmanager
    def recording_scope(self) -> Iterator["RecordingSession"]:
        """Record for the duration of the ``with`` block, stopping even on error."""
        self.start()
        try:
            yield self
        finally:
            self.stop()
