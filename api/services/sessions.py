"""
In-memory registry of recording sessions served over HTTP.

Each session owns a lock. A frame that arrives while the previous one for the
same session is still being processed is dropped rather than queued, the same
way a camera loop drops images while the detector is busy.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional
from uuid import uuid4

from fastapi import HTTPException

from api.schemas import FrameIn, FrameResult, SessionStatus
from repcount.config import Thresholds
from repcount.session import RecordingSession
from repcount.vision.landmarks import Joint

logger = logging.getLogger(__name__)


@dataclass
class ManagedSession:
    session_id: str
    session: RecordingSession
    lock: threading.Lock = field(default_factory=threading.Lock)

    def status(self) -> SessionStatus:
        counter = self.session.counter
        return SessionStatus(
            session_id=self.session_id,
            count=counter.count,
            state=counter.state,
            recording=self.session.recording,
            thresholds=counter.thresholds.as_dict(),
        )


class SessionRegistry:
    def __init__(self) -> None:
        self._sessions: Dict[str, ManagedSession] = {}
        self._guard = threading.Lock()

    def create(self, thresholds: Optional[Thresholds] = None) -> ManagedSession:
        managed = ManagedSession(session_id=uuid4().hex, session=RecordingSession(thresholds=thresholds))
        with self._guard:
            self._sessions[managed.session_id] = managed
        logger.info("Created session %s", managed.session_id)
        return managed

    def get(self, session_id: str) -> ManagedSession:
        with self._guard:
            managed = self._sessions.get(session_id)
        if managed is None:
            raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
        return managed

    def delete(self, session_id: str) -> None:
        with self._guard:
            managed = self._sessions.pop(session_id, None)
        if managed is None:
            raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
        with managed.lock:
            managed.session.stop()
            managed.session.counter.dispose()
        logger.info("Deleted session %s", session_id)

    def start(self, session_id: str) -> SessionStatus:
        managed = self.get(session_id)
        with managed.lock:
            managed.session.start()
            return managed.status()

    def stop(self, session_id: str) -> SessionStatus:
        managed = self.get(session_id)
        with managed.lock:
            managed.session.stop()
            return managed.status()

    def reset(self, session_id: str) -> SessionStatus:
        managed = self.get(session_id)
        with managed.lock:
            managed.session.counter.reset()
            return managed.status()

    def submit_frame(self, session_id: str, payload: FrameIn) -> FrameResult:
        managed = self.get(session_id)
        frame = {
            name: Joint(name=name, x=j.x, y=j.y, z=j.z, confidence=j.confidence)
            for name, j in payload.joints.items()
        }

        if not managed.lock.acquire(blocking=False):
            logger.debug("Session %s busy; dropping frame", session_id)
            counter = managed.session.counter
            return FrameResult(accepted=False, count=counter.count, state=counter.state)
        try:
            outcome = managed.session.submit(frame)
            counter = managed.session.counter
            if outcome is None:
                return FrameResult(accepted=False, count=counter.count, state=counter.state)
            return FrameResult(
                accepted=True,
                counted=outcome.counted,
                count=counter.count,
                state=outcome.state,
                skipped=outcome.skipped,
                left_angle=outcome.left_angle,
                right_angle=outcome.right_angle,
            )
        finally:
            managed.lock.release()


registry = SessionRegistry()


def get_registry() -> SessionRegistry:
    return registry
