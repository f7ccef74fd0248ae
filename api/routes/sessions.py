from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Response

from api.schemas import FrameIn, FrameResult, SessionCreate, SessionStatus
from api.services.sessions import SessionRegistry, get_registry

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionStatus, status_code=201)
def create_session(
    payload: Optional[SessionCreate] = None,
    registry: SessionRegistry = Depends(get_registry),
) -> SessionStatus:
    """
    Create a counting session. Thresholds default to 160/70 degrees and 0.5 confidence.
    The session starts stopped; call /start before posting frames.
    """
    thresholds = payload.thresholds.to_thresholds() if payload and payload.thresholds else None
    return registry.create(thresholds).status()


@router.get("/{session_id}", response_model=SessionStatus)
def get_session(session_id: str, registry: SessionRegistry = Depends(get_registry)) -> SessionStatus:
    return registry.get(session_id).status()


@router.post("/{session_id}/start", response_model=SessionStatus)
def start_session(session_id: str, registry: SessionRegistry = Depends(get_registry)) -> SessionStatus:
    return registry.start(session_id)


@router.post("/{session_id}/stop", response_model=SessionStatus)
def stop_session(session_id: str, registry: SessionRegistry = Depends(get_registry)) -> SessionStatus:
    """Stop recording; the repetition count is reset to zero."""
    return registry.stop(session_id)


@router.post("/{session_id}/reset", response_model=SessionStatus)
def reset_session(session_id: str, registry: SessionRegistry = Depends(get_registry)) -> SessionStatus:
    return registry.reset(session_id)


@router.post("/{session_id}/frames", response_model=FrameResult)
def submit_frame(
    session_id: str,
    payload: FrameIn,
    registry: SessionRegistry = Depends(get_registry),
) -> FrameResult:
    """
    Feed one pose frame. Frames missing an arm joint or below the confidence threshold
    are reported as skipped and leave the count untouched.
    """
    return registry.submit_frame(session_id, payload)


@router.delete("/{session_id}", status_code=204)
def delete_session(session_id: str, registry: SessionRegistry = Depends(get_registry)) -> Response:
    registry.delete(session_id)
    return Response(status_code=204)
