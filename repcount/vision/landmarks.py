"""Joint and frame types handed over by the external pose estimator.

A frame is a plain mapping from joint name to :class:`Joint`. The counter only
reads the six arm joints; everything else a pose model reports is carried along
untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

LEFT_SHOULDER = "left_shoulder"
RIGHT_SHOULDER = "right_shoulder"
LEFT_ELBOW = "left_elbow"
RIGHT_ELBOW = "right_elbow"
LEFT_WRIST = "left_wrist"
RIGHT_WRIST = "right_wrist"


@dataclass(frozen=True)
class Joint:
    """Single tracked landmark with the estimator's confidence score."""

    name: str
    x: float
    y: float
    z: float
    confidence: float


Frame = Mapping[str, Joint]

# MediaPipe Pose (33-point model) indices for the joints we track.
MEDIAPIPE_INDEX = {
    "nose": 0,
    LEFT_SHOULDER: 11,
    RIGHT_SHOULDER: 12,
    LEFT_ELBOW: 13,
    RIGHT_ELBOW: 14,
    LEFT_WRIST: 15,
    RIGHT_WRIST: 16,
    "left_hip": 23,
    "right_hip": 24,
}


def frame_from_landmarks(
    landmarks: Sequence[Any], *, index: Mapping[str, int] = MEDIAPIPE_INDEX
) -> Dict[str, Joint]:
    """Build a frame from a MediaPipe-style landmark list.

    Each landmark needs ``x``, ``y``, ``z`` and ``visibility`` attributes;
    visibility becomes the joint confidence. Indices beyond the end of the
    list are left out of the frame rather than raising.
    """

    frame: Dict[str, Joint] = {}
    for name, idx in index.items():
        if idx >= len(landmarks):
            continue
        lm = landmarks[idx]
        frame[name] = Joint(
            name=name,
            x=float(lm.x),
            y=float(lm.y),
            z=float(getattr(lm, "z", 0.0) or 0.0),
            confidence=float(getattr(lm, "visibility", 0.0) or 0.0),
        )
    return frame


def joint_from_dict(name: str, payload: Mapping[str, Any]) -> Joint:
    """Build a joint from a ``{x, y, z, confidence}`` mapping; ``z`` defaults to 0."""
    return Joint(
        name=name,
        x=float(payload["x"]),
        y=float(payload["y"]),
        z=float(payload.get("z", 0.0)),
        confidence=float(payload["confidence"]),
    )


def joint_to_dict(joint: Joint) -> Dict[str, float]:
    return {"x": joint.x, "y": joint.y, "z": joint.z, "confidence": joint.confidence}
