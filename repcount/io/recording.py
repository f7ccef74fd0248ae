"""JSONL recordings of pose frames.

A recording lets a capture session be replayed through the counter offline
(see ``repcount replay``). Each line holds one frame:

    {"frame_index": 0, "timestamp": 0.0,
     "joints": {"left_elbow": {"x": .., "y": .., "z": .., "confidence": ..}, ...}}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator

from repcount.vision.landmarks import Joint, joint_from_dict, joint_to_dict


class RecordingError(ValueError):
    """Raised when a recording line cannot be parsed into a frame."""


@dataclass(frozen=True)
class RecordedFrame:
    """Pose data for a single captured frame."""

    frame_index: int
    timestamp: float
    joints: Dict[str, Joint] = field(default_factory=dict)


def _frame_to_json(frame: RecordedFrame) -> str:
    payload = {
        "frame_index": frame.frame_index,
        "timestamp": frame.timestamp,
        "joints": {name: joint_to_dict(joint) for name, joint in frame.joints.items()},
    }
    return json.dumps(payload)


def _frame_from_obj(obj: dict) -> RecordedFrame:
    joints = {name: joint_from_dict(name, payload) for name, payload in obj.get("joints", {}).items()}
    return RecordedFrame(
        frame_index=int(obj["frame_index"]),
        timestamp=float(obj["timestamp"]),
        joints=joints,
    )


def save_frames(path: Path, frames: Iterable[RecordedFrame], *, overwrite: bool = True) -> Path:
    """Write frames to a JSONL recording.

    Args:
        path: Destination path; parent directories are created.
        frames: Iterable of RecordedFrame instances.
        overwrite: Whether to replace an existing file.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists() and not overwrite:
        raise FileExistsError(f"Recording already exists: {path}")

    with path.open("w", encoding="utf-8") as fh:
        for frame in frames:
            fh.write(_frame_to_json(frame))
            fh.write("\n")
    return path


def load_frames(path: Path) -> Iterator[RecordedFrame]:
    """Read frames from a JSONL recording, skipping blank lines."""
    with path.open("rb") as fh:
        for line_no, raw in enumerate(fh, start=1):
            if not raw.strip():
                continue
            try:
                frame = _frame_from_obj(json.loads(raw.decode("utf-8")))
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                raise RecordingError(f"{path}:{line_no}: invalid frame: {exc}") from exc
            yield frame
