"""repcount: repetition counting from per-frame pose landmarks.

The package turns a stream of joint positions from an external pose model into
an overhead-press repetition count, with confidence gating and a two-threshold
state machine so noisy frames neither stall nor double-count.
"""

from repcount.config import Thresholds
from repcount.repdetect.counter import FrameOutcome, PostureState, RepetitionCounter
from repcount.session import RecordingSession
from repcount.signals.kinematics import joint_angle
from repcount.vision.landmarks import Joint

__all__ = [
    "FrameOutcome",
    "Joint",
    "PostureState",
    "RecordingSession",
    "RepetitionCounter",
    "Thresholds",
    "joint_angle",
]

__version__ = "0.1.0"
