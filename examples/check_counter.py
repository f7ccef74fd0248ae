"""Sanity check for the press counter on a synthetic pose stream.

Builds frames that sweep both elbows through three presses, drops a few joints
and confidences along the way, and prints the count after every frame.
"""

import math
import sys
from pathlib import Path

# Allow running this script directly without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from repcount import Joint, RepetitionCounter  # noqa: E402


def synthetic_frame(angle_deg: float, confidence: float = 0.9) -> dict:
    rad = math.radians(angle_deg)
    frame = {}
    for side, offset in (("left", 0.0), ("right", 1.0)):
        frame[f"{side}_elbow"] = Joint(f"{side}_elbow", offset, 0.0, 0.0, confidence)
        frame[f"{side}_shoulder"] = Joint(f"{side}_shoulder", offset + 0.3, 0.0, 0.0, confidence)
        frame[f"{side}_wrist"] = Joint(
            f"{side}_wrist", offset + 0.3 * math.cos(rad), 0.3 * math.sin(rad), 0.0, confidence
        )
    return frame


def run_examples() -> None:
    counter = RepetitionCounter()
    counter.add_listener(lambda count: print(f"  -> rep {count}"))

    angles = [90, 120, 165, 172, 150, 80, 60, 45, 100, 168, 90, 50, 175]
    for idx, angle in enumerate(angles):
        frame = synthetic_frame(angle, confidence=0.3 if idx == 4 else 0.9)
        if idx == 8:
            del frame["right_wrist"]
        outcome = counter.process_frame(frame)
        print(f"frame {idx:2d} angle={angle:3d} state={outcome.state.value:7s} skipped={outcome.skipped}")

    assert counter.count == 3, f"expected 3 reps, got {counter.count}"
    print("Counter checks passed.")


if __name__ == "__main__":
    run_examples()
