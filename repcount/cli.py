"""Command-line interface: replay a recorded pose stream through the counter.

Usage:
    repcount replay session.jsonl --up-angle 160 --down-angle 70 --trace
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from repcount.config import Thresholds
from repcount.io.recording import RecordedFrame, load_frames
from repcount.quality.failures import REQUIRED_JOINTS
from repcount.repdetect.counter import RepetitionCounter
from repcount.signals.kinematics import angle_series
from repcount.vision.landmarks import (
    LEFT_ELBOW,
    LEFT_SHOULDER,
    LEFT_WRIST,
    RIGHT_ELBOW,
    RIGHT_SHOULDER,
    RIGHT_WRIST,
)


def eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="repcount",
        description="Count overhead-press repetitions from recorded pose frames.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    replay = sub.add_parser("replay", help="Replay a JSONL recording through the counter.")
    replay.add_argument("recording", help="Path to a JSONL pose recording")
    replay.add_argument("--up-angle", type=float, default=None,
                        help="Elbow angle (degrees) both arms must exceed to count as up (default: 160)")
    replay.add_argument("--down-angle", type=float, default=None,
                        help="Elbow angle (degrees) both arms must fall below to count as down (default: 70)")
    replay.add_argument("--min-confidence", type=float, default=None,
                        help="Minimum per-joint confidence in [0, 1] (default: 0.5)")
    replay.add_argument("--trace", action="store_true",
                        help="Print per-frame elbow angles after the replay")
    replay.add_argument("--verbose", action="store_true",
                        help="Enable debug logging (skipped frames, transitions)")

    return p.parse_args(argv)


def build_thresholds(args: argparse.Namespace) -> Thresholds:
    for name in ("up_angle", "down_angle", "min_confidence"):
        value = getattr(args, name)
        if value is not None and (math.isnan(value) or math.isinf(value)):
            raise ValueError(f"--{name.replace('_', '-')} must be a finite number.")
    return Thresholds().with_overrides(
        up_angle_deg=args.up_angle,
        down_angle_deg=args.down_angle,
        min_confidence=args.min_confidence,
    ).validate()


def print_trace(frames: List[RecordedFrame]) -> None:
    """Print elbow angles for every frame that carries all arm joints."""
    complete = [f for f in frames if all(name in f.joints for name in REQUIRED_JOINTS)]
    if not complete:
        print("trace: no frame carries all arm joints")
        return

    def points(name: str) -> np.ndarray:
        return np.array([[f.joints[name].x, f.joints[name].y, f.joints[name].z] for f in complete])

    left = angle_series(points(LEFT_SHOULDER), points(LEFT_ELBOW), points(LEFT_WRIST))
    right = angle_series(points(RIGHT_SHOULDER), points(RIGHT_ELBOW), points(RIGHT_WRIST))
    for frame, l_deg, r_deg in zip(complete, left, right):
        print(f"frame={frame.frame_index} t={frame.timestamp:.3f}s left={l_deg:.1f} right={r_deg:.1f}")


def replay(args: argparse.Namespace) -> int:
    thresholds = build_thresholds(args)
    path = Path(args.recording).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Recording not found: {path}")

    frames = list(load_frames(path))
    counter = RepetitionCounter(thresholds)
    for frame in frames:
        outcome = counter.process_frame(frame.joints)
        if outcome.counted:
            print(f"rep {counter.count} at frame={frame.frame_index} t={frame.timestamp:.3f}s")

    if args.trace:
        print_trace(frames)
    print(f"Done. {counter.count} repetitions in {len(frames)} frames.")
    return 0


def run(args: argparse.Namespace) -> int:
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    try:
        if args.command == "replay":
            return replay(args)
        raise ValueError(f"Unknown command: {args.command}")
    except Exception as ex:
        eprint(f"Error: {ex}")
        return 2


def main(argv: Optional[List[str]] = None) -> int:
    return run(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
