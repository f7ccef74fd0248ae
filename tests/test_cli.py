import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from repcount import cli
from repcount.io.recording import RecordedFrame, save_frames
from test_counter import make_frame


class ReplayCliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.path = Path(tempfile.mkdtemp()) / "press.jsonl"
        angles = [120, 170, 170, 45, 100, 170, 45]
        frames = [
            RecordedFrame(frame_index=i, timestamp=i / 10, joints=make_frame(a))
            for i, a in enumerate(angles)
        ]
        frames.append(RecordedFrame(frame_index=len(angles), timestamp=0.7, joints={}))
        save_frames(self.path, frames)

    def run_cli(self, *argv: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = cli.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_replay_prints_each_rep_and_total(self) -> None:
        code, out, _ = self.run_cli("replay", str(self.path))
        self.assertEqual(code, 0)
        self.assertIn("rep 1 at frame=1", out)
        self.assertIn("rep 2 at frame=5", out)
        self.assertIn("Done. 2 repetitions in 8 frames.", out)

    def test_trace_lists_complete_frames(self) -> None:
        code, out, _ = self.run_cli("replay", str(self.path), "--trace")
        self.assertEqual(code, 0)
        self.assertIn("frame=0 t=0.000s left=120.0 right=120.0", out)
        self.assertNotIn("frame=7 ", out)

    def test_threshold_flags_change_the_count(self) -> None:
        code, out, _ = self.run_cli("replay", str(self.path), "--up-angle", "175")
        self.assertEqual(code, 0)
        self.assertIn("Done. 0 repetitions", out)

    def test_inverted_thresholds_are_rejected(self) -> None:
        code, _, err = self.run_cli("replay", str(self.path), "--up-angle", "60")
        self.assertEqual(code, 2)
        self.assertIn("Error:", err)

    def test_missing_recording_is_reported(self) -> None:
        code, _, err = self.run_cli("replay", str(self.path.with_name("absent.jsonl")))
        self.assertEqual(code, 2)
        self.assertIn("Recording not found", err)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
