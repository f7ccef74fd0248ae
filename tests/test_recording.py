import tempfile
import unittest
from pathlib import Path

from repcount.io import recording
from repcount.vision.landmarks import Joint


class RecordingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp_dir = Path(tempfile.mkdtemp())

    def test_save_and_load_frames(self) -> None:
        frames = [
            recording.RecordedFrame(
                frame_index=0,
                timestamp=0.0,
                joints={"left_elbow": Joint("left_elbow", 0.1, 0.2, 0.3, 0.9)},
            ),
            recording.RecordedFrame(frame_index=1, timestamp=0.033, joints={}),
        ]

        path = recording.save_frames(self.tmp_dir / "nested" / "session.jsonl", frames)
        self.assertEqual(list(recording.load_frames(path)), frames)

    def test_save_refuses_overwrite_when_disabled(self) -> None:
        path = self.tmp_dir / "session.jsonl"
        recording.save_frames(path, [])
        with self.assertRaises(FileExistsError):
            recording.save_frames(path, [], overwrite=False)

    def test_blank_lines_skipped(self) -> None:
        path = self.tmp_dir / "session.jsonl"
        path.write_text('\n{"frame_index": 4, "timestamp": 0.5, "joints": {}}\n\n', encoding="utf-8")
        frames = list(recording.load_frames(path))
        self.assertEqual(frames, [recording.RecordedFrame(frame_index=4, timestamp=0.5)])

    def test_malformed_line_reports_line_number(self) -> None:
        path = self.tmp_dir / "session.jsonl"
        path.write_text('{"frame_index": 0, "timestamp": 0.0}\n{"timestamp": 1.0}\n', encoding="utf-8")
        with self.assertRaises(recording.RecordingError) as ctx:
            list(recording.load_frames(path))
        self.assertIn(":2:", str(ctx.exception))

    def test_invalid_utf8_reports_line_number(self) -> None:
        path = self.tmp_dir / "session.jsonl"
        path.write_bytes(b'{"frame_index": 0, "timestamp": 0.0}\n\xff\xfe{}\n')
        with self.assertRaises(recording.RecordingError) as ctx:
            list(recording.load_frames(path))
        self.assertIn(":2:", str(ctx.exception))

    def test_invalid_json_raises_recording_error(self) -> None:
        path = self.tmp_dir / "session.jsonl"
        path.write_text("not json\n", encoding="utf-8")
        with self.assertRaises(recording.RecordingError):
            list(recording.load_frames(path))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
