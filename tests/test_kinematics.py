import math
import unittest

import numpy as np

from repcount.signals import kinematics
from repcount.vision.landmarks import Joint


def pt(x: float, y: float, z: float = 0.0) -> Joint:
    return Joint(name="p", x=x, y=y, z=z, confidence=1.0)


class JointAngleTests(unittest.TestCase):
    def test_collinear_points_with_vertex_between_give_straight_angle(self) -> None:
        angle = kinematics.joint_angle(pt(-1, 0), pt(0, 0), pt(2, 0))
        self.assertAlmostEqual(angle, 180.0, places=6)

    def test_right_angle_at_vertex(self) -> None:
        angle = kinematics.joint_angle(pt(1, 0, 0), pt(0, 0, 0), pt(0, 0, 3))
        self.assertAlmostEqual(angle, 90.0, places=6)

    def test_degenerate_vertex_returns_zero_without_error(self) -> None:
        self.assertEqual(kinematics.joint_angle(pt(1, 1), pt(1, 1), pt(2, 3)), 0.0)
        self.assertEqual(kinematics.joint_angle(pt(0, 0), pt(1, 1), pt(1, 1)), 0.0)

    def test_near_parallel_vectors_stay_in_domain(self) -> None:
        angle = kinematics.joint_angle(pt(1e-9, 1.0), pt(0, 0), pt(3e-9, 3.0))
        self.assertFalse(math.isnan(angle))
        self.assertGreaterEqual(angle, 0.0)
        self.assertLess(angle, 1e-3)

    def test_uses_all_three_coordinates(self) -> None:
        angle = kinematics.joint_angle(pt(1, 0, 0), pt(0, 0, 0), pt(1, 0, 1))
        self.assertAlmostEqual(angle, 45.0, places=6)

    def test_elbow_angles_reads_both_arms(self) -> None:
        frame = {
            "left_shoulder": pt(0, 1),
            "left_elbow": pt(0, 0),
            "left_wrist": pt(0, -1),
            "right_shoulder": pt(5, 1),
            "right_elbow": pt(5, 0),
            "right_wrist": pt(6, 0),
        }
        left, right = kinematics.elbow_angles(frame)
        self.assertAlmostEqual(left, 180.0, places=6)
        self.assertAlmostEqual(right, 90.0, places=6)


class AngleSeriesTests(unittest.TestCase):
    def test_matches_scalar_estimator_and_zeroes_degenerate_rows(self) -> None:
        p1 = np.array([[-1.0, 0, 0], [1.0, 0, 0], [0.0, 0, 0]])
        vertex = np.zeros((3, 3))
        p2 = np.array([[1.0, 0, 0], [0.0, 2.0, 0], [1.0, 0, 0]])

        angles = kinematics.angle_series(p1, vertex, p2)

        np.testing.assert_allclose(angles, [180.0, 90.0, 0.0], atol=1e-9)

    def test_mismatched_shapes_raise(self) -> None:
        with self.assertRaises(ValueError):
            kinematics.angle_series(np.zeros((2, 3)), np.zeros((3, 3)), np.zeros((2, 3)))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
