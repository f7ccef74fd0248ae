"""Joint-angle computation.

``joint_angle`` is the per-frame estimator used by the counter: plain floats,
no numpy, no failure mode. ``angle_series`` applies the same formula to whole
recordings at once for offline inspection.
"""

from __future__ import annotations

import math
from typing import Any, Tuple

import numpy as np

from repcount.vision.landmarks import (
    LEFT_ELBOW,
    LEFT_SHOULDER,
    LEFT_WRIST,
    RIGHT_ELBOW,
    RIGHT_SHOULDER,
    RIGHT_WRIST,
    Frame,
)


def joint_angle(p1: Any, vertex: Any, p2: Any) -> float:
    """Return the angle at ``vertex`` formed by ``p1`` and ``p2``, in degrees.

    Points need ``x``, ``y`` and ``z`` attributes. The cosine is clamped to
    ``[-1, 1]`` before ``acos`` so rounding on near-(anti)parallel arms cannot
    leave the domain. When ``vertex`` coincides with either endpoint the angle
    is undefined and ``0.0`` is returned.
    """

    v1x, v1y, v1z = p1.x - vertex.x, p1.y - vertex.y, p1.z - vertex.z
    v2x, v2y, v2z = p2.x - vertex.x, p2.y - vertex.y, p2.z - vertex.z

    mag1 = math.sqrt(v1x * v1x + v1y * v1y + v1z * v1z)
    mag2 = math.sqrt(v2x * v2x + v2y * v2y + v2z * v2z)
    if mag1 == 0 or mag2 == 0:
        return 0.0

    dot = v1x * v2x + v1y * v2y + v1z * v2z
    cos_theta = max(-1.0, min(1.0, dot / (mag1 * mag2)))
    return math.degrees(math.acos(cos_theta))


def elbow_angles(frame: Frame) -> Tuple[float, float]:
    """Return ``(left, right)`` elbow angles; the frame must hold all arm joints."""
    left = joint_angle(frame[LEFT_SHOULDER], frame[LEFT_ELBOW], frame[LEFT_WRIST])
    right = joint_angle(frame[RIGHT_SHOULDER], frame[RIGHT_ELBOW], frame[RIGHT_WRIST])
    return left, right


def angle_series(p1: Any, vertex: Any, p2: Any) -> np.ndarray:
    """Vectorised :func:`joint_angle` over ``(N, 3)`` point arrays.

    Rows where either vector has zero length yield ``0.0``, matching the
    scalar estimator.
    """

    a = np.asarray(p1, dtype=float).reshape(-1, 3)
    b = np.asarray(vertex, dtype=float).reshape(-1, 3)
    c = np.asarray(p2, dtype=float).reshape(-1, 3)
    if not (a.shape == b.shape == c.shape):
        raise ValueError(f"point arrays must share a shape, got {a.shape}, {b.shape}, {c.shape}")

    v1 = a - b
    v2 = c - b
    mags = np.linalg.norm(v1, axis=1) * np.linalg.norm(v2, axis=1)
    degenerate = mags == 0
    dots = np.einsum("ij,ij->i", v1, v2)
    cos_theta = np.clip(dots / np.where(degenerate, 1.0, mags), -1.0, 1.0)
    angles = np.degrees(np.arccos(cos_theta))
    angles[degenerate] = 0.0
    return angles
