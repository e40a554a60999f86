"""
Pure geometric utility functions.
No imports from the rest of the project — safe to use anywhere.
"""
from __future__ import annotations
from typing import Sequence, Tuple

Point2D = Tuple[float, float]

# Face mesh indices
NOSE_TIP = 1
LEFT_EYE_OUTER = 33
RIGHT_EYE_OUTER = 263
UPPER_LIP = 13


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def midpoint(a: Point2D, b: Point2D) -> Point2D:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def head_orientation(landmarks: Sequence[Point2D]) -> Tuple[float, float]:
    """
    Reduce normalised face-mesh landmarks to (yaw, pitch).

    yaw   : horizontal offset of the nose tip from the eye-corner midpoint.
    pitch : vertical offset of the upper lip from the eye-corner midpoint.
    """
    eye_center = midpoint(landmarks[LEFT_EYE_OUTER], landmarks[RIGHT_EYE_OUTER])
    yaw = landmarks[NOSE_TIP][0] - eye_center[0]
    pitch = landmarks[UPPER_LIP][1] - eye_center[1]
    return yaw, pitch
