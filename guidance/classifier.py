"""
Direction classification relative to the calibrated baseline.
No state, no timers — just classify().
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from domain.enums import Direction
from domain.models import Baseline, PoseSample
from utils.constants import H_TOL, PITCH_DOWN, PITCH_UP, YAW_NEED


@dataclass(frozen=True)
class DirectionThresholds:
    yaw_need: float = YAW_NEED
    pitch_up: float = PITCH_UP
    pitch_down: float = PITCH_DOWN
    h_tol: float = H_TOL


DEFAULT_THRESHOLDS = DirectionThresholds()


def classify_direction(
    sample: PoseSample,
    baseline: Baseline,
    thresholds: DirectionThresholds = DEFAULT_THRESHOLDS,
) -> Optional[Direction]:
    """
    Map a sample to at most one of right / left / up / down.

    Horizontal bands are checked first and require small vertical drift,
    so a diagonal pose never fires as left/right. Vertical bands have no
    horizontal guard.
    """
    rel_yaw = sample.yaw - baseline.yaw
    rel_pitch = sample.pitch - baseline.pitch
    t = thresholds

    if rel_yaw > t.yaw_need and abs(rel_pitch) < t.h_tol:
        return Direction.RIGHT
    if rel_yaw < -t.yaw_need and abs(rel_pitch) < t.h_tol:
        return Direction.LEFT
    if rel_pitch < -t.pitch_up:
        return Direction.UP
    if rel_pitch > t.pitch_down:
        return Direction.DOWN
    return None
