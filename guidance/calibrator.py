"""
StraightCalibrator — finds the user's personal "straight" pose.

Two ways out of calibration, first one wins:

  1. Sustained hold: a straight-enough sample held for ``hold`` seconds.
  2. Give-up: once ``giveup`` seconds have passed since the first
     observation, the best-scoring sample seen so far is taken, whether or
     not it was straight enough.

The calibrator only proposes a baseline. The capture manager commits it
once the matching ``straight`` image has been recorded, so a failed encode
leaves this state untouched and the next tick retries.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from domain.models import PoseSample
from utils.constants import (
    SCORE_PITCH_SPAN,
    SCORE_YAW_SPAN,
    STRAIGHT_GIVEUP,
    STRAIGHT_HOLD,
    STRAIGHT_PITCH_MAX,
    STRAIGHT_PITCH_MIN,
    STRAIGHT_YAW_MAX,
)
from utils.geometry import clamp
from utils.timing import exceeded, reached


def straight_score(sample: PoseSample) -> float:
    """1.0 for a perfectly centred pose, falling to 0.0 at the scoring spans."""
    yaw_score = clamp(1 - abs(sample.yaw) / SCORE_YAW_SPAN, 0.0, 1.0)
    pitch_score = clamp(1 - abs(sample.pitch) / SCORE_PITCH_SPAN, 0.0, 1.0)
    return (yaw_score + pitch_score) / 2


def is_straight_enough(sample: PoseSample) -> bool:
    return (
        abs(sample.yaw) < STRAIGHT_YAW_MAX
        and STRAIGHT_PITCH_MIN < sample.pitch < STRAIGHT_PITCH_MAX
    )


@dataclass(frozen=True)
class CalibrationState:
    phase_start: Optional[float] = None
    best: Optional[PoseSample] = None
    best_score: float = -1.0
    hold_start: Optional[float] = None

    @property
    def has_observed_face(self) -> bool:
        return self.best is not None


class StraightCalibrator:
    """
    Parameters
    ----------
    hold : float
        Seconds a straight-enough pose must be held.
    giveup : float
        Seconds after the first observation before the best sample is used.
    """

    def __init__(self, hold: float = STRAIGHT_HOLD, giveup: float = STRAIGHT_GIVEUP) -> None:
        self._hold = hold
        self._giveup = giveup

    def initial(self) -> CalibrationState:
        return CalibrationState()

    # ------------------------------------------------------------------
    def observe(
        self,
        state: CalibrationState,
        sample: Optional[PoseSample],
        now: float,
    ) -> Tuple[CalibrationState, Optional[PoseSample]]:
        """
        Feed one tick. Returns the new state and, when calibration
        succeeds, the proposed baseline.
        """
        if state.phase_start is None:
            state = replace(state, phase_start=now)

        if sample is not None:
            score = straight_score(sample)
            if state.best is None or score > state.best_score:
                state = replace(state, best=sample, best_score=score)

        # Give-up path
        if state.best is not None and exceeded(state.phase_start, now, self._giveup):
            return state, state.best

        # Sustained-hold path
        if sample is None or not is_straight_enough(sample):
            return replace(state, hold_start=None), None

        if state.hold_start is None:
            return replace(state, hold_start=now), None

        if reached(state.hold_start, now, self._hold):
            return state, sample

        return state, None

    def progress(self, state: CalibrationState, now: float) -> float:
        if state.hold_start is None or self._hold <= 0:
            return 0.0
        return clamp((now - state.hold_start) / self._hold, 0.0, 1.0)
