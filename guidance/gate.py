"""
GateController — keeps the session out of calibration until a face has
been continuously present for a minimum dwell.

Presence is restarted, not accumulated: any tick without a face clears
the dwell timer.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from domain.enums import GateEvent
from domain.models import PoseSample
from utils.constants import GATE_DWELL
from utils.geometry import clamp
from utils.timing import reached


@dataclass(frozen=True)
class GateState:
    dwell_start: Optional[float] = None


class GateController:
    """
    Parameters
    ----------
    dwell : float
        Seconds of uninterrupted presence required to advance.
    """

    def __init__(self, dwell: float = GATE_DWELL) -> None:
        self._dwell = dwell

    def initial(self) -> GateState:
        return GateState()

    def observe(
        self,
        state: GateState,
        sample: Optional[PoseSample],
        now: float,
    ) -> Tuple[GateState, Optional[GateEvent]]:
        if sample is None:
            return GateState(), None

        if state.dwell_start is None:
            return GateState(dwell_start=now), None

        if reached(state.dwell_start, now, self._dwell):
            return GateState(), GateEvent.ADVANCE

        return state, None

    def progress(self, state: GateState, now: float) -> float:
        if state.dwell_start is None or self._dwell <= 0:
            return 0.0
        return clamp((now - state.dwell_start) / self._dwell, 0.0, 1.0)
