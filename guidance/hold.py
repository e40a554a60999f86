"""
HoldToCapture — per-direction debouncer.

A direction triggers a capture only after it has been the classified
direction on every tick for ``hold`` seconds. Timers are wall-clock based,
so a skipped sampler tick does not break a hold.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Optional, Tuple

from domain.enums import Direction
from utils.constants import DIRECTION_HOLD
from utils.geometry import clamp
from utils.timing import reached


@dataclass(frozen=True)
class HoldState:
    starts: Dict[Direction, float] = field(default_factory=dict)

    def start_of(self, label: Direction) -> Optional[float]:
        return self.starts.get(label)


class HoldToCapture:
    """
    Parameters
    ----------
    hold : float
        Seconds a direction must be held continuously.
    """

    def __init__(self, hold: float = DIRECTION_HOLD) -> None:
        self._hold = hold

    def initial(self) -> HoldState:
        return HoldState()

    # ------------------------------------------------------------------
    def tick(
        self,
        state: HoldState,
        direction: Optional[Direction],
        captured: AbstractSet[Direction],
        now: float,
    ) -> Tuple[HoldState, Optional[Direction]]:
        """
        Returns the new state and the label to capture, if any.

        Every label other than ``direction`` lapses on this tick, so only
        the active label can carry a timer forward. Labels that already
        have a capture never start a timer.
        """
        if direction is None or direction in captured:
            return HoldState(), None

        start = state.start_of(direction)
        if start is None:
            return HoldState({direction: now}), None

        if reached(start, now, self._hold):
            return HoldState(), direction

        return HoldState({direction: start}), None

    def progress(self, state: HoldState, label: Optional[Direction], now: float) -> float:
        if label is None or self._hold <= 0:
            return 0.0
        start = state.start_of(label)
        if start is None:
            return 0.0
        return clamp((now - start) / self._hold, 0.0, 1.0)
