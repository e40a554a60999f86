"""
CooldownManager — centralises the post-capture settle windows so the
capture manager doesn't need to track them itself.
"""
from __future__ import annotations
import time
from typing import Callable, Dict

from utils.timing import reached


class CooldownManager:
    """
    Per-name settle windows driven by an injectable clock.

    Usage
    -----
    cm = CooldownManager(default_cooldown=0.2)
    cm.start("CAPTURE", now=t)
    if cm.active("CAPTURE", now=t2):
        ...  # still settling
    """

    def __init__(
        self,
        default_cooldown: float = 0.2,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default = default_cooldown
        self._clock = clock
        self._last: Dict[str, float] = {}

    def start(self, name: str, now: float | None = None) -> None:
        """Open a window for ``name`` starting at ``now``."""
        self._last[name] = self._clock() if now is None else now

    def active(self, name: str, cooldown: float | None = None, now: float | None = None) -> bool:
        """True while the window opened for ``name`` has not yet elapsed."""
        if name not in self._last:
            return False
        now = self._clock() if now is None else now
        threshold = cooldown if cooldown is not None else self._default
        return not reached(self._last[name], now, threshold)

    def reset_all(self) -> None:
        self._last.clear()
