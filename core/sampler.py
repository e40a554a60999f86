"""
PoseSampler — one sampler tick: frame → detection timestamp → pose.

Extractor faults are contained here so the sampling loop never dies on a
bad frame. A frame source that stops delivering altogether is fatal.
"""
from __future__ import annotations
import logging
import time
from typing import Any, Callable, Optional, Protocol

from domain.errors import AcquisitionError
from domain.models import FrameData, PoseSample
from utils.constants import ACQUISITION_TIMEOUT
from utils.timing import reached

logger = logging.getLogger(__name__)


class FrameSource(Protocol):
    def current_frame(self) -> Optional[Any]: ...


class PoseExtractor(Protocol):
    def infer(self, frame: Any, timestamp_ms: int) -> Optional[PoseSample]: ...


class PoseSampler:
    """
    Parameters
    ----------
    source : FrameSource
        Anything with ``current_frame()``; an ``is_open`` attribute is
        honoured when present.
    extractor : PoseExtractor
    clock : callable
        Monotonic clock in seconds.
    acquisition_timeout : float
        Seconds without a usable frame before the source is declared dead.
    """

    def __init__(
        self,
        source: FrameSource,
        extractor: PoseExtractor,
        clock: Callable[[], float] = time.monotonic,
        acquisition_timeout: float = ACQUISITION_TIMEOUT,
    ) -> None:
        self._source = source
        self._extractor = extractor
        self._clock = clock
        self._timeout = acquisition_timeout
        self._last_ts_ms = 0
        self._waiting_since: Optional[float] = None

    # ------------------------------------------------------------------
    def next_timestamp_ms(self, now: float) -> int:
        """Detection timestamp for ``now``, bumped by 1ms if time stood still."""
        ts = int(now * 1000)
        if ts <= self._last_ts_ms:
            ts = self._last_ts_ms + 1
        self._last_ts_ms = ts
        return ts

    def tick(self) -> Optional[FrameData]:
        """
        Returns a FrameData for this tick, or None when the source has no
        usable pixels right now (the tick is skipped, not buffered).

        Raises AcquisitionError when the source is closed or has been
        silent for longer than the acquisition timeout.
        """
        now = self._clock()

        if not getattr(self._source, "is_open", True):
            raise AcquisitionError("frame source is closed")

        frame = self._source.current_frame()
        if frame is None:
            if self._waiting_since is None:
                self._waiting_since = now
            elif reached(self._waiting_since, now, self._timeout):
                raise AcquisitionError(
                    f"no usable frame for {now - self._waiting_since:.1f}s"
                )
            return None

        self._waiting_since = None
        ts = self.next_timestamp_ms(now)

        try:
            sample = self._extractor.infer(frame, ts)
        except Exception as exc:
            logger.warning("pose extraction failed, treating tick as no face: %s", exc)
            sample = None

        return FrameData(sample=sample, frame=frame, timestamp=now)

    def reset(self) -> None:
        """Forget acquisition history. Detection timestamps stay monotonic."""
        self._waiting_since = None
