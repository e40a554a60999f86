"""
CaptureLedger — one image per pose label, written at most once.
"""
from __future__ import annotations
import logging
from typing import Dict, FrozenSet, List

from domain.enums import CAPTURE_ORDER, Direction, RecordResult
from domain.models import Artifact

logger = logging.getLogger(__name__)


class CaptureLedger:
    """
    Usage
    -----
    ledger = CaptureLedger()
    if ledger.record(Direction.RIGHT, jpeg) is RecordResult.RECORDED:
        ...
    if ledger.just_completed:
        ...  # fires once, on the record that filled the last label
    """

    def __init__(self) -> None:
        self._captures: Dict[Direction, Artifact] = {}
        self._completion_signalled = False
        self.just_completed = False

    def record(self, label: Direction, artifact: Artifact) -> RecordResult:
        self.just_completed = False

        if label in self._captures:
            logger.debug("capture for %s already present, ignoring", label.value)
            return RecordResult.ALREADY_PRESENT

        self._captures[label] = artifact

        if self.is_complete() and not self._completion_signalled:
            self._completion_signalled = True
            self.just_completed = True

        return RecordResult.RECORDED

    def is_complete(self) -> bool:
        return all(label in self._captures for label in CAPTURE_ORDER)

    def has(self, label: Direction) -> bool:
        return label in self._captures

    def labels(self) -> FrozenSet[Direction]:
        return frozenset(self._captures)

    def items(self) -> Dict[Direction, Artifact]:
        return dict(self._captures)

    def ordered(self) -> List[Artifact]:
        """Artifacts in canonical order; only meaningful once complete."""
        return [self._captures[label] for label in CAPTURE_ORDER if label in self._captures]

    def clear(self) -> None:
        self._captures.clear()
        self._completion_signalled = False
        self.just_completed = False

    def __len__(self) -> int:
        return len(self._captures)
