from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional
import time

from domain.enums import Direction, Instruction, Phase, SessionEventKind

# Type aliases
Artifact = bytes                       # encoded image, owned by the encoder
CaptureRecord = Dict[Direction, Artifact]


@dataclass(frozen=True)
class PoseSample:
    """
    Head orientation for one tick, as two unitless deviations from a
    forward-facing reference. "No face" is represented by ``None``.
    """
    yaw: float
    pitch: float


# The calibrated neutral pose is just a sample.
Baseline = PoseSample


@dataclass
class FrameData:
    """
    Everything one sampler tick hands to the capture manager.
    ``frame`` is the BGR image the sample was extracted from; it is what gets
    encoded when this tick triggers a capture.
    """
    sample: Optional[PoseSample]
    frame: Any = None
    timestamp: float = field(default_factory=time.monotonic)

    # ---- convenience accessors ----------------------------------------
    @property
    def has_face(self) -> bool:
        return self.sample is not None


@dataclass(frozen=True)
class SessionEvent:
    kind: SessionEventKind
    phase: Optional[Phase] = None
    label: Optional[Direction] = None
    artifacts: Optional[List[Artifact]] = None
    message: str = ""


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Read-only view of a session, published after every sampler tick.
    The redraw path only ever sees these.
    """
    phase: Phase
    instruction: Optional[Instruction]
    captured: FrozenSet[Direction] = frozenset()
    active_direction: Optional[Direction] = None
    progress: float = 0.0
    error: str = ""
    thumbnails: Dict[Direction, Artifact] = field(default_factory=dict)

    @property
    def is_done(self) -> bool:
        return self.phase == Phase.DONE

    @property
    def is_failed(self) -> bool:
        return self.phase == Phase.FAILED
