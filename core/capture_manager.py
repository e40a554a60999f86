"""
GuidedCaptureManager — drives one guided capture session.

    gate → calibrating → directing → done
                (any) → failed

Design decisions:
  - The manager is the single owner of session state; every guidance step
    is a pure function of (substate, sample, now) returning a new substate
    plus an optional event.
  - Time comes from FrameData.timestamp, never from a clock read here,
    so a session replays deterministically in tests.
  - A substate is committed after a would-be capture only if the image
    was actually recorded. A failed encode therefore keeps the hold
    timer running and the next qualifying tick retries at once.
  - After each capture a short settle window (CooldownManager) pauses
    evaluation while the user is still in the captured pose.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, List, Optional, Protocol

from domain.enums import (
    CAPTURE_ORDER,
    DISPLAY_ORDER,
    Direction,
    GateEvent,
    Instruction,
    Phase,
    RecordResult,
    SessionEventKind,
)
from domain.errors import EncoderError
from domain.models import Artifact, Baseline, FrameData, SessionEvent, SessionSnapshot
from core.cooldown_manager import CooldownManager
from guidance.calibrator import StraightCalibrator
from guidance.classifier import DEFAULT_THRESHOLDS, DirectionThresholds, classify_direction
from guidance.gate import GateController
from guidance.hold import HoldToCapture
from guidance.ledger import CaptureLedger
from utils.constants import CALIBRATION_TIMEOUT, CAPTURE_SETTLE, RESULT_DELAY
from utils.timing import reached

logger = logging.getLogger(__name__)

_SETTLE = "CAPTURE"

ResultConsumer = Callable[[List[Artifact]], None]


class ImageEncoder(Protocol):
    def encode(self, frame: Any) -> Artifact: ...


class GuidedCaptureManager:
    """
    The single entry point for session processing.

    Usage
    -----
    manager = GuidedCaptureManager(encoder, on_result=handle_images)
    events  = manager.process(frame_data)     # once per sampler tick
    view    = manager.snapshot()              # any time, read-only

    Parameters
    ----------
    encoder : ImageEncoder
        Turns the frame of a capturing tick into an artifact.
    gate, calibrator, hold : guidance steps
        Injected so thresholds and durations can be tuned from config.
    thresholds : DirectionThresholds
        Classifier bands.
    cooldown : CooldownManager
        Holds the post-capture settle window.
    calibration_timeout : float
        Seconds in calibration without ever seeing a face before failing.
    result_delay : float
        Seconds between completion and handing the images over.
    on_result : callable
        Receives the five images in canonical order, exactly once.
    """

    def __init__(
        self,
        encoder: ImageEncoder,
        gate: Optional[GateController] = None,
        calibrator: Optional[StraightCalibrator] = None,
        hold: Optional[HoldToCapture] = None,
        thresholds: DirectionThresholds = DEFAULT_THRESHOLDS,
        cooldown: Optional[CooldownManager] = None,
        calibration_timeout: float = CALIBRATION_TIMEOUT,
        result_delay: float = RESULT_DELAY,
        on_result: Optional[ResultConsumer] = None,
    ) -> None:
        self._encoder = encoder
        self._gate = gate or GateController()
        self._calibrator = calibrator or StraightCalibrator()
        self._hold = hold or HoldToCapture()
        self._thresholds = thresholds
        self._cooldown = cooldown or CooldownManager(default_cooldown=CAPTURE_SETTLE)
        self._calibration_timeout = calibration_timeout
        self._result_delay = result_delay
        self._on_result = on_result

        self._ledger = CaptureLedger()
        self._active = True
        self.reset()

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Start a new session: clears images, baseline and every timer."""
        self._phase = Phase.GATE
        self._gate_state = self._gate.initial()
        self._calib_state = self._calibrator.initial()
        self._calib_entered_at: Optional[float] = None
        self._hold_state = self._hold.initial()
        self._baseline: Optional[Baseline] = None
        self._active_direction: Optional[Direction] = None
        self._capturing = False
        self._done_at: Optional[float] = None
        self._result_delivered = False
        self._error = ""
        self._last_now = 0.0

        self._ledger.clear()
        self._cooldown.reset_all()
        self._active = True
        logger.info("capture session started")

    def cancel(self) -> None:
        """Stop the session; nothing is emitted afterwards, not even a pending result."""
        if self._active:
            logger.info("capture session cancelled in phase %s", self._phase.value)
        self._active = False

    def fail(self, message: str) -> List[SessionEvent]:
        """Halt the session with a user-visible error until reset()."""
        if not self._active or self._phase == Phase.FAILED:
            return []
        logger.error("capture session failed: %s", message)
        self._error = message
        events: List[SessionEvent] = []
        self._enter(Phase.FAILED, events)
        events.append(SessionEvent(SessionEventKind.FAILED, phase=Phase.FAILED, message=message))
        return events

    # ------------------------------------------------------------------
    # Per-tick processing
    # ------------------------------------------------------------------
    def process(self, frame_data: FrameData) -> List[SessionEvent]:
        """
        Feed one sampler tick and return the events it triggered.
        Exactly one phase step runs per tick.
        """
        if not self._active:
            return []

        now = frame_data.timestamp
        self._last_now = now
        events: List[SessionEvent] = []

        if self._phase == Phase.GATE:
            self._step_gate(frame_data, now, events)
        elif self._phase == Phase.CALIBRATING:
            self._step_calibration(frame_data, now, events)
        elif self._phase == Phase.DIRECTING:
            self._step_direction(frame_data, now, events)
        elif self._phase == Phase.DONE:
            self._step_done(now, events)

        return events

    def poll(self, now: float) -> List[SessionEvent]:
        """
        Time-only update for ticks that produced no frame. Only the
        delayed result hand-off depends on time alone.
        """
        if not self._active or self._phase != Phase.DONE:
            return []
        self._last_now = now
        events: List[SessionEvent] = []
        self._step_done(now, events)
        return events

    # ---- gate ----------------------------------------------------------
    def _step_gate(self, fd: FrameData, now: float, events: List[SessionEvent]) -> None:
        self._gate_state, event = self._gate.observe(self._gate_state, fd.sample, now)
        if event is GateEvent.ADVANCE:
            self._calib_state = self._calibrator.initial()
            self._calib_entered_at = now
            self._enter(Phase.CALIBRATING, events)

    # ---- calibrating ---------------------------------------------------
    def _step_calibration(self, fd: FrameData, now: float, events: List[SessionEvent]) -> None:
        state, baseline = self._calibrator.observe(self._calib_state, fd.sample, now)
        self._calib_state = state

        if baseline is None:
            if (not state.has_observed_face
                    and reached(self._calib_entered_at, now, self._calibration_timeout)):
                events.extend(self.fail("No face detected. Please try again."))
            return

        if not self._capture(Direction.STRAIGHT, fd.frame, now, events):
            return

        self._baseline = baseline
        logger.info("baseline set: yaw=%.4f pitch=%.4f", baseline.yaw, baseline.pitch)
        if self._phase == Phase.CALIBRATING:
            self._enter(Phase.DIRECTING, events)

    # ---- directing -----------------------------------------------------
    def _step_direction(self, fd: FrameData, now: float, events: List[SessionEvent]) -> None:
        if fd.sample is None:
            self._active_direction = None
            self._hold_state = self._hold.initial()
            return

        direction = classify_direction(fd.sample, self._baseline, self._thresholds)
        self._active_direction = direction

        if self._cooldown.active(_SETTLE, now=now):
            return

        state, label = self._hold.tick(self._hold_state, direction, self._ledger.labels(), now)
        if label is None or self._capture(label, fd.frame, now, events):
            self._hold_state = state

    # ---- done ----------------------------------------------------------
    def _step_done(self, now: float, events: List[SessionEvent]) -> None:
        if self._result_delivered or self._done_at is None:
            return
        if not reached(self._done_at, now, self._result_delay):
            return

        self._result_delivered = True
        artifacts = self._ledger.ordered()
        logger.info("handing over %d images", len(artifacts))
        events.append(SessionEvent(SessionEventKind.RESULT_READY, phase=Phase.DONE, artifacts=artifacts))
        if self._on_result is not None:
            self._on_result(artifacts)

    # ------------------------------------------------------------------
    def _capture(self, label: Direction, frame: Any, now: float, events: List[SessionEvent]) -> bool:
        """Encode and record one image. Returns True only if it was recorded."""
        if self._capturing:
            logger.debug("capture of %s skipped, another capture in progress", label.value)
            return False

        self._capturing = True
        try:
            try:
                artifact = self._encoder.encode(frame)
            except EncoderError as exc:
                logger.warning("capture of %s abandoned: %s", label.value, exc)
                return False

            if self._ledger.record(label, artifact) is RecordResult.ALREADY_PRESENT:
                return False

            self._cooldown.start(_SETTLE, now=now)
            logger.info("captured %s (%d/%d)", label.value, len(self._ledger), len(CAPTURE_ORDER))
            events.append(SessionEvent(SessionEventKind.CAPTURED, phase=self._phase, label=label))

            if self._ledger.just_completed:
                self._done_at = now
                self._active_direction = None
                events.append(SessionEvent(SessionEventKind.COMPLETED, phase=self._phase))
                self._enter(Phase.DONE, events)
            return True
        finally:
            self._capturing = False

    def _enter(self, phase: Phase, events: List[SessionEvent]) -> None:
        logger.info("phase %s → %s", self._phase.value, phase.value)
        self._phase = phase
        events.append(SessionEvent(SessionEventKind.PHASE_CHANGED, phase=phase))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def baseline(self) -> Optional[Baseline]:
        return self._baseline

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def ledger(self) -> CaptureLedger:
        return self._ledger

    @property
    def instruction(self) -> Optional[Instruction]:
        """Derived from phase and ledger only, so it can never drift."""
        if self._phase == Phase.GATE:
            return Instruction.CENTER
        if self._phase == Phase.CALIBRATING:
            return Instruction.STRAIGHT
        if self._phase == Phase.DIRECTING:
            for label in DISPLAY_ORDER:
                if not self._ledger.has(label):
                    return Instruction(label.value)
        return None

    def progress(self) -> float:
        now = self._last_now
        if self._phase == Phase.GATE:
            return self._gate.progress(self._gate_state, now)
        if self._phase == Phase.CALIBRATING:
            return self._calibrator.progress(self._calib_state, now)
        if self._phase == Phase.DIRECTING:
            return self._hold.progress(self._hold_state, self._active_direction, now)
        if self._phase == Phase.DONE:
            return 1.0
        return 0.0

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self._phase,
            instruction=self.instruction,
            captured=self._ledger.labels(),
            active_direction=self._active_direction,
            progress=self.progress(),
            error=self._error,
            thumbnails=self._ledger.items(),
        )
