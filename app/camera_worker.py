"""
CameraWorker — runs the camera, sampler and capture manager in a QThread
and publishes read-only snapshots to the UI through Qt signals.

The worker is the only writer of session state. Requests from the UI
(restart) are queued through a flag that the loop picks up between ticks.
"""
from __future__ import annotations
import logging
import time
from typing import List, Optional

import numpy as np
from PyQt6.QtCore import QThread, pyqtSignal

from app.config import AppConfig
from app.factory import build_manager, build_sampler
from core.camera import Camera
from core.capture_manager import GuidedCaptureManager
from core.face_tracker import FaceTracker
from core.sampler import PoseSampler
from domain.enums import SessionEventKind
from domain.errors import AcquisitionError
from domain.models import Artifact

logger = logging.getLogger(__name__)


class CameraWorker(QThread):
    """
    QThread running the whole capture pipeline.

    Signals:
        frame_ready    — BGR frame as np.ndarray (every camera frame)
        snapshot_ready — SessionSnapshot (after every sampler tick)
        result_ready   — list of five JPEG byte strings, once per session
        status_msg     — log line for the UI
    """

    frame_ready    = pyqtSignal(np.ndarray)
    snapshot_ready = pyqtSignal(object)      # SessionSnapshot
    result_ready   = pyqtSignal(list)
    status_msg     = pyqtSignal(str)

    def __init__(self, config: AppConfig, parent=None) -> None:
        super().__init__(parent)
        self._config = config
        self._running = False
        self._reset_requested = False

        # Pipeline components are created in run() so they live in the worker thread
        self._camera:  Optional[Camera]               = None
        self._tracker: Optional[FaceTracker]          = None
        self._sampler: Optional[PoseSampler]          = None
        self._manager: Optional[GuidedCaptureManager] = None

    # ------------------------------------------------------------------
    def run(self) -> None:
        """Main loop — runs on the worker thread."""
        cfg = self._config
        self._manager = build_manager(cfg, on_result=self._on_result)

        try:
            self._camera  = Camera(cfg.camera_device, cfg.fps_limit)
            self._tracker = FaceTracker(
                cfg.model_path,
                min_detection_confidence=cfg.min_detection_confidence,
                min_tracking_confidence=cfg.min_tracking_confidence,
            )
            self._sampler = build_sampler(cfg, self._camera, self._tracker)
        except Exception as exc:
            logger.exception("pipeline initialisation failed")
            self._manager.fail(str(exc))
            self.snapshot_ready.emit(self._manager.snapshot())
            self.status_msg.emit(f"[ERROR] Initialisation: {exc}")
            self._cleanup()
            return

        self._running = True
        self.status_msg.emit("Pipeline started")
        self.snapshot_ready.emit(self._manager.snapshot())
        next_sample = time.monotonic()

        while self._running:
            if self._reset_requested:
                self._reset_requested = False
                self._manager.reset()
                self._sampler.reset()
                self.status_msg.emit("[SESSION] restarted")
                self.snapshot_ready.emit(self._manager.snapshot())

            frame = self._camera.read()
            if frame is not None:
                self.frame_ready.emit(frame.copy())

            now = time.monotonic()
            if now < next_sample:
                continue
            next_sample = now + cfg.sample_interval
            if not self._running:
                break
            self._tick(now)

        self._cleanup()

    def _tick(self, now: float) -> None:
        try:
            frame_data = self._sampler.tick()
        except AcquisitionError as exc:
            events = self._manager.fail(str(exc))
        else:
            if frame_data is None:
                events = self._manager.poll(now)
            else:
                events = self._manager.process(frame_data)

        for event in events:
            if event.kind == SessionEventKind.CAPTURED:
                self.status_msg.emit(f"[CAPTURE] {event.label.value}")
            elif event.kind == SessionEventKind.PHASE_CHANGED:
                self.status_msg.emit(f"[PHASE] {event.phase.value}")
            elif event.kind == SessionEventKind.FAILED:
                self.status_msg.emit(f"[ERROR] {event.message}")

        self.snapshot_ready.emit(self._manager.snapshot())

    def _on_result(self, images: List[Artifact]) -> None:
        self.status_msg.emit(f"[RESULT] {len(images)} images ready")
        self.result_ready.emit(list(images))

    # ------------------------------------------------------------------
    def request_reset(self) -> None:
        self._reset_requested = True

    def stop(self) -> None:
        # The loop cancels the manager in _cleanup, on this worker's thread.
        self._running = False
        self.wait(3000)  # wait up to 3s for the loop to finish

    def _cleanup(self) -> None:
        if self._manager:
            self._manager.cancel()
        if self._camera:
            self._camera.release()
        if self._tracker:
            self._tracker.release()
        self.status_msg.emit("Pipeline stopped")
