"""
CaptureWindowApp — PyQt6 front end that wires CameraWorker to CameraWindow.

    • On start: window shown, pipeline running on the worker thread.
    • "Restart" → a fresh session on the same camera.
    • Closing the window stops the worker and releases the camera.
"""
from __future__ import annotations
import logging
import sys
from typing import List

from PyQt6.QtWidgets import QApplication

from app.camera_window import CameraWindow
from app.camera_worker import CameraWorker
from app.config import AppConfig, default_config

logger = logging.getLogger(__name__)


class CaptureWindowApp:
    """
    Connects CameraWorker (thread) ↔ CameraWindow (UI) through Qt signals.
    """

    def __init__(self, config: AppConfig = default_config) -> None:
        self._config = config
        self._running = False

        self._window = CameraWindow()
        self._worker = CameraWorker(config)
        self._connect_worker()
        self._window.restart_requested.connect(self._worker.request_reset)

    # ------------------------------------------------------------------
    def start(self) -> None:
        self._worker.start()
        self._running = True
        self._window.show()

    def stop(self) -> None:
        if self._running:
            self._worker.stop()
            self._running = False

    # ------------------------------------------------------------------
    def _connect_worker(self) -> None:
        self._worker.frame_ready.connect(self._window.on_frame)
        self._worker.snapshot_ready.connect(self._window.on_snapshot)
        self._worker.status_msg.connect(self._window.on_status)
        self._worker.result_ready.connect(self._on_result)

    def _on_result(self, images: List[bytes]) -> None:
        logger.info("session finished with %d images", len(images))


def run(config: AppConfig = default_config) -> int:
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    qt_app = QApplication(sys.argv)
    capture_app = CaptureWindowApp(config)
    qt_app.aboutToQuit.connect(capture_app.stop)
    capture_app.start()
    return qt_app.exec()


if __name__ == "__main__":
    sys.exit(run())
