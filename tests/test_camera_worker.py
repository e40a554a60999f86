"""Tests for CameraWorker thread ownership (no camera, thread never started)."""

from app.camera_worker import CameraWorker
from app.config import AppConfig
from domain.enums import Phase
from helpers import STRAIGHT, tick


def test_stop_leaves_session_to_the_worker_thread(manager):
    worker = CameraWorker(AppConfig())
    worker._manager = manager
    tick(manager, STRAIGHT, 0.0)

    worker.stop()

    # Only the worker's own cleanup may cancel; stop() just ends the loop.
    assert manager.is_active
    assert manager.phase == Phase.GATE
    assert not worker._running


def test_cleanup_cancels_session(manager):
    worker = CameraWorker(AppConfig())
    worker._manager = manager
    worker._cleanup()
    assert not manager.is_active
