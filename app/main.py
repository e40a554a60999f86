"""
main.py — Application entry point (single-threaded OpenCV loop).

Two cooperative drivers share one thread:

    sampler (every sample_interval):
        Camera → FaceTracker → GuidedCaptureManager → events
    redraw (every camera frame):
        manager.snapshot() → OpenCVUI

The redraw path only reads snapshots; all session mutation happens in the
sampler branch, so no locking is needed.
"""
from __future__ import annotations
import logging
import time
from typing import List, Optional

from app.config import AppConfig, default_config
from app.factory import build_manager, build_sampler
from app.ui import OpenCVUI
from core.camera import Camera
from core.capture_manager import GuidedCaptureManager
from core.face_tracker import FaceTracker
from domain.errors import AcquisitionError
from domain.models import Artifact

logger = logging.getLogger(__name__)

KEY_ESC = 27
KEY_RETRY = ord("r")


def _report_result(images: List[Artifact]) -> None:
    sizes = ", ".join(f"{len(img) // 1024}KB" for img in images)
    print(f"[RESULT] {len(images)} images ready ({sizes})")


def _open_camera(config: AppConfig, manager: GuidedCaptureManager, ui: OpenCVUI) -> Optional[Camera]:
    """
    Open the camera. On failure the failed session is shown until the user
    retries (R) or quits (ESC).
    """
    while True:
        try:
            camera = Camera(config.camera_device, config.fps_limit)
        except AcquisitionError as exc:
            manager.fail(str(exc))
            print(f"[ERROR] {exc}")
        else:
            if manager.snapshot().is_failed:
                manager.reset()
            return camera

        ui.render_blank(manager.snapshot())
        key = ui.wait_key()
        while key not in (KEY_RETRY, KEY_ESC):
            key = ui.wait_key()
        if key == KEY_ESC:
            return None


def run(config: AppConfig = default_config) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    print("="*55)
    print("  FACE CAPTURE — guided five-pose session")
    print("="*55)
    print(f"  Model   : {config.model_path}")
    print(f"  Sampler : every {config.sample_interval * 1000:.0f}ms")
    print(f"  FPS cap : {config.fps_limit}")
    print("  Press ESC to quit, R to restart")
    print("="*55 + "\n")

    manager = build_manager(config, on_result=_report_result)

    ui = OpenCVUI(config)
    camera = _open_camera(config, manager, ui)
    if camera is None:
        ui.close()
        return

    tracker = FaceTracker(
        config.model_path,
        min_detection_confidence=config.min_detection_confidence,
        min_tracking_confidence=config.min_tracking_confidence,
    )
    sampler = build_sampler(config, camera, tracker)

    next_sample = time.monotonic()

    try:
        while True:
            # 1. Capture
            frame = camera.read()

            # 2. Sampler tick (late ticks are skipped, never queued)
            now = time.monotonic()
            if now >= next_sample and manager.is_active:
                next_sample = now + config.sample_interval
                try:
                    frame_data = sampler.tick()
                except AcquisitionError as exc:
                    events = manager.fail(str(exc))
                else:
                    if frame_data is None:
                        events = manager.poll(now)
                    else:
                        events = manager.process(frame_data)
                for event in events:
                    logger.debug("event %s", event.kind.value)

            # 3. Redraw
            if frame is not None:
                ui.render(frame, manager.snapshot())

            key = ui.poll_key()
            if key == KEY_ESC:
                break
            if key == KEY_RETRY:
                manager.reset()
                sampler.reset()

    finally:
        manager.cancel()
        camera.release()
        tracker.release()
        ui.close()
        print("\n✓ Application closed cleanly")


if __name__ == "__main__":
    run()
