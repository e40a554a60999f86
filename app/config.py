from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from utils import constants as C


@dataclass
class AppConfig:
    """
    Central configuration injected into all components.
    Durations are in seconds.
    """
    # ---- paths ---------------------------------------------------------
    model_path: Path = Path("models/face_landmarker.task")

    # ---- camera --------------------------------------------------------
    camera_device: int = 0
    fps_limit: int = C.FPS_LIMIT
    acquisition_timeout: float = C.ACQUISITION_TIMEOUT

    # ---- sampling ------------------------------------------------------
    sample_interval: float = C.SAMPLE_INTERVAL
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5

    # ---- gate ----------------------------------------------------------
    gate_dwell: float = C.GATE_DWELL

    # ---- straight calibration -----------------------------------------
    straight_hold: float = C.STRAIGHT_HOLD
    straight_giveup: float = C.STRAIGHT_GIVEUP
    calibration_timeout: float = C.CALIBRATION_TIMEOUT

    # ---- directions ----------------------------------------------------
    yaw_need: float = C.YAW_NEED
    pitch_up: float = C.PITCH_UP
    pitch_down: float = C.PITCH_DOWN
    h_tol: float = C.H_TOL
    direction_hold: float = C.DIRECTION_HOLD

    # ---- capture -------------------------------------------------------
    capture_settle: float = C.CAPTURE_SETTLE
    result_delay: float = C.RESULT_DELAY
    jpeg_quality: int = C.JPEG_QUALITY

    # ---- logging -------------------------------------------------------
    log_level: str = "INFO"


# Shared instance used when no config is passed.
default_config = AppConfig()
