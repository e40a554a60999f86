"""
Wiring helpers shared by the OpenCV loop and the Qt worker.
"""
from __future__ import annotations
import time
from typing import Callable, Optional

from app.config import AppConfig
from core.capture_manager import GuidedCaptureManager, ResultConsumer
from core.cooldown_manager import CooldownManager
from core.image_encoder import JpegEncoder
from core.sampler import FrameSource, PoseExtractor, PoseSampler
from guidance.calibrator import StraightCalibrator
from guidance.classifier import DirectionThresholds
from guidance.gate import GateController
from guidance.hold import HoldToCapture


def build_manager(
    config: AppConfig,
    on_result: Optional[ResultConsumer] = None,
) -> GuidedCaptureManager:
    return GuidedCaptureManager(
        encoder=JpegEncoder(config.jpeg_quality),
        gate=GateController(config.gate_dwell),
        calibrator=StraightCalibrator(config.straight_hold, config.straight_giveup),
        hold=HoldToCapture(config.direction_hold),
        thresholds=DirectionThresholds(
            yaw_need=config.yaw_need,
            pitch_up=config.pitch_up,
            pitch_down=config.pitch_down,
            h_tol=config.h_tol,
        ),
        cooldown=CooldownManager(default_cooldown=config.capture_settle),
        calibration_timeout=config.calibration_timeout,
        result_delay=config.result_delay,
        on_result=on_result,
    )


def build_sampler(
    config: AppConfig,
    source: FrameSource,
    extractor: PoseExtractor,
    clock: Callable[[], float] = time.monotonic,
) -> PoseSampler:
    return PoseSampler(
        source,
        extractor,
        clock=clock,
        acquisition_timeout=config.acquisition_timeout,
    )
