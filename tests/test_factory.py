"""Tests for config-driven wiring."""

import numpy as np
import pytest

from app.config import AppConfig
from app.factory import build_manager, build_sampler
from domain.enums import Direction, Phase
from domain.errors import AcquisitionError
from domain.models import FrameData
from helpers import STRAIGHT, FakeClock


def test_manager_honours_configured_durations():
    config = AppConfig(gate_dwell=0.5, straight_hold=0.1)
    manager = build_manager(config)
    frame = np.zeros((32, 32, 3), dtype=np.uint8)

    manager.process(FrameData(STRAIGHT, frame, timestamp=0.0))
    manager.process(FrameData(STRAIGHT, frame, timestamp=0.6))
    assert manager.phase == Phase.CALIBRATING

    manager.process(FrameData(STRAIGHT, frame, timestamp=0.7))
    manager.process(FrameData(STRAIGHT, frame, timestamp=0.85))
    assert manager.phase == Phase.DIRECTING
    assert manager.ledger.items()[Direction.STRAIGHT][:2] == b"\xff\xd8"


def test_sampler_uses_configured_timeout():
    class Silent:
        def current_frame(self):
            return None

    clock = FakeClock()
    sampler = build_sampler(AppConfig(acquisition_timeout=1.0), Silent(), extractor=None, clock=clock)
    assert sampler.tick() is None
    clock.now = 0.9
    assert sampler.tick() is None
    clock.now = 1.0
    with pytest.raises(AcquisitionError):
        sampler.tick()
