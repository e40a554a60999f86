"""Tests for PoseSampler (timestamps, fault containment, acquisition loss)."""

import logging

import pytest

from core.sampler import PoseSampler
from domain.errors import AcquisitionError
from domain.models import PoseSample

SAMPLE = PoseSample(yaw=0.01, pitch=0.02)


class FakeSource:
    def __init__(self, frame="frame"):
        self.frame = frame
        self.is_open = True

    def current_frame(self):
        return self.frame


class FakeExtractor:
    def __init__(self, result=SAMPLE, error=None):
        self.result = result
        self.error = error
        self.timestamps = []

    def infer(self, frame, timestamp_ms):
        self.timestamps.append(timestamp_ms)
        if self.error is not None:
            raise self.error
        return self.result


def test_tick_returns_frame_data(clock):
    clock.now = 3.5
    sampler = PoseSampler(FakeSource("pixels"), FakeExtractor(), clock=clock)
    fd = sampler.tick()
    assert fd.sample == SAMPLE
    assert fd.frame == "pixels"
    assert fd.timestamp == 3.5
    assert fd.has_face


def test_timestamps_strictly_increase_on_frozen_clock(clock):
    clock.now = 1.0
    extractor = FakeExtractor()
    sampler = PoseSampler(FakeSource(), extractor, clock=clock)
    for _ in range(3):
        sampler.tick()
    assert extractor.timestamps == [1000, 1001, 1002]


def test_timestamps_follow_clock(clock):
    extractor = FakeExtractor()
    sampler = PoseSampler(FakeSource(), extractor, clock=clock)
    clock.now = 1.0
    sampler.tick()
    clock.now = 1.25
    sampler.tick()
    assert extractor.timestamps == [1000, 1250]


def test_extractor_fault_becomes_no_face(clock, caplog):
    sampler = PoseSampler(FakeSource(), FakeExtractor(error=RuntimeError("graph crashed")), clock=clock)
    with caplog.at_level(logging.WARNING, logger="core.sampler"):
        fd = sampler.tick()
    assert fd is not None
    assert fd.sample is None
    assert not fd.has_face
    assert "graph crashed" in caplog.text


def test_extractor_reporting_no_face(clock):
    sampler = PoseSampler(FakeSource(), FakeExtractor(result=None), clock=clock)
    assert sampler.tick().sample is None


def test_missing_frame_skips_tick_until_timeout(clock):
    source = FakeSource(frame=None)
    sampler = PoseSampler(source, FakeExtractor(), clock=clock, acquisition_timeout=5.0)

    assert sampler.tick() is None
    clock.now = 4.9
    assert sampler.tick() is None
    clock.now = 5.0
    with pytest.raises(AcquisitionError):
        sampler.tick()


def test_frame_arrival_restarts_acquisition_timer(clock):
    source = FakeSource(frame=None)
    sampler = PoseSampler(source, FakeExtractor(), clock=clock, acquisition_timeout=5.0)
    sampler.tick()
    clock.now = 4.0
    source.frame = "frame"
    assert sampler.tick() is not None

    source.frame = None
    clock.now = 8.0
    assert sampler.tick() is None
    clock.now = 12.0
    assert sampler.tick() is None


def test_reset_forgets_waiting(clock):
    source = FakeSource(frame=None)
    sampler = PoseSampler(source, FakeExtractor(), clock=clock, acquisition_timeout=5.0)
    sampler.tick()
    sampler.reset()
    clock.now = 6.0
    assert sampler.tick() is None


def test_closed_source_is_fatal(clock):
    source = FakeSource()
    source.is_open = False
    sampler = PoseSampler(source, FakeExtractor(), clock=clock)
    with pytest.raises(AcquisitionError):
        sampler.tick()
