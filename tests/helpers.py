"""Fakes and drivers for the capture pipeline tests."""

from typing import List, Optional

from core.capture_manager import GuidedCaptureManager
from domain.enums import Direction, Instruction
from domain.errors import EncoderError
from domain.models import FrameData, PoseSample


# ── Poses (relative to a (0.0, 0.02) baseline) ──

STRAIGHT = PoseSample(yaw=0.0, pitch=0.02)
RIGHT = PoseSample(yaw=0.02, pitch=0.02)
LEFT = PoseSample(yaw=-0.02, pitch=0.02)
UP = PoseSample(yaw=0.0, pitch=0.0)
DOWN = PoseSample(yaw=0.0, pitch=0.03)

POSE_FOR = {
    Direction.STRAIGHT: STRAIGHT,
    Direction.RIGHT: RIGHT,
    Direction.LEFT: LEFT,
    Direction.UP: UP,
    Direction.DOWN: DOWN,
}


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class FakeEncoder:
    """Encodes a frame label into bytes; can be told to fail."""

    def __init__(self, fail_times: int = 0):
        self.fail_times = fail_times
        self.calls = 0

    def encode(self, frame) -> bytes:
        self.calls += 1
        if self.fail_times > 0:
            self.fail_times -= 1
            raise EncoderError("simulated encoder failure")
        return f"jpeg:{frame}".encode()


class ResultSink:
    def __init__(self):
        self.calls: List[List[bytes]] = []

    def __call__(self, images: List[bytes]) -> None:
        self.calls.append(list(images))


def tick(manager: GuidedCaptureManager, sample: Optional[PoseSample], t: float, frame="frame"):
    return manager.process(FrameData(sample=sample, frame=frame, timestamp=t))


def pass_gate(manager: GuidedCaptureManager, start: float = 0.0) -> float:
    """Face present for the full dwell; returns the time of the advancing tick."""
    tick(manager, STRAIGHT, start)
    tick(manager, STRAIGHT, start + 2.0)
    return start + 2.0


def calibrate(manager: GuidedCaptureManager, start: float) -> float:
    """Straight-enough hold through to the baseline; returns the capture time."""
    tick(manager, STRAIGHT, start, frame="straight")
    tick(manager, STRAIGHT, start + 0.2, frame="straight")
    return start + 0.2


def hold(manager: GuidedCaptureManager, label: Direction, start: float) -> float:
    """Hold one direction long enough to capture it; returns the capture time."""
    pose = POSE_FOR[label]
    tick(manager, pose, start, frame=label.value)
    tick(manager, pose, start + 0.5, frame=label.value)
    return start + 0.5


def simulated_user(instruction: Optional[Instruction]) -> PoseSample:
    """A user who always does what the screen says."""
    if instruction is None or instruction in (Instruction.CENTER, Instruction.STRAIGHT):
        return STRAIGHT
    return POSE_FOR[Direction(instruction.value)]


