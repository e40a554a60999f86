"""Shared test fixtures for the capture pipeline."""

import importlib.util
import sys
from pathlib import Path

import pytest

# Load helpers module from the tests directory using importlib to avoid
# polluting sys.path.
_helpers_path = Path(__file__).resolve().parent / "helpers.py"
_spec = importlib.util.spec_from_file_location("helpers", _helpers_path)
_helpers = importlib.util.module_from_spec(_spec)
sys.modules["helpers"] = _helpers
_spec.loader.exec_module(_helpers)

from helpers import FakeClock, FakeEncoder, ResultSink  # noqa: E402
from core.capture_manager import GuidedCaptureManager  # noqa: E402


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def encoder():
    return FakeEncoder()


@pytest.fixture
def sink():
    return ResultSink()


@pytest.fixture
def manager(encoder, sink):
    return GuidedCaptureManager(encoder, on_result=sink)
