"""Tests for GateController (continuous presence dwell)."""

import pytest

from domain.enums import GateEvent
from domain.models import PoseSample
from guidance.gate import GateController, GateState

FACE = PoseSample(yaw=0.0, pitch=0.0)


@pytest.fixture
def gate():
    return GateController(dwell=2.0)


def test_first_presence_starts_dwell(gate):
    state, event = gate.observe(gate.initial(), FACE, 0.0)
    assert event is None
    assert state.dwell_start == 0.0


def test_advances_after_full_dwell(gate):
    state, _ = gate.observe(gate.initial(), FACE, 0.0)
    state, event = gate.observe(state, FACE, 1.0)
    assert event is None
    state, event = gate.observe(state, FACE, 2.0)
    assert event is GateEvent.ADVANCE
    assert state.dwell_start is None


def test_presence_just_short_then_loss_never_advances(gate):
    state = gate.initial()
    for t in (0.0, 0.5, 1.0, 1.5, 1.999):
        state, event = gate.observe(state, FACE, t)
        assert event is None
    state, event = gate.observe(state, None, 2.1)
    assert event is None
    assert state == GateState()


def test_loss_restarts_rather_than_accumulates(gate):
    state, _ = gate.observe(gate.initial(), FACE, 0.0)
    state, _ = gate.observe(state, FACE, 1.5)
    state, _ = gate.observe(state, None, 1.6)
    state, _ = gate.observe(state, FACE, 1.7)
    assert state.dwell_start == 1.7

    state, event = gate.observe(state, FACE, 3.6)
    assert event is None
    state, event = gate.observe(state, FACE, 3.8)
    assert event is GateEvent.ADVANCE


def test_progress(gate):
    assert gate.progress(gate.initial(), 5.0) == 0.0
    state, _ = gate.observe(gate.initial(), FACE, 0.0)
    assert gate.progress(state, 1.0) == pytest.approx(0.5)
    assert gate.progress(state, 10.0) == 1.0


@pytest.mark.parametrize("start", [0.11, 0.55, 1.43, 100.33])
def test_dwell_boundary_is_inclusive_at_any_start(gate, start):
    state, _ = gate.observe(gate.initial(), FACE, start)
    _, event = gate.observe(state, FACE, start + 1.999)
    assert event is None
    _, event = gate.observe(state, FACE, start + 2.0)
    assert event is GateEvent.ADVANCE
