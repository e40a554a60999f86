"""Tests for CooldownManager (settle windows on an injected clock)."""

import pytest

from core.cooldown_manager import CooldownManager


def test_window_active_until_elapsed(clock):
    cm = CooldownManager(default_cooldown=0.2, clock=clock)
    cm.start("CAPTURE")
    clock.advance(0.1)
    assert cm.active("CAPTURE")
    clock.advance(0.15)
    assert not cm.active("CAPTURE")


def test_unknown_name_is_never_active(clock):
    cm = CooldownManager(default_cooldown=1.0, clock=clock)
    cm.start("CAPTURE")
    assert cm.active("CAPTURE")
    assert not cm.active("OTHER")


def test_start_with_explicit_time():
    cm = CooldownManager(default_cooldown=0.2, clock=lambda: 0.0)
    cm.start("CAPTURE", now=10.0)
    assert cm.active("CAPTURE", now=10.1)
    assert not cm.active("CAPTURE", now=10.3)


@pytest.mark.parametrize("start", [0.11, 0.55, 2.31, 100.33])
def test_window_closes_exactly_at_its_length(start):
    cm = CooldownManager(default_cooldown=0.2, clock=lambda: 0.0)
    cm.start("CAPTURE", now=start)
    assert cm.active("CAPTURE", now=start + 0.199)
    assert not cm.active("CAPTURE", now=start + 0.2)


def test_per_call_cooldown_overrides_default(clock):
    cm = CooldownManager(default_cooldown=0.2, clock=clock)
    cm.start("CAPTURE")
    clock.advance(0.5)
    assert not cm.active("CAPTURE")
    assert cm.active("CAPTURE", cooldown=1.0)


def test_reset_all(clock):
    cm = CooldownManager(default_cooldown=5.0, clock=clock)
    cm.start("A")
    cm.start("B")
    cm.reset_all()
    assert not cm.active("A")
    assert not cm.active("B")
