"""Tests for the millisecond timer helpers."""

import pytest

from utils.timing import elapsed_ms, exceeded, reached, to_ms


def test_to_ms_rounds_to_nearest():
    assert to_ms(0.42) == 420
    assert to_ms(0.1 + 0.2) == 300
    assert to_ms(100.33) == 100330


@pytest.mark.parametrize("start", [i * 0.11 for i in range(1, 60)])
@pytest.mark.parametrize("limit", [0.15, 0.42, 2.0])
def test_limit_is_reached_exactly_at_start_plus_limit(start, limit):
    assert elapsed_ms(start, start + limit) == to_ms(limit)
    assert reached(start, start + limit, limit)
    assert not reached(start, start + limit - 0.001, limit)


def test_exceeded_is_strict():
    assert not exceeded(0.33, 1.33, 1.0)
    assert exceeded(0.33, 1.331, 1.0)
