"""
Millisecond arithmetic for session timers.

Timestamps arrive as float seconds from a monotonic clock. Limits are
defined in whole milliseconds, so elapsed time is compared after rounding
both ends to the millisecond; a plain float subtraction can land a hair
under an inclusive limit.
"""
from __future__ import annotations


def to_ms(seconds: float) -> int:
    return int(round(seconds * 1000))


def elapsed_ms(start: float, now: float) -> int:
    """Whole milliseconds from ``start`` to ``now``."""
    return to_ms(now) - to_ms(start)


def reached(start: float, now: float, limit: float) -> bool:
    """True once at least ``limit`` seconds have elapsed since ``start``."""
    return elapsed_ms(start, now) >= to_ms(limit)


def exceeded(start: float, now: float, limit: float) -> bool:
    """True once strictly more than ``limit`` seconds have elapsed."""
    return elapsed_ms(start, now) > to_ms(limit)
