"""Tests for the landmark → (yaw, pitch) reduction."""

import pytest

from utils.geometry import (
    LEFT_EYE_OUTER,
    NOSE_TIP,
    RIGHT_EYE_OUTER,
    UPPER_LIP,
    clamp,
    head_orientation,
)


def make_landmarks(nose, left_eye, right_eye, lip):
    points = [(0.5, 0.5)] * 300
    points[NOSE_TIP] = nose
    points[LEFT_EYE_OUTER] = left_eye
    points[RIGHT_EYE_OUTER] = right_eye
    points[UPPER_LIP] = lip
    return points


def test_centred_face():
    lm = make_landmarks(nose=(0.5, 0.5), left_eye=(0.4, 0.4), right_eye=(0.6, 0.4), lip=(0.5, 0.42))
    yaw, pitch = head_orientation(lm)
    assert yaw == pytest.approx(0.0)
    assert pitch == pytest.approx(0.02)


def test_nose_offset_gives_yaw():
    lm = make_landmarks(nose=(0.53, 0.5), left_eye=(0.4, 0.4), right_eye=(0.6, 0.4), lip=(0.5, 0.4))
    yaw, pitch = head_orientation(lm)
    assert yaw == pytest.approx(0.03)
    assert pitch == pytest.approx(0.0)


def test_clamp():
    assert clamp(-1.0, 0.0, 1.0) == 0.0
    assert clamp(0.3, 0.0, 1.0) == 0.3
    assert clamp(4.0, 0.0, 1.0) == 1.0
