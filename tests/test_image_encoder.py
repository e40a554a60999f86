"""Tests for JpegEncoder."""

import numpy as np
import pytest

from core.image_encoder import JpegEncoder
from domain.errors import EncoderError


def test_encodes_bgr_frame_to_jpeg():
    frame = np.zeros((48, 64, 3), dtype=np.uint8)
    frame[:, :, 2] = 255
    data = JpegEncoder(quality=90).encode(frame)
    assert isinstance(data, bytes)
    assert data[:2] == b"\xff\xd8"


def test_missing_frame_is_an_encoder_error():
    with pytest.raises(EncoderError):
        JpegEncoder().encode(None)


def test_empty_frame_is_an_encoder_error():
    with pytest.raises(EncoderError):
        JpegEncoder().encode(np.zeros((0, 0, 3), dtype=np.uint8))
