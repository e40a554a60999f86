"""
JpegEncoder — turns a BGR frame into storable JPEG bytes.
"""
from __future__ import annotations
from typing import Any

import cv2

from domain.errors import EncoderError
from domain.models import Artifact
from utils.constants import JPEG_QUALITY


class JpegEncoder:
    def __init__(self, quality: int = JPEG_QUALITY) -> None:
        self._params = [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)]

    def encode(self, frame: Any) -> Artifact:
        if frame is None or getattr(frame, "size", 0) == 0:
            raise EncoderError("no pixel data to encode")

        try:
            ok, buf = cv2.imencode(".jpg", frame, self._params)
        except cv2.error as exc:
            raise EncoderError(f"cv2.imencode failed: {exc}") from exc
        if not ok:
            raise EncoderError("cv2.imencode rejected the frame")
        return buf.tobytes()
