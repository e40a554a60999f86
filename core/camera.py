"""
Camera — thin wrapper around OpenCV VideoCapture.
No ML, no pose logic, no capture decisions.
"""
from __future__ import annotations
import time
from typing import Optional

import cv2
import numpy as np

from domain.errors import AcquisitionError


class Camera:
    """
    Parameters
    ----------
    device : int
        Camera index (0 = default webcam).
    fps_limit : int
        Maximum frames per second to read.
    """

    def __init__(self, device: int = 0, fps_limit: int = 30) -> None:
        self._cap = cv2.VideoCapture(device)
        self._frame_time = 1.0 / fps_limit
        self._prev_time: float = 0.0
        self._latest: Optional[np.ndarray] = None

        if not self._cap.isOpened():
            raise AcquisitionError(f"Cannot open camera device {device}")

    # ------------------------------------------------------------------
    def read(self) -> Optional[np.ndarray]:
        """
        Block until the next frame is due (FPS limiter), then return it.
        Returns None on read failure.
        """
        wait = self._frame_time - (time.monotonic() - self._prev_time)
        if wait > 0:
            time.sleep(wait)
        self._prev_time = time.monotonic()

        ret, frame = self._cap.read()
        self._latest = frame if ret and frame is not None and frame.size else None
        return self._latest

    def current_frame(self) -> Optional[np.ndarray]:
        """
        The most recent frame with usable pixel data, or None if the last
        read produced nothing. Never blocks.
        """
        return self._latest

    @property
    def is_open(self) -> bool:
        return self._cap.isOpened()

    def release(self) -> None:
        self._cap.release()

    def __enter__(self) -> "Camera":
        return self

    def __exit__(self, *_) -> None:
        self.release()
