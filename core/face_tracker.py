"""
FaceTracker — encapsulates all MediaPipe logic and landmark reduction.
The rest of the application never imports mediapipe directly.
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, List, Optional

import cv2
import mediapipe as mp
from mediapipe.tasks import python as mp_python
from mediapipe.tasks.python import vision

from domain.errors import ExtractorError
from domain.models import PoseSample
from utils.geometry import Point2D, head_orientation


class FaceTracker:
    """
    Runs the MediaPipe Face Landmarker in VIDEO mode on a BGR frame and
    reduces the first face to a PoseSample.

    Parameters
    ----------
    model_path : Path
        Path to ``face_landmarker.task``.
    min_detection_confidence : float
    min_tracking_confidence : float
    """

    def __init__(
        self,
        model_path: Path,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ) -> None:
        options = vision.FaceLandmarkerOptions(
            base_options=mp_python.BaseOptions(model_asset_path=str(model_path)),
            running_mode=vision.RunningMode.VIDEO,
            num_faces=1,
            min_face_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        self._landmarker = vision.FaceLandmarker.create_from_options(options)

    # ------------------------------------------------------------------
    def infer(self, frame: Any, timestamp_ms: int) -> Optional[PoseSample]:
        """
        Parameters
        ----------
        frame : np.ndarray
            BGR frame from OpenCV.
        timestamp_ms : int
            Must increase strictly across calls (VIDEO mode requirement).

        Returns
        -------
        PoseSample, or None when no face is found.
        """
        try:
            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
            image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)
            result = self._landmarker.detect_for_video(image, timestamp_ms)
        except Exception as exc:
            raise ExtractorError(f"face landmarker failed: {exc}") from exc

        if not result.face_landmarks:
            return None

        points: List[Point2D] = [(lm.x, lm.y) for lm in result.face_landmarks[0]]
        yaw, pitch = head_orientation(points)
        return PoseSample(yaw=yaw, pitch=pitch)

    def release(self) -> None:
        self._landmarker.close()
