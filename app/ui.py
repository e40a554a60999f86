"""
OpenCVUI — all rendering logic isolated from detection and session logic.

The loop never calls cv2 drawing functions directly — it hands this class
a SessionSnapshot and the current frame.
"""
from __future__ import annotations
from typing import Any, Dict, Optional

import cv2
import numpy as np

from app.config import AppConfig
from domain.enums import CAPTURE_ORDER, Direction, Instruction, Phase
from domain.models import SessionSnapshot

ORANGE = (0, 140, 255)
WHITE = (255, 255, 255)
DIM = (110, 110, 110)
RED = (60, 60, 230)

# The preview is mirrored, so a head turn to the camera's right shows up
# on the left half of the screen and is asked for as "LOOK LEFT".
INSTRUCTION_TEXT: Dict[Instruction, str] = {
    Instruction.CENTER:   "Position your face within the frame",
    Instruction.STRAIGHT: "LOOK FORWARD",
    Instruction.RIGHT:    "LOOK LEFT",
    Instruction.LEFT:     "LOOK RIGHT",
    Instruction.UP:       "LOOK UP",
    Instruction.DOWN:     "LOOK DOWN",
}

# Ring quarters in screen space (degrees, clockwise from 3 o'clock).
RING_ARCS: Dict[Direction, tuple] = {
    Direction.UP:    (-140, -40),
    Direction.LEFT:  (-40, 40),
    Direction.DOWN:  (40, 140),
    Direction.RIGHT: (140, 220),
}


def decode_thumbnail(artifact: bytes, size: int) -> Optional[np.ndarray]:
    img = cv2.imdecode(np.frombuffer(artifact, dtype=np.uint8), cv2.IMREAD_COLOR)
    if img is None:
        return None
    return cv2.resize(img, (size, size), interpolation=cv2.INTER_AREA)


class OpenCVUI:
    """Renders guidance overlays onto the frame and shows it in a window."""

    def __init__(
        self,
        config: AppConfig,
        window_name: str = "Face Capture",
        thumb_size: int = 64,
    ) -> None:
        self._cfg = config
        self._name = window_name
        self._thumb_size = thumb_size
        self._thumbs: Dict[Direction, np.ndarray] = {}

    def render(self, frame: Any, snapshot: SessionSnapshot) -> None:
        """Flip frame, draw overlays, show window."""
        frame = cv2.flip(frame, 1)
        h, w = frame.shape[:2]

        if snapshot.phase == Phase.GATE:
            self._draw_corners(frame, w, h)
        elif snapshot.phase in (Phase.CALIBRATING, Phase.DIRECTING):
            self._draw_ring(frame, w, h, snapshot)

        if snapshot.instruction is not None:
            text = INSTRUCTION_TEXT[snapshot.instruction]
            cv2.putText(frame, text, (20, 50), cv2.FONT_HERSHEY_SIMPLEX, 1.1, WHITE, 3)

        self._draw_thumbnails(frame, w, h, snapshot)

        if snapshot.is_done:
            self._draw_banner(frame, w, h, "Capture Complete", ORANGE)
        elif snapshot.is_failed:
            self._draw_banner(frame, w, h, snapshot.error or "Capture failed", RED)
            cv2.putText(frame, "R to retry", (20, h - 20),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.6, WHITE, 1)

        cv2.putText(frame, "ESC to quit",
                    (w - 200, h - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.6, WHITE, 1)

        cv2.imshow(self._name, frame)

    # ------------------------------------------------------------------
    def _draw_corners(self, frame: Any, w: int, h: int) -> None:
        side = int(min(w, h) * 0.6)
        x0, y0 = (w - side) // 2, (h - side) // 2
        x1, y1 = x0 + side, y0 + side
        arm = side // 8
        for (cx, cy, dx, dy) in ((x0, y0, 1, 1), (x1, y0, -1, 1), (x0, y1, 1, -1), (x1, y1, -1, -1)):
            cv2.line(frame, (cx, cy), (cx + dx * arm, cy), WHITE, 4)
            cv2.line(frame, (cx, cy), (cx, cy + dy * arm), WHITE, 4)

    def _draw_ring(self, frame: Any, w: int, h: int, snapshot: SessionSnapshot) -> None:
        center = (w // 2, h // 2)
        radius = int(min(w, h) * 0.4)
        axes = (radius, radius)

        if snapshot.phase == Phase.CALIBRATING:
            cv2.circle(frame, center, radius, DIM, 4)
            sweep = int(360 * snapshot.progress)
            if sweep:
                cv2.ellipse(frame, center, axes, -90, 0, sweep, ORANGE, 8)
            return

        for label, (start, end) in RING_ARCS.items():
            done = label in snapshot.captured
            active = label == snapshot.active_direction
            color = ORANGE if done or active else DIM
            cv2.ellipse(frame, center, axes, 0, start, end, color, 10 if done or active else 4)
            if active and not done and snapshot.progress > 0:
                fill_end = start + (end - start) * snapshot.progress
                cv2.ellipse(frame, center, (radius + 12, radius + 12), 0, start, fill_end, WHITE, 3)

    def _draw_thumbnails(self, frame: Any, w: int, h: int, snapshot: SessionSnapshot) -> None:
        if not snapshot.thumbnails:
            self._thumbs.clear()
            return

        size = self._thumb_size
        x = 20
        y = h - size - 50
        for label in CAPTURE_ORDER:
            artifact = snapshot.thumbnails.get(label)
            if artifact is None:
                x += size + 8
                continue
            if label not in self._thumbs:
                thumb = decode_thumbnail(artifact, size)
                if thumb is None:
                    continue
                self._thumbs[label] = cv2.flip(thumb, 1)
            if y >= 0 and x + size <= w:
                frame[y:y + size, x:x + size] = self._thumbs[label]
                cv2.rectangle(frame, (x, y), (x + size, y + size), ORANGE, 2)
            x += size + 8

    def _draw_banner(self, frame: Any, w: int, h: int, text: str, color: tuple) -> None:
        (tw, th), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, 1.0, 2)
        x, y = (w - tw) // 2, (h + th) // 2
        cv2.rectangle(frame, (x - 20, y - th - 20), (x + tw + 20, y + 20), (0, 0, 0), -1)
        cv2.rectangle(frame, (x - 20, y - th - 20), (x + tw + 20, y + 20), color, 2)
        cv2.putText(frame, text, (x, y), cv2.FONT_HERSHEY_DUPLEX, 1.0, WHITE, 2)

    # ------------------------------------------------------------------
    def render_blank(self, snapshot: SessionSnapshot, width: int = 640, height: int = 480) -> None:
        """Show the overlays on a black canvas, for when no camera frame exists."""
        self.render(np.zeros((height, width, 3), dtype=np.uint8), snapshot)

    def poll_key(self) -> int:
        return cv2.waitKey(1) & 0xFF

    def wait_key(self) -> int:
        return cv2.waitKey(0) & 0xFF

    def close(self) -> None:
        cv2.destroyAllWindows()
