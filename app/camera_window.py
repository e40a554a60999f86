"""
CameraWindow — PyQt6 window showing the mirrored camera feed, the next
instruction, the four-quarter progress ring and the captured thumbnails.

It only renders what CameraWorker publishes; it never touches the session.
"""
from __future__ import annotations
from typing import Dict, Optional

import cv2
import numpy as np
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QImage, QPixmap, QColor, QPainter, QPen, QTransform
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QTextEdit, QSizePolicy,
)

from app.ui import INSTRUCTION_TEXT
from domain.enums import CAPTURE_ORDER, Direction, Phase
from domain.models import SessionSnapshot

_ORANGE = QColor(255, 140, 0)
_DIM    = QColor(255, 255, 255, 76)
_WHITE  = QColor(255, 255, 255)

# Qt angles: degrees, counter-clockwise from 3 o'clock, in 1/16 units.
# Same screen placement as the OpenCV ring (mirrored preview).
_QT_ARCS: Dict[Direction, tuple] = {
    Direction.UP:    (40, 100),
    Direction.LEFT:  (-40, 80),
    Direction.DOWN:  (220, 100),
    Direction.RIGHT: (140, 80),
}


class CameraWindow(QWidget):
    """
    Main capture window.

    - Camera feed with the guidance ring drawn on top.
    - Instruction label and thumbnails of completed poses.
    - Console log fed by CameraWorker.status_msg.
    """

    restart_requested = pyqtSignal()

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._snapshot: Optional[SessionSnapshot] = None
        self._thumb_labels: Dict[Direction, QLabel] = {}
        self._setup_ui()

    # ------------------------------------------------------------------
    # UI setup
    # ------------------------------------------------------------------
    def _setup_ui(self) -> None:
        self.setWindowTitle("Face Capture")
        self.setMinimumSize(860, 560)
        self.setStyleSheet("""
            QWidget {
                background-color: #000000;
                color: #e0e0e0;
                font-family: 'Segoe UI', Consolas, monospace;
            }
            QLabel#instruction {
                font-size: 26px;
                font-weight: bold;
                color: #FFFFFF;
                padding: 6px 0;
            }
            QLabel#error {
                color: #ff6b6b;
                font-size: 12px;
            }
            QTextEdit#log {
                background-color: #111111;
                color: #7ec8a0;
                font-size: 11px;
                border: 1px solid #333;
                border-radius: 4px;
            }
            QPushButton {
                background-color: #1a1a1a;
                color: #ffffff;
                border: 1px solid #444;
                border-radius: 12px;
                padding: 6px 14px;
                font-size: 12px;
            }
        """)

        root = QHBoxLayout(self)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(10)

        # ---- LEFT: instruction + camera + thumbnails -----------------
        left = QVBoxLayout()
        left.setSpacing(6)

        self._instruction = QLabel("")
        self._instruction.setObjectName("instruction")
        self._instruction.setAlignment(Qt.AlignmentFlag.AlignCenter)
        left.addWidget(self._instruction)

        self._camera_label = QLabel()
        self._camera_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._camera_label.setMinimumSize(480, 360)
        self._camera_label.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
        )
        left.addWidget(self._camera_label, stretch=1)

        thumbs = QHBoxLayout()
        for label in CAPTURE_ORDER:
            lbl = QLabel(label.value)
            lbl.setFixedSize(72, 72)
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            lbl.setStyleSheet("background:#1a1a1a; border-radius:6px; font-size:10px; color:#555;")
            thumbs.addWidget(lbl)
            self._thumb_labels[label] = lbl
        thumbs.addStretch()
        left.addLayout(thumbs)

        self._error = QLabel("")
        self._error.setObjectName("error")
        left.addWidget(self._error)

        root.addLayout(left, stretch=3)

        # ---- RIGHT: log + controls -----------------------------------
        right = QVBoxLayout()
        right.addWidget(QLabel("Console log"))
        self._log = QTextEdit()
        self._log.setObjectName("log")
        self._log.setReadOnly(True)
        right.addWidget(self._log, stretch=1)

        restart_btn = QPushButton("Restart")
        restart_btn.clicked.connect(self.restart_requested.emit)
        right.addWidget(restart_btn)

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.close)
        right.addWidget(close_btn)

        root.addLayout(right, stretch=1)

    # ------------------------------------------------------------------
    # Slots called from CameraWorker via signals
    # ------------------------------------------------------------------
    def on_frame(self, frame: np.ndarray) -> None:
        """Receives a BGR frame and shows it mirrored with the ring overlay."""
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        frame_rgb = np.ascontiguousarray(cv2.flip(frame_rgb, 1))

        h, w, ch = frame_rgb.shape
        img = QImage(frame_rgb.data, w, h, ch * w, QImage.Format.Format_RGB888)
        pix = QPixmap.fromImage(img).scaled(
            self._camera_label.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        if self._snapshot is not None:
            self._draw_ring(pix, self._snapshot)
        self._camera_label.setPixmap(pix)

    def on_snapshot(self, snapshot: SessionSnapshot) -> None:
        self._snapshot = snapshot

        if snapshot.is_done:
            self._instruction.setText("Capture Complete")
        elif snapshot.instruction is not None:
            self._instruction.setText(INSTRUCTION_TEXT[snapshot.instruction])
        else:
            self._instruction.setText("")

        self._error.setText(snapshot.error)
        self._update_thumbnails(snapshot)

    def on_status(self, msg: str) -> None:
        if msg.startswith("[ERROR]"):
            self._log.append(f"<span style='color:#ff6b6b'>{msg}</span>")
        elif msg.startswith("[CAPTURE]") or msg.startswith("[RESULT]"):
            self._log.append(f"<span style='color:#ff8c00'>{msg}</span>")
        else:
            self._log.append(f"<span style='color:#888'>{msg}</span>")
        sb = self._log.verticalScrollBar()
        sb.setValue(sb.maximum())

    # ------------------------------------------------------------------
    def _update_thumbnails(self, snapshot: SessionSnapshot) -> None:
        for label, widget in self._thumb_labels.items():
            artifact = snapshot.thumbnails.get(label)
            if artifact is None:
                widget.clear()
                widget.setText(label.value)
                continue
            if widget.pixmap() is not None and not widget.pixmap().isNull():
                continue
            pix = QPixmap()
            pix.loadFromData(artifact, "JPG")
            widget.setPixmap(pix.transformed(QTransform().scale(-1, 1)).scaled(
                widget.size(),
                Qt.AspectRatioMode.KeepAspectRatioByExpanding,
                Qt.TransformationMode.SmoothTransformation,
            ))

    def _draw_ring(self, pix: QPixmap, snapshot: SessionSnapshot) -> None:
        if snapshot.phase not in (Phase.CALIBRATING, Phase.DIRECTING):
            return

        w, h = pix.width(), pix.height()
        side = int(min(w, h) * 0.8)
        x, y = (w - side) // 2, (h - side) // 2

        p = QPainter(pix)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)

        if snapshot.phase == Phase.CALIBRATING:
            p.setPen(QPen(_DIM, 4))
            p.drawEllipse(x, y, side, side)
            pen = QPen(_ORANGE, 8)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            p.setPen(pen)
            p.drawArc(x, y, side, side, 90 * 16, int(-360 * 16 * snapshot.progress))
            p.end()
            return

        for label, (start, span) in _QT_ARCS.items():
            done = label in snapshot.captured
            active = label == snapshot.active_direction
            pen = QPen(_ORANGE if done or active else _DIM, 10 if done or active else 4)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            p.setPen(pen)
            p.drawArc(x, y, side, side, start * 16, span * 16)
            if active and not done and snapshot.progress > 0:
                p.setPen(QPen(_WHITE, 3))
                p.drawArc(x - 10, y - 10, side + 20, side + 20,
                          start * 16, int(span * 16 * snapshot.progress))
        p.end()
