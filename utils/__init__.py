"""
Shared helpers for the capture pipeline.
"""

from .constants import *
from .geometry import clamp, head_orientation

__all__ = [
    'clamp',
    'head_orientation',
    'SAMPLE_INTERVAL',
    'GATE_DWELL',
    'STRAIGHT_HOLD',
    'STRAIGHT_GIVEUP',
    'CALIBRATION_TIMEOUT',
    'DIRECTION_HOLD',
    'CAPTURE_SETTLE',
    'RESULT_DELAY',
    'JPEG_QUALITY',
    'ACQUISITION_TIMEOUT',
]
