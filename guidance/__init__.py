"""
Per-phase guidance steps of a capture session.
"""

from .gate import GateController, GateState
from .calibrator import StraightCalibrator, CalibrationState, straight_score, is_straight_enough
from .classifier import classify_direction, DirectionThresholds
from .hold import HoldToCapture, HoldState
from .ledger import CaptureLedger

__all__ = [
    'GateController',
    'GateState',
    'StraightCalibrator',
    'CalibrationState',
    'straight_score',
    'is_straight_enough',
    'classify_direction',
    'DirectionThresholds',
    'HoldToCapture',
    'HoldState',
    'CaptureLedger',
]
