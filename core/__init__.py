from core.cooldown_manager import CooldownManager
from core.sampler import PoseSampler
from core.capture_manager import GuidedCaptureManager

__all__ = [
    "CooldownManager",
    "PoseSampler",
    "GuidedCaptureManager",
]
