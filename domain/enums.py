from enum import Enum


class Phase(str, Enum):
    """Lifecycle of one guided capture session."""
    GATE        = "gate"
    CALIBRATING = "calibrating"
    DIRECTING   = "directing"
    DONE        = "done"
    FAILED      = "failed"


class Direction(str, Enum):
    """Pose labels; one reference image is captured per label."""
    STRAIGHT = "straight"
    RIGHT    = "right"
    LEFT     = "left"
    UP       = "up"
    DOWN     = "down"


class Instruction(str, Enum):
    """What the user should do next, as shown by the presentation layer."""
    CENTER   = "center"
    STRAIGHT = "straight"
    RIGHT    = "right"
    LEFT     = "left"
    UP       = "up"
    DOWN     = "down"


class GateEvent(str, Enum):
    ADVANCE = "ADVANCE"


class RecordResult(str, Enum):
    RECORDED        = "RECORDED"
    ALREADY_PRESENT = "ALREADY_PRESENT"


class SessionEventKind(str, Enum):
    """Events emitted by the capture manager."""
    PHASE_CHANGED = "PHASE_CHANGED"
    CAPTURED      = "CAPTURED"
    COMPLETED     = "COMPLETED"
    RESULT_READY  = "RESULT_READY"
    FAILED        = "FAILED"


# Emission order of the finished set, independent of capture order.
CAPTURE_ORDER = (
    Direction.STRAIGHT,
    Direction.RIGHT,
    Direction.LEFT,
    Direction.UP,
    Direction.DOWN,
)

# Order in which the remaining directions are asked for.
DISPLAY_ORDER = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.UP,
    Direction.DOWN,
)
