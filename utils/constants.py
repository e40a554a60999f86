# =========================
# SAMPLING
# =========================
SAMPLE_INTERVAL = 0.110        # 110ms between pose samples
FPS_LIMIT = 30                 # redraw cadence

# =========================
# GATE (face must stay in frame before calibrating)
# =========================
GATE_DWELL = 2.0               # 2000ms continuous presence

# =========================
# STRAIGHT CALIBRATION
# =========================
STRAIGHT_HOLD = 0.150          # 150ms straight-enough hold
STRAIGHT_GIVEUP = 1.0          # after 1s take the best sample seen
CALIBRATION_TIMEOUT = 10.0     # no face at all for this long → fail

# Straight-enough band; neutral pitch is not zero for this geometry
STRAIGHT_YAW_MAX = 0.02
STRAIGHT_PITCH_MIN = -0.015
STRAIGHT_PITCH_MAX = 0.055

# Scoring spans used to rank candidate baselines
SCORE_YAW_SPAN = 0.04
SCORE_PITCH_SPAN = 0.08

# =========================
# DIRECTIONS (relative to baseline)
# =========================
YAW_NEED = 0.012
PITCH_UP = 0.015
PITCH_DOWN = 0.007
H_TOL = 0.03                   # max vertical drift for a left/right

DIRECTION_HOLD = 0.420         # 420ms debounce per direction

# =========================
# CAPTURE
# =========================
CAPTURE_SETTLE = 0.2           # pause after each capture
RESULT_DELAY = 2.0             # "capture complete" display before handing off
JPEG_QUALITY = 90

# =========================
# ACQUISITION
# =========================
ACQUISITION_TIMEOUT = 5.0      # no usable frame for this long → fatal
