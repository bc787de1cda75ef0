"""
config.py — Visualizer Defaults
================================
Module-level constants shared by the web layer, the generator and the
pacing helpers.  Values mirror the ranges exposed by the UI sliders.
"""

# ---------------------------------------------------------------------------
# Array generation
# ---------------------------------------------------------------------------
DEFAULT_ARRAY_SIZE = 50
MIN_ARRAY_SIZE     = 10
MAX_ARRAY_SIZE     = 200

VALUE_MIN = 5
VALUE_MAX = 500

# ---------------------------------------------------------------------------
# Speed slider (higher speed => shorter delay between frames)
# ---------------------------------------------------------------------------
SPEED_MAX     = 1000
SPEED_STEP    = 200
DEFAULT_SPEED = 800

DEFAULT_ALGORITHM = "bubble"
