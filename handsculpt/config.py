"""
HandSculpt Configuration Management.
====================================

This module defines every tunable constant of the HandSculpt application.
The parameters are organized into an architectural "Layer Cake" model,
from raw detector input up to the visual feedback layer.

! WARNING !
The scale mapping, smoothing and timing layers define the "feel" of the
controls. Changing them changes behaviour immediately.
"""

import logging
import logging.handlers
import os
from pathlib import Path

# --- SYSTEM PATHS ---
FILE_PATH = Path(__file__).resolve()
PROJECT_ROOT = FILE_PATH.parent.parent

PATHS = {
    "LOG_DIR": PROJECT_ROOT / "logs",
    "LOG_FILE": PROJECT_ROOT / "logs" / "handsculpt.log",
}

# --- OBJECT PALETTE ---
# Fixed set of material colors (0xRRGGBB) picked at random on a color change.
HOUSE_COLORS = [
    0x8B4513,
    0xD2691E,
    0xA52A2A,
    0xCD5C5C,
    0xBC8F8F,
    0xF4A460,
    0xDAA520,
    0xB8860B,
    0x9370DB,
    0x3CB371,
    0x4682B4,
    0x6A5ACD,
]

# --- MASTER CONFIGURATION ---
CONFIG = {
    # =========================================================
    # LAYER 1: INPUT SIGNAL (The Detector)
    # =========================================================
    "MAX_NUM_HANDS": 2,
    "MODEL_COMPLEXITY": 1,          # 0=Fast, 1=Balanced
    "MIN_DETECTION_CONFIDENCE": 0.5,
    "MIN_TRACKING_CONFIDENCE": 0.5,

    # =========================================================
    # LAYER 2: WORLD MAPPING (Camera -> Scene)
    # =========================================================
    "WORLD_SPAN": 10.0,             # Normalized frame width in world units
    "OBJECT_BASE_RADIUS": 2.0,      # Radius of the object at scale 1.0
    "NEAR_MARGIN": 1.5,             # Hit-test slack to tolerate tracking jitter

    # =========================================================
    # LAYER 3: GESTURE RULES (The Referee)
    # =========================================================
    "FIST_THRESHOLD": 0.1,          # Every tip (thumb included) within this of wrist
    "MIDDLE_EXTENDED_THRESHOLD": 0.15,  # Wrist -> middle tip distance

    # =========================================================
    # LAYER 4: SCALE PHYSICS (Pinch -> Size)
    # =========================================================
    "PINCH_MIN": 0.05,              # At or below: smallest size
    "PINCH_MAX": 0.25,              # At or above: largest size
    "SCALE_MIN": 0.5,
    "SCALE_MAX": 1.5,
    "SCALE_SMOOTHING": 0.15,        # Low-pass factor per frame

    # =========================================================
    # LAYER 5: TIMING (Debounce windows, integer milliseconds)
    # =========================================================
    "DOUBLE_TAP_WINDOW_MS": 300,    # Two taps closer than this toggle rotation
    "COLOR_CHANGE_DELAY_MS": 500,   # Minimum gap between color changes

    # =========================================================
    # LAYER 6: FEEDBACK (Particles & Idle Animation)
    # =========================================================
    "PARTICLE_COUNT": 20,
    "PARTICLE_SPEED": 0.1,          # Velocity span per axis, centred on zero
    "PARTICLE_LIFETIME_MIN": 1.0,
    "PARTICLE_LIFETIME_SPAN": 1.0,  # Lifetime in [MIN, MIN + SPAN)
    "PARTICLE_FIXED_STEP": True,    # Decay by 1/60 per tick instead of dt
    "FRAME_STEP": 1.0 / 60.0,
    "IDLE_ROTATION_STEP": 0.005,    # Radians per frame
    "BREATHE_AMPLITUDE": 0.05,
    "RANDOM_SEED": None,            # Set for reproducible palette/particles

    # =========================================================
    # WORKSPACE & DISPLAY
    # =========================================================
    "CAMERA_INDEX": 0,
    "CAMERA_WIDTH": 1280,
    "CAMERA_HEIGHT": 720,
    "TARGET_FPS": 30,
    "MIRROR_VIEW": True,            # Flip frame horizontally before detection
    "LOG_LEVEL": "INFO",
}


def init_environment():
    """
    Creates necessary directories safely at runtime.
    """
    os.makedirs(PATHS["LOG_DIR"], exist_ok=True)


def setup_logging(level=None, log_file=None):
    """Configures the root logger: compact console output plus an optional rotating file."""
    level = level or CONFIG["LOG_LEVEL"]
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter("%(asctime)s  %(levelname)-5s  %(message)s", datefmt="%H:%M:%S"))
    root.addHandler(console)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)-7s] %(name)-32s | %(message)s", datefmt="%H:%M:%S"))
        root.addHandler(file_handler)

    return root
