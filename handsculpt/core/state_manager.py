"""
HandSculpt State Management.
One explicit ControlState per session, passed into every frame update.
"""
import logging
from handsculpt.core.types import ORIGIN, Point2D, Point3D

logger = logging.getLogger(__name__)

class ControlState:
    def __init__(self):
        # --- DRAG MACHINE ---
        self.drag_mode = False
        self.drag_anchor_world = Point2D(0.0, 0.0)
        self.object_anchor_position = ORIGIN

        # --- SCALE FILTER ---
        self.current_scale = 1.0
        self.target_scale = 1.0

        # --- LEFT HAND TOGGLES & TIMERS (integer ms, so window edges are exact) ---
        self.rotation_enabled = True
        self.last_tap_time = 0
        self.last_color_change_time = 0

        # --- STATUS CHANNEL ---
        self.status = ""

    def set_status(self, message: str):
        """Updates the human-readable status line. Logs only on change."""
        if message != self.status:
            logger.info("Status: %s", message)
        self.status = message

    def begin_drag(self, hand_world: Point2D, object_position: Point3D):
        self.drag_mode = True
        self.drag_anchor_world = hand_world
        self.object_anchor_position = object_position

    def end_drag(self, object_position: Point3D = None):
        """Leaves drag mode. The object anchor is re-captured when a resting position is given."""
        self.drag_mode = False
        if object_position is not None:
            self.object_anchor_position = object_position

    def reset(self):
        """Two-fist reset: scale, anchors and rotation back to their start values."""
        self.drag_mode = False
        self.drag_anchor_world = Point2D(0.0, 0.0)
        self.object_anchor_position = ORIGIN
        self.current_scale = 1.0
        self.target_scale = 1.0
        self.rotation_enabled = True
