"""
HandSculpt HUD.
Draws the skeletons, a top-down preview of the controlled object and its particles.
Read-only: nothing here feeds back into the control state.
"""

import cv2
import numpy as np

from handsculpt.config import CONFIG
from handsculpt.core.types import Handedness

HAND_CONNECTIONS = [
    (0, 1), (1, 2), (2, 3), (3, 4),
    (0, 5), (5, 6), (6, 7), (7, 8),
    (0, 9), (9, 10), (10, 11), (11, 12),
    (0, 13), (13, 14), (14, 15), (15, 16),
    (0, 17), (17, 18), (18, 19), (19, 20),
    (5, 9), (9, 13), (13, 17),
]

def rgb_to_bgr(color: int):
    return (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF)

class HUD:
    def __init__(self, config=None):
        self.config = config or CONFIG

        # --- THEME COLORS (BGR) ---
        self.C_LEFT   = (255, 0, 255)    # Left hand skeleton
        self.C_RIGHT  = (255, 255, 0)    # Right hand skeleton
        self.C_TIP    = (0, 0, 255)      # Thumb & index tips
        self.C_ORANGE = (0, 165, 255)    # Dragging / Active
        self.C_GREEN  = (0, 255, 0)      # Idle / Rotating
        self.C_DARK   = (20, 20, 20)     # Backgrounds

    def _draw_glass_panel(self, img, x, y, w, h, color, alpha=0.6):
        """Draws a semi-transparent 'Glass' background."""
        # Safety check for image bounds
        if y+h > img.shape[0] or x+w > img.shape[1] or x < 0 or y < 0: return

        sub_img = img[y:y+h, x:x+w]
        white_rect = np.full(sub_img.shape, color, dtype=np.uint8)
        res = cv2.addWeighted(sub_img, 1 - alpha, white_rect, alpha, 1.0)
        img[y:y+h, x:x+w] = res
        cv2.rectangle(img, (x, y), (x+w, y+h), color, 1)

    def _to_pixels(self, wx, wy, w, h):
        span = self.config["WORLD_SPAN"]
        return int((wx / span + 0.5) * w), int((0.5 - wy / span) * h)

    def render(self, frame, hands, sink, state):
        h, w, _ = frame.shape

        # 1. SKELETONS
        for hand in hands:
            self._draw_hand(frame, hand)

        # 2. OBJECT & PARTICLES
        self._draw_object(frame, sink.object, state)
        self._draw_particles(frame, sink.particles)

        # 3. STATUS BAR
        ui_color = self.C_ORANGE if state.drag_mode else self.C_GREEN
        self._draw_glass_panel(frame, 20, 20, 420, 80, self.C_DARK, 0.4)
        cv2.putText(frame, state.status or "-", (35, 50),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, ui_color, 2)
        detail = (f"scale {state.current_scale:.2f} -> {state.target_scale:.2f}   "
                  f"rot {'ON' if state.rotation_enabled else 'OFF'}   "
                  f"{'DRAG' if state.drag_mode else ''}")
        cv2.putText(frame, detail, (35, 82),
                    cv2.FONT_HERSHEY_PLAIN, 1.1, ui_color, 1)

    def _draw_hand(self, frame, hand):
        h, w, _ = frame.shape
        size = min(w, h)
        line_w = int(max(2, min(5, size / 300)))
        point_r = max(2, size // 250)
        color = self.C_LEFT if hand.handedness is Handedness.LEFT else self.C_RIGHT

        pts = [(int(p.x * w), int(p.y * h)) for p in hand.landmarks]
        for i, j in HAND_CONNECTIONS:
            cv2.line(frame, pts[i], pts[j], color, line_w)
        for idx, pt in enumerate(pts):
            if idx in (4, 8):
                cv2.circle(frame, pt, int(point_r * 1.2), self.C_TIP, -1)
            else:
                cv2.circle(frame, pt, point_r, color, -1)

    def _draw_object(self, frame, obj, state):
        h, w, _ = frame.shape
        center = self._to_pixels(obj.position.x, obj.position.y, w, h)
        radius = max(1, int(obj.effective_radius / self.config["WORLD_SPAN"] * w))
        # Breathing shows up as a vertical stretch of the outline
        ratio = obj.scale_y / obj.scale if obj.scale else 1.0
        axes = (radius, max(1, int(radius * ratio)))

        overlay = frame.copy()
        cv2.ellipse(overlay, center, axes, 0, 0, 360, rgb_to_bgr(obj.color), -1)
        cv2.addWeighted(overlay, 0.8, frame, 0.2, 0, dst=frame)
        cv2.ellipse(frame, center, axes, 0, 0, 360, (255, 255, 255), 1)

        # Spoke for the Y rotation
        tip = (int(center[0] + radius * np.cos(obj.rotation_y)),
               int(center[1] + axes[1] * np.sin(obj.rotation_y) * 0.3))
        cv2.line(frame, center, tip, (255, 255, 255), 1)

        if state.drag_mode:
            cv2.circle(frame, center, radius + 6, self.C_ORANGE, 2)

    def _draw_particles(self, frame, particles):
        if not len(particles):
            return
        h, w, _ = frame.shape
        # One blend per alpha bucket (tenths) keeps each particle's own fade
        buckets = np.round(particles.alphas, 1)
        for alpha in np.unique(buckets):
            if alpha <= 0:
                continue
            overlay = frame.copy()
            mask = buckets == alpha
            for (px, py, _pz), color in zip(particles.positions[mask], particles.colors[mask]):
                cv2.circle(overlay, self._to_pixels(px, py, w, h), 4, rgb_to_bgr(int(color)), -1)
            cv2.addWeighted(overlay, float(alpha), frame, 1 - float(alpha), 0, dst=frame)

    def draw_fps(self, frame, fps):
        cv2.putText(frame, f"{int(fps)} FPS", (frame.shape[1]-100, 40),
                    cv2.FONT_HERSHEY_PLAIN, 1, self.C_GREEN, 1)
