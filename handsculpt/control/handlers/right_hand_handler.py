"""
HandSculpt Right Hand Logic (Drag & Scale).
==========================================

Key Logic: "Anchor & Delta"
1. When the middle finger is extended over the object, we save the hand's
   world point and the object's position as Anchors.
2. Every following frame moves the object to `anchor + (hand - hand anchor)`.
3. Releasing the finger re-captures the object anchor at its resting place,
   so the next grab continues from there without a jump.

When not dragging, the thumb-index pinch drives the object size through a
clamped Lerp followed by a first-order low-pass filter.
"""
import logging

from handsculpt.control.handlers import HandlerContext
from handsculpt.core.geometry import map_hand_to_world, smooth_towards
from handsculpt.core.gesture_rules import (
    is_middle_finger_extended, is_near_object, pinch_distance, target_scale_for_pinch,
)
from handsculpt.core.types import MoveIntent, ScaleIntent

logger = logging.getLogger(__name__)

class RightHandHandler:
    def handle(self, ctx: HandlerContext):
        state = ctx.state
        middle_tip = ctx.hand.middle_tip
        extended = is_middle_finger_extended(ctx.hand)

        # --- DRAG MACHINE ---
        if not state.drag_mode:
            if extended and is_near_object(middle_tip, ctx.view):
                state.begin_drag(map_hand_to_world(middle_tip), ctx.view.position)
                logger.debug("Drag start at %s", state.drag_anchor_world)

        if state.drag_mode:
            if extended:
                self._follow(ctx)
            else:
                state.end_drag(ctx.view.position)
                logger.debug("Drag end, object rests at %s", state.object_anchor_position)

        # --- SCALE (mutually exclusive with drag) ---
        if not state.drag_mode:
            self._scale(ctx)

    def _follow(self, ctx: HandlerContext):
        state = ctx.state
        delta = map_hand_to_world(ctx.hand.middle_tip) - state.drag_anchor_world
        anchor = state.object_anchor_position
        ctx.emit(MoveIntent(anchor.x + delta.x, anchor.y + delta.y))

    def _scale(self, ctx: HandlerContext):
        state = ctx.state
        state.target_scale = target_scale_for_pinch(pinch_distance(ctx.hand))
        state.current_scale = smooth_towards(
            state.current_scale, state.target_scale, ctx.config["SCALE_SMOOTHING"]
        )
        ctx.emit(ScaleIntent(state.current_scale))
