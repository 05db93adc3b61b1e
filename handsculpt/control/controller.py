"""
HandSculpt Controller.
Acts as the central nervous system: assigns a role to every detected hand,
catches the two-fist reset and feeds the handlers. Emits intents only; the
attached sink is the one place where the object changes.
"""
import logging
import time
from typing import Optional, Tuple

import numpy as np

from handsculpt.config import CONFIG
from handsculpt.core.state_manager import ControlState
from handsculpt.core.gesture_rules import is_fist
from handsculpt.core.types import FrameResult, Hand, Handedness, ObjectView, ResetIntent, Status
from handsculpt.control.handlers import HandlerContext

# HANDLERS
from handsculpt.control.handlers.right_hand_handler import RightHandHandler
from handsculpt.control.handlers.left_hand_handler import LeftHandHandler

logger = logging.getLogger(__name__)

def assign_roles(frame) -> Tuple[Optional[Hand], Optional[Hand]]:
    """
    Returns (right, left). Roles come from the handedness label only.
    The first hand of each label wins; a second hand with the same label is ignored.
    """
    right = left = None
    for hand in frame:
        if hand.handedness is Handedness.RIGHT:
            if right is None:
                right = hand
                continue
        elif left is None:
            left = hand
            continue
        logger.warning("Ignoring duplicate %s hand in frame", hand.handedness.value)
    return right, left

class HandController:
    def __init__(self, sink=None, state: ControlState = None, config=None, rng=None):
        self.config = config or CONFIG
        self.state = state or ControlState()
        self.sink = sink
        self.rng = rng if rng is not None else np.random.default_rng(self.config.get("RANDOM_SEED"))

        # Handlers (right before left keeps the original tie-break order)
        self.right_handler = RightHandHandler()
        self.left_handler = LeftHandHandler()

    def process(self, frame, now: float = None, view: ObjectView = None) -> FrameResult:
        """
        Runs one landmark frame through the router and returns its intents.
        With a sink attached, the view is read from it and the intents are applied to it.
        """
        now = time.time() if now is None else now
        if view is None:
            if self.sink is None:
                raise ValueError("HandController.process needs a view when no sink is attached")
            view = self.sink.view()

        result = self._route(tuple(frame), now, view)
        if result.status is not None:
            self.state.set_status(result.status)
        if self.sink is not None and result.intents:
            self.sink.apply(result.intents)
        return result

    def _route(self, frame, now: float, view: ObjectView) -> FrameResult:
        state = self.state

        # 1. Hand loss abandons any drag
        if not frame:
            state.drag_mode = False
            return FrameResult(status=Status.NO_HANDS)

        right, left = assign_roles(frame)

        # 2. Two fists: reset and skip everything else this frame
        if len(frame) == 2 and right is not None and left is not None:
            if is_fist(left) and is_fist(right):
                state.reset()
                logger.debug("Two-fist reset")
                return FrameResult(intents=[ResetIntent()], status=Status.RESET, reset=True)

        # 3. Dispatch
        intents = []
        if right is not None:
            ctx = HandlerContext(right, view, state, now, self.config, self.rng)
            self.right_handler.handle(ctx)
            intents.extend(ctx.intents)
            view = ctx.view
        if left is not None:
            ctx = HandlerContext(left, view, state, now, self.config, self.rng)
            self.left_handler.handle(ctx)
            intents.extend(ctx.intents)

        return FrameResult(intents=intents)
