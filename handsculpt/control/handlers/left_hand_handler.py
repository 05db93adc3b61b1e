"""HandSculpt Left Hand Handler (Color & Rotation Toggle)."""
import logging
from handsculpt.config import HOUSE_COLORS
from handsculpt.control.handlers import HandlerContext
from handsculpt.core.gesture_rules import is_near_object
from handsculpt.core.types import ColorChangeIntent, Status

logger = logging.getLogger(__name__)

def to_millis(now: float) -> int:
    """Clock seconds to whole milliseconds (rounded, not truncated)."""
    return int(round(now * 1000))

class LeftHandHandler:
    def __init__(self, palette=None):
        self.palette = list(palette or HOUSE_COLORS)

    def handle(self, ctx: HandlerContext):
        # Index tip away from the object: no state change, no events
        if not is_near_object(ctx.hand.index_tip, ctx.view):
            return

        now_ms = to_millis(ctx.now)
        self._handle_tap(ctx, now_ms)
        self._handle_color(ctx, now_ms)

    def _handle_tap(self, ctx: HandlerContext, now_ms: int):
        state = ctx.state
        if (now_ms - state.last_tap_time) < ctx.config["DOUBLE_TAP_WINDOW_MS"]:
            state.rotation_enabled = not state.rotation_enabled
            state.set_status(Status.ROTATION_ON if state.rotation_enabled else Status.ROTATION_OFF)
            # Zeroed so a third tap starts a fresh pair
            state.last_tap_time = 0
        else:
            state.last_tap_time = now_ms

    def _handle_color(self, ctx: HandlerContext, now_ms: int):
        state = ctx.state
        if (now_ms - state.last_color_change_time) > ctx.config["COLOR_CHANGE_DELAY_MS"]:
            color = self.palette[int(ctx.rng.integers(len(self.palette)))]
            logger.debug("Color change -> #%06X", color)
            ctx.emit(ColorChangeIntent(color))
            state.last_color_change_time = now_ms
