"""
Handler Context Definition.
Defines the Data Transfer Object (DTO) for the Control Layer.
"""

from handsculpt.core.types import Hand, ObjectView

class HandlerContext:
    """
    A unified context object containing all data required for a Handler to make decisions.
    Wraps the Hand (Typed), the object view, shared ControlState, the frame clock,
    configuration and the list of intents emitted so far this frame.
    """
    def __init__(self, hand: Hand, view: ObjectView, state, now: float, config, rng):
        # 1. The hand this handler owns for the frame
        self.hand = hand

        # 2. Object as it will look after earlier intents of this frame
        self.view = view

        # 3. Global Resources
        self.state = state     # Shared ControlState
        self.now = now         # Seconds
        self.config = config   # Master Config Dict
        self.rng = rng         # numpy Generator (palette picks)

        # 4. Output
        self.intents = []

    def emit(self, intent):
        """Queues an intent for the sink and folds it into the view seen by later handlers."""
        self.intents.append(intent)
        self.view = self.view.fold(intent)
