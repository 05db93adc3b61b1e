"""
HandSculpt Gesture Rules (The Referee).
======================================

Pure geometric classifiers over a single hand's 21 landmarks.
No model, no history: every rule is a strict Euclidean distance check
against thresholds from `CONFIG`, so the result depends only on the
current frame.

Distances are measured in normalized image units, except for
`is_near_object`, which works in world units after `map_hand_to_world`.
"""
import math

from handsculpt.config import CONFIG
from handsculpt.core.geometry import distance, map_hand_to_world, clamped_ramp
from handsculpt.core.types import Hand, LandmarkIndex, LandmarkPoint, ObjectView

FINGER_TIPS = (
    LandmarkIndex.INDEX_TIP,
    LandmarkIndex.MIDDLE_TIP,
    LandmarkIndex.RING_TIP,
    LandmarkIndex.PINKY_TIP,
)

def is_fist(hand: Hand) -> bool:
    """
    True when every fingertip is curled in close to the wrist.

    The thumb is checked on its own: it can stay extended while the other
    four fingers curl, and that pose must not count as a fist.
    """
    threshold = CONFIG["FIST_THRESHOLD"]
    wrist = hand.wrist
    max_reach = max(distance(wrist, hand[tip]) for tip in FINGER_TIPS)
    return max_reach < threshold and distance(wrist, hand.thumb_tip) < threshold

def pinch_distance(hand: Hand) -> float:
    """Thumb tip (4) to index tip (8)."""
    return distance(hand.thumb_tip, hand.index_tip)

def is_middle_finger_extended(hand: Hand) -> bool:
    """Middle tip (12) reaches far enough from the wrist to count as pointing."""
    return distance(hand.wrist, hand.middle_tip) > CONFIG["MIDDLE_EXTENDED_THRESHOLD"]

def is_near_object(point: LandmarkPoint, obj: ObjectView) -> bool:
    """
    Hit test of a landmark against the object, in world units.
    The landmark lies on the z=0 plane; the radius gets a generous margin.
    """
    world = map_hand_to_world(point)
    pos = obj.position
    dist = math.sqrt((world.x - pos.x)**2 + (world.y - pos.y)**2 + pos.z**2)
    return dist < obj.effective_radius * CONFIG["NEAR_MARGIN"]

def target_scale_for_pinch(pinch: float) -> float:
    """Maps a pinch distance onto the object scale range (clamped Lerp)."""
    return clamped_ramp(
        pinch,
        CONFIG["PINCH_MIN"], CONFIG["PINCH_MAX"],
        CONFIG["SCALE_MIN"], CONFIG["SCALE_MAX"],
    )
