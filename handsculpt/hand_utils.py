"""
HandSculpt Landmark Processing Utilities.
========================================

Bridges the detector output into the core's data contract.
MediaPipe reports hands as two parallel lists:
1. `multi_hand_landmarks`: 21 NormalizedLandmark objects per hand.
2. `multi_handedness`: a classification whose top label is "Left" or "Right".

This module zips them into immutable `Hand` objects so that nothing past
this point depends on MediaPipe types.
"""

import logging
from typing import Any, List

import numpy as np

from handsculpt.core.types import Hand, Handedness, LandmarkFrame, LandmarkPoint

logger = logging.getLogger(__name__)

def landmarks_to_points(landmark_list: Any) -> List[LandmarkPoint]:
    """
    Converts MediaPipe landmarks, or a raw 21x3 / flat 63-float list, into LandmarkPoints.
    """
    if hasattr(landmark_list, "landmark"):
        landmark_list = landmark_list.landmark

    if len(landmark_list) and hasattr(landmark_list[0], "x"):
        # MediaPipe Object -> Numpy
        coords = np.array([[lm.x, lm.y, lm.z] for lm in landmark_list], dtype=np.float64)
    else:
        # Raw List/CSV Input -> Numpy
        coords = np.asarray(landmark_list, dtype=np.float64).reshape(-1, 3)

    return [LandmarkPoint(float(x), float(y), float(z)) for x, y, z in coords]

def handedness_label(classification: Any) -> str:
    """Top label of a MediaPipe handedness entry (or a plain string)."""
    if isinstance(classification, str):
        return classification
    return classification.classification[0].label

def frame_from_results(results: Any) -> LandmarkFrame:
    """
    Builds the LandmarkFrame for one MediaPipe Hands result.
    Hands with an unreadable label or landmark count are skipped, not fatal.
    """
    multi_lms = getattr(results, "multi_hand_landmarks", None) or []
    multi_side = getattr(results, "multi_handedness", None) or []

    hands = []
    for lms, side in zip(multi_lms, multi_side):
        try:
            hands.append(Hand(landmarks_to_points(lms), Handedness.from_label(handedness_label(side))))
        except ValueError as exc:
            logger.warning("Skipping hand: %s", exc)
    return tuple(hands)
