"""
HandSculpt Geometry.
Pure distance / interpolation math shared by the rules and handlers.
"""
import math
from handsculpt.config import CONFIG
from handsculpt.core.types import LandmarkPoint, Point2D

def distance(a, b) -> float:
    """Euclidean distance between two 3D points (anything with x, y, z)."""
    return math.sqrt((a.x - b.x)**2 + (a.y - b.y)**2 + (a.z - b.z)**2)

def map_hand_to_world(p: LandmarkPoint, span: float = None) -> Point2D:
    """
    Maps a normalized landmark into the object's world plane.
    The image centre becomes the origin and Y is flipped (image Y grows down).
    Depth is dropped: all interaction is planar.
    """
    span = CONFIG["WORLD_SPAN"] if span is None else span
    return Point2D((p.x - 0.5) * span, (0.5 - p.y) * span)

def clamped_ramp(value: float, in_lo: float, in_hi: float, out_lo: float, out_hi: float) -> float:
    """Linear interpolation (Lerp) of `value` from [in_lo, in_hi] to [out_lo, out_hi], clamped at both ends."""
    if value < in_lo:
        return out_lo
    if value > in_hi:
        return out_hi
    return out_lo + (value - in_lo) * (out_hi - out_lo) / (in_hi - in_lo)

def smooth_towards(current: float, target: float, alpha: float) -> float:
    """One step of exponential smoothing. Never overshoots for 0 < alpha <= 1."""
    return current + (target - current) * alpha
