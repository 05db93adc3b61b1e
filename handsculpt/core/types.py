"""
HandSculpt Types.
Central definition of Data Contracts to prevent circular imports.
"""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

# --- GEOMETRY TYPES ---
@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def __sub__(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x - other.x, self.y - other.y)

@dataclass(frozen=True)
class Point3D:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

ORIGIN = Point3D(0.0, 0.0, 0.0)

# --- LANDMARK TYPES ---
@dataclass(frozen=True)
class LandmarkPoint:
    """Normalized image-space point: x, y in [0, 1], z relative depth."""
    x: float
    y: float
    z: float = 0.0

class LandmarkIndex(IntEnum):
    WRIST = 0
    THUMB_TIP = 4
    INDEX_TIP = 8
    MIDDLE_TIP = 12
    RING_TIP = 16
    PINKY_TIP = 20

NUM_LANDMARKS = 21

class Handedness(Enum):
    LEFT = "Left"
    RIGHT = "Right"

    @classmethod
    def from_label(cls, raw_label: str) -> "Handedness":
        if not isinstance(raw_label, str):
            raise ValueError(f"Handedness label must be a string, got {raw_label!r}")
        clean = raw_label.strip().lower()
        for member in cls:
            if member.value.lower() == clean:
                return member
        raise ValueError(f"Unknown handedness label: {raw_label!r}")

@dataclass(frozen=True)
class Hand:
    landmarks: Tuple[LandmarkPoint, ...]
    handedness: Handedness

    def __post_init__(self):
        if len(self.landmarks) != NUM_LANDMARKS:
            raise ValueError(f"A hand needs {NUM_LANDMARKS} landmarks, got {len(self.landmarks)}")
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "landmarks", tuple(self.landmarks))

    def __getitem__(self, index: int) -> LandmarkPoint:
        return self.landmarks[index]

    @property
    def wrist(self) -> LandmarkPoint: return self.landmarks[LandmarkIndex.WRIST]
    @property
    def thumb_tip(self) -> LandmarkPoint: return self.landmarks[LandmarkIndex.THUMB_TIP]
    @property
    def index_tip(self) -> LandmarkPoint: return self.landmarks[LandmarkIndex.INDEX_TIP]
    @property
    def middle_tip(self) -> LandmarkPoint: return self.landmarks[LandmarkIndex.MIDDLE_TIP]

# Zero, one or two hands for the current image
LandmarkFrame = Tuple[Hand, ...]

# --- INTENT TYPES ---
# Controllers never touch the object. They emit intents; the SceneSink applies them.
@dataclass(frozen=True)
class MoveIntent:
    x: float
    y: float

@dataclass(frozen=True)
class ScaleIntent:
    scale: float

@dataclass(frozen=True)
class ColorChangeIntent:
    color: int

@dataclass(frozen=True)
class ResetIntent:
    pass

Intent = Union[MoveIntent, ScaleIntent, ColorChangeIntent, ResetIntent]

@dataclass(frozen=True)
class ObjectView:
    """Read-only snapshot of the controlled object as the controllers see it."""
    position: Point3D
    scale: float
    base_radius: float

    @property
    def effective_radius(self) -> float:
        return self.scale * self.base_radius

    def fold(self, intent) -> "ObjectView":
        """Returns the view as it will look once `intent` has been applied."""
        if isinstance(intent, MoveIntent):
            return ObjectView(Point3D(intent.x, intent.y, self.position.z), self.scale, self.base_radius)
        if isinstance(intent, ScaleIntent):
            return ObjectView(self.position, intent.scale, self.base_radius)
        if isinstance(intent, ResetIntent):
            return ObjectView(ORIGIN, 1.0, self.base_radius)
        return self

@dataclass
class FrameResult:
    intents: list = field(default_factory=list)
    status: Optional[str] = None
    reset: bool = False

# --- STATUS MESSAGES ---
class Status:
    LOADING = "Loading MediaPipe..."
    INITIALIZING = "Initializing MediaPipe Hands..."
    READY = "Hand tracking ready!"
    NO_HANDS = "No hands detected"
    RESET = "Reset performed!"
    ROTATION_ON = "Rotation enabled"
    ROTATION_OFF = "Rotation disabled"

    @staticmethod
    def error(message: str) -> str:
        return f"Error: {message}"
