"""
HandSculpt Core Interfaces.
Defines the abstract contract between the controllers and the scene.
"""

from abc import ABC, abstractmethod

class ITransformSink(ABC):
    """
    Abstract Protocol for the single mutation point of the controlled object.
    """

    # --- FRAME INPUT ---
    @abstractmethod
    def apply(self, intents) -> None: pass
    @abstractmethod
    def view(self): pass

    # --- TRANSFORM PRIMITIVES ---
    @abstractmethod
    def move_to(self, x: float, y: float) -> None: pass
    @abstractmethod
    def set_scale(self, scale: float) -> None: pass
    @abstractmethod
    def change_color(self, color: int) -> None: pass
    @abstractmethod
    def reset(self) -> None: pass

    # --- FEEDBACK ---
    @abstractmethod
    def spawn_particles(self, position, color: int) -> None: pass
    @abstractmethod
    def tick(self, state, dt: float, elapsed: float) -> None: pass
