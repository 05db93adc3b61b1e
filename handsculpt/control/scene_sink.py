"""
HandSculpt Scene Sink (The Actuator).
====================================

This module implements the Command Pattern on the output side: controllers
describe *what* should happen to the object as intents, and the sink is the
only component that actually mutates it.

Features:
- **Single Mutation Point:** Intents are applied in emission order, once per frame.
- **Particle Feedback:** A vectorized (NumPy) particle burst on every color change.
- **Idle Animation:** Slow spin and a "breathing" Y-scale while nothing is grabbed.
"""

import logging
import math
from dataclasses import dataclass
from typing import List

import numpy as np

from handsculpt.config import CONFIG
from handsculpt.core.interfaces import ITransformSink
from handsculpt.core.types import (
    ORIGIN, ColorChangeIntent, MoveIntent, ObjectView, Point3D, ResetIntent, ScaleIntent,
)

logger = logging.getLogger(__name__)

@dataclass
class ControlledObject:
    position: Point3D = ORIGIN
    scale: float = 1.0
    scale_y: float = 1.0       # Render value, modulated by the breathing effect
    rotation_y: float = 0.0
    color: int = 0xA52A2A
    base_radius: float = 2.0

    @property
    def effective_radius(self) -> float:
        return self.scale * self.base_radius

    @property
    def world_position(self) -> Point3D:
        # No parent transform: local and world coincide
        return self.position

@dataclass
class Particle:
    position: tuple
    velocity: tuple
    remaining_lifetime: float
    color: int

    @property
    def alpha(self) -> float:
        return min(max(self.remaining_lifetime, 0.0), 1.0)

class ParticleSystem:
    """
    Struct-of-arrays particle store.
    Every live particle is one row; ticking is a handful of NumPy operations.
    """
    def __init__(self, config=None):
        self.config = config or CONFIG
        self.positions = np.zeros((0, 3), dtype=np.float64)
        self.velocities = np.zeros((0, 3), dtype=np.float64)
        self.lifetimes = np.zeros(0, dtype=np.float64)
        self.colors = np.zeros(0, dtype=np.int64)

    def __len__(self):
        return len(self.lifetimes)

    def add(self, positions, velocities, lifetimes, color: int):
        positions = np.atleast_2d(np.asarray(positions, dtype=np.float64))
        velocities = np.atleast_2d(np.asarray(velocities, dtype=np.float64))
        lifetimes = np.atleast_1d(np.asarray(lifetimes, dtype=np.float64))
        self.positions = np.vstack([self.positions, positions])
        self.velocities = np.vstack([self.velocities, velocities])
        self.lifetimes = np.concatenate([self.lifetimes, lifetimes])
        self.colors = np.concatenate([self.colors, np.full(len(lifetimes), color, dtype=np.int64)])

    def spawn(self, position: Point3D, color: int, rng: np.random.Generator):
        """Burst of PARTICLE_COUNT particles from one point."""
        n = self.config["PARTICLE_COUNT"]
        origin = np.tile([position.x, position.y, position.z], (n, 1))
        velocities = (rng.random((n, 3)) - 0.5) * self.config["PARTICLE_SPEED"]
        lifetimes = self.config["PARTICLE_LIFETIME_MIN"] + rng.random(n) * self.config["PARTICLE_LIFETIME_SPAN"]
        self.add(origin, velocities, lifetimes, color)

    def tick(self, dt: float):
        if not len(self):
            return
        # One tick is one rendered frame: motion is per call, not per second
        self.positions += self.velocities
        decay = self.config["FRAME_STEP"] if self.config["PARTICLE_FIXED_STEP"] else dt
        self.lifetimes -= decay

        alive = self.lifetimes > 0
        if not alive.all():
            self.positions = self.positions[alive]
            self.velocities = self.velocities[alive]
            self.lifetimes = self.lifetimes[alive]
            self.colors = self.colors[alive]

    @property
    def alphas(self) -> np.ndarray:
        return np.clip(self.lifetimes, 0.0, 1.0)

    @property
    def particles(self) -> List[Particle]:
        return [
            Particle(tuple(p), tuple(v), float(life), int(c))
            for p, v, life, c in zip(self.positions, self.velocities, self.lifetimes, self.colors)
        ]

class SceneSink(ITransformSink):
    """
    Owns the controlled object and its particles.
    """
    def __init__(self, config=None, rng=None, obj: ControlledObject = None):
        self.config = config or CONFIG
        self.rng = rng if rng is not None else np.random.default_rng(self.config.get("RANDOM_SEED"))
        self.object = obj or ControlledObject(base_radius=self.config["OBJECT_BASE_RADIUS"])
        self.particles = ParticleSystem(self.config)

    # --- FRAME INPUT ---
    def view(self) -> ObjectView:
        return ObjectView(self.object.position, self.object.scale, self.object.base_radius)

    def apply(self, intents) -> None:
        for intent in intents:
            if isinstance(intent, MoveIntent):
                self.move_to(intent.x, intent.y)
            elif isinstance(intent, ScaleIntent):
                self.set_scale(intent.scale)
            elif isinstance(intent, ColorChangeIntent):
                self.change_color(intent.color)
            elif isinstance(intent, ResetIntent):
                self.reset()
            else:
                raise TypeError(f"Unknown intent: {intent!r}")

    # --- TRANSFORM PRIMITIVES ---
    def move_to(self, x: float, y: float) -> None:
        """Drag only ever moves the object in its X/Y plane."""
        self.object.position = Point3D(x, y, self.object.position.z)

    def set_scale(self, scale: float) -> None:
        self.object.scale = scale
        self.object.scale_y = scale

    def change_color(self, color: int) -> None:
        self.object.color = color
        self.spawn_particles(self.object.world_position, color)

    def reset(self) -> None:
        self.object.position = ORIGIN
        self.object.scale = 1.0
        self.object.scale_y = 1.0
        self.object.rotation_y = 0.0
        logger.debug("Object transform reset")

    # --- FEEDBACK ---
    def spawn_particles(self, position, color: int) -> None:
        self.particles.spawn(position, color, self.rng)

    def tick(self, state, dt: float, elapsed: float) -> None:
        """
        Render-loop step, independent of gesture frames.
        Spins and breathes the object while it is free, then ages the particles.
        """
        if not state.drag_mode and state.rotation_enabled:
            self.object.rotation_y += self.config["IDLE_ROTATION_STEP"]
            breathe = 1.0 + self.config["BREATHE_AMPLITUDE"] * math.sin(elapsed)
            self.object.scale_y = state.current_scale * breathe
        self.particles.tick(dt)
