"""Per-boid view of the flock's state, as handed to the renderer."""

import numpy as np
from dataclasses import dataclass, field

from .vector import add, look_at_rotation


@dataclass
class Boid:
    """
    A single boid (bird-oid object) copied out of the flock arrays.

    Attributes:
        position: 3D position vector
        velocity: 3D velocity vector (heading x speed, per frame)
        acceleration: 3D acceleration accumulator, zero between ticks
        phase: Wing-flap phase offset in [0, 2*pi)
        color_variant: Palette index, 0 (amber) or 1 (dark orange)
        wing_angle: Latest wing-flap angle in radians
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(3))
    phase: float = 0.0
    color_variant: int = 0
    wing_angle: float = 0.0

    @property
    def speed(self) -> float:
        return float(np.linalg.norm(self.velocity))

    @property
    def look_target(self) -> np.ndarray:
        """Point the bird faces: one frame ahead along its velocity."""
        return add(self.position, self.velocity)

    @property
    def rotation(self) -> np.ndarray:
        """3x3 orientation with local +z facing the direction of travel."""
        return look_at_rotation(self.position, self.look_target)

    @property
    def left_wing_angle(self) -> float:
        return -self.wing_angle

    @property
    def right_wing_angle(self) -> float:
        return self.wing_angle
