"""Boids flocking simulation core."""

from .boid import Boid
from .flock import Flock
from .params import FlockParams, UPDATE_MODES
from .pointer import PointerTarget
from .random_source import NumpyRandomSource, RandomSource, SequenceRandomSource

__all__ = [
    "Boid",
    "Flock",
    "FlockParams",
    "UPDATE_MODES",
    "PointerTarget",
    "NumpyRandomSource",
    "RandomSource",
    "SequenceRandomSource",
]
