"""Immutable simulation parameters built from `config.flock`."""

from dataclasses import dataclass, fields, replace
from typing import Tuple

from config import flock as config


UPDATE_MODES = ("sequential", "synchronous")


@dataclass(frozen=True)
class FlockParams:
    """
    Flocking, repulsion, boundary and animation constants.

    Radii used for neighbour tests are stored squared so the hot path never
    takes a square root. Speeds are in world units per frame.
    """
    count: int = config.FLOCK["count"]
    update_mode: str = config.FLOCK["update_mode"]

    perception_radius_sq: float = config.FLOCK["perception_radius_sq"]
    close_radius_sq: float = config.FLOCK["close_radius_sq"]
    separation_epsilon: float = config.FLOCK["separation_epsilon"]
    steer_gain: float = config.FLOCK["steer_gain"]
    separation_scale: float = config.FLOCK["separation_scale"]
    separation_weight: float = config.FLOCK["separation_weight"]
    alignment_weight: float = config.FLOCK["alignment_weight"]
    cohesion_weight: float = config.FLOCK["cohesion_weight"]

    initial_speed: float = config.FLOCK["initial_speed"]
    min_speed: float = config.FLOCK["min_speed"]
    max_speed: float = config.FLOCK["max_speed"]
    spawn_extents: Tuple[float, float, float] = config.FLOCK["spawn_extents"]

    repulsion_radius_sq: float = config.POINTER["radius_sq"]
    repulsion_gain: float = config.POINTER["gain"]
    repulsion_epsilon: float = config.POINTER["epsilon"]
    repulsion_strength: float = config.POINTER["predator"] * config.POINTER["predator_scale"]

    outer_radius: float = config.BOUNDARY["outer_radius"]
    outer_gain: float = config.BOUNDARY["outer_gain"]
    depth_limit: float = config.BOUNDARY["depth_limit"]
    depth_gain: float = config.BOUNDARY["depth_gain"]

    flap_base: float = config.BIRD["flap_base"]
    flap_speed_gain: float = config.BIRD["flap_speed_gain"]
    flap_amplitude: float = config.BIRD["flap_amplitude"]

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if self.update_mode not in UPDATE_MODES:
            raise ValueError(
                f"update_mode must be one of {UPDATE_MODES}, got {self.update_mode!r}"
            )
        for name in ("perception_radius_sq", "close_radius_sq", "repulsion_radius_sq",
                     "outer_radius", "depth_limit"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.repulsion_epsilon <= 0 or self.separation_epsilon <= 0:
            raise ValueError("repulsion_epsilon and separation_epsilon must be positive")
        if not 0 < self.min_speed <= self.max_speed:
            raise ValueError(
                f"speed bounds must satisfy 0 < min_speed <= max_speed, "
                f"got [{self.min_speed}, {self.max_speed}]"
            )
        if len(self.spawn_extents) != 3:
            raise ValueError("spawn_extents needs exactly three values")

    @classmethod
    def from_config(cls, **overrides) -> "FlockParams":
        """Build parameters from `config.flock`, replacing any given fields."""
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown flock parameter(s): {', '.join(sorted(unknown))}")
        return replace(cls(), **{k: v for k, v in overrides.items() if v is not None})

    @property
    def synchronous(self) -> bool:
        return self.update_mode == "synchronous"
