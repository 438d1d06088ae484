"""Flock state and per-frame update, with Numba JIT-compiled steering kernels."""

import logging
import math
from dataclasses import replace
from typing import Iterator, NamedTuple, Optional

import numpy as np
from numba import njit

from config import flock as config
from .boid import Boid
from .params import FlockParams
from .pointer import PointerTarget
from .random_source import NumpyRandomSource, RandomSource
from .vector import (
    add, clamp_length, distance_sq, length, length_sq, normalize, scale, subtract, vec3
)

logger = logging.getLogger(__name__)


class KernelParams(NamedTuple):
    """Float-only view of `FlockParams` that Numba can take as one argument."""
    perception_radius_sq: float
    close_radius_sq: float
    separation_epsilon: float
    steer_gain: float
    separation_scale: float
    separation_weight: float
    alignment_weight: float
    cohesion_weight: float
    min_speed: float
    max_speed: float
    repulsion_radius_sq: float
    repulsion_gain: float
    repulsion_epsilon: float
    repulsion_strength: float
    outer_radius: float
    outer_gain: float
    depth_limit: float
    depth_gain: float
    flap_base: float
    flap_speed_gain: float
    flap_amplitude: float

    @classmethod
    def from_params(cls, params: FlockParams) -> "KernelParams":
        return cls(*(float(getattr(params, name)) for name in cls._fields))


# ============================================================================
# NUMBA JIT-COMPILED STEERING KERNELS
# ============================================================================

@njit(cache=True)
def flocking_force(i: int, positions: np.ndarray, velocities: np.ndarray, kp) -> np.ndarray:
    """
    Weighted separation + alignment + cohesion for boid i.

    Neighbours are read from `positions`/`velocities`; boid i's own row is
    read from the same arrays. Returns exactly zero when no other boid is
    inside the perception radius.
    """
    pos_i = positions[i]
    vel_i = velocities[i]

    separation = vec3(0.0, 0.0, 0.0)
    alignment = vec3(0.0, 0.0, 0.0)
    cohesion = vec3(0.0, 0.0, 0.0)
    count = 0

    for j in range(positions.shape[0]):
        if j == i:
            continue

        dist_sq = distance_sq(pos_i, positions[j])
        if dist_sq < kp.perception_radius_sq:
            count += 1

            if dist_sq < kp.close_radius_sq:
                # Closer neighbours push harder; coincident ones add nothing
                away = normalize(subtract(pos_i, positions[j]))
                dist = max(math.sqrt(dist_sq), kp.separation_epsilon)
                separation += scale(away, 1.0 / dist)

            alignment += velocities[j]
            cohesion += positions[j]

    if count == 0:
        return vec3(0.0, 0.0, 0.0)

    alignment = scale(
        subtract(scale(normalize(scale(alignment, 1.0 / count)), kp.max_speed), vel_i),
        kp.steer_gain
    )
    cohesion = scale(
        subtract(
            scale(normalize(subtract(scale(cohesion, 1.0 / count), pos_i)), kp.max_speed),
            vel_i
        ),
        kp.steer_gain
    )
    separation = scale(separation, kp.separation_scale / count)

    force = scale(separation, kp.separation_weight)
    force = add(force, scale(alignment, kp.alignment_weight))
    force = add(force, scale(cohesion, kp.cohesion_weight))
    return force


@njit(cache=True)
def pointer_repulsion(position: np.ndarray, velocity: np.ndarray, target: np.ndarray, kp) -> np.ndarray:
    """
    Push away from the pointer target, stronger the closer the boid is.

    Zero at or beyond the repulsion radius. At zero distance the push
    follows the boid's own heading (or +y when it has none).
    """
    dist_sq = distance_sq(position, target)
    if dist_sq >= kp.repulsion_radius_sq:
        return vec3(0.0, 0.0, 0.0)

    direction = normalize(subtract(position, target))
    if length_sq(direction) == 0.0:
        direction = normalize(velocity)
        if length_sq(direction) == 0.0:
            direction = vec3(0.0, 1.0, 0.0)

    magnitude = kp.repulsion_gain / (math.sqrt(dist_sq) + kp.repulsion_epsilon)
    return scale(direction, magnitude * kp.repulsion_strength)


@njit(cache=True)
def boundary_force(position: np.ndarray, kp) -> np.ndarray:
    """
    Soft spherical containment plus a stronger linear pull toward z = 0.

    Both corrections are zero until their limit is strictly exceeded.
    """
    force = vec3(0.0, 0.0, 0.0)

    dist = length(position)
    if dist > kp.outer_radius:
        force = scale(normalize(scale(position, -1.0)), (dist - kp.outer_radius) * kp.outer_gain)

    if abs(position[2]) > kp.depth_limit:
        force[2] -= position[2] * kp.depth_gain

    return force


@njit(cache=True)
def wing_angle(speed: float, phase: float, clock_ms: float, kp) -> float:
    """Sinusoidal wing flap; faster boids flap at a higher frequency."""
    frequency = kp.flap_base + speed * kp.flap_speed_gain
    return math.sin(clock_ms * frequency + phase) * kp.flap_amplitude


@njit(cache=True)
def step_boid(
    i: int,
    neighbor_positions: np.ndarray,
    neighbor_velocities: np.ndarray,
    positions: np.ndarray,
    velocities: np.ndarray,
    accelerations: np.ndarray,
    phases: np.ndarray,
    wing_angles: np.ndarray,
    pointer_position: np.ndarray,
    pointer_active: bool,
    clock_ms: float,
    kp
):
    """Accumulate forces, integrate and refresh visual state for boid i."""
    acceleration = add(accelerations[i], flocking_force(i, neighbor_positions, neighbor_velocities, kp))

    if pointer_active:
        acceleration = add(acceleration, pointer_repulsion(positions[i], velocities[i], pointer_position, kp))

    acceleration = add(acceleration, boundary_force(positions[i], kp))
    accelerations[i, :] = acceleration

    heading = velocities[i].copy()
    new_velocity = clamp_length(add(velocities[i], acceleration), kp.min_speed, kp.max_speed, heading)
    velocities[i, :] = new_velocity
    positions[i, :] = add(positions[i], new_velocity)
    accelerations[i, :] = 0.0

    wing_angles[i] = wing_angle(length(new_velocity), phases[i], clock_ms, kp)


@njit(cache=True)
def update_flock_numba(
    neighbor_positions: np.ndarray,
    neighbor_velocities: np.ndarray,
    positions: np.ndarray,
    velocities: np.ndarray,
    accelerations: np.ndarray,
    phases: np.ndarray,
    wing_angles: np.ndarray,
    pointer_position: np.ndarray,
    pointer_active: bool,
    clock_ms: float,
    kp
):
    """One full pass over the flock in index order."""
    for i in range(positions.shape[0]):
        step_boid(
            i, neighbor_positions, neighbor_velocities,
            positions, velocities, accelerations, phases, wing_angles,
            pointer_position, pointer_active, clock_ms, kp
        )


# ============================================================================
# FLOCK CLASS
# ============================================================================

class Flock:
    """
    A fixed-size flock and the parameters that drive it.

    This is the whole simulation context: agent state lives in per-field
    arrays owned by the instance, and nothing is shared through globals.
    """

    def __init__(self, params: Optional[FlockParams] = None, random_source: Optional[RandomSource] = None):
        self.params = params if params is not None else FlockParams.from_config()
        if random_source is None:
            random_source = NumpyRandomSource(config.FLOCK["seed"])
        self.random_source = random_source
        self._kernel_params = KernelParams.from_params(self.params)
        self.ticks = 0

        self._spawn(self.params.count)
        logger.debug("Spawned %d boids (%s updates)", self.num_boids, self.params.update_mode)

    @classmethod
    def from_state(
        cls,
        positions,
        velocities,
        params: Optional[FlockParams] = None,
        phases=None,
        color_variants=None
    ) -> "Flock":
        """
        Build a flock from explicit initial positions and velocities.

        The agent count is taken from `positions`; any `count` in params is
        replaced to match.
        """
        positions = np.array(positions, dtype=np.float64)
        velocities = np.array(velocities, dtype=np.float64)
        # An empty flock may come in as plain []
        if positions.size == 0 and velocities.size == 0:
            positions = positions.reshape(0, 3)
            velocities = velocities.reshape(0, 3)
        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError(f"positions must have shape (n, 3), got {positions.shape}")
        if velocities.shape != positions.shape:
            raise ValueError(
                f"velocities shape {velocities.shape} does not match positions {positions.shape}"
            )

        n = positions.shape[0]
        base = params if params is not None else FlockParams.from_config()
        flock = cls(replace(base, count=n), NumpyRandomSource(0))
        flock.positions[:] = positions
        flock.velocities[:] = velocities
        if phases is not None:
            flock.phases[:] = np.asarray(phases, dtype=np.float64).reshape(n)
        if color_variants is not None:
            flock.color_variants[:] = np.asarray(color_variants, dtype=np.int8).reshape(n)
        return flock

    def _spawn(self, count: int):
        """Randomize initial position, heading, colour and flap phase."""
        extents = np.asarray(self.params.spawn_extents, dtype=np.float64)
        rand = self.random_source.random

        self.num_boids = count
        self.positions = (rand((count, 3)) - 0.5) * extents

        headings = rand((count, 3)) - 0.5
        norms = np.linalg.norm(headings, axis=1, keepdims=True)
        headings = np.where(norms > 0, headings / np.where(norms > 0, norms, 1.0), [1.0, 0.0, 0.0])
        self.velocities = headings * self.params.initial_speed

        self.color_variants = (rand(count) > 0.5).astype(np.int8)
        self.phases = rand(count) * 2.0 * math.pi

        self.accelerations = np.zeros((count, 3), dtype=np.float64)
        self.wing_angles = np.zeros(count, dtype=np.float64)

    def reseed(self, random_source: RandomSource):
        """Respawn every boid from a new random source, keeping the count."""
        self.random_source = random_source
        self._spawn(self.num_boids)
        self.ticks = 0
        logger.info("Flock re-seeded with %d boids", self.num_boids)

    def warmup(self):
        """Pre-compile the Numba kernels on a throwaway copy of the flock."""
        update_flock_numba(
            self.positions.copy(), self.velocities.copy(),
            self.positions.copy(), self.velocities.copy(), np.zeros_like(self.accelerations),
            self.phases.copy(), np.zeros_like(self.wing_angles),
            np.zeros(3), False, 0.0, self._kernel_params
        )

    def update(self, pointer: Optional[PointerTarget] = None, clock_ms: float = 0.0):
        """
        Advance every boid by one frame.

        The pointer is read once, before any boid moves. In sequential mode
        boids later in the pass see the already-updated state of earlier
        ones; in synchronous mode everyone reads last frame's state.
        """
        if pointer is not None:
            pointer_position, pointer_active = pointer.snapshot()
        else:
            pointer_position, pointer_active = np.zeros(3), False

        if self.params.synchronous:
            neighbor_positions = self.positions.copy()
            neighbor_velocities = self.velocities.copy()
        else:
            neighbor_positions = self.positions
            neighbor_velocities = self.velocities

        update_flock_numba(
            neighbor_positions,
            neighbor_velocities,
            self.positions,
            self.velocities,
            self.accelerations,
            self.phases,
            self.wing_angles,
            np.asarray(pointer_position, dtype=np.float64),
            bool(pointer_active),
            float(clock_ms),
            self._kernel_params
        )
        self.ticks += 1

    def speeds(self) -> np.ndarray:
        return np.linalg.norm(self.velocities, axis=1)

    def distances_from_origin(self) -> np.ndarray:
        return np.linalg.norm(self.positions, axis=1)

    def boid(self, i: int) -> Boid:
        return Boid(
            position=self.positions[i].copy(),
            velocity=self.velocities[i].copy(),
            acceleration=self.accelerations[i].copy(),
            phase=float(self.phases[i]),
            color_variant=int(self.color_variants[i]),
            wing_angle=float(self.wing_angles[i])
        )

    def __len__(self):
        return self.num_boids

    def __iter__(self) -> Iterator[Boid]:
        for i in range(self.num_boids):
            yield self.boid(i)
