"""
3D vector helpers used by the flock kernels.

Vectors are plain float64 numpy arrays of shape (3,). Every helper here
returns a new array and never mutates its arguments; the only in-place
writes in the simulation happen in `flocking.flock` on rows the flock owns.
All helpers are Numba JIT-compiled so the kernels can call them, and remain
callable from ordinary Python.
"""

import math
import numpy as np
from numba import njit


@njit(cache=True)
def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Build a float64 vector."""
    out = np.empty(3, dtype=np.float64)
    out[0] = x
    out[1] = y
    out[2] = z
    return out


@njit(cache=True)
def length_sq(v: np.ndarray) -> float:
    return v[0] * v[0] + v[1] * v[1] + v[2] * v[2]


@njit(cache=True)
def length(v: np.ndarray) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


@njit(cache=True)
def distance_sq(a: np.ndarray, b: np.ndarray) -> float:
    """Squared distance between two points (no square root)."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    dz = a[2] - b[2]
    return dx * dx + dy * dy + dz * dz


@njit(cache=True)
def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return vec3(a[0] + b[0], a[1] + b[1], a[2] + b[2])


@njit(cache=True)
def subtract(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return vec3(a[0] - b[0], a[1] - b[1], a[2] - b[2])


@njit(cache=True)
def scale(v: np.ndarray, s: float) -> np.ndarray:
    return vec3(v[0] * s, v[1] * s, v[2] * s)


@njit(cache=True)
def normalize(v: np.ndarray) -> np.ndarray:
    """
    Unit vector in the direction of v.

    The zero vector normalizes to the zero vector.
    """
    mag = length(v)
    if mag == 0.0:
        return vec3(0.0, 0.0, 0.0)
    return vec3(v[0] / mag, v[1] / mag, v[2] / mag)


@njit(cache=True)
def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return vec3(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0]
    )


@njit(cache=True)
def clamp_length(v: np.ndarray, min_len: float, max_len: float, fallback: np.ndarray) -> np.ndarray:
    """
    Rescale v so its length lies in [min_len, max_len], keeping its direction.

    A zero-length v has no direction; `fallback` supplies it instead, and
    `+x` is used if the fallback is zero too. The result is never zero
    while min_len > 0.
    """
    mag = length(v)
    if mag == 0.0:
        direction = normalize(fallback)
        if length_sq(direction) == 0.0:
            direction = vec3(1.0, 0.0, 0.0)
        return scale(direction, min_len)
    if mag > max_len:
        return scale(v, max_len / mag)
    if mag < min_len:
        return scale(v, min_len / mag)
    return vec3(v[0], v[1], v[2])


@njit(cache=True)
def look_at_rotation(eye: np.ndarray, target: np.ndarray) -> np.ndarray:
    """
    3x3 rotation whose local +z axis points from eye toward target.

    Columns are the local x, y and z axes in world space, with world +y as
    the up hint. Degenerate cases (target == eye, or looking straight
    up/down) still return an orthonormal basis.
    """
    forward = normalize(subtract(target, eye))
    if length_sq(forward) == 0.0:
        forward = vec3(0.0, 0.0, 1.0)

    up = vec3(0.0, 1.0, 0.0)
    right = cross(up, forward)
    if length_sq(right) < 1e-12:
        # Parallel to up: nudge the forward axis like a scene graph would
        right = cross(up, vec3(forward[0], forward[1], forward[2] + 0.0001))
        if length_sq(right) < 1e-12:
            right = vec3(1.0, 0.0, 0.0)
    right = normalize(right)
    true_up = cross(forward, right)

    rotation = np.empty((3, 3), dtype=np.float64)
    for k in range(3):
        rotation[k, 0] = right[k]
        rotation[k, 1] = true_up[k]
        rotation[k, 2] = forward[k]
    return rotation
