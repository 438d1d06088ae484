"""Bird geometry and model matrices, built with numpy only."""

import math
from typing import Sequence, Tuple

import numpy as np


def cone_mesh(radius: float, length: float, segments: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Triangle list for a cone centred on the origin with its tip on +z.

    Returns:
        vertices: (segments * 6, 3) float32, sides then base cap
        normals: matching per-face normals
    """
    half = length / 2.0
    tip = np.array([0.0, 0.0, half])
    centre = np.array([0.0, 0.0, -half])

    angles = np.linspace(0.0, 2.0 * math.pi, segments, endpoint=False)
    ring = np.stack([np.cos(angles) * radius, np.sin(angles) * radius, np.full(segments, -half)], axis=1)

    vertices = []
    normals = []
    for k in range(segments):
        a = ring[k]
        b = ring[(k + 1) % segments]

        side = [a, b, tip]
        n = np.cross(b - a, tip - a)
        vertices.extend(side)
        normals.extend([n / np.linalg.norm(n)] * 3)

        vertices.extend([b, a, centre])
        normals.extend([np.array([0.0, 0.0, -1.0])] * 3)

    return np.asarray(vertices, dtype=np.float32), np.asarray(normals, dtype=np.float32)


def wing_mesh(outline: Sequence[Tuple[float, float]]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Flat wing lying in the local xz plane, fanned from the first outline point.

    Outline points are (span, chord): span along +x from the shoulder,
    negative chord sweeps back toward -z.
    """
    points = [np.array([x, 0.0, y]) for x, y in outline]
    vertices = []
    for k in range(1, len(points) - 1):
        vertices.extend([points[0], points[k], points[k + 1]])

    normals = [np.array([0.0, 1.0, 0.0])] * len(vertices)
    return np.asarray(vertices, dtype=np.float32), np.asarray(normals, dtype=np.float32)


def model_matrix(position: np.ndarray, rotation: np.ndarray) -> np.ndarray:
    """4x4 transform in OpenGL column-major order, ready for glMultMatrixf."""
    m = np.identity(4, dtype=np.float32)
    m[:3, :3] = rotation
    m[:3, 3] = position
    return m.T.copy()


def palette_rgb(palette) -> np.ndarray:
    """0-255 integer triples to 0-1 floats."""
    return np.asarray(palette, dtype=np.float32) / 255.0
