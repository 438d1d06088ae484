"""Fixed perspective camera and screen-to-world pointer unprojection."""

import math
from typing import Optional, Tuple

import numpy as np

from config import flock as config


class Camera:
    """
    Perspective camera looking at the flock from a fixed position.

    Holds the projection parameters the application hands to OpenGL and
    turns mouse pixels into world-space points on a fixed depth plane.
    """

    def __init__(self, width: int = config.WINDOW["width"], height: int = config.WINDOW["height"]):
        self.fov = config.CAMERA["fov"]
        self.near_clip = config.CAMERA["near_clip"]
        self.far_clip = config.CAMERA["far_clip"]
        self.position = np.array(config.CAMERA["position"], dtype=np.float64)
        self.target = np.array(config.CAMERA["target"], dtype=np.float64)
        self.width = 1
        self.height = 1
        self.resize(width, height)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def resize(self, width: int, height: int):
        """Track a new viewport size; zero sizes (minimized windows) clamp to 1."""
        self.width = max(1, int(width))
        self.height = max(1, int(height))

    def get_camera_axes(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Get the camera's local coordinate axes (forward, right, up).
        Forward points from camera toward target.
        """
        forward = self.target - self.position
        forward = forward / np.linalg.norm(forward)

        world_up = np.array([0.0, 1.0, 0.0])

        right = np.cross(forward, world_up)
        right_len = np.linalg.norm(right)
        if right_len < 0.001:
            right = np.array([1.0, 0.0, 0.0])
        else:
            right = right / right_len

        up = np.cross(right, forward)
        up = up / np.linalg.norm(up)

        return forward, right, up

    def screen_ray(self, x: float, y: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Ray from the camera through a window pixel.

        Args:
            x: Pixel column from the left edge
            y: Pixel row from the top edge

        Returns:
            (origin, unit direction) in world space
        """
        ndc_x = (x / self.width) * 2.0 - 1.0
        ndc_y = -(y / self.height) * 2.0 + 1.0

        forward, right, up = self.get_camera_axes()
        tan_v = math.tan(math.radians(self.fov) / 2.0)
        direction = forward + right * (ndc_x * tan_v * self.aspect) + up * (ndc_y * tan_v)
        return self.position.copy(), direction / np.linalg.norm(direction)

    def unproject_to_plane(self, x: float, y: float, plane_z: float = config.CAMERA["pointer_plane_z"]) -> Optional[np.ndarray]:
        """
        World point where the ray through pixel (x, y) meets the plane z = plane_z.

        Returns None if the ray is parallel to the plane or the plane is
        behind the camera.
        """
        origin, direction = self.screen_ray(x, y)
        if abs(direction[2]) < 1e-9:
            return None

        t = (plane_z - origin[2]) / direction[2]
        if t < 0:
            return None
        return origin + direction * t
