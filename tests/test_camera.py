"""
Test Suite: Camera
==================
Pointer unprojection from window pixels onto the z = 0 plane.
"""

import math

import numpy as np
import pytest

from core import Camera


@pytest.fixture
def camera():
    cam = Camera(800, 600)
    cam.fov = 75.0
    cam.position = np.array([0.0, 0.0, 12.0])
    cam.target = np.array([0.0, 0.0, 0.0])
    return cam


class TestAxes:

    def test_axes_orthonormal(self, camera):
        forward, right, up = camera.get_camera_axes()
        np.testing.assert_array_almost_equal(forward, [0.0, 0.0, -1.0])
        np.testing.assert_array_almost_equal(right, [1.0, 0.0, 0.0])
        np.testing.assert_array_almost_equal(up, [0.0, 1.0, 0.0])


class TestUnproject:

    def test_centre_pixel_hits_origin(self, camera):
        point = camera.unproject_to_plane(400, 300, 0.0)
        np.testing.assert_array_almost_equal(point, [0.0, 0.0, 0.0])

    def test_top_right_corner(self, camera):
        point = camera.unproject_to_plane(800, 0, 0.0)
        half_h = 12.0 * math.tan(math.radians(75.0) / 2)
        np.testing.assert_array_almost_equal(point, [half_h * 800 / 600, half_h, 0.0])

    def test_screen_y_points_down(self, camera):
        below = camera.unproject_to_plane(400, 500, 0.0)
        assert below[1] < 0

    def test_other_plane_depth(self, camera):
        point = camera.unproject_to_plane(400, 300, 2.0)
        np.testing.assert_array_almost_equal(point, [0.0, 0.0, 2.0])

    def test_parallel_ray_returns_none(self, camera):
        camera.position = np.array([0.0, 0.0, 0.0])
        camera.target = np.array([1.0, 0.0, 0.0])
        assert camera.unproject_to_plane(400, 300, 0.0) is None

    def test_plane_behind_camera_returns_none(self, camera):
        camera.target = np.array([0.0, 0.0, 24.0])
        assert camera.unproject_to_plane(400, 300, 0.0) is None


class TestResize:

    def test_aspect_follows_resize(self, camera):
        camera.resize(1920, 1080)
        assert camera.aspect == pytest.approx(1920 / 1080)

    def test_zero_size_clamped(self, camera):
        camera.resize(0, 0)
        assert camera.width == 1
        assert camera.height == 1

    def test_unproject_uses_new_size(self, camera):
        camera.resize(1000, 500)
        np.testing.assert_array_almost_equal(camera.unproject_to_plane(500, 250, 0.0), [0.0, 0.0, 0.0])
