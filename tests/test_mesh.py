"""
Test Suite: Bird Geometry
=========================
Body and wing meshes and model matrices used by the bird renderer.
"""

import numpy as np
import pytest

from config import flock as config
from flocking.vector import look_at_rotation
from rendering.mesh import cone_mesh, model_matrix, palette_rgb, wing_mesh


class TestConeMesh:

    def test_shape_and_tip(self):
        vertices, normals = cone_mesh(0.06, 0.3, 8)
        assert vertices.shape == (48, 3)
        assert normals.shape == (48, 3)
        assert vertices[:, 2].max() == pytest.approx(0.15)
        assert vertices[:, 2].min() == pytest.approx(-0.15)

    def test_normals_are_unit(self):
        _, normals = cone_mesh(0.06, 0.3, 8)
        np.testing.assert_allclose(np.linalg.norm(normals, axis=1), 1.0, rtol=1e-5)

    def test_side_normals_point_outward(self):
        vertices, normals = cone_mesh(0.06, 0.3, 8)
        side = normals[0::6]
        centroid = vertices[0:3].mean(axis=0)
        assert np.dot(side[0][:2], centroid[:2]) > 0


class TestWingMesh:

    def test_fan_triangles(self):
        vertices, normals = wing_mesh(config.BIRD["wing_shape"])
        assert vertices.shape == (6, 3)
        np.testing.assert_array_equal(vertices[:, 1], 0.0)
        np.testing.assert_array_equal(normals, [[0.0, 1.0, 0.0]] * 6)

    def test_wing_sweeps_back(self):
        vertices, _ = wing_mesh(config.BIRD["wing_shape"])
        assert vertices[:, 2].max() <= 0.0
        assert vertices[:, 0].max() == pytest.approx(0.4)


class TestModelMatrix:

    def test_column_major_translation(self):
        position = np.array([1.0, 2.0, 3.0])
        m = model_matrix(position, np.identity(3))
        np.testing.assert_array_almost_equal(m[3, :3], position)
        np.testing.assert_array_almost_equal(m[:3, :3], np.identity(3))

    def test_rotation_maps_local_forward(self):
        rotation = look_at_rotation(np.zeros(3), np.array([0.0, 0.0, -1.0]))
        m = model_matrix(np.zeros(3), rotation).T
        forward = m @ np.array([0.0, 0.0, 1.0, 0.0])
        np.testing.assert_array_almost_equal(forward[:3], [0.0, 0.0, -1.0])


def test_palette_rgb():
    rgb = palette_rgb(config.COLORS["palette"])
    assert rgb.shape == (2, 3)
    np.testing.assert_array_almost_equal(rgb[0], [0xd9 / 255, 0x77 / 255, 0x06 / 255])
