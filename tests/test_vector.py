"""
Test Suite: Vector Helpers
==========================
Unit tests for the JIT-compiled 3D vector helpers.
"""

import numpy as np
import pytest

from flocking.vector import (
    add, clamp_length, cross, distance_sq, length, look_at_rotation, normalize, scale, subtract, vec3
)


class TestBasicOps:
    """Arithmetic helpers return new arrays"""

    def test_add_and_subtract(self):
        a = np.array([1.0, 2.0, 3.0])
        b = np.array([0.5, -1.0, 2.0])
        np.testing.assert_array_almost_equal(add(a, b), [1.5, 1.0, 5.0])
        np.testing.assert_array_almost_equal(subtract(a, b), [0.5, 3.0, 1.0])

    def test_inputs_not_mutated(self):
        a = np.array([3.0, 4.0, 0.0])
        b = np.array([1.0, 1.0, 1.0])
        add(a, b)
        scale(a, 10.0)
        normalize(a)
        np.testing.assert_array_equal(a, [3.0, 4.0, 0.0])
        np.testing.assert_array_equal(b, [1.0, 1.0, 1.0])

    def test_length_and_distance(self):
        assert length(np.array([3.0, 4.0, 0.0])) == pytest.approx(5.0)
        assert distance_sq(np.array([1.0, 1.0, 1.0]), np.array([2.0, 3.0, 1.0])) == pytest.approx(5.0)

    def test_cross(self):
        np.testing.assert_array_almost_equal(
            cross(vec3(1.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0)), [0.0, 0.0, 1.0]
        )


class TestNormalize:
    """Tests for normalize"""

    def test_unit_length(self):
        assert length(normalize(np.array([2.0, -3.0, 6.0]))) == pytest.approx(1.0)

    def test_zero_vector_stays_zero(self):
        result = normalize(np.zeros(3))
        np.testing.assert_array_equal(result, [0.0, 0.0, 0.0])
        assert np.all(np.isfinite(result))


class TestClampLength:
    """Speed clamp keeps direction and never zeroes"""

    def test_too_fast_scaled_down(self):
        np.testing.assert_array_almost_equal(
            clamp_length(np.array([1.0, 0.0, 0.0]), 0.03, 0.1, np.zeros(3)), [0.1, 0.0, 0.0]
        )

    def test_too_slow_scaled_up(self):
        result = clamp_length(np.array([0.0, 0.01, 0.0]), 0.03, 0.1, np.zeros(3))
        np.testing.assert_array_almost_equal(result, [0.0, 0.03, 0.0])

    def test_in_range_unchanged(self):
        v = np.array([0.0, 0.0, 0.05])
        np.testing.assert_array_almost_equal(clamp_length(v, 0.03, 0.1, np.zeros(3)), v)

    def test_zero_uses_fallback_direction(self):
        result = clamp_length(np.zeros(3), 0.03, 0.1, np.array([0.0, 2.0, 0.0]))
        np.testing.assert_array_almost_equal(result, [0.0, 0.03, 0.0])

    def test_zero_without_fallback_uses_x(self):
        result = clamp_length(np.zeros(3), 0.03, 0.1, np.zeros(3))
        np.testing.assert_array_almost_equal(result, [0.03, 0.0, 0.0])


class TestLookAtRotation:
    """Orientation toward the direction of travel"""

    @pytest.mark.parametrize("target", [
        [1.0, 0.0, 0.0],
        [0.0, 0.0, -5.0],
        [0.3, -0.2, 0.9],
        [0.0, 1.0, 0.0],
        [0.0, -2.0, 0.0],
    ])
    def test_orthonormal_and_facing_target(self, target):
        eye = np.array([0.0, 0.0, 0.0])
        rotation = look_at_rotation(eye, np.array(target))

        np.testing.assert_array_almost_equal(rotation.T @ rotation, np.identity(3))
        assert np.linalg.det(rotation) == pytest.approx(1.0)
        np.testing.assert_array_almost_equal(rotation[:, 2], normalize(np.array(target)))

    def test_degenerate_target_is_still_a_rotation(self):
        eye = np.array([1.0, 2.0, 3.0])
        rotation = look_at_rotation(eye, eye.copy())
        np.testing.assert_array_almost_equal(rotation.T @ rotation, np.identity(3))
