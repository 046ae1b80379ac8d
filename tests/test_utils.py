"""Unit tests for vector helpers."""

import numpy as np
import pytest

from snake_ik.utils import as_point, axis_rot, distance, lerp, mix, perpendicular, vector_norm


class TestVectorOps:
    def test_distance(self):
        assert distance([0, 0, 0], [3, 4, 0]) == pytest.approx(5.0)

    def test_vector_norm_unit(self):
        v = vector_norm(np.array([0.0, 3.0, 4.0]))
        assert np.linalg.norm(v) == pytest.approx(1.0, abs=1e-6)

    def test_vector_norm_zero_is_finite(self):
        v = vector_norm(np.zeros(3))
        np.testing.assert_array_equal(v, np.zeros(3))

    def test_lerp_endpoints(self):
        a = np.array([1.0, 0.0, 0.0])
        b = np.array([3.0, 2.0, 0.0])
        np.testing.assert_allclose(lerp(a, b, 0.0), a)
        np.testing.assert_allclose(lerp(a, b, 1.0), b)

    def test_mix_extrapolates(self):
        np.testing.assert_allclose(mix(np.zeros(3), np.array([1.0, 0.0, 0.0]), 2.5), [2.5, 0.0, 0.0])


class TestAsPoint:
    def test_2d_gets_zero_z(self):
        np.testing.assert_array_equal(as_point((1, 2)), [1.0, 2.0, 0.0])

    def test_3d_is_float(self):
        p = as_point([1, 2, 3])
        assert p.dtype == np.float64

    def test_bad_shape(self):
        with pytest.raises(ValueError):
            as_point([1, 2, 3, 4])


class TestRotations:
    def test_axis_rot_quarter_turn(self):
        m = axis_rot(90, [0, 0, 1])
        np.testing.assert_allclose(np.dot(m, [1, 0, 0, 1])[:3], [0, 1, 0], atol=1e-12)


    def test_perpendicular_in_plane(self):
        p = perpendicular(np.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(p, [0.0, -1.0, 0.0], atol=1e-6)

    def test_perpendicular_of_z_axis(self):
        p = perpendicular(np.array([0.0, 0.0, 2.0]))
        assert np.dot(p, [0.0, 0.0, 1.0]) == pytest.approx(0.0)
        assert np.linalg.norm(p) == pytest.approx(1.0, abs=1e-6)
