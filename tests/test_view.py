"""Unit tests for the shared camera / pointer mapping."""

import numpy as np
import pytest

from snake_ik.config_loader import load_config
from snake_visible.view import ViewConfig


class TestFlatView:
    """With no camera rotation the mapping is the plain orthographic one."""

    def setup_method(self):
        self.view = ViewConfig(yaw=0.0, pitch=0.0)

    def test_center_maps_to_origin(self):
        np.testing.assert_allclose(self.view.canvas_to_world(400, 300, 800, 600), [0, 0, 0], atol=1e-9)

    def test_top_left_corner(self):
        np.testing.assert_allclose(self.view.canvas_to_world(0, 0, 800, 600), [-10, 10, 0], atol=1e-9)

    def test_matches_ortho_formula(self):
        x, y, w, h = 200.0, 450.0, 800.0, 600.0
        nx, ny = x / w, y / h
        expected = [-10 + nx * 20, -10 + (1 - ny) * 20, 0.0]
        np.testing.assert_allclose(self.view.canvas_to_world(x, y, w, h), expected, atol=1e-9)


class TestRotatedView:
    def setup_method(self):
        self.view = ViewConfig()

    def test_point_on_ground_plane(self):
        p = self.view.canvas_to_world(123, 456, 800, 800)
        assert p[2] == pytest.approx(0.0)

    def test_projects_back_to_same_pixel(self):
        p = self.view.canvas_to_world(123, 456, 800, 800)
        x, y = self.view.world_to_canvas(p, 800, 800)
        assert x == pytest.approx(123, abs=1e-6)
        assert y == pytest.approx(456, abs=1e-6)

    def test_model_view_is_rotation(self):
        rot = self.view.model_view()[:3, :3]
        np.testing.assert_allclose(np.dot(rot, rot.T), np.eye(3), atol=1e-12)

    def test_edge_on_camera_falls_back(self):
        view = ViewConfig(yaw=0.0, pitch=90.0)
        p = view.canvas_to_world(400, 400, 800, 800)
        assert np.all(np.isfinite(p))
        assert p[2] == 0.0


class TestFromConfig:
    def test_default_view(self):
        view = ViewConfig.from_config(load_config().view)
        assert view.yaw == pytest.approx(30.0)
        assert view.pitch == pytest.approx(-20.0)
        assert view.left == pytest.approx(-10.0)
