"""Tests for the procedural starfield and belts."""
import numpy as np

from rendering.backdrop import STAR_TILE, build_belt, build_starfield


class TestStarfield:
    def test_deterministic(self):
        a = build_starfield(42, 100)
        b = build_starfield(42, 100)
        assert np.array_equal(a.points, b.points)
        assert not np.array_equal(a.points, build_starfield(43, 100).points)

    def test_value_ranges(self):
        pts = build_starfield(42, 420).points
        assert pts.shape == (420, 4)
        assert pts[:, 2].min() >= 0.2 and pts[:, 2].max() < 2.0
        assert pts[:, 3].min() >= 0.18 and pts[:, 3].max() < 0.73

    def test_projection_wraps(self):
        field = build_starfield(42, 200)
        for cam in [(0, 0), (1e5, -3e4), (-777.7, 12.5)]:
            xy = field.project(800, 600, cam[0], cam[1], 0.002)
            assert xy[:, 0].min() >= 0 and xy[:, 0].max() <= STAR_TILE * 800
            assert xy[:, 1].min() >= 0 and xy[:, 1].max() <= STAR_TILE * 600

    def test_parallax_moves_stars(self):
        field = build_starfield(42, 50)
        a = field.project(800, 600, 0, 0, 0.002)
        b = field.project(800, 600, 10, 0, 0.002)
        assert not np.allclose(a, b)
        assert np.allclose(a[:, 1], b[:, 1])


class TestBelt:
    def test_points_stay_in_band(self):
        belt = build_belt("Kuiper", 570, 1337, count=110, jitter=12)
        r = np.hypot(belt.points[:, 0], belt.points[:, 1])
        assert r.min() >= 570 - 6 - 1e-9
        assert r.max() <= 570 + 6 + 1e-9
        assert len(belt.points) == 110

    def test_deterministic(self):
        a = build_belt("Asteroid", 205, 7331)
        b = build_belt("Asteroid", 205, 7331)
        assert np.array_equal(a.points, b.points)
