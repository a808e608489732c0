"""Tests for the scene renderer against a recording surface."""
import pytest

from core.config import MoonLayout, TrackerConfig
from core.hit_registry import KIND_MISSION, KIND_PLANET, KIND_SUN
from game.view_state import ANCHOR_BODY, ANCHOR_MOON, PinPlacement
from rendering.scene_renderer import PIN_PINK, SceneRenderer, moon_fade, size_zoom_multiplier
from universe.orbits import body_position


def draw(scene, surface, hover=None):
    scene.registry.clear()
    scene.renderer.draw(surface, scene.camera, scene.view, scene.registry, hover)
    return scene.registry.targets()


class TestOverview:
    def test_registers_sun_and_planets_only(self, scene, surface):
        targets = draw(scene, surface)
        kinds = [t.kind for t in targets]
        assert kinds[0] == KIND_SUN
        assert [t.id for t in targets if t.kind == KIND_PLANET] == ["Venus", "Earth", "Mars"]
        assert KIND_MISSION not in kinds

    def test_planet_target_at_body_position(self, scene, surface):
        scene.view.advance(3.0)
        targets = {t.id: t for t in draw(scene, surface)}
        earth = scene.system.get_body("Earth")
        p = body_position(earth, scene.view.clock.elapsed)
        sx, sy = scene.camera.world_to_screen(p.x, p.y)
        assert targets["Earth"].x == pytest.approx(sx)
        assert targets["Earth"].y == pytest.approx(sy)
        assert targets["Earth"].payload is earth

    def test_labels_drawn(self, scene, surface):
        draw(scene, surface)
        assert {"Venus", "Earth", "Mars"} <= set(surface.texts())

    def test_moons_hidden_when_zoomed_out(self, scene, surface):
        scene.camera.snap_to(0, 0, 0.5)
        draw(scene, surface)
        assert "Moon" not in surface.texts()
        scene.camera.snap_to(0, 0, 2.0)
        draw(scene, surface)
        assert "Moon" in surface.texts()

    def test_hover_ring(self, scene, surface):
        targets = {t.id: t for t in draw(scene, surface)}
        draw(scene, surface)
        assert not [c for c in surface.of("stroke_circle") if c[3] == PIN_PINK]
        draw(scene, surface, hover=targets["Earth"])
        rings = [c for c in surface.of("stroke_circle") if c[3] == PIN_PINK]
        assert len(rings) == 1
        assert rings[0][1] == pytest.approx((targets["Earth"].x, targets["Earth"].y))


class TestFocused:
    def test_registers_missions_only(self, scene, surface):
        scene.view.focus_on("Earth")
        targets = draw(scene, surface)
        assert [t.kind for t in targets] == [KIND_MISSION] * 3
        assert [t.id for t in targets] == ["M-MOON", "M-LEO", "M-GHOST"]
        assert targets[0].payload.name == "Lunar Relay"

    def test_moon_pin_follows_moon(self, scene, surface):
        scene.view.focus_on("Earth")
        before = {t.id: (t.x, t.y) for t in draw(scene, surface)}
        scene.view.advance(50.0)
        after = {t.id: (t.x, t.y) for t in draw(scene, surface)}
        assert after["M-MOON"] != pytest.approx(before["M-MOON"])
        assert after["M-LEO"] == pytest.approx(before["M-LEO"])

    def test_body_pin_offset_from_centre(self, scene, surface):
        view = scene.view
        view.focus_on("Earth")
        targets = {t.id: t for t in draw(scene, surface)}
        pin = view.pin_for("M-LEO")
        cx, cy = scene.camera.world_to_screen(0, 0)
        dx, dy = pin.offset()
        assert targets["M-LEO"].x == pytest.approx(cx + dx)
        assert targets["M-LEO"].y == pytest.approx(cy + dy)

    def test_no_moons_hint(self, scene, surface):
        scene.view.focus_on("Venus")
        draw(scene, surface)
        assert "This planet has no moons." in surface.texts()

    def test_missing_moon_falls_back_to_first(self, scene):
        renderer, cam = scene.renderer, scene.camera
        earth = scene.system.get_body("Earth")
        lost = PinPlacement("X", ANCHOR_MOON, 0.0, 20.0, moon="Nope")
        first = PinPlacement("X", ANCHOR_MOON, 0.0, 20.0, moon="Moon")
        assert renderer.pin_screen_position(cam, earth, lost, 10.0) == \
            pytest.approx(renderer.pin_screen_position(cam, earth, first, 10.0))

    def test_moon_anchor_without_moons_uses_body(self, scene):
        renderer, cam = scene.renderer, scene.camera
        venus = scene.system.get_body("Venus")
        moon_pin = PinPlacement("X", ANCHOR_MOON, 0.0, 20.0, moon="Nope")
        body_pin = PinPlacement("X", ANCHOR_BODY, 0.0, 20.0)
        assert renderer.pin_screen_position(cam, venus, moon_pin, 5.0) == \
            renderer.pin_screen_position(cam, venus, body_pin, 5.0)

    def test_focused_moons_run_on_slowed_clock(self, scene, config):
        renderer = scene.renderer
        earth = scene.system.get_body("Earth")
        moon = earth.moons[0]
        x, y = renderer.focus_moon_world(earth, moon, 0.0)
        assert (x * x + y * y) ** 0.5 == pytest.approx(
            config.focus_moon_base_orbit + moon.orbit * config.focus_moon_orbit_scale)
        # One full moon period on the slowed clock is a full turn
        t = moon.period * config.focus_time_divisor
        x2, y2 = renderer.focus_moon_world(earth, moon, t)
        assert (x2, y2) == pytest.approx((x, y), abs=1e-9)


class TestMoonLayout:
    def test_compressed_vs_orbital(self, small_system):
        moon = small_system.get_body("Earth").moons[0]
        compressed = SceneRenderer(small_system, TrackerConfig())
        orbital = SceneRenderer(small_system, TrackerConfig(moon_layout=MoonLayout.ORBITAL))
        assert compressed.overview_moon_orbit(moon) < 22.0
        assert orbital.overview_moon_orbit(moon) == moon.orbit


class TestScaling:
    def test_size_multiplier(self):
        assert size_zoom_multiplier(0.5) == pytest.approx(0.5)
        assert size_zoom_multiplier(1.25) == pytest.approx(1.25)
        assert size_zoom_multiplier(3.0) == pytest.approx(1.0)

    def test_moon_fade(self):
        assert moon_fade(0.5) == 0.0
        assert moon_fade(0.9) == 0.0
        assert moon_fade(1.8) == 1.0
        assert 0.0 < moon_fade(1.2) < 1.0


class TestBelts:
    def test_belts_follow_configured_bodies(self, small_system):
        renderer = SceneRenderer(small_system, TrackerConfig())
        assert renderer.belts == []
        cfg = TrackerConfig(asteroid_belt_body="Mars")
        names = [b.name for b in SceneRenderer(small_system, cfg).belts]
        assert names == ["Asteroid"]
