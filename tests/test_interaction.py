"""Tests for pointer and keyboard handling."""
import math

import pytest

from game.interaction import InteractionController
from game.view_state import ViewMode


@pytest.fixture
def controller(scene, surface, clock):
    scene.frame(surface, 0.0, now=clock.now)
    return InteractionController(scene)


def target(scene, target_id):
    return next(t for t in scene.registry.targets() if t.id == target_id)


def click(ctrl, x, y):
    ctrl.on_pointer_down(x, y)
    ctrl.on_pointer_up(x, y)
    return ctrl.on_click(x, y)


def enter_focus(scene, surface, clock, ctrl, body_id="Earth"):
    t = target(scene, body_id)
    click(ctrl, t.x, t.y)
    clock.advance(5000)
    scene.frame(surface, 0.0)
    scene.frame(surface, 0.0)


class TestClick:
    def test_click_planet_focuses(self, scene, controller):
        earth = target(scene, "Earth")
        hit = click(controller, earth.x, earth.y)
        assert hit.id == "Earth"
        assert scene.view.mode is ViewMode.FOCUSED
        assert scene.view.focus == "Earth"

    def test_click_empty_space_ignored(self, scene, controller):
        assert click(controller, 5, 5) is None
        assert scene.view.mode is ViewMode.OVERVIEW

    def test_click_sun_ignored(self, scene, controller):
        sun = target(scene, "Sun")
        assert click(controller, sun.x, sun.y) is None
        assert scene.view.mode is ViewMode.OVERVIEW

    def test_click_mission_opens_card(self, scene, surface, clock, controller):
        enter_focus(scene, surface, clock, controller)
        # Last registered pin is topmost, so its centre always picks it
        pin = target(scene, "M-GHOST")
        hit = click(controller, pin.x, pin.y)
        assert hit.id == "M-GHOST"
        assert scene.view.selected.id == "M-GHOST"

    def test_open_card_blocks_clicks(self, scene, surface, clock, controller):
        enter_focus(scene, surface, clock, controller)
        scene.view.open_mission(scene.view.missions[0])
        pin = target(scene, "M-GHOST")
        assert click(controller, pin.x, pin.y) is None
        assert scene.view.selected.id == "M-MOON"


class TestDrag:
    def test_drag_pans_and_suppresses_click(self, scene, controller):
        cam = scene.camera
        earth = target(scene, "Earth")
        x0, y0 = cam.x, cam.y
        controller.on_pointer_down(earth.x, earth.y)
        controller.on_pointer_move(earth.x + 30, earth.y - 10)
        controller.on_pointer_up(earth.x + 30, earth.y - 10)
        assert controller.on_click(earth.x + 30, earth.y - 10) is None
        assert scene.view.mode is ViewMode.OVERVIEW
        assert cam.x == pytest.approx(x0 - 30 / cam.zoom)
        assert cam.y == pytest.approx(y0 + 10 / cam.zoom)
        # Suppression is consumed by that one click
        assert not controller.is_dragging

    def test_small_jitter_is_still_a_click(self, scene, controller):
        earth = target(scene, "Earth")
        controller.on_pointer_down(earth.x, earth.y)
        controller.on_pointer_move(earth.x + 1, earth.y + 1)
        controller.on_pointer_up(earth.x + 1, earth.y + 1)
        assert controller.on_click(earth.x + 1, earth.y + 1).id == "Earth"

    def test_drag_cancels_animation(self, scene, controller):
        scene.camera.set_target(200, 200, 2.0, 1000, now=0)
        controller.on_pointer_down(100, 100)
        controller.on_pointer_move(150, 100)
        assert not scene.camera.animating

    def test_move_without_down_only_tracks_pointer(self, scene, controller):
        x0 = scene.camera.x
        controller.on_pointer_move(300, 300)
        assert scene.pointer == (300, 300)
        assert scene.camera.x == x0

    def test_cancel_clears_drag(self, controller):
        controller.on_pointer_down(0, 0)
        controller.on_pointer_move(50, 0)
        controller.on_pointer_cancel()
        assert not controller.is_down
        assert not controller.is_dragging

    def test_leave_clears_hover(self, scene, controller):
        controller.on_pointer_move(10, 10)
        controller.on_pointer_leave()
        assert scene.pointer is None


class TestWheel:
    def test_wheel_zoom_keeps_cursor_point(self, scene, controller):
        cam = scene.camera
        before = cam.screen_to_world(700, 250)
        controller.on_wheel(700, 250, -240)
        assert cam.zoom == pytest.approx(math.exp(240 * scene.config.wheel_zoom_k))
        after = cam.screen_to_world(700, 250)
        assert after[0] == pytest.approx(before[0])
        assert after[1] == pytest.approx(before[1])

    def test_scroll_down_zooms_out(self, scene, controller):
        controller.on_wheel(500, 400, 100)
        assert scene.camera.zoom < 1.0


class TestKeys:
    def test_space_toggles_pause(self, scene, controller):
        assert controller.on_key("space")
        assert scene.view.clock.paused
        controller.on_key("space")
        assert not scene.view.clock.paused

    def test_reset(self, scene, controller):
        scene.view.focus_on("Earth")
        assert controller.on_key("r")
        assert scene.view.mode is ViewMode.OVERVIEW

    def test_back_only_when_focused(self, scene, controller):
        assert not controller.on_key("b")
        scene.view.focus_on("Mars")
        assert controller.on_key("B")
        assert scene.view.mode is ViewMode.OVERVIEW

    def test_escape_with_card_open_closes_card_and_stays_focused(self, scene, controller):
        # one Escape per layer: card first, focused view on the next press
        scene.view.focus_on("Earth")
        scene.view.open_mission(scene.view.missions[0])
        controller.on_key("escape")
        assert not scene.view.card_open
        assert scene.view.mode is ViewMode.FOCUSED
        controller.on_key("escape")
        assert scene.view.mode is ViewMode.OVERVIEW

    def test_recenter(self, scene, controller, config):
        scene.camera.snap_to(120, -80, 2.0)
        controller.on_key("0")
        t = scene.camera.target
        assert (t.x, t.y, t.zoom) == (0.0, 0.0, config.overview_zoom)

    def test_zoom_keys(self, scene, controller):
        controller.on_key("+")
        assert scene.camera.zoom == pytest.approx(1.1)
        controller.on_key("-")
        controller.on_key("_")
        assert scene.camera.zoom == pytest.approx(1 / 1.1)

    def test_speed_keys(self, scene, controller):
        controller.on_key("]")
        assert scene.view.clock.time_scale == 20
        controller.on_key("[")
        controller.on_key("[")
        assert scene.view.clock.time_scale == 5

    def test_unknown_key(self, controller):
        assert not controller.on_key("q")
