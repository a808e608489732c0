"""Tests for the overview/focused view state machine."""
import pytest

from core.seeded_rng import hash_string, make_rng, pair_key
from game.view_state import ANCHOR_BODY, ANCHOR_MOON, ViewMode, place_pin
from universe.orbits import body_position


def settle(scene, clock, ms):
    clock.advance(ms)
    scene.view.scheduler.run_due(clock.now)
    scene.camera.tick(clock.now)


class TestFocusAndBack:
    def test_focus_on_earth(self, scene):
        view = scene.view
        assert view.focus_on("Earth")
        assert view.mode is ViewMode.FOCUSED
        assert view.focus == "Earth"
        assert [m.id for m in view.missions] == ["M-MOON", "M-LEO", "M-GHOST"]

    def test_back_returns_to_overview(self, scene):
        view = scene.view
        view.focus_on("Earth")
        assert view.back()
        assert view.mode is ViewMode.OVERVIEW
        assert view.focus is None
        assert view.missions == ()
        assert view.pins == {}

    def test_back_in_overview_is_noop(self, scene):
        assert not scene.view.back()

    def test_unknown_body_rejected(self, scene, capsys):
        view = scene.view
        assert not view.focus_on("Vulcan")
        assert view.mode is ViewMode.OVERVIEW
        assert "Vulcan" in capsys.readouterr().out

    def test_no_direct_body_to_body(self, scene):
        view = scene.view
        view.focus_on("Earth")
        assert not view.focus_on("Mars")
        assert view.focus == "Earth"

    def test_body_without_missions(self, scene):
        scene.view.focus_on("Mars")
        assert scene.view.missions == ()


class TestTwoStageCamera:
    def test_approach_then_settle(self, scene, clock, config):
        view, cam = scene.view, scene.camera
        p = body_position(scene.system.get_body("Earth"), view.clock.elapsed)
        x0, y0 = cam.x, cam.y
        view.focus_on("Earth")
        # rebased into the focused frame, then approaching its origin
        assert (cam.x, cam.y) == (pytest.approx(x0 - p.x), pytest.approx(y0 - p.y))
        assert (cam.target.x, cam.target.y) == (0.0, 0.0)
        assert cam.target.zoom == pytest.approx(config.focus_approach_zoom)
        assert len(view.scheduler.pending("focus-settle")) == 1

        settle(scene, clock, config.focus_settle_delay_ms)
        assert (cam.target.x, cam.target.y) == (0.0, 0.0)
        assert cam.target.zoom == pytest.approx(config.focus_zoom)

        settle(scene, clock, config.transition_ms)
        assert (cam.x, cam.y, cam.zoom) == (0.0, 0.0, config.focus_zoom)

    def test_back_during_delay_drops_settle(self, scene, clock, config):
        view, cam = scene.view, scene.camera
        view.focus_on("Earth")
        clock.advance(200)
        view.back()
        settle(scene, clock, config.focus_settle_delay_ms)
        assert view.mode is ViewMode.OVERVIEW
        assert (cam.target.x, cam.target.y, cam.target.zoom) == (0.0, 0.0, config.overview_zoom)

    def test_refocus_during_delay_keeps_only_latest(self, scene, clock, config):
        view, cam = scene.view, scene.camera
        view.focus_on("Earth")
        clock.advance(100)
        view.back()
        view.focus_on("Mars")
        # Earth's settle falls due first and must not fire
        clock.advance(config.focus_settle_delay_ms - 100)
        assert view.scheduler.run_due(clock.now) == 0
        assert cam.target.zoom == pytest.approx(config.focus_approach_zoom)

        clock.advance(100)
        assert view.scheduler.run_due(clock.now) == 1
        assert cam.target.zoom == pytest.approx(config.focus_zoom)


class TestReset:
    @pytest.mark.parametrize("focused,paused", [(False, False), (True, False),
                                                (False, True), (True, True)])
    def test_reset_from_any_state(self, scene, clock, config, focused, paused):
        view, cam = scene.view, scene.camera
        if focused:
            view.focus_on("Earth")
        view.set_paused(paused)
        cam.pan_to(300, -200)
        view.reset()
        settle(scene, clock, config.transition_ms + 1000)
        assert view.mode is ViewMode.OVERVIEW
        assert view.focus is None
        assert view.missions == ()
        assert (cam.x, cam.y, cam.zoom) == (0.0, 0.0, config.overview_zoom)
        assert view.clock.paused == paused

    def test_idempotent(self, scene):
        scene.view.reset()
        scene.view.reset()
        assert scene.view.mode is ViewMode.OVERVIEW

    def test_reset_closes_card(self, scene):
        view = scene.view
        view.focus_on("Earth")
        view.open_mission(view.missions[0])
        view.reset()
        assert not view.card_open


class TestPins:
    def test_anchor_kinds(self, scene):
        view = scene.view
        view.focus_on("Earth")
        assert view.pin_for("M-MOON").anchor == ANCHOR_MOON
        assert view.pin_for("M-MOON").moon == "Moon"
        assert view.pin_for("M-LEO").anchor == ANCHOR_BODY
        assert view.pin_for("M-GHOST").anchor == ANCHOR_BODY

    def test_stable_across_refocus(self, scene):
        view = scene.view
        view.focus_on("Earth")
        first = dict(view.pins)
        view.back()
        view.focus_on("Earth")
        assert view.pins == first

    def test_seeded_from_mission_and_body(self, small_system, config):
        mission = small_system.get_mission("M-MOON")
        body = small_system.get_body("Earth")
        pin = place_pin(mission, body, config)
        rng = make_rng(hash_string(pair_key("M-MOON", "Earth")))
        angle = rng() * 6.283185307179586
        distance = config.pin_moon_base + rng() * config.pin_moon_jitter
        assert pin.angle == pytest.approx(angle)
        assert pin.distance == pytest.approx(distance)

    def test_distance_ranges(self, scene, config):
        scene.view.focus_on("Earth")
        for pin in scene.view.pins.values():
            if pin.anchor == ANCHOR_MOON:
                assert config.pin_moon_base <= pin.distance < config.pin_moon_base + config.pin_moon_jitter
            else:
                assert config.pin_body_base <= pin.distance < config.pin_body_base + config.pin_body_jitter


class TestClockControl:
    def test_paused_clock_does_not_advance(self, scene):
        view = scene.view
        view.set_paused(True)
        view.advance(5.0)
        assert view.clock.elapsed == 0.0

    def test_zero_time_scale_does_not_advance(self, scene):
        view = scene.view
        view.set_time_scale(0)
        view.advance(5.0)
        assert view.clock.elapsed == 0.0
        assert not view.clock.paused

    def test_pause_keeps_mode(self, scene):
        scene.view.focus_on("Earth")
        scene.view.toggle_pause()
        assert scene.view.mode is ViewMode.FOCUSED

    def test_negative_time_scale(self, scene):
        with pytest.raises(ValueError):
            scene.view.set_time_scale(-2)


class TestNotifications:
    def test_every_transition_emits(self, scene):
        snaps = []
        view = scene.view
        view.subscribe(snaps.append)
        view.focus_on("Earth")
        view.open_mission(view.missions[0])
        view.close_mission()
        view.toggle_pause()
        view.speed_up()
        view.back()
        view.reset()
        assert [s.reason for s in snaps] == ["focus", "select", "select", "pause",
                                             "time_scale", "back", "reset"]
        focus = snaps[0]
        assert focus.mode is ViewMode.FOCUSED
        assert focus.focus == "Earth"
        assert len(focus.missions) == 3
        assert snaps[1].selected.id == "M-MOON"
        assert snaps[3].paused
        assert snaps[4].time_scale == 20

    def test_rejected_transition_is_silent(self, scene):
        snaps = []
        scene.view.subscribe(snaps.append)
        scene.view.focus_on("Vulcan")
        scene.view.back()
        assert snaps == []

    def test_unsubscribe(self, scene):
        snaps = []
        scene.view.subscribe(snaps.append)
        scene.view.unsubscribe(snaps.append)
        scene.view.reset()
        assert snaps == []
