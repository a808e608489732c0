"""
Scene Renderer - draws one frame of the tracker.

Frame layout
------------
  background + starfield        decorative, parallaxed by the camera
  OVERVIEW:
    orbit rings                 one per orbiting body
    belts                       scattered points + radial dust band
    root (Sun)                  glow + disc, hit target "sun"
    bodies                      glow + disc + label, hit target "planet"
      moons                     ring + disc, fade in above zoom 0.9, not pickable
  FOCUSED:
    vignette
    focused body                fixed-size disc at the world origin
    moons                       host-relative rings sized for the focused frame
    mission pins                glow + dot + label, hit target "mission"

Hit targets are registered in draw order, so later elements win picks.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from core.camera import Camera, clamp, lerp
from core.config import MoonLayout, TrackerConfig
from core.hit_registry import HitRegistry, HitTarget, KIND_MISSION, KIND_PLANET, KIND_SUN
from universe.bodies import Body, Moon
from universe.orbits import body_position, compress_orbit, moon_position
from universe.system import SolarSystem
from game.view_state import ANCHOR_BODY, ANCHOR_MOON, PinPlacement, ViewMode, ViewStateMachine
from .backdrop import BeltScatter, build_belt, build_starfield
from .render_surface import GradientStop, RenderSurface

# Palette
SPACE_BG = (5, 5, 10)
WHITE = (255, 255, 255)
PIN_PINK = (255, 10, 107)
CLEAR = (0, 0, 0, 0)

SUN_GLOW = (
    GradientStop(0.00, (255, 220, 140, 242)),
    GradientStop(0.25, (255, 110, 80, 102)),
    GradientStop(1.00, (255, 110, 80, 0)),
)
FOCUS_GLOW = (
    GradientStop(0.0, (24, 160, 255, 46)),
    GradientStop(0.2, (138, 43, 226, 31)),
    GradientStop(1.0, CLEAR),
)
PIN_GLOW = (
    GradientStop(0.00, (255, 10, 107, 107)),
    GradientStop(0.25, (138, 43, 226, 56)),
    GradientStop(1.00, CLEAR),
)
VIGNETTE = (
    GradientStop(0.0, CLEAR),
    GradientStop(1.0, (0, 0, 0, 115)),
)

# Zoom thresholds
MOON_FADE_START = 0.9
LABEL_ZOOM = 1.25
SIZE_DAMP_RANGE = 1.2

# Screen sizes (px)
SUN_GLOW_SCALE = 7.0
FOCUS_BODY_RADIUS = 10.0
PIN_GLOW_RADIUS = 22.0
PIN_DOT_RADIUS = 6.2
PIN_PICK_RADIUS = 14.0


def size_zoom_multiplier(zoom: float) -> float:
    """
    Scale factor for body sizes: follows zoom up to 1.25×, then eases
    towards a constant screen size so close-ups are not swamped.
    """
    t = clamp((zoom - LABEL_ZOOM) / SIZE_DAMP_RANGE, 0.0, 1.0)
    return lerp(zoom, 1.0, t)


def moon_fade(zoom: float) -> float:
    return clamp((zoom - MOON_FADE_START) / MOON_FADE_START, 0.0, 1.0)


class SceneRenderer:
    """Draws the scene onto a RenderSurface and fills the hit registry."""

    def __init__(self, system: SolarSystem, config: Optional[TrackerConfig] = None):
        self.system = system
        self.config = config or TrackerConfig()
        self.starfield = build_starfield(self.config.starfield_seed,
                                         self.config.starfield_count)
        self.belts = self._build_belts()

    def _build_belts(self) -> List[BeltScatter]:
        cfg = self.config
        belts = []
        asteroid = self.system.get_body(cfg.asteroid_belt_body)
        if asteroid is not None:
            belts.append(build_belt("Asteroid", asteroid.orbit, cfg.asteroid_belt_seed,
                                    count=140, jitter=10.0))
        kuiper = self.system.get_body(cfg.kuiper_belt_body)
        if kuiper is not None:
            belts.append(build_belt("Kuiper", kuiper.orbit, cfg.kuiper_belt_seed,
                                    count=110, jitter=12.0))
        return belts

    # -----------------------------------------------------------------------
    # Frame
    # -----------------------------------------------------------------------

    def draw(self, surface: RenderSurface, camera: Camera, view: ViewStateMachine,
             registry: HitRegistry, hover: Optional[HitTarget] = None):
        """Draw one frame. The registry must have been cleared by the caller."""
        self.draw_stars(surface, camera)
        t = view.clock.elapsed
        if view.mode is ViewMode.OVERVIEW:
            self.draw_overview(surface, camera, registry, t, hover)
        else:
            self.draw_vignette(surface)
            self.draw_focused(surface, camera, view, registry, t)

    def draw_stars(self, surface: RenderSurface, camera: Camera):
        surface.clear(SPACE_BG)
        pts = self.starfield.project(surface.width, surface.height,
                                     camera.x, camera.y, self.config.starfield_parallax)
        for (x, y), r, a in zip(pts, self.starfield.points[:, 2], self.starfield.points[:, 3]):
            surface.fill_circle((float(x), float(y)), float(r), WHITE, alpha=float(a))

    def draw_vignette(self, surface: RenderSurface):
        w, h = surface.width, surface.height
        surface.fill_radial_gradient((w / 2, h / 2), min(w, h) * 0.15,
                                     max(w, h) * 0.62, VIGNETTE, cover=True)

    # -----------------------------------------------------------------------
    # Overview
    # -----------------------------------------------------------------------

    def draw_overview(self, surface: RenderSurface, camera: Camera,
                      registry: HitRegistry, t: float,
                      hover: Optional[HitTarget] = None):
        origin = camera.world_to_screen(0.0, 0.0)
        for body in self.system.bodies:
            if body.orbit:
                surface.stroke_circle(origin, camera.world_length(body.orbit), WHITE, alpha=0.08)

        for belt in self.belts:
            self.draw_belt(surface, camera, belt)

        self.draw_root(surface, camera, registry)

        for body in self.system.bodies:
            self.draw_body(surface, camera, registry, body, t, hover)

    def draw_belt(self, surface: RenderSurface, camera: Camera, belt: BeltScatter):
        for wx, wy, r, a in belt.points:
            s = camera.world_to_screen(float(wx), float(wy))
            surface.fill_circle(s, float(r), WHITE, alpha=float(a))

        c = camera.world_to_screen(0.0, 0.0)
        r = camera.world_length(belt.orbit)
        w = camera.world_length(belt.band_width)
        surface.fill_radial_gradient(c, max(1.0, r - w), r + w, (
            GradientStop(0.00, (255, 255, 255, 0)),
            GradientStop(0.45, (255, 255, 255, 8)),
            GradientStop(0.55, (255, 255, 255, 8)),
            GradientStop(1.00, (255, 255, 255, 0)),
        ))

    def draw_root(self, surface: RenderSurface, camera: Camera, registry: HitRegistry):
        root = self.system.root
        c = camera.world_to_screen(0.0, 0.0)
        r = camera.world_length(root.size)
        surface.fill_radial_gradient(c, 0.0, r * SUN_GLOW_SCALE, SUN_GLOW)
        surface.fill_circle(c, r, root.color)
        registry.register(KIND_SUN, root.id, c[0], c[1], max(10.0, r), root)

    def draw_body(self, surface: RenderSurface, camera: Camera, registry: HitRegistry,
                  body: Body, t: float, hover: Optional[HitTarget] = None):
        p = body_position(body, t)
        s = camera.world_to_screen(p.x, p.y)
        pr = max(4.0, body.size * 1.2) * size_zoom_multiplier(camera.zoom)

        surface.fill_radial_gradient(s, 0.0, pr * 4, (
            GradientStop(0.0, (*body.color[:3], 36)),
            GradientStop(1.0, CLEAR),
        ))
        surface.fill_circle(s, pr, body.color)
        surface.stroke_circle(s, pr, WHITE, alpha=0.18)

        if hover is not None and hover.kind == KIND_PLANET and hover.id == body.id:
            surface.stroke_circle(s, pr + 6, PIN_PINK, alpha=0.55, width=2)

        surface.text((s[0] + pr + 8, s[1]), body.id, WHITE, size=12, alpha=0.75)
        registry.register(KIND_PLANET, body.id, s[0], s[1], max(12.0, pr + 6), body)

        self.draw_overview_moons(surface, camera, body, p.x, p.y, t)

    def overview_moon_orbit(self, moon: Moon) -> float:
        """Display radius of a moon's orbit in the overview (world units)."""
        if self.config.moon_layout is MoonLayout.COMPRESSED:
            return compress_orbit(moon.orbit / 3.0, self.config.moon_orbit_cap)
        return moon.orbit

    def draw_overview_moons(self, surface: RenderSurface, camera: Camera,
                            host: Body, hx: float, hy: float, t: float):
        if not host.moons:
            return
        fade = moon_fade(camera.zoom)
        if fade <= 0.02:
            return

        host_s = camera.world_to_screen(hx, hy)
        orbits = [self.overview_moon_orbit(m) for m in host.moons]
        for orbit in orbits:
            surface.stroke_circle(host_s, camera.world_length(orbit), WHITE, alpha=0.08 * fade)

        compressed = self.config.moon_layout is MoonLayout.COMPRESSED
        for moon, orbit in zip(host.moons, orbits):
            mp = moon_position(host.id, moon, t, radius=orbit)
            s = camera.world_to_screen(hx + mp.x, hy + mp.y)
            base = max(1.6, moon.size * 0.55)
            r = base * (size_zoom_multiplier(camera.zoom) if compressed else camera.zoom)
            surface.fill_circle(s, r, moon.color, alpha=0.75 * fade)
            if camera.zoom >= LABEL_ZOOM:
                surface.text((s[0] + r + 6, s[1]), moon.name, WHITE, size=11,
                             alpha=0.65 * fade)

    # -----------------------------------------------------------------------
    # Focused
    # -----------------------------------------------------------------------

    def focus_moon_orbit(self, moon: Moon) -> float:
        cfg = self.config
        return cfg.focus_moon_base_orbit + moon.orbit * cfg.focus_moon_orbit_scale

    def focus_moon_world(self, host: Body, moon: Moon, t: float) -> Tuple[float, float]:
        """Moon position in the focused frame (host at the origin, slowed clock)."""
        mp = moon_position(host.id, moon, t / self.config.focus_time_divisor,
                           radius=self.focus_moon_orbit(moon))
        return mp.x, mp.y

    def pin_screen_position(self, camera: Camera, body: Body, pin: PinPlacement,
                            t: float) -> Tuple[float, float]:
        """Screen position of a pin: its anchor's current position + its offset."""
        if pin.anchor == ANCHOR_MOON and body.moons:
            idx = body.moon_index(pin.moon)
            moon = body.moons[idx] if idx >= 0 else body.moons[0]
            anchor = camera.world_to_screen(*self.focus_moon_world(body, moon, t))
        else:
            anchor = camera.world_to_screen(0.0, 0.0)
        dx, dy = pin.offset()
        return anchor[0] + dx, anchor[1] + dy

    def focused_pin_positions(self, camera: Camera, view: ViewStateMachine
                              ) -> Dict[str, Tuple[float, float]]:
        body = view.focused_body
        if body is None:
            return {}
        t = view.clock.elapsed
        out = {}
        for m in view.missions:
            pin = view.pin_for(m.id) or PinPlacement(m.id, ANCHOR_BODY, 0.0, 22.0)
            out[m.id] = self.pin_screen_position(camera, body, pin, t)
        return out

    def draw_focused(self, surface: RenderSurface, camera: Camera,
                     view: ViewStateMachine, registry: HitRegistry, t: float):
        body = view.focused_body
        if body is None:
            return

        center = camera.world_to_screen(0.0, 0.0)
        r = FOCUS_BODY_RADIUS
        surface.fill_radial_gradient(center, 0.0, r * 4.2, FOCUS_GLOW)
        surface.fill_circle(center, r, body.color)
        surface.stroke_circle(center, r, WHITE, alpha=0.22, width=2)
        surface.text((center[0] + r + 12, center[1]), body.id, WHITE, size=16, alpha=0.82)

        if body.moons:
            for moon in body.moons:
                surface.stroke_circle(center, camera.world_length(self.focus_moon_orbit(moon)),
                                      WHITE, alpha=0.10)
            for moon in body.moons:
                s = camera.world_to_screen(*self.focus_moon_world(body, moon, t))
                mr = clamp(moon.size * 2.0, 6.0, 11.0)
                surface.fill_circle(s, mr, moon.color)
                surface.stroke_circle(s, mr, WHITE, alpha=0.22)
                surface.text((s[0] + mr + 8, s[1]), moon.name, WHITE, size=12, alpha=0.70)
        else:
            surface.text((center[0] - 85, center[1] + r + 38), "This planet has no moons.",
                         WHITE, size=13, alpha=0.62)

        positions = self.focused_pin_positions(camera, view)
        for m in view.missions:
            x, y = positions[m.id]
            self.draw_pin(surface, x, y, m.id)
            registry.register(KIND_MISSION, m.id, x, y, PIN_PICK_RADIUS, m)

    def draw_pin(self, surface: RenderSurface, x: float, y: float, label: str):
        surface.fill_radial_gradient((x, y), 0.0, PIN_GLOW_RADIUS, PIN_GLOW)
        surface.fill_circle((x, y), PIN_DOT_RADIUS, PIN_PINK)
        surface.stroke_circle((x, y), PIN_DOT_RADIUS, WHITE, alpha=0.70)
        surface.text((x + 10, y - 8), label, WHITE, size=12, alpha=0.78)
