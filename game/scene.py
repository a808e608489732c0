"""
Scene - the aggregate that owns one tracker session.

    Scene
      ├── Camera             world ↔ screen, animated transitions
      ├── ViewStateMachine   mode, focus, missions, clock, selection
      │     └── TaskScheduler delayed camera retargets
      ├── HitRegistry        pick targets of the last drawn frame
      └── SceneRenderer      draws onto a RenderSurface

Per-frame order (frame()):
  1. due delayed tasks       (stale ones are dropped)
  2. camera animation tick
  3. clear hit registry
  4. advance simulated clock
  5. draw + register targets
  6. pick the pointer against the fresh registry → hover
"""

from __future__ import annotations
from typing import Callable, Optional, Tuple

from core.camera import Camera
from core.config import TrackerConfig
from core.hit_registry import HitRegistry, HitTarget, KIND_MISSION, KIND_PLANET
from core.time_controller import now_ms
from universe.system import SolarSystem
from rendering.render_surface import RenderSurface
from rendering.scene_renderer import SceneRenderer
from .view_state import ViewStateMachine


class Scene:
    """
    One interactive map session.

    Parameters
    ----------
    system : body and mission tables (read-only)
    config : engine configuration
    width, height : initial viewport size in logical pixels
    time_source : callable returning milliseconds (tests inject a fake)
    """

    def __init__(self, system: SolarSystem, config: Optional[TrackerConfig] = None,
                 width: float = 1280, height: float = 800,
                 time_source: Optional[Callable[[], float]] = None):
        self.system = system
        self.config = config or TrackerConfig()
        self._time = time_source or now_ms

        self.camera = Camera(width, height, self.config.zoom_min, self.config.zoom_max,
                             time_source=self._time)
        self.registry = HitRegistry()
        self.view = ViewStateMachine(system, self.camera, self.config,
                                     time_source=self._time)
        self.renderer = SceneRenderer(system, self.config)

        self.pointer: Optional[Tuple[float, float]] = None
        self.hover: Optional[HitTarget] = None
        self.frame_count = 0

        # Initial camera: fit the whole system
        self.camera.set_target(0.0, 0.0, self.config.overview_zoom, 1.0,
                               now=self._time())

    def now(self) -> float:
        return self._time()

    def resize(self, width: float, height: float):
        self.camera.set_viewport(width, height)

    # -----------------------------------------------------------------------
    # Pointer tracking (hover)
    # -----------------------------------------------------------------------

    def set_pointer(self, x: float, y: float):
        self.pointer = (x, y)

    def clear_pointer(self):
        self.pointer = None
        self.hover = None

    # -----------------------------------------------------------------------
    # Frame
    # -----------------------------------------------------------------------

    def frame(self, surface: RenderSurface, dt: float, now: Optional[float] = None):
        """Simulate and draw one frame; dt in real seconds, now in ms."""
        if now is None:
            now = self._time()
        if surface.width != self.camera.width or surface.height != self.camera.height:
            self.camera.set_viewport(surface.width, surface.height)

        self.view.scheduler.run_due(now)
        self.camera.tick(now)
        self.registry.clear()
        self.view.advance(dt)

        self.renderer.draw(surface, self.camera, self.view, self.registry, self.hover)

        self.hover = self.registry.pick(*self.pointer) if self.pointer else None
        self.frame_count += 1

    def pick(self, x: float, y: float) -> Optional[HitTarget]:
        return self.registry.pick(x, y)

    @property
    def hover_is_interactive(self) -> bool:
        """True when the pointer is over something clickable (hand cursor)."""
        return self.hover is not None and self.hover.kind in (KIND_PLANET, KIND_MISSION)
