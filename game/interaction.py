"""
Interaction Controller - pointer and keyboard → camera / view changes.

Toolkit-neutral: the screen translates its own events into the calls
below (positions in logical pixels, keys as lower-case names).

Controls
--------
  Drag                 Pan
  Wheel                Zoom towards the cursor
  Click planet         Focus (overview only)
  Click mission pin    Open mission card (focused only)
  Space                Pause / resume
  R                    Reset view
  B / Esc              Back to overview (Esc closes an open card first)
  0                    Recenter
  + / =   - / _        Zoom in / out
  ] / [                Faster / slower time
"""

from __future__ import annotations
import math
from typing import Optional, Tuple

from core.hit_registry import HitTarget, KIND_MISSION, KIND_PLANET
from .scene import Scene
from .view_state import ViewMode

KEY_PAUSE = ("space",)
KEY_RESET = ("r",)
KEY_BACK = ("b", "escape")
KEY_RECENTER = ("0",)
KEY_ZOOM_IN = ("+", "=")
KEY_ZOOM_OUT = ("-", "_")
KEY_FASTER = ("]",)
KEY_SLOWER = ("[",)


class InteractionController:
    """Turns raw input into Camera and ViewStateMachine operations."""

    def __init__(self, scene: Scene):
        self.scene = scene
        self.is_down = False
        self.is_dragging = False
        self._drag_start: Tuple[float, float] = (0.0, 0.0)
        self._cam_start: Tuple[float, float] = (0.0, 0.0)

    @property
    def camera(self):
        return self.scene.camera

    @property
    def view(self):
        return self.scene.view

    # -----------------------------------------------------------------------
    # Pointer
    # -----------------------------------------------------------------------

    def on_pointer_down(self, x: float, y: float):
        self.is_down = True
        self.is_dragging = False
        self._drag_start = (x, y)
        self._cam_start = (self.camera.x, self.camera.y)

    def on_pointer_move(self, x: float, y: float):
        self.scene.set_pointer(x, y)
        if not self.is_down:
            return

        dx = x - self._drag_start[0]
        dy = y - self._drag_start[1]
        threshold = self.scene.config.drag_threshold_px
        if not self.is_dragging and dx * dx + dy * dy >= threshold * threshold:
            self.is_dragging = True
            self.camera.cancel_animation()

        if self.is_dragging:
            # Content follows the pointer
            zoom = self.camera.zoom
            self.camera.pan_to(self._cam_start[0] - dx / zoom,
                               self._cam_start[1] - dy / zoom)

    def on_pointer_up(self, x: float, y: float):
        # Drag classification survives until the click that follows
        self.is_down = False

    def on_pointer_cancel(self):
        self.is_down = False
        self.is_dragging = False

    def on_pointer_leave(self):
        self.scene.clear_pointer()

    def on_click(self, x: float, y: float) -> Optional[HitTarget]:
        """
        Resolve a click against the last drawn frame.

        Returns the target acted on, or None (drag, open card, miss, or a
        target that means nothing in the current mode).
        """
        if self.view.card_open:
            return None
        if self.is_dragging:
            self.is_dragging = False
            return None

        target = self.scene.pick(x, y)
        if target is None:
            return None

        if target.kind == KIND_PLANET and self.view.mode is ViewMode.OVERVIEW:
            return target if self.view.focus_on(target.id) else None
        if target.kind == KIND_MISSION and self.view.mode is ViewMode.FOCUSED:
            self.view.open_mission(target.payload)
            return target
        return None

    def on_wheel(self, x: float, y: float, delta_y: float):
        """Wheel zoom; delta_y > 0 (scrolling down) zooms out."""
        factor = math.exp(-delta_y * self.scene.config.wheel_zoom_k)
        self.camera.zoom_at(x, y, factor)

    # -----------------------------------------------------------------------
    # Keyboard
    # -----------------------------------------------------------------------

    def on_key(self, key: str) -> bool:
        """Handle a key by name. Returns True if it was used."""
        key = key.lower()
        cfg = self.scene.config

        if key in KEY_PAUSE:
            self.view.toggle_pause()
        elif key in KEY_RESET:
            self.view.reset()
        elif key in KEY_BACK:
            if key == "escape" and self.view.close_mission():
                return True
            if not self.view.is_focused:
                return False
            self.view.back()
        elif key in KEY_RECENTER:
            self.camera.set_target(0.0, 0.0, cfg.overview_zoom, cfg.recenter_ms,
                                   now=self.scene.now())
        elif key in KEY_ZOOM_IN:
            self.camera.zoom_by(cfg.key_zoom_step)
        elif key in KEY_ZOOM_OUT:
            self.camera.zoom_by(1.0 / cfg.key_zoom_step)
        elif key in KEY_FASTER:
            self.view.speed_up()
        elif key in KEY_SLOWER:
            self.view.speed_down()
        else:
            return False
        return True
