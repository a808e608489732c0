"""
Camera - world → screen mapping with animated transitions.

The map is a plain affine transform: translate by the camera centre,
scale uniformly by zoom, then move the origin to the viewport centre.

    sx = (wx - cx) * zoom + width / 2
    sy = (wy - cy) * zoom + height / 2

Transitions
-----------
set_target() captures the current pose and eases towards the requested
one; tick(now) is called once per frame. Any manual pan/zoom calls
cancel_animation() first so the user always wins over an in-flight
transition.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .config import ZOOM_MIN, ZOOM_MAX, DEFAULT_TRANSITION_MS
from .time_controller import now_ms


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def ease_in_out(t: float) -> float:
    """Cubic ease-in-out: ease(0)=0, ease(0.5)=0.5, ease(1)=1."""
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - ((-2.0 * t + 2.0) ** 3) / 2.0


@dataclass(slots=True)
class CameraPose:
    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0


class Camera:
    """
    Pan/zoom camera over the world plane.

    Parameters
    ----------
    width, height : viewport size in logical pixels
    zoom_min, zoom_max : range enforced on every zoom change
    time_source : callable returning milliseconds (default: perf counter)
    """

    def __init__(self, width: float = 1280, height: float = 800,
                 zoom_min: float = ZOOM_MIN, zoom_max: float = ZOOM_MAX,
                 time_source: Optional[Callable[[], float]] = None):
        self.width = float(width)
        self.height = float(height)
        self.zoom_min = zoom_min
        self.zoom_max = zoom_max
        self._time = time_source or now_ms

        self.pose = CameraPose()
        self._start = CameraPose()
        self._target = CameraPose()
        self._start_at = 0.0
        self._duration = DEFAULT_TRANSITION_MS
        self.progress = 1.0     # elapsed fraction of the current animation

    # ── Properties ──────────────────────────────────────────────────────────

    @property
    def x(self) -> float:
        return self.pose.x

    @property
    def y(self) -> float:
        return self.pose.y

    @property
    def zoom(self) -> float:
        return self.pose.zoom

    @property
    def target(self) -> CameraPose:
        return CameraPose(self._target.x, self._target.y, self._target.zoom)

    @property
    def animating(self) -> bool:
        return self.progress < 1.0

    def set_viewport(self, width: float, height: float):
        self.width = float(width)
        self.height = float(height)

    def clamp_zoom(self, zoom: float) -> float:
        return clamp(zoom, self.zoom_min, self.zoom_max)

    # ── Animation ───────────────────────────────────────────────────────────

    def set_target(self, x: float, y: float, zoom: float,
                   duration_ms: float = DEFAULT_TRANSITION_MS,
                   now: Optional[float] = None):
        """Start an eased transition from the current pose to (x, y, zoom)."""
        if zoom <= 0:
            raise ValueError(f"Camera zoom must be positive, got {zoom}")
        self._start = CameraPose(self.pose.x, self.pose.y, self.pose.zoom)
        self._target = CameraPose(float(x), float(y), self.clamp_zoom(zoom))
        self._duration = max(0.0, float(duration_ms))
        self._start_at = self._time() if now is None else now
        self.progress = 0.0

    def tick(self, now: Optional[float] = None):
        """Advance an in-flight transition to time `now` (ms)."""
        if self.progress >= 1.0:
            return
        if now is None:
            now = self._time()
        if self._duration <= 0:
            t = 1.0
        else:
            t = clamp((now - self._start_at) / self._duration, 0.0, 1.0)

        if t >= 1.0:
            # Land exactly on the target, no interpolation residue
            self.pose = CameraPose(self._target.x, self._target.y, self._target.zoom)
        else:
            e = ease_in_out(t)
            self.pose = CameraPose(
                lerp(self._start.x, self._target.x, e),
                lerp(self._start.y, self._target.y, e),
                lerp(self._start.zoom, self._target.zoom, e),
            )
        self.progress = t

    def cancel_animation(self):
        """Freeze at the current pose, dropping any in-flight transition."""
        self.progress = 1.0
        self._target = CameraPose(self.pose.x, self.pose.y, self.pose.zoom)

    def snap_to(self, x: float, y: float, zoom: float):
        self.pose = CameraPose(float(x), float(y), self.clamp_zoom(zoom))
        self.cancel_animation()

    # ── Manual control ──────────────────────────────────────────────────────

    def pan_to(self, x: float, y: float):
        self.cancel_animation()
        self.pose = CameraPose(float(x), float(y), self.pose.zoom)

    def zoom_by(self, factor: float):
        """Multiply zoom around the viewport centre."""
        self.cancel_animation()
        self.pose = CameraPose(self.pose.x, self.pose.y,
                               self.clamp_zoom(self.pose.zoom * factor))

    def zoom_at(self, sx: float, sy: float, factor: float):
        """Multiply zoom keeping the world point under (sx, sy) fixed."""
        self.cancel_animation()
        before = self.screen_to_world(sx, sy)
        self.pose = CameraPose(self.pose.x, self.pose.y,
                               self.clamp_zoom(self.pose.zoom * factor))
        after = self.screen_to_world(sx, sy)
        self.pose = CameraPose(self.pose.x + before[0] - after[0],
                               self.pose.y + before[1] - after[1],
                               self.pose.zoom)

    # ── Projection ──────────────────────────────────────────────────────────

    def world_to_screen(self, wx: float, wy: float) -> Tuple[float, float]:
        z = self.pose.zoom
        return ((wx - self.pose.x) * z + self.width / 2.0,
                (wy - self.pose.y) * z + self.height / 2.0)

    def screen_to_world(self, sx: float, sy: float) -> Tuple[float, float]:
        z = self.pose.zoom
        return ((sx - self.width / 2.0) / z + self.pose.x,
                (sy - self.height / 2.0) / z + self.pose.y)

    def world_length(self, length: float) -> float:
        """World distance → screen pixels."""
        return length * self.pose.zoom
