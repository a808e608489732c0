"""
View state machine - overview ↔ focused.

States
------
  OVERVIEW   whole system, every body clickable
  FOCUSED    one body enlarged at the origin with its moons and mission pins

Transitions
-----------
  OVERVIEW --focus_on(id)--> FOCUSED     pins placed, two-stage camera move
  FOCUSED  --back()-------> OVERVIEW     camera back to the overview pose
  any      --reset()------> OVERVIEW     idempotent escape hatch

Body-to-body focus is not direct: go back to the overview first.

Every change is pushed to subscribers as a ViewSnapshot; the machine keeps
no UI text of its own.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Hashable, List, Optional, Tuple

from core.camera import Camera
from core.config import TrackerConfig
from core.seeded_rng import hash_string, make_rng, pair_key
from core.time_controller import SimClock, now_ms
from universe.bodies import Body, Mission
from universe.orbits import body_position
from universe.system import SolarSystem
from .scheduler import TaskScheduler

TAU = math.tau

ANCHOR_BODY = "body"
ANCHOR_MOON = "moon"


class ViewMode(Enum):
    OVERVIEW = "overview"
    FOCUSED = "focused"


@dataclass(frozen=True, slots=True)
class PinPlacement:
    """Where a mission pin sits relative to its anchor (screen pixels)."""
    mission_id: str
    anchor: str                   # ANCHOR_BODY or ANCHOR_MOON
    angle: float                  # radians
    distance: float               # pixels from the anchor
    moon: Optional[str] = None    # anchor moon name

    def offset(self) -> Tuple[float, float]:
        return (math.cos(self.angle) * self.distance,
                math.sin(self.angle) * self.distance)


@dataclass(frozen=True)
class ViewSnapshot:
    """What the UI needs after every transition."""
    mode: ViewMode
    focus: Optional[str]
    missions: Tuple[Mission, ...]
    elapsed: float
    paused: bool
    time_scale: float
    selected: Optional[Mission] = None
    reason: str = ""


def place_pin(mission: Mission, body: Body, config: TrackerConfig) -> PinPlacement:
    """
    Stable pin placement for mission inside body's focused view.

    Seeded from (mission id, body id): the same mission lands on the same
    spot every time that body is focused.
    """
    rng = make_rng(hash_string(pair_key(mission.id, body.id)))
    moon = body.find_moon(mission.target)
    if moon is not None:
        angle = rng() * TAU
        distance = config.pin_moon_base + rng() * config.pin_moon_jitter
        return PinPlacement(mission.id, ANCHOR_MOON, angle, distance, moon.name)
    angle = rng() * TAU
    distance = config.pin_body_base + rng() * config.pin_body_jitter
    return PinPlacement(mission.id, ANCHOR_BODY, angle, distance)


Listener = Callable[[ViewSnapshot], None]


class ViewStateMachine:
    """
    Owns the view mode, the focused body and its missions, the simulated
    clock and the selected mission. Drives the camera on transitions.
    """

    def __init__(self, system: SolarSystem, camera: Camera,
                 config: Optional[TrackerConfig] = None,
                 clock: Optional[SimClock] = None,
                 time_source: Optional[Callable[[], float]] = None):
        self.system = system
        self.camera = camera
        self.config = config or TrackerConfig()
        self.clock = clock or SimClock(self.config.time_scale,
                                       paused=self.config.start_paused)
        self._time = time_source or now_ms
        self.scheduler = TaskScheduler(self.view_key)

        self.mode = ViewMode.OVERVIEW
        self.focus: Optional[str] = None
        self.missions: Tuple[Mission, ...] = ()
        self.pins: Dict[str, PinPlacement] = {}
        self.selected: Optional[Mission] = None

        self._listeners: List[Listener] = []

    # -----------------------------------------------------------------------
    # Subscribers
    # -----------------------------------------------------------------------

    def subscribe(self, listener: Listener):
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self, reason: str = "") -> ViewSnapshot:
        return ViewSnapshot(
            mode=self.mode,
            focus=self.focus,
            missions=self.missions,
            elapsed=self.clock.elapsed,
            paused=self.clock.paused,
            time_scale=self.clock.time_scale,
            selected=self.selected,
            reason=reason,
        )

    def _emit(self, reason: str):
        snap = self.snapshot(reason)
        for listener in list(self._listeners):
            listener(snap)

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    @property
    def is_focused(self) -> bool:
        return self.mode is ViewMode.FOCUSED

    @property
    def card_open(self) -> bool:
        return self.selected is not None

    @property
    def focused_body(self) -> Optional[Body]:
        return self.system.get_body(self.focus)

    def view_key(self) -> Hashable:
        return (self.mode, self.focus)

    def pin_for(self, mission_id: str) -> Optional[PinPlacement]:
        return self.pins.get(mission_id)

    # -----------------------------------------------------------------------
    # Transitions
    # -----------------------------------------------------------------------

    def focus_on(self, body_id: str) -> bool:
        """
        Enter the focused view of body_id.

        Rejected (returns False, nothing changes) when already focused or
        when body_id is unknown.
        """
        if self.mode is ViewMode.FOCUSED:
            print(f"Warning: focus_on({body_id!r}) while focused on "
                  f"{self.focus!r}; go back to the overview first")
            return False
        body = self.system.get_body(body_id)
        if body is None:
            print(f"Warning: unknown body {body_id!r}")
            return False

        self.mode = ViewMode.FOCUSED
        self.focus = body.id
        self.missions = tuple(self.system.missions_for(body.id))
        self.pins = {m.id: place_pin(m, body, self.config) for m in self.missions}
        self.selected = None

        # The focused frame draws the body at the origin. Rebase the camera
        # so the body stays where it was on screen, approach it, then
        # settle on the focused frame once the first move has played out.
        now = self._time()
        cfg = self.config
        self._rebase(body, -1.0)
        self.camera.set_target(0.0, 0.0, cfg.focus_approach_zoom,
                               cfg.focus_approach_ms, now=now)
        self.scheduler.schedule(cfg.focus_settle_delay_ms, now,
                                self._settle_focus, name="focus-settle")

        self._emit("focus")
        return True

    def _settle_focus(self):
        self.camera.set_target(0.0, 0.0, self.config.focus_zoom,
                               self.config.transition_ms, now=self._time())

    def back(self) -> bool:
        """Return to the overview. No-op (False) when not focused."""
        if self.mode is not ViewMode.FOCUSED:
            return False
        self._to_overview()
        self._emit("back")
        return True

    def reset(self):
        """Force the overview with the default camera pose, from any state."""
        self._to_overview()
        self._emit("reset")

    def _rebase(self, body: Body, sign: float):
        """Shift the camera by sign * the body's orbit position, keeping zoom."""
        p = body_position(body, self.clock.elapsed)
        cam = self.camera
        cam.snap_to(cam.x + sign * p.x, cam.y + sign * p.y, cam.zoom)

    def _to_overview(self):
        body = self.focused_body
        if self.mode is ViewMode.FOCUSED and body is not None:
            self._rebase(body, 1.0)
        self.mode = ViewMode.OVERVIEW
        self.focus = None
        self.missions = ()
        self.pins = {}
        self.selected = None
        self.camera.set_target(0.0, 0.0, self.config.overview_zoom,
                               self.config.transition_ms, now=self._time())

    # -----------------------------------------------------------------------
    # Clock
    # -----------------------------------------------------------------------

    def set_paused(self, paused: bool):
        self.clock.set_paused(paused)
        self._emit("pause")

    def toggle_pause(self):
        self.set_paused(not self.clock.paused)

    def set_time_scale(self, x: float):
        self.clock.set_time_scale(x)
        self._emit("time_scale")

    def speed_up(self):
        self.clock.speed_up()
        self._emit("time_scale")

    def speed_down(self):
        self.clock.speed_down()
        self._emit("time_scale")

    def advance(self, dt: float) -> float:
        """Advance the simulated clock by dt real seconds (no notification)."""
        return self.clock.step(dt)

    # -----------------------------------------------------------------------
    # Mission selection
    # -----------------------------------------------------------------------

    def open_mission(self, mission: Mission):
        self.selected = mission
        self._emit("select")

    def close_mission(self) -> bool:
        if self.selected is None:
            return False
        self.selected = None
        self._emit("select")
        return True
