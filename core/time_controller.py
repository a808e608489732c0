"""
SimClock - shared simulated time.

Elapsed simulated time is measured in days and advanced once per frame
from the wall-clock delta. It never runs backwards.

Speed ladder (simulated days per real second):
    SPEEDS = [0, 1, 2, 5, 10, 20, 50, 100]

Controls:
    clock.toggle_pause()
    clock.set_time_scale(x)   - any x >= 0 (0 = frozen, independent of pause)
    clock.speed_up()          - next step on the ladder
    clock.speed_down()        - previous step (down to 0)
    clock.step(dt_wall)       - called every frame, returns elapsed days
"""

from __future__ import annotations
import time

from .config import DEFAULT_TIME_SCALE


SPEEDS = [0, 1, 2, 5, 10, 20, 50, 100]


def now_ms() -> float:
    """Monotonic wall clock in milliseconds."""
    return time.perf_counter() * 1000.0


def format_speed(x: float) -> str:
    if float(x).is_integer():
        return f"{int(x)}×"
    return f"{x:g}×"


class SimClock:
    """
    Simulated clock with pause and time-scale multiplier.

    Parameters
    ----------
    time_scale : simulated days per real second
    paused     : start paused
    elapsed    : initial elapsed simulated days
    """

    def __init__(self, time_scale: float = DEFAULT_TIME_SCALE,
                 paused: bool = False, elapsed: float = 0.0):
        if time_scale < 0:
            raise ValueError(f"time_scale must be >= 0, got {time_scale}")
        self._elapsed = float(elapsed)
        self._time_scale = float(time_scale)
        self._paused = bool(paused)

    # ── Properties ──────────────────────────────────────────────────────────

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def frozen(self) -> bool:
        """True when time does not advance for either reason."""
        return self._paused or self._time_scale == 0

    @property
    def speed_label(self) -> str:
        if self._paused:
            return "PAUSED"
        if self._time_scale == 0:
            return "0× frozen"
        return format_speed(self._time_scale)

    # ── Controls ────────────────────────────────────────────────────────────

    def set_paused(self, paused: bool):
        self._paused = bool(paused)

    def toggle_pause(self):
        self._paused = not self._paused

    def set_time_scale(self, x: float):
        if x < 0:
            raise ValueError(f"time_scale must be >= 0, got {x}")
        self._time_scale = float(x)

    def speed_up(self):
        """Move to the next faster step on the ladder."""
        for s in SPEEDS:
            if s > self._time_scale:
                self._time_scale = float(s)
                return

    def speed_down(self):
        """Move to the next slower step on the ladder (stops at 0)."""
        for s in reversed(SPEEDS):
            if s < self._time_scale:
                self._time_scale = float(s)
                return

    # ── Frame update ────────────────────────────────────────────────────────

    def step(self, dt_wall: float) -> float:
        """
        Advance by dt_wall real seconds; returns elapsed simulated days.
        Non-positive deltas are ignored so the clock stays monotonic.
        """
        if not self._paused and dt_wall > 0:
            self._elapsed += dt_wall * self._time_scale
        return self._elapsed
