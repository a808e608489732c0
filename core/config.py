"""
Tracker configuration.

All tunables of the simulation and interaction engine live in a single
dataclass so that screens, tests and the command line can build variants
without touching module globals.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class MoonLayout(Enum):
    """How moons are laid out around their host in the overview."""
    COMPRESSED = "compressed"   # compress_orbit(orbit / 3, cap), zoom-damped size
    ORBITAL = "orbital"         # true orbit radius, size scales with zoom


# Camera
ZOOM_MIN = 0.35
ZOOM_MAX = 9.0
WHEEL_ZOOM_K = 0.0015
KEY_ZOOM_STEP = 1.1
DEFAULT_TRANSITION_MS = 650.0

# Interaction
DRAG_THRESHOLD_PX = 4.0

# Time (simulated days per real second)
DEFAULT_TIME_SCALE = 10.0


@dataclass
class TrackerConfig:
    """Engine configuration (defaults reproduce the stock tracker)."""

    # Camera limits and input response
    zoom_min: float = ZOOM_MIN
    zoom_max: float = ZOOM_MAX
    wheel_zoom_k: float = WHEEL_ZOOM_K
    key_zoom_step: float = KEY_ZOOM_STEP
    drag_threshold_px: float = DRAG_THRESHOLD_PX

    # Camera poses and transitions
    overview_zoom: float = 1.0
    transition_ms: float = DEFAULT_TRANSITION_MS
    recenter_ms: float = 250.0
    focus_approach_zoom: float = 2.7
    focus_approach_ms: float = 700.0
    focus_settle_delay_ms: float = 720.0
    focus_zoom: float = 3.6

    # Clock
    time_scale: float = DEFAULT_TIME_SCALE
    start_paused: bool = False

    # Mission pins (screen pixels from the anchor)
    pin_moon_base: float = 18.0
    pin_moon_jitter: float = 16.0
    pin_body_base: float = 18.0
    pin_body_jitter: float = 20.0

    # Moons
    moon_layout: MoonLayout = MoonLayout.COMPRESSED
    moon_orbit_cap: float = 22.0
    focus_moon_base_orbit: float = 5.0
    focus_moon_orbit_scale: float = 2.0
    focus_time_divisor: float = 70.0

    # Decoration
    starfield_seed: int = 42
    starfield_count: int = 420
    starfield_parallax: float = 0.002
    asteroid_belt_body: str = "Dwarf Planets"
    asteroid_belt_seed: int = 7331
    kuiper_belt_body: str = "Kuiper Belt"
    kuiper_belt_seed: int = 1337

