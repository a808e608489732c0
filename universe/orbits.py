"""
Orbital position model.

Positions are a stylised periodic function of the simulated clock, not a
Keplerian solution: every body moves on a circle at constant angular rate,
starting from a phase derived from its id.

    angle = radians(hash(id) mod 360) + (t / period) * 2π
    (x, y) = (cos(angle) * r, sin(angle) * r)

Pure functions of (descriptor, time) - no per-body state anywhere.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

from core.seeded_rng import hash_string, pair_key
from .bodies import Body, Moon

TAU = math.tau


@dataclass(frozen=True, slots=True)
class OrbitPosition:
    x: float
    y: float
    angle: float
    radius: float = 0.0


def phase_of(key: str) -> float:
    """Stable starting phase (radians) for an identifier."""
    return math.radians(hash_string(key) % 360)


def orbit_angle(key: str, t: float, period: float) -> float:
    angle = phase_of(key)
    if period > 0:
        angle += (t / period) * TAU
    return angle


def body_position(body: Body, t: float) -> OrbitPosition:
    """Position of body at simulated time t, centred on the root."""
    if body.orbit == 0:
        return OrbitPosition(0.0, 0.0, 0.0, 0.0)
    angle = orbit_angle(body.id, t, body.period)
    return OrbitPosition(math.cos(angle) * body.orbit,
                         math.sin(angle) * body.orbit,
                         angle, body.orbit)


def moon_position(host_id: str, moon: Moon, t: float,
                  radius: Optional[float] = None) -> OrbitPosition:
    """
    Position of moon relative to its host at time t.

    radius overrides the moon's own orbit for display layouts; the phase
    and angular rate are unaffected.
    """
    r = moon.orbit if radius is None else radius
    angle = orbit_angle(pair_key(host_id, moon.name), t, moon.period)
    return OrbitPosition(math.cos(angle) * r, math.sin(angle) * r, angle, r)


def compress_orbit(r: float, cap: float = 40.0) -> float:
    """
    Display-only radius compression: r / (1 + r / cap).
    Monotonic, ≈ r for small r, bounded above by cap.
    """
    if r <= 0:
        return 0.0
    return r / (1.0 + r / cap)
