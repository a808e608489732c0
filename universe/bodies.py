"""
Body, Moon and Mission records.

These are the immutable inputs of the tracker. They are loaded once
(from catalogs/solar_system_data.py or a JSON file) and referenced, never
copied or mutated, by the engine.

    Body          a planet-like entity orbiting the root (or the root itself)
      └── Moon    orbits its host Body
    Mission       annotation pinned to a Body, optionally to one of its moons
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from core.seeded_rng import hash_string

Color = Tuple[int, ...]     # (r, g, b) or (r, g, b, a), 0-255

MOON_COLOR = (255, 255, 255, 219)


class BodyKind(Enum):
    PLANET = "planet"     # primary orbiting body
    DWARF = "dwarf"       # dwarf-classed body


@dataclass(frozen=True, slots=True)
class Moon:
    """
    Moon descriptor.

    orbit  : orbit radius relative to the host (world units)
    period : days per revolution
    size   : visual size
    """
    name: str
    orbit: float
    period: float
    size: float
    color: Color = MOON_COLOR


@dataclass(frozen=True, slots=True)
class Body:
    """
    Orbiting body. An orbit of 0 marks the non-orbiting root (the star).
    """
    id: str
    kind: BodyKind
    orbit: float
    size: float
    period: float
    color: Color
    moons: Tuple[Moon, ...] = ()

    @property
    def is_root(self) -> bool:
        return self.orbit == 0

    def find_moon(self, name: Optional[str]) -> Optional[Moon]:
        if not name:
            return None
        for moon in self.moons:
            if moon.name == name:
                return moon
        return None

    def moon_index(self, name: str) -> int:
        for i, moon in enumerate(self.moons):
            if moon.name == name:
                return i
        return -1


@dataclass(frozen=True, slots=True)
class Mission:
    """Mission annotation. `system` is a Body id; `target` a Moon name or Body id."""
    id: str
    name: str
    system: str
    target: Optional[str] = None
    status: str = ""
    type: str = ""
    launched: str = ""
    operator: str = ""
    description: str = ""
    extra: Tuple[Tuple[str, str], ...] = field(default=())

    @property
    def location(self) -> str:
        return f"{self.target} • {self.system}" if self.target else self.system


def make_moon(name: str, index: int, orbit: Optional[float] = None,
              period: Optional[float] = None, size: Optional[float] = None,
              color: Optional[Color] = None,
              base_orbit: float = 12.0, orbit_step: float = 6.0) -> Moon:
    """
    Build a Moon, filling missing fields with stable hash-derived values.

    index is the 0-based position of the moon in its host's list.
    """
    h = hash_string(name)
    if orbit is None:
        orbit = base_orbit + index * orbit_step
    if period is None:
        period = min(120.0, max(2.0, 3.5 + index * 6.5 + (h % 17) * 0.35))
    if size is None:
        size = min(4.0, max(2.0, 2.3 + (h % 7) * 0.25))
    if color is None:
        color = MOON_COLOR
    return Moon(name=name, orbit=float(orbit), period=float(period),
                size=float(size), color=tuple(color))
