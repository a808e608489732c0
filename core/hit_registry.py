"""
Hit-test registry.

Rebuilt from scratch every frame: the renderer registers a circle for
each interactive element as it draws it, and pointer picking walks the
list from the top (last registered) down. Entries are only valid until
the next clear().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional

# Target kinds
KIND_SUN = "sun"
KIND_PLANET = "planet"
KIND_MISSION = "mission"


@dataclass(slots=True)
class HitTarget:
    kind: str
    id: str
    x: float
    y: float
    radius: float
    payload: Any = None

    def contains(self, sx: float, sy: float) -> bool:
        dx = sx - self.x
        dy = sy - self.y
        return dx * dx + dy * dy <= self.radius * self.radius


class HitRegistry:
    """Per-frame list of screen-space pick circles."""

    def __init__(self):
        self._targets: List[HitTarget] = []

    def clear(self):
        self._targets = []

    def register(self, kind: str, target_id: str, x: float, y: float,
                 radius: float, payload: Any = None) -> HitTarget:
        target = HitTarget(kind, target_id, x, y, radius, payload)
        self._targets.append(target)
        return target

    def pick(self, sx: float, sy: float) -> Optional[HitTarget]:
        """Topmost target whose circle contains (sx, sy), or None."""
        for target in reversed(self._targets):
            if target.contains(sx, sy):
                return target
        return None

    def targets(self) -> List[HitTarget]:
        return list(self._targets)

    def __len__(self) -> int:
        return len(self._targets)
