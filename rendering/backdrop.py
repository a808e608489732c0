"""
Procedural backdrop: starfield and belt scatter.

Both are generated once from fixed seeds with make_rng(), so every run
shows the same sky. Points are kept in numpy arrays and projected in one
go each frame.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from core.seeded_rng import make_rng

TAU = math.tau

# Starfield lives in a 1.2 × 1.2 unit tile, wrapped onto the viewport
STAR_TILE = 1.2


@dataclass
class Starfield:
    """Columns: x, y (tile units), radius px, alpha."""
    points: np.ndarray

    def project(self, width: float, height: float, cam_x: float, cam_y: float,
                parallax: float) -> np.ndarray:
        """Screen positions (N, 2) for a camera centre, wrapped into the tile."""
        px = cam_x * parallax
        py = cam_y * parallax
        xs = np.mod(self.points[:, 0] + px, STAR_TILE) * width
        ys = np.mod(self.points[:, 1] + py, STAR_TILE) * height
        return np.column_stack((xs, ys))


def build_starfield(seed: int = 42, count: int = 420) -> Starfield:
    rnd = make_rng(seed)
    pts = np.empty((count, 4), dtype=np.float64)
    for i in range(count):
        pts[i, 0] = rnd() * 1.2 - 0.1
        pts[i, 1] = rnd() * 1.2 - 0.1
        pts[i, 2] = rnd() * 1.8 + 0.2
        pts[i, 3] = rnd() * 0.55 + 0.18
    return Starfield(pts)


@dataclass
class BeltScatter:
    """Columns: world x, world y, radius px, alpha."""
    name: str
    orbit: float
    band_width: float
    points: np.ndarray


def build_belt(name: str, orbit: float, seed: int, count: int = 110,
               jitter: float = 12.0, band_width: float = 22.0) -> BeltScatter:
    """Points scattered around a ring of radius orbit (± jitter / 2)."""
    rnd = make_rng(seed)
    pts = np.empty((count, 4), dtype=np.float64)
    for i in range(count):
        a = rnd() * TAU
        j = (rnd() - 0.5) * jitter
        pts[i, 0] = math.cos(a) * (orbit + j)
        pts[i, 1] = math.sin(a) * (orbit + j)
        pts[i, 3] = 0.20 + rnd() * 0.35
        pts[i, 2] = rnd() * 1.4 + 0.4
    return BeltScatter(name, orbit, band_width, pts)
