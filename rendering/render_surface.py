"""
RenderSurface - the drawing capability the scene renderer needs.

An immediate-mode 2D surface addressed in logical pixels. Concrete
surfaces (pygame, or a recording fake in tests) map logical pixels to
device pixels with their own pixel ratio.

Colours are RGB or RGBA tuples (0-255); `alpha` multiplies the colour's
own alpha.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, Tuple

Color = Tuple[int, ...]
Point = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class GradientStop:
    offset: float      # 0 = inner radius, 1 = outer radius
    color: Color       # RGBA


class RenderSurface(ABC):
    """Abstract drawing surface."""

    @property
    @abstractmethod
    def width(self) -> float:
        """Logical width in pixels."""

    @property
    @abstractmethod
    def height(self) -> float:
        """Logical height in pixels."""

    @property
    def pixel_ratio(self) -> float:
        return 1.0

    def resize(self, width: float, height: float):
        """Called when the viewport changes size."""

    @abstractmethod
    def clear(self, color: Color):
        """Paint the whole surface."""

    @abstractmethod
    def fill_circle(self, center: Point, radius: float, color: Color,
                    alpha: float = 1.0):
        pass

    @abstractmethod
    def stroke_circle(self, center: Point, radius: float, color: Color,
                      alpha: float = 1.0, width: float = 1.0):
        pass

    @abstractmethod
    def fill_radial_gradient(self, center: Point, inner_radius: float,
                             outer_radius: float, stops: Sequence[GradientStop],
                             cover: bool = False):
        """
        Radial gradient between inner_radius and outer_radius, clamped to
        the first/last stop outside that range. Fills the disc of
        outer_radius, or the whole surface when cover is True.
        """

    @abstractmethod
    def text(self, pos: Point, text: str, color: Color, size: int = 12,
             alpha: float = 1.0):
        """Draw a label with its left edge at pos[0], vertically centred on pos[1]."""
