"""
pygame implementation of RenderSurface.

Drawing calls take logical pixels; everything is scaled by the device
pixel ratio (clamped to 1..2) before it touches the display surface.
Radial gradients are rasterised with numpy (np.mgrid distance field →
per-channel np.interp over the stops) and blitted as RGBA surfaces.
"""

from __future__ import annotations
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pygame

from core.camera import clamp
from .render_surface import Color, GradientStop, Point, RenderSurface

PIXEL_RATIO_MIN = 1.0
PIXEL_RATIO_MAX = 2.0

# Gradients covering more device pixels than this are computed at half
# resolution and smoothscaled up.
GRADIENT_FULL_RES_LIMIT = 160_000
# Disc gradients up to this device radius are cached as sprites.
SPRITE_CACHE_RADIUS = 64
SPRITE_CACHE_SIZE = 256

FONT_FAMILY = "Verdana"


def _rgba(color: Color, alpha: float) -> Tuple[int, int, int, int]:
    a = color[3] if len(color) > 3 else 255
    return (int(color[0]), int(color[1]), int(color[2]),
            int(clamp(a * alpha, 0, 255)))


def gradient_rgba(width: int, height: int, cx: float, cy: float,
                  inner: float, outer: float,
                  stops: Sequence[GradientStop], step: float = 1.0) -> np.ndarray:
    """
    RGBA pixels (height, width, 4) uint8 of a radial gradient centred on
    (cx, cy) in array coordinates. step scales array pixels to gradient
    pixels (2.0 when rendering at half resolution).
    """
    yy, xx = np.mgrid[0:height, 0:width].astype(np.float32)
    d = np.hypot((xx + 0.5) * step - cx, (yy + 0.5) * step - cy)
    span = max(outer - inner, 1e-6)
    t = np.clip((d - inner) / span, 0.0, 1.0)

    offsets = np.array([s.offset for s in stops], dtype=np.float32)
    colors = np.array([_rgba(s.color, 1.0) for s in stops], dtype=np.float32)
    out = np.empty((height, width, 4), dtype=np.uint8)
    for ch in range(4):
        out[..., ch] = np.interp(t, offsets, colors[:, ch]).astype(np.uint8)
    return out


def rgba_to_surface(pixels: np.ndarray) -> pygame.Surface:
    h, w = pixels.shape[:2]
    surf = pygame.image.frombuffer(np.ascontiguousarray(pixels).tobytes(), (w, h), "RGBA")
    return surf.convert_alpha() if pygame.display.get_surface() else surf


class PygameRenderSurface(RenderSurface):
    """
    Wraps a pygame.Surface (normally the display surface).

    Parameters
    ----------
    target : surface sized in device pixels
    pixel_ratio : device pixels per logical pixel; clamped to [1, 2]
    """

    def __init__(self, target: pygame.Surface, pixel_ratio: float = 1.0):
        self.target = target
        self._ratio = clamp(float(pixel_ratio), PIXEL_RATIO_MIN, PIXEL_RATIO_MAX)
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._sprites: Dict[tuple, pygame.Surface] = {}

    # -----------------------------------------------------------------------
    # Geometry
    # -----------------------------------------------------------------------

    @property
    def pixel_ratio(self) -> float:
        return self._ratio

    @property
    def width(self) -> float:
        return self.target.get_width() / self._ratio

    @property
    def height(self) -> float:
        return self.target.get_height() / self._ratio

    def set_target(self, target: pygame.Surface, pixel_ratio: Optional[float] = None):
        self.target = target
        if pixel_ratio is not None:
            ratio = clamp(float(pixel_ratio), PIXEL_RATIO_MIN, PIXEL_RATIO_MAX)
            if ratio != self._ratio:
                self._ratio = ratio
                self._fonts.clear()
                self._sprites.clear()

    def resize(self, width: float, height: float):
        # Display surface is recreated by the app; nothing cached depends on size
        pass

    def _dev(self, p: Point) -> Tuple[float, float]:
        return p[0] * self._ratio, p[1] * self._ratio

    # -----------------------------------------------------------------------
    # Primitives
    # -----------------------------------------------------------------------

    def clear(self, color: Color):
        self.target.fill(color[:3])

    def _blit_circle(self, center: Point, radius: float, color: Color,
                     alpha: float, width: int):
        r = radius * self._ratio
        if r <= 0:
            return
        rgba = _rgba(color, alpha)
        if rgba[3] <= 0:
            return
        cx, cy = self._dev(center)
        size = int(r * 2) + 4
        if cx + size < 0 or cy + size < 0 or \
                cx - size > self.target.get_width() or cy - size > self.target.get_height():
            return
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(sprite, rgba, (size / 2, size / 2), r, width)
        self.target.blit(sprite, (cx - size / 2, cy - size / 2))

    def fill_circle(self, center: Point, radius: float, color: Color,
                    alpha: float = 1.0):
        self._blit_circle(center, radius, color, alpha, 0)

    def stroke_circle(self, center: Point, radius: float, color: Color,
                      alpha: float = 1.0, width: float = 1.0):
        self._blit_circle(center, radius, color, alpha,
                          max(1, int(round(width * self._ratio))))

    def fill_radial_gradient(self, center: Point, inner_radius: float,
                             outer_radius: float, stops: Sequence[GradientStop],
                             cover: bool = False):
        if not stops or outer_radius <= 0:
            return
        ratio = self._ratio
        cx, cy = self._dev(center)
        inner = inner_radius * ratio
        outer = outer_radius * ratio
        tw, th = self.target.get_size()

        if not cover and outer <= SPRITE_CACHE_RADIUS:
            self._blit_gradient_sprite(cx, cy, inner, outer, stops)
            return

        # Area to rasterise, clipped to the viewport
        if cover:
            rect = pygame.Rect(0, 0, tw, th)
        else:
            rect = pygame.Rect(int(cx - outer), int(cy - outer),
                               int(outer * 2) + 2, int(outer * 2) + 2).clip((0, 0, tw, th))
        if rect.w <= 0 or rect.h <= 0:
            return

        step = 2.0 if rect.w * rect.h > GRADIENT_FULL_RES_LIMIT else 1.0
        gw = max(1, int(np.ceil(rect.w / step)))
        gh = max(1, int(np.ceil(rect.h / step)))
        pixels = gradient_rgba(gw, gh, cx - rect.x, cy - rect.y, inner, outer, stops, step)
        if not cover:
            # Transparent outside the disc
            yy, xx = np.mgrid[0:gh, 0:gw].astype(np.float32)
            outside = np.hypot((xx + 0.5) * step - (cx - rect.x),
                               (yy + 0.5) * step - (cy - rect.y)) > outer
            pixels[outside, 3] = 0

        surf = rgba_to_surface(pixels)
        if step != 1.0:
            surf = pygame.transform.smoothscale(surf, (rect.w, rect.h))
        self.target.blit(surf, rect.topleft)

    def _blit_gradient_sprite(self, cx: float, cy: float, inner: float,
                              outer: float, stops: Sequence[GradientStop]):
        key = (round(inner, 1), round(outer, 1),
               tuple((s.offset, tuple(s.color)) for s in stops))
        sprite = self._sprites.get(key)
        if sprite is None:
            size = int(outer * 2) + 2
            pixels = gradient_rgba(size, size, size / 2, size / 2, inner, outer, stops)
            yy, xx = np.mgrid[0:size, 0:size].astype(np.float32)
            pixels[np.hypot(xx + 0.5 - size / 2, yy + 0.5 - size / 2) > outer, 3] = 0
            sprite = rgba_to_surface(pixels)
            if len(self._sprites) >= SPRITE_CACHE_SIZE:
                self._sprites.clear()
            self._sprites[key] = sprite
        w, h = sprite.get_size()
        self.target.blit(sprite, (cx - w / 2, cy - h / 2))

    # -----------------------------------------------------------------------
    # Text
    # -----------------------------------------------------------------------

    def font(self, size: int) -> pygame.font.Font:
        px = max(6, int(round(size * self._ratio)))
        f = self._fonts.get(px)
        if f is None:
            f = pygame.font.SysFont(FONT_FAMILY, px)
            self._fonts[px] = f
        return f

    def text(self, pos: Point, text: str, color: Color, size: int = 12,
             alpha: float = 1.0):
        if not text:
            return
        rgba = _rgba(color, alpha)
        if rgba[3] <= 0:
            return
        img = self.font(size).render(text, True, rgba[:3])
        if rgba[3] < 255:
            img.set_alpha(rgba[3])
        x, y = self._dev(pos)
        self.target.blit(img, (x, y - img.get_height() / 2))
