"""
UI Theme - Mission Tracker

Colours, fonts and panel drawing for the tracker chrome (HUD header,
buttons, mission list, card, toast). The map itself is drawn by
rendering.scene_renderer with its own palette.
"""

import pygame
from typing import Tuple
from dataclasses import dataclass


class Colors:
    """
    Colour palette: deep-space panels with cool blue accents
    """

    # Background colors
    BG_DARK = (5, 7, 14)          # Window clear colour
    BG_PANEL = (12, 16, 30)       # Glass panel
    BG_PANEL_LIGHT = (22, 30, 52) # Hovered row / button
    BG_BACKDROP = (0, 0, 0)       # Modal dim

    # Foreground colors
    FG_PRIMARY = (232, 238, 252)  # Main text
    FG_DIM = (150, 164, 196)      # Secondary text
    FG_DARK = (80, 92, 122)       # Disabled, borders

    # Accent colors
    ACCENT_BLUE = (120, 180, 255)   # Selection, focus ring
    ACCENT_VIOLET = (200, 170, 255) # Mission tags
    ACCENT_GREEN = (110, 231, 183)  # Status "Active"
    ACCENT_AMBER = (255, 200, 120)  # Paused indicator
    ACCENT_RED = (255, 110, 110)    # Errors

    # UI element colors
    BUTTON_NORMAL = FG_PRIMARY
    BUTTON_HOVER = ACCENT_BLUE
    BUTTON_PRESSED = ACCENT_VIOLET
    BUTTON_DISABLED = FG_DARK

    BORDER_NORMAL = (44, 56, 92)
    BORDER_FOCUS = ACCENT_BLUE
    BORDER_DISABLED = (30, 36, 56)


@dataclass
class FontConfig:
    """Font configuration"""
    family: str = "Segoe UI,Helvetica,Verdana,Arial"
    size_title: int = 22
    size_large: int = 17
    size_normal: int = 15
    size_small: int = 13
    size_tiny: int = 11
    bold_title: bool = True


class Fonts:
    """
    Font manager

    Loads and caches the UI fonts once pygame.font is up.
    """

    _initialized = False
    _fonts: dict = {}
    _config = FontConfig()

    @classmethod
    def initialize(cls, config: FontConfig = None):
        """
        Initialize fonts

        Args:
            config: Font configuration (optional)
        """
        if config is not None:
            cls._config = config

        pygame.font.init()

        # SysFont takes a comma separated preference list and falls back
        # to the pygame default font when none is installed
        family = cls._config.family
        cls._fonts['title'] = pygame.font.SysFont(
            family, cls._config.size_title, bold=cls._config.bold_title
        )
        cls._fonts['large'] = pygame.font.SysFont(family, cls._config.size_large, bold=True)
        cls._fonts['normal'] = pygame.font.SysFont(family, cls._config.size_normal)
        cls._fonts['small'] = pygame.font.SysFont(family, cls._config.size_small)
        cls._fonts['tiny'] = pygame.font.SysFont(family, cls._config.size_tiny)
        cls._initialized = True

    @classmethod
    def get(cls, size: str = 'normal') -> pygame.font.Font:
        """
        Get font by size name

        Args:
            size: 'title', 'large', 'normal', 'small', or 'tiny'

        Returns:
            Pygame font object
        """
        if not cls._initialized:
            cls.initialize()

        return cls._fonts.get(size, cls._fonts['normal'])

    @classmethod
    def title(cls) -> pygame.font.Font:
        return cls.get('title')

    @classmethod
    def large(cls) -> pygame.font.Font:
        return cls.get('large')

    @classmethod
    def normal(cls) -> pygame.font.Font:
        return cls.get('normal')

    @classmethod
    def small(cls) -> pygame.font.Font:
        return cls.get('small')

    @classmethod
    def tiny(cls) -> pygame.font.Font:
        return cls.get('tiny')


class Theme:
    """
    Complete theme configuration

    Bundles colors, fonts, and spacing into single object.
    """

    def __init__(self):
        """Initialize theme"""
        self.colors = Colors()
        self.fonts = Fonts()

        # Spacing and sizing
        self.padding = 10
        self.margin = 14
        self.border_width = 1
        self.panel_alpha = 215

        # Component sizes
        self.button_height = 30
        self.list_item_height = 44

        # Toast
        self.toast_ms = 1800

    def draw_border(self, surface: pygame.Surface, rect: pygame.Rect,
                    color: Tuple[int, int, int], width: int = None):
        if width is None:
            width = self.border_width
        pygame.draw.rect(surface, color, rect, width, border_radius=8)

    def draw_panel(self, surface: pygame.Surface, rect: pygame.Rect,
                   title: str = "",
                   fg_color: Tuple[int, int, int] = None,
                   bg_color: Tuple[int, int, int] = None,
                   alpha: int = None):
        """
        Draw a translucent rounded panel

        Args:
            surface: Target surface
            rect: Panel rectangle
            title: Optional title text
            fg_color: Border color (None = use default)
            bg_color: Fill color (None = use default)
            alpha: Fill opacity 0-255 (None = theme default)
        """
        if fg_color is None:
            fg_color = self.colors.BORDER_NORMAL
        if bg_color is None:
            bg_color = self.colors.BG_PANEL
        if alpha is None:
            alpha = self.panel_alpha

        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(panel, (*bg_color, alpha), panel.get_rect(), border_radius=8)
        surface.blit(panel, rect.topleft)
        self.draw_border(surface, rect, fg_color)

        if title:
            self.draw_text(surface, self.fonts.small(),
                           rect.x + self.padding, rect.y + 8,
                           title.upper(), self.colors.FG_DIM)

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                  x: int, y: int, text: str, color: Tuple[int, int, int],
                  align: str = 'left') -> int:
        """
        Draw antialiased text

        Args:
            surface: Target surface
            font: Font to use
            x, y: Position (top of the text)
            text: Text to render
            color: Text color
            align: 'left', 'center', or 'right'

        Returns:
            Rendered width in pixels
        """
        rendered = font.render(text, True, color)

        if align == 'center':
            x -= rendered.get_width() // 2
        elif align == 'right':
            x -= rendered.get_width()

        surface.blit(rendered, (x, y))
        return rendered.get_width()

    def wrap_text(self, font: pygame.font.Font, text: str, width: int) -> list:
        """Greedy word wrap to a pixel width."""
        lines, line = [], ""
        for word in text.split():
            candidate = f"{line} {word}".strip()
            if line and font.size(candidate)[0] > width:
                lines.append(line)
                line = word
            else:
                line = candidate
        if line:
            lines.append(line)
        return lines


# Global theme instance
_theme = None

def get_theme() -> Theme:
    """Get global theme instance"""
    global _theme
    if _theme is None:
        _theme = Theme()
        _theme.fonts.initialize()
    return _theme
