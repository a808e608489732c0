"""
Base Screen Class

Interface the application loop drives: enter/exit, one batch of events
per frame, update, render. Also draws the header and footer strips that
frame the tracker map.
"""

import pygame
from abc import ABC, abstractmethod
from typing import Optional
from .theme import get_theme


class BaseScreen(ABC):
    """
    A full-window screen.

    TrackerApp calls on_enter once, then per frame handle_input(events),
    update(dt) and render(surface); on_resize on window size changes.
    """

    def __init__(self, screen_name: str):
        self.screen_name = screen_name
        self.active = False
        self.theme = get_theme()

    @abstractmethod
    def on_enter(self):
        self.active = True

    @abstractmethod
    def on_exit(self):
        self.active = False

    @abstractmethod
    def handle_input(self, events: list[pygame.event.Event]) -> Optional[str]:
        """Consume this frame's events; return "QUIT" to stop the app."""

    @abstractmethod
    def update(self, dt: float):
        """Advance by dt wall-clock seconds."""

    @abstractmethod
    def render(self, surface: pygame.Surface):
        """Draw the whole window onto surface."""

    def on_resize(self, width: int, height: int):
        """Window size changed (device pixels)."""

    # Header / footer strips

    def draw_header(self, surface: pygame.Surface, rect: pygame.Rect,
                    title: str, subtitle: str = ""):
        """Glass panel with the view title and, below it, a one-line hint."""
        colors = self.theme.colors
        self.theme.draw_panel(surface, rect)
        self.theme.draw_text(surface, self.theme.fonts.title(),
                             rect.x + 12, rect.y + 8, title, colors.FG_PRIMARY)
        if subtitle:
            self.theme.draw_text(surface, self.theme.fonts.small(),
                                 rect.x + 12, rect.y + 38, subtitle, colors.FG_DIM)

    def draw_footer(self, surface: pygame.Surface, rect: pygame.Rect,
                    controls: str):
        """Thin strip listing the keyboard and mouse controls."""
        self.theme.draw_panel(surface, rect)
        self.theme.draw_text(surface, self.theme.fonts.tiny(),
                             rect.x + 12, rect.y + 7, controls, self.theme.colors.FG_DIM)
