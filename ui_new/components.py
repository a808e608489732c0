"""
UI Components - Tracker widgets

- Button: Interactive button with hover/click states
- MissionList: Scrollable list of missions for the current view
- MissionCard: Modal mission detail card
- Toast: Short-lived status message
"""

import pygame
from typing import Optional, Callable, List, Sequence, Tuple
from dataclasses import dataclass

from game.hud import mission_subline
from universe.bodies import Mission
from .theme import get_theme


@dataclass
class ButtonState:
    """Button state"""
    hovered: bool = False
    pressed: bool = False


class Button:
    """
    Interactive button component

    Rounded button with hover and click states. An active button keeps
    the pressed look (Pause while paused).
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, callback: Optional[Callable] = None):
        """
        Initialize button

        Args:
            x, y: Position
            width, height: Size
            text: Button text
            callback: Function to call when clicked
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.callback = callback
        self.state = ButtonState()
        self.enabled = True
        self.active = False     # toggled look (Pause while paused)
        self.theme = get_theme()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle input event

        Args:
            event: Pygame event

        Returns:
            True if event was handled
        """
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.state.pressed = True
                return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.state.pressed and self.rect.collidepoint(event.pos):
                self.state.pressed = False
                if self.callback:
                    self.callback()
                return True
            self.state.pressed = False

        return False

    def update(self, mouse_pos: Tuple[int, int]):
        """Update button state based on mouse position"""
        self.state.hovered = self.enabled and self.rect.collidepoint(mouse_pos)

    def draw(self, surface: pygame.Surface):
        colors = self.theme.colors
        if not self.enabled:
            bg_color, fg_color, border_color = colors.BG_PANEL, colors.BUTTON_DISABLED, colors.BORDER_DISABLED
        elif self.state.pressed or self.active:
            bg_color, fg_color, border_color = colors.BG_PANEL_LIGHT, colors.BUTTON_PRESSED, colors.BUTTON_PRESSED
        elif self.state.hovered:
            bg_color, fg_color, border_color = colors.BG_PANEL_LIGHT, colors.BUTTON_HOVER, colors.BORDER_FOCUS
        else:
            bg_color, fg_color, border_color = colors.BG_PANEL, colors.BUTTON_NORMAL, colors.BORDER_NORMAL

        self.theme.draw_panel(surface, self.rect, fg_color=border_color, bg_color=bg_color)

        font = self.theme.fonts.small()
        self.theme.draw_text(surface, font,
                             self.rect.centerx, self.rect.centery - font.get_height() // 2,
                             self.text, fg_color, align='center')

    def set_enabled(self, enabled: bool):
        """Enable/disable button"""
        self.enabled = enabled
        if not enabled:
            self.state = ButtonState()


class MissionList:
    """
    Scrollable list of missions

    Two lines per row (name + id tag, status + target). Clicking a row
    calls on_select(mission).
    """

    HEADER_H = 28

    def __init__(self, x: int, y: int, width: int, height: int,
                 on_select: Optional[Callable[[Mission], None]] = None):
        """
        Initialize mission list

        Args:
            x, y: Position
            width, height: Size
            on_select: Called with the clicked mission
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.theme = get_theme()
        self.item_height = self.theme.list_item_height
        self.items: List[Mission] = []
        self.empty_text = ""
        self.on_select = on_select
        self.hover_index = -1
        self.scroll_offset = 0

    @property
    def max_visible_items(self) -> int:
        return max(1, (self.rect.height - self.HEADER_H) // self.item_height)

    def set_items(self, items: Sequence[Mission], empty_text: str = ""):
        """Set list items"""
        self.items = list(items)
        self.empty_text = empty_text
        self.hover_index = -1
        self.scroll_offset = 0

    def _index_at(self, pos) -> int:
        if not self.rect.collidepoint(pos):
            return -1
        relative_y = pos[1] - self.rect.y - self.HEADER_H
        if relative_y < 0:
            return -1
        index = relative_y // self.item_height + self.scroll_offset
        return index if 0 <= index < len(self.items) else -1

    def contains(self, pos) -> bool:
        return self.rect.collidepoint(pos)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle input event

        Returns:
            True if event was handled
        """
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            index = self._index_at(event.pos)
            if index >= 0:
                if self.on_select:
                    self.on_select(self.items[index])
                return True

        elif event.type == pygame.MOUSEWHEEL:
            if self.rect.collidepoint(pygame.mouse.get_pos()):
                limit = max(0, len(self.items) - self.max_visible_items)
                self.scroll_offset = max(0, min(limit, self.scroll_offset - event.y))
                return True

        return False

    def update(self, mouse_pos: Tuple[int, int]):
        self.hover_index = self._index_at(mouse_pos)

    def draw(self, surface: pygame.Surface):
        """Draw list"""
        colors = self.theme.colors
        self.theme.draw_panel(surface, self.rect, "Missions")

        font = self.theme.fonts.small()
        tiny = self.theme.fonts.tiny()
        x = self.rect.x + self.theme.padding

        if not self.items:
            self.theme.draw_text(surface, tiny, x, self.rect.y + self.HEADER_H + 4,
                                 self.empty_text, colors.FG_DIM)
            return

        visible_end = min(len(self.items), self.scroll_offset + self.max_visible_items)
        for i in range(self.scroll_offset, visible_end):
            m = self.items[i]
            y = self.rect.y + self.HEADER_H + (i - self.scroll_offset) * self.item_height

            if i == self.hover_index:
                row = pygame.Rect(self.rect.x + 3, y, self.rect.width - 6, self.item_height - 4)
                pygame.draw.rect(surface, colors.BG_PANEL_LIGHT, row, border_radius=6)

            self.theme.draw_text(surface, font, x, y + 4, m.name[:34], colors.FG_PRIMARY)
            self.theme.draw_text(surface, tiny, self.rect.right - self.theme.padding, y + 6,
                                 m.id, colors.ACCENT_VIOLET, align='right')
            self.theme.draw_text(surface, tiny, x, y + 23, mission_subline(m)[:48], colors.FG_DIM)

        # Scrollbar (if needed)
        if len(self.items) > self.max_visible_items:
            body_h = self.rect.height - self.HEADER_H
            bar_h = max(20, (self.max_visible_items / len(self.items)) * body_h)
            bar_y = self.rect.y + self.HEADER_H + (self.scroll_offset / len(self.items)) * body_h
            pygame.draw.rect(surface, colors.FG_DARK,
                             pygame.Rect(self.rect.right - 6, int(bar_y), 3, int(bar_h)))


class MissionCard:
    """
    Modal mission detail card

    Dims the window and shows every field of the mission. A click on the
    backdrop or the close button calls on_close().
    """

    WIDTH = 420
    HEIGHT = 320

    def __init__(self, on_close: Optional[Callable[[], None]] = None):
        self.mission: Optional[Mission] = None
        self.on_close = on_close
        self.theme = get_theme()
        self.rect = pygame.Rect(0, 0, self.WIDTH, self.HEIGHT)
        self.close_button = Button(0, 0, 28, 26, "×", self._close)

    @property
    def is_open(self) -> bool:
        return self.mission is not None

    def show(self, mission: Optional[Mission]):
        self.mission = mission

    def layout(self, width: int, height: int):
        self.rect.center = (width // 2, height // 2)
        self.close_button.rect.topright = (self.rect.right - 10, self.rect.y + 10)

    def _close(self):
        if self.on_close:
            self.on_close()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Swallows every pointer event while open."""
        if not self.is_open:
            return False
        if self.close_button.handle_event(event):
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if not self.rect.collidepoint(event.pos):
                self._close()
            return True
        return event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEWHEEL)

    def update(self, mouse_pos: Tuple[int, int]):
        self.close_button.update(mouse_pos)

    def draw(self, surface: pygame.Surface):
        if not self.is_open:
            return
        m = self.mission
        colors = self.theme.colors
        pad = self.theme.padding * 2

        dim = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        dim.fill((*colors.BG_BACKDROP, 140))
        surface.blit(dim, (0, 0))

        self.theme.draw_panel(surface, self.rect, alpha=245, fg_color=colors.BORDER_FOCUS)
        x, y = self.rect.x + pad, self.rect.y + pad
        self.theme.draw_text(surface, self.theme.fonts.large(), x, y, m.name, colors.FG_PRIMARY)
        y += 26
        self.theme.draw_text(surface, self.theme.fonts.small(), x, y, m.type, colors.FG_DIM)
        y += 30

        small = self.theme.fonts.small()
        rows = [
            ("Status", m.status),
            ("Location", m.location),
            ("Launched", m.launched),
            ("Operator", m.operator),
        ]
        for label, value in rows:
            self.theme.draw_text(surface, small, x, y, label, colors.FG_DIM)
            self.theme.draw_text(surface, small, x + 100, y, value,
                                 colors.ACCENT_GREEN if label == "Status" else colors.FG_PRIMARY)
            y += 22

        y += 10
        for line in self.theme.wrap_text(small, m.description, self.rect.width - pad * 2):
            if y > self.rect.bottom - pad:
                break
            self.theme.draw_text(surface, small, x, y, line, colors.FG_PRIMARY)
            y += 19

        self.close_button.draw(surface)


class Toast:
    """
    Short status message at the bottom centre, hidden after duration_ms.
    """

    def __init__(self, duration_ms: Optional[int] = None):
        self.theme = get_theme()
        self.duration_ms = duration_ms if duration_ms is not None else self.theme.toast_ms
        self.message = ""
        self.remaining_ms = 0.0

    def show(self, message: str):
        self.message = message
        self.remaining_ms = float(self.duration_ms)

    @property
    def visible(self) -> bool:
        return self.remaining_ms > 0 and bool(self.message)

    def update(self, dt: float):
        if self.remaining_ms > 0:
            self.remaining_ms = max(0.0, self.remaining_ms - dt * 1000.0)

    def draw(self, surface: pygame.Surface):
        if not self.visible:
            return
        font = self.theme.fonts.small()
        w = font.size(self.message)[0] + 32
        rect = pygame.Rect(0, 0, w, 34)
        rect.midbottom = (surface.get_width() // 2, surface.get_height() - 56)
        self.theme.draw_panel(surface, rect, fg_color=self.theme.colors.BORDER_FOCUS)
        self.theme.draw_text(surface, font, rect.centerx, rect.centery - font.get_height() // 2,
                             self.message, self.theme.colors.FG_PRIMARY, align='center')
