"""
Mission Tracker Screen

Hosts the interactive map: translates pygame events into
InteractionController calls, draws the Scene through a
PygameRenderSurface, and keeps the chrome (HUD header, buttons, mission
list, mission card, toast) in sync with view-state snapshots.
"""

import traceback
from typing import Optional

import pygame

from core.config import TrackerConfig
from game.hud import (INTRO_TIP, clock_line, hud_subtitle, hud_title,
                      mission_list_empty_text, toast_message)
from game.interaction import InteractionController
from game.scene import Scene
from game.view_state import ViewSnapshot
from rendering.pygame_surface import PygameRenderSurface
from universe.system import SolarSystem
from .base_screen import BaseScreen
from .components import Button, MissionCard, MissionList, Toast

# Wheel "clicks" → pixel-style deltaY
WHEEL_DELTA_PER_STEP = 100.0

KEY_NAMES = {
    pygame.K_SPACE: "space",
    pygame.K_ESCAPE: "escape",
    pygame.K_KP_PLUS: "+",
    pygame.K_KP_MINUS: "-",
    pygame.K_KP0: "0",
}

CONTROLS_HINT = ("[Drag] Pan  [Wheel] Zoom  [Space] Pause  [R] Reset  "
                 "[B] Back  [0] Recenter  [+/-] Zoom  [ [ / ] ] Speed  [F11] Fullscreen")


def window_pixel_ratio(surface: pygame.Surface) -> float:
    """Drawable pixels per window pixel (HiDPI), 1.0 when unknown."""
    try:
        win_w, _ = pygame.display.get_window_size()
    except pygame.error:
        return 1.0
    if win_w <= 0:
        return 1.0
    return surface.get_width() / win_w


class TrackerScreen(BaseScreen):
    """
    The solar-system mission map.

    Args:
        system: Bodies and missions to show
        config: Engine configuration
    """

    def __init__(self, system: SolarSystem, config: Optional[TrackerConfig] = None):
        super().__init__("TRACKER")
        self.config = config or TrackerConfig()
        self.scene = Scene(system, self.config)
        self.controller = InteractionController(self.scene)
        self.view = self.scene.view
        self.render_surface: Optional[PygameRenderSurface] = None

        self.title = hud_title(self.view.snapshot())
        self.subtitle = hud_subtitle(None)
        self._dt = 0.0
        self._canvas_press = False
        self._hand_cursor = False
        self.frame_errors = 0

        self.toast = Toast()
        self.card = MissionCard(on_close=self.view.close_mission)
        self.mission_list = MissionList(0, 0, 300, 260, on_select=self.view.open_mission)
        self.mission_list.set_items((), mission_list_empty_text(self.view.mode))

        self.btn_back = Button(0, 0, 70, self.theme.button_height, "Back", self.view.back)
        self.btn_pause = Button(0, 0, 80, self.theme.button_height, "Pause", self.view.toggle_pause)
        self.btn_reset = Button(0, 0, 70, self.theme.button_height, "Reset", self.view.reset)
        self.btn_slower = Button(0, 0, 34, self.theme.button_height, "«", self.view.speed_down)
        self.btn_faster = Button(0, 0, 34, self.theme.button_height, "»", self.view.speed_up)
        self.buttons = [self.btn_back, self.btn_pause, self.btn_reset,
                        self.btn_slower, self.btn_faster]

        self.view.subscribe(self.on_view_change)
        self._sync_buttons(self.view.snapshot())

    # ── Lifecycle ───────────────────────────────────────────────────────────

    def on_enter(self):
        super().on_enter()
        self.toast.show(INTRO_TIP)

    def on_exit(self):
        super().on_exit()
        pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_ARROW)

    def on_resize(self, width: int, height: int):
        # Surface is rebound on the next render()
        self.render_surface = None

    def layout(self, width: int, height: int):
        """Place the chrome for a logical window size."""
        m = self.theme.margin
        x = width - m
        for btn in reversed(self.buttons[:3]):
            x -= btn.rect.width
            btn.rect.topleft = (x, m)
            x -= 8
        self.btn_faster.rect.topright = (width - m, m + self.theme.button_height + 10)
        self.btn_slower.rect.topright = (self.btn_faster.rect.x - 90, self.btn_faster.rect.y)

        list_top = self.btn_faster.rect.bottom + 12
        self.mission_list.rect = pygame.Rect(width - m - 300, list_top, 300,
                                             max(120, min(300, height - list_top - 70)))
        self.card.layout(width, height)

    # ── View-state subscriber ───────────────────────────────────────────────

    def on_view_change(self, snapshot: ViewSnapshot):
        self.title = hud_title(snapshot)
        self.subtitle = hud_subtitle(self.view.focused_body)
        if snapshot.reason != "select":
            self.mission_list.set_items(snapshot.missions, mission_list_empty_text(snapshot.mode))
        self.card.show(snapshot.selected)
        self._sync_buttons(snapshot)

        msg = toast_message(snapshot)
        if msg:
            self.toast.show(msg)

    def _sync_buttons(self, snapshot: ViewSnapshot):
        self.btn_back.set_enabled(self.view.is_focused)
        self.btn_pause.text = "Resume" if snapshot.paused else "Pause"
        self.btn_pause.active = snapshot.paused

    # ── Input ───────────────────────────────────────────────────────────────

    def _over_chrome(self, pos) -> bool:
        return (any(b.rect.collidepoint(pos) for b in self.buttons)
                or self.mission_list.contains(pos))

    def handle_input(self, events: list[pygame.event.Event]) -> Optional[str]:
        for event in events:
            if self.card.handle_event(event):
                continue

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if any(b.handle_event(event) for b in self.buttons):
                    continue
                if self.mission_list.contains(event.pos):
                    continue
                self._canvas_press = True
                self.controller.on_pointer_down(*event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                # Every button sees the release so stale presses reset
                if any([b.handle_event(event) for b in self.buttons]):
                    self._canvas_press = False
                    self.controller.on_pointer_cancel()
                    continue
                if not self._canvas_press:
                    self.mission_list.handle_event(event)
                    continue
                self._canvas_press = False
                self.controller.on_pointer_up(*event.pos)
                self.controller.on_click(*event.pos)

            elif event.type == pygame.MOUSEMOTION:
                if self._over_chrome(event.pos) and not self.controller.is_down:
                    self.scene.clear_pointer()
                else:
                    self.controller.on_pointer_move(*event.pos)

            elif event.type == pygame.MOUSEWHEEL:
                if self.mission_list.handle_event(event):
                    continue
                x, y = pygame.mouse.get_pos()
                self.controller.on_wheel(x, y, -event.y * WHEEL_DELTA_PER_STEP)

            elif event.type == pygame.WINDOWLEAVE:
                self.controller.on_pointer_leave()

            elif event.type == pygame.WINDOWFOCUSLOST:
                self._canvas_press = False
                self.controller.on_pointer_cancel()

            elif event.type == pygame.KEYDOWN:
                name = KEY_NAMES.get(event.key, event.unicode)
                if name:
                    self.controller.on_key(name)

        return None

    # ── Update / render ─────────────────────────────────────────────────────

    def update(self, dt: float):
        self._dt = dt
        self.toast.update(dt)

        mouse = pygame.mouse.get_pos()
        for btn in self.buttons:
            btn.update(mouse)
        self.mission_list.update(mouse)
        self.card.update(mouse)

        hand = self.scene.hover_is_interactive and not self.card.is_open
        if hand != self._hand_cursor:
            self._hand_cursor = hand
            pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_HAND if hand
                                    else pygame.SYSTEM_CURSOR_ARROW)

    def render(self, surface: pygame.Surface):
        ratio = window_pixel_ratio(surface)
        if self.render_surface is None:
            self.render_surface = PygameRenderSurface(surface, ratio)
        else:
            self.render_surface.set_target(surface, ratio)
        rs = self.render_surface

        try:
            self.scene.frame(rs, self._dt)
        except Exception as e:
            # Keep the loop alive; the next frame starts from fresh state
            self.frame_errors += 1
            print(f"Frame {self.scene.frame_count} failed: {e}")
            traceback.print_exc()

        # Chrome is laid out in window pixels; draw at device scale 1
        width, height = int(rs.width), int(rs.height)
        self.layout(width, height)
        chrome = surface if rs.pixel_ratio == 1.0 else pygame.Surface((width, height), pygame.SRCALPHA)
        self._draw_chrome(chrome)
        if chrome is not surface:
            surface.blit(pygame.transform.smoothscale(chrome, surface.get_size()), (0, 0))

    def _draw_chrome(self, surface: pygame.Surface):
        m = self.theme.margin
        width, height = surface.get_size()
        font = self.theme.fonts.small()

        header_w = min(width - 2 * m - 330, max(360, font.size(self.subtitle)[0] + 30))
        self.draw_header(surface, pygame.Rect(m, m, max(240, header_w), 62),
                         self.title, self.subtitle)

        for btn in self.buttons:
            btn.draw(surface)
        speed_rect = pygame.Rect(self.btn_slower.rect.right, self.btn_slower.rect.y,
                                 self.btn_faster.rect.x - self.btn_slower.rect.right,
                                 self.btn_slower.rect.height)
        clock = self.view.clock
        self.theme.draw_text(surface, font, speed_rect.centerx,
                             speed_rect.centery - font.get_height() // 2,
                             clock.speed_label,
                             self.theme.colors.ACCENT_AMBER if clock.frozen
                             else self.theme.colors.FG_PRIMARY, align='center')

        self.mission_list.draw(surface)

        footer = pygame.Rect(m, height - m - 30, width - 2 * m, 30)
        self.draw_footer(surface, footer, CONTROLS_HINT)
        snap = self.view.snapshot()
        self.theme.draw_text(surface, self.theme.fonts.tiny(), footer.right - 12, footer.y + 7,
                             clock_line(snap),
                             self.theme.colors.ACCENT_AMBER if snap.paused
                             else self.theme.colors.FG_DIM,
                             align='right')

        self.toast.draw(surface)
        self.card.draw(surface)
