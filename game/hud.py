"""
HUD text helpers.

Turn view snapshots and bodies into the short strings the screen shows:
header title/subtitle, the toast for each transition, mission list lines.
No drawing here.
"""

from __future__ import annotations
from typing import Optional

from core.time_controller import format_speed
from universe.bodies import Body, Mission
from .view_state import ViewMode, ViewSnapshot

OVERVIEW_TITLE = "Solar System"
OVERVIEW_HINT = "Click a planet to zoom. Click a mission pin to view details."
NO_MOONS_HINT = "No moons in this system. Missions (if any) appear near the planet."
INTRO_TIP = "Tip: Click Earth to see the Moon mission demo."
MAX_LISTED_MOONS = 5


def hud_title(snapshot: ViewSnapshot) -> str:
    if snapshot.mode is ViewMode.FOCUSED and snapshot.focus:
        return snapshot.focus
    return OVERVIEW_TITLE


def hud_subtitle(body: Optional[Body]) -> str:
    """Overview hint, or the focused body's moons (first five, then "+N more")."""
    if body is None:
        return OVERVIEW_HINT
    if not body.moons:
        return NO_MOONS_HINT
    names = [m.name for m in body.moons]
    shown = names[:MAX_LISTED_MOONS]
    more = f" +{len(names) - len(shown)} more" if len(names) > len(shown) else ""
    return f"Moons: {', '.join(shown)}{more}. Click a mission pin to view details."


def toast_message(snapshot: ViewSnapshot) -> Optional[str]:
    """Short message for a transition, None when it deserves no toast."""
    reason = snapshot.reason
    if reason == "focus":
        return f"Zoomed to {snapshot.focus}"
    if reason == "back":
        return "Back to Solar System"
    if reason == "reset":
        return "View reset"
    if reason == "pause":
        return "Paused" if snapshot.paused else "Resumed"
    if reason == "time_scale":
        if snapshot.time_scale == 0:
            return "Time is frozen (0×)"
        return f"Speed {format_speed(snapshot.time_scale)}"
    return None


def mission_list_empty_text(mode: ViewMode) -> str:
    if mode is ViewMode.FOCUSED:
        return "No active missions in this system."
    return "Select a planet to see missions."


def mission_subline(mission: Mission) -> str:
    return f"{mission.status} • Target: {mission.target or mission.system}"


def clock_line(snapshot: ViewSnapshot) -> str:
    state = "paused" if snapshot.paused else format_speed(snapshot.time_scale)
    return f"Day {snapshot.elapsed:,.1f}  ({state})"
