"""
UI Module - pygame chrome around the mission map
"""
from .theme import get_theme, Colors, Fonts
from .base_screen import BaseScreen
from .components import Button, MissionList, MissionCard, Toast
from .screen_tracker import TrackerScreen

__all__ = [
    "get_theme", "Colors", "Fonts",
    "BaseScreen",
    "Button", "MissionList", "MissionCard", "Toast",
    "TrackerScreen",
]
