"""Shared fixtures: a small system, a manual clock and a recording surface."""
import pytest

from core.config import TrackerConfig
from game.scene import Scene
from rendering.render_surface import RenderSurface
from universe.system import system_from_records


class FakeClock:
    """Millisecond time source advanced by hand."""

    def __init__(self, now: float = 0.0):
        self.now = float(now)

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float):
        self.now += ms


class RecordingSurface(RenderSurface):
    """RenderSurface that records every call instead of drawing."""

    def __init__(self, width: float = 1000, height: float = 800):
        self._w = width
        self._h = height
        self.calls = []

    @property
    def width(self):
        return self._w

    @property
    def height(self):
        return self._h

    def clear(self, color):
        self.calls = [("clear", color)]

    def fill_circle(self, center, radius, color, alpha=1.0):
        self.calls.append(("fill_circle", center, radius, color, alpha))

    def stroke_circle(self, center, radius, color, alpha=1.0, width=1.0):
        self.calls.append(("stroke_circle", center, radius, color, alpha, width))

    def fill_radial_gradient(self, center, inner_radius, outer_radius, stops, cover=False):
        self.calls.append(("gradient", center, inner_radius, outer_radius, stops, cover))

    def text(self, pos, text, color, size=12, alpha=1.0):
        self.calls.append(("text", pos, text, color, size, alpha))

    def texts(self):
        return [c[2] for c in self.calls if c[0] == "text"]

    def of(self, name):
        return [c for c in self.calls if c[0] == name]


SMALL_BODIES = [
    {"id": "Venus", "kind": "planet", "orbit": 95, "size": 6.2, "period": 225,
     "color": [215, 195, 162]},
    {"id": "Earth", "kind": "planet", "orbit": 125, "size": 6.4, "period": 365,
     "color": "#4aa3ff",
     "moons": [{"name": "Moon", "orbit": 38.4, "period": 27.3, "size": 3.4}]},
    {"id": "Mars", "kind": "planet", "orbit": 160, "size": 5.0, "period": 687,
     "color": [255, 107, 74],
     "moons": [{"name": "Phobos", "orbit": 0.94, "period": 0.32},
               {"name": "Deimos", "orbit": 2.35, "period": 1.26}]},
]

SMALL_MISSIONS = [
    {"id": "M-MOON", "name": "Lunar Relay", "system": "Earth", "target": "Moon",
     "status": "Active • Nominal", "type": "Relay"},
    {"id": "M-LEO", "name": "Low Orbit Lab", "system": "Earth",
     "status": "Active", "type": "Station"},
    {"id": "M-GHOST", "name": "Lost Target", "system": "Earth", "target": "Ghost"},
    {"id": "M-VEN", "name": "Cloud Probe", "system": "Venus", "target": "Venus"},
]


@pytest.fixture
def small_system():
    return system_from_records({"id": "Sun", "size": 14, "color": "#ffd79e"},
                               SMALL_BODIES, SMALL_MISSIONS)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return TrackerConfig()


@pytest.fixture
def scene(small_system, config, clock):
    return Scene(small_system, config, width=1000, height=800, time_source=clock)


@pytest.fixture
def surface():
    return RecordingSurface(1000, 800)
