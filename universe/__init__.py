"""
Universe module - bodies, moons, missions and their positions.

Usage:
    from universe import build_solar_system, body_position
    system = build_solar_system()

    # Query
    earth = system.get_body("Earth")
    missions = system.missions_for("Earth")
    pos = body_position(earth, t=120.0)
"""

from .bodies import (
    Body,
    BodyKind,
    Moon,
    Mission,
    make_moon,
)
from .orbits import (
    OrbitPosition,
    body_position,
    moon_position,
    compress_orbit,
)
from .system import (
    SolarSystem,
    build_solar_system,
    load_system,
    system_from_records,
)

__all__ = [
    "Body",
    "BodyKind",
    "Moon",
    "Mission",
    "make_moon",
    "OrbitPosition",
    "body_position",
    "moon_position",
    "compress_orbit",
    "SolarSystem",
    "build_solar_system",
    "load_system",
    "system_from_records",
]
