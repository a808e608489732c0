"""
Default Solar System Data

Bodies, moons and demo missions shown by the tracker.

Orbit radii and periods are layout units, not physical values:
- orbit  : world units from the Sun (moons: from their host)
- period : simulated days per revolution
- size   : visual size

"Dwarf Planets" and "Kuiper Belt" are clickable groups; the asteroid
and Kuiper belts are drawn at their orbits.
"""

WHITE_86 = (255, 255, 255, 219)
WHITE_90 = (255, 255, 255, 230)
WHITE_84 = (255, 255, 255, 214)
WHITE_82 = (255, 255, 255, 209)
WHITE_78 = (255, 255, 255, 199)

# Root of the system: (id, size, color)
ROOT_DATA = ("Sun", 14.0, (255, 215, 158))

# Format: (id, kind, orbit, size, period, color, moons)
# Moon format: (name, orbit, period, size, color)
BODY_DATA = [
    ("Mercury", "planet", 70, 4.2, 88, (181, 185, 194), []),

    ("Venus", "planet", 95, 6.2, 225, (215, 195, 162), []),

    ("Earth", "planet", 125, 6.4, 365, (74, 163, 255), [
        ("Moon", 38.4, 27.3, 3.4, WHITE_86),
    ]),

    ("Mars", "planet", 160, 5.0, 687, (255, 107, 74), [
        ("Phobos", 0.94, 0.32, 2.6, WHITE_86),
        ("Deimos", 2.35, 1.26, 2.5, WHITE_86),
    ]),

    ("Dwarf Planets", "planet", 205, 6.0, 1400, (168, 161, 255), [
        ("Ceres", 12, 18, 2.7, WHITE_86),
        ("Vesta", 24, 28, 2.7, WHITE_86),
        ("Pallas", 36, 40, 2.7, WHITE_86),
        ("Psyche", 48, 55, 2.7, WHITE_86),
        ("Other", 70, 80, 2.2, WHITE_78),
    ]),

    ("Jupiter", "planet", 270, 12.0, 4333, (217, 179, 140), [
        ("Amalthea", 18.1, 0.50, 2.5, WHITE_82),
        ("Thebe", 22.2, 0.67, 2.4, WHITE_82),
        ("Io", 42.2, 1.77, 3.0, WHITE_86),
        ("Europa", 67.1, 3.55, 2.9, WHITE_86),
        ("Ganymede", 107, 7.15, 3.2, WHITE_86),
        ("Callisto", 188, 16.7, 3.1, WHITE_86),
        ("Other", 230, 25.0, 2.2, WHITE_78),
    ]),

    ("Saturn", "planet", 335, 10.5, 10759, (229, 211, 162), [
        ("Mimas", 18.5, 0.94, 2.7, WHITE_86),
        ("Enceladus", 23.8, 1.37, 2.8, WHITE_86),
        ("Tethys", 29.5, 1.89, 2.9, WHITE_86),
        ("Dione", 37.7, 2.74, 2.9, WHITE_86),
        ("Rhea", 52.7, 4.52, 3.0, WHITE_86),
        ("Titan", 120, 15.95, 3.6, WHITE_90),
        ("Iapetus", 356, 79.3, 3.1, WHITE_86),
        ("Other", 460, 110, 2.2, WHITE_78),
    ]),

    ("Uranus", "planet", 395, 8.0, 30687, (120, 224, 255), [
        ("Ariel", 19.1, 2.52, 2.9, WHITE_86),
        ("Umbriel", 26.6, 4.14, 2.8, WHITE_86),
        ("Titania", 43.6, 8.71, 3.0, WHITE_86),
        ("Other", 70, 20.0, 2.2, WHITE_78),
    ]),

    ("Neptune", "planet", 450, 8.0, 60190, (79, 125, 255), [
        ("Triton", 35.5, 5.88, 3.3, WHITE_90),
        ("Nereid", 550, 360, 2.7, WHITE_84),
        ("Proteus", 11.8, 1.12, 2.8, WHITE_84),
        ("Other", 720, 400, 2.2, WHITE_78),
    ]),

    ("Pluto", "dwarf", 505, 4.2, 90560, (198, 179, 166), [
        ("Charon", 1.8, 6.39, 2.8, WHITE_86),
    ]),

    ("Kuiper Belt", "planet", 570, 6.2, 110000, (255, 255, 255), [
        ("Arrokoth", 26, 298, 2.7, WHITE_86),
        ("Other", 32, 520, 2.2, WHITE_78),
    ]),

    ("Interstellar Space", "planet", 850, 8.0, 130000, (156, 156, 156), []),
]

# Format: dicts, same keys as the JSON mission table
MISSION_DATA = [
    {
        "id": "CR-MLN-01",
        "name": "Selene Pathfinder",
        "system": "Earth",
        "target": "Moon",
        "status": "Active • Nominal",
        "type": "Surface Relay Demonstrator",
        "launched": "2036-07-18",
        "operator": "Constellation Reimagined",
        "description": "A demonstration of lunar surface relay nodes enabling "
                       "continuous comms for polar operations.",
    },
    {
        "id": "CR-MLN-02",
        "name": "Selene Explorer",
        "system": "Earth",
        "target": "Moon",
        "status": "Active • Nominal",
        "type": "Lunar Surface Exploration",
        "launched": "2036-07-18",
        "operator": "Constellation Reimagined",
        "description": "Rover survey of permanently shadowed craters near the "
                       "lunar south pole.",
    },
    {
        "id": "CR-LEO-07",
        "name": "Halo Weather Net",
        "system": "Earth",
        "target": None,
        "status": "Active • Degraded",
        "type": "Orbital Weather Constellation",
        "launched": "2034-03-02",
        "operator": "Constellation Reimagined",
        "description": "Twelve-satellite ring providing storm-track imaging "
                       "with a 20 minute revisit.",
    },
    {
        "id": "CR-JUP-03",
        "name": "Icebreaker",
        "system": "Jupiter",
        "target": "Europa",
        "status": "Cruise",
        "type": "Subsurface Ocean Probe",
        "launched": "2039-11-30",
        "operator": "Constellation Reimagined",
        "description": "Ice-penetrating radar orbiter mapping the shell "
                       "thickness over Europa's leading hemisphere.",
    },
    {
        "id": "CR-ISM-01",
        "name": "Heliopause Drifter",
        "system": "Interstellar Space",
        "target": None,
        "status": "Active • Nominal",
        "type": "Interstellar Medium Sampler",
        "launched": "2031-05-14",
        "operator": "Constellation Reimagined",
        "description": "Measures plasma density and cosmic-ray flux beyond "
                       "the heliopause.",
    },
    {
        "id": "CR-ISM-02",
        "name": "Heliopause Drifter II",
        "system": "Interstellar Space",
        "target": "Moon",
        "status": "Active • Nominal",
        "type": "Interstellar Medium Sampler",
        "launched": "2033-09-21",
        "operator": "Constellation Reimagined",
        "description": "Second sampler on a diverging trajectory for "
                       "baseline comparison.",
    },
]
