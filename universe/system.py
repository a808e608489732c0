"""
SolarSystem - the read-only body and mission tables for a session.

Built either from the default tables in catalogs/solar_system_data.py:

    system = build_solar_system()

or from a JSON file with the same shape:

    {
      "root":     {"id": "Sun", "size": 14, "color": "#ffd79e"},
      "bodies":   [{"id": "Earth", "kind": "planet", "orbit": 125,
                    "size": 6.4, "period": 365, "color": [74, 163, 255],
                    "moons": [{"name": "Moon", "orbit": 38.4, "period": 27.3}]}],
      "missions": [{"id": "M-1", "name": "...", "system": "Earth",
                    "target": "Moon", "status": "Active"}]
    }

Moons may omit orbit/period/size/color; make_moon() fills them with
stable hash-derived values.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .bodies import Body, BodyKind, Mission, Moon, make_moon


class SolarSystem:
    """
    Ordered bodies plus missions, with id lookup.

    The root (orbit 0) is kept apart from the orbiting bodies: it is drawn
    and picked separately and cannot be focused.
    """

    def __init__(self, root: Body, bodies: Sequence[Body],
                 missions: Sequence[Mission] = ()):
        self.root = root
        self.bodies: Tuple[Body, ...] = tuple(bodies)
        self.missions: Tuple[Mission, ...] = tuple(missions)

        self._by_id: Dict[str, Body] = {}
        for body in self.bodies:
            if body.id in self._by_id or body.id == root.id:
                raise ValueError(f"Duplicate body id: {body.id!r}")
            self._by_id[body.id] = body

    def get_body(self, body_id: Optional[str]) -> Optional[Body]:
        """Orbiting body by id, or None."""
        if body_id is None:
            return None
        return self._by_id.get(body_id)

    def has_body(self, body_id: Optional[str]) -> bool:
        return body_id in self._by_id

    def missions_for(self, body_id: str) -> List[Mission]:
        """Missions whose system is body_id, in table order."""
        return [m for m in self.missions if m.system == body_id]

    def get_mission(self, mission_id: str) -> Optional[Mission]:
        for m in self.missions:
            if m.id == mission_id:
                return m
        return None

    def __len__(self) -> int:
        return len(self.bodies)

    def __iter__(self):
        return iter(self.bodies)


# ---------------------------------------------------------------------------
# Record parsing
# ---------------------------------------------------------------------------

def parse_color(value) -> Tuple[int, ...]:
    """'#rrggbb', '#rrggbbaa' or a 3/4-item sequence → RGB(A) tuple."""
    if isinstance(value, str):
        s = value.lstrip("#")
        if len(s) not in (6, 8):
            raise ValueError(f"Bad colour string: {value!r}")
        return tuple(int(s[i:i + 2], 16) for i in range(0, len(s), 2))
    items = tuple(int(v) for v in value)
    if len(items) not in (3, 4):
        raise ValueError(f"Colour needs 3 or 4 components, got {value!r}")
    return items


def _require(record: dict, key: str, what: str):
    if key not in record or record[key] is None:
        raise ValueError(f"{what} record missing required field '{key}': {record!r}")
    return record[key]


def moon_from_record(record: dict, index: int) -> Moon:
    if not isinstance(record, dict):
        raise ValueError(f"Moon record must be an object, got {record!r}")
    name = _require(record, "name", "Moon")
    color = record.get("color")
    moon = make_moon(
        name, index,
        orbit=record.get("orbit"),
        period=record.get("period"),
        size=record.get("size"),
        color=parse_color(color) if color is not None else None,
    )
    if moon.period <= 0:
        raise ValueError(f"Moon {name!r} has non-positive period {moon.period}")
    return moon


def body_from_record(record: dict) -> Body:
    body_id = _require(record, "id", "Body")
    kind = BodyKind(record.get("kind", "planet"))
    period = float(_require(record, "period", "Body"))
    if period <= 0:
        raise ValueError(f"Body {body_id!r} has non-positive period {period}")
    raw_moons = record.get("moons") or []
    if not isinstance(raw_moons, list):
        raise ValueError(f"Body {body_id!r} moons must be a list, got {raw_moons!r}")
    moons = tuple(moon_from_record(m, i) for i, m in enumerate(raw_moons))
    return Body(
        id=body_id,
        kind=kind,
        orbit=float(_require(record, "orbit", "Body")),
        size=float(_require(record, "size", "Body")),
        period=period,
        color=parse_color(_require(record, "color", "Body")),
        moons=moons,
    )


def root_from_record(record: dict) -> Body:
    return Body(
        id=_require(record, "id", "Root"),
        kind=BodyKind.PLANET,
        orbit=0.0,
        size=float(record.get("size", 14.0)),
        period=0.0,
        color=parse_color(record.get("color", (255, 215, 158))),
    )


_MISSION_FIELDS = ("status", "type", "launched", "operator", "description")


def mission_from_record(record: dict) -> Mission:
    mission_id = _require(record, "id", "Mission")
    known = {"id", "name", "system", "target", *_MISSION_FIELDS}
    extra = tuple(sorted((k, str(v)) for k, v in record.items() if k not in known))
    return Mission(
        id=mission_id,
        name=record.get("name") or mission_id,
        system=_require(record, "system", "Mission"),
        target=record.get("target") or None,
        extra=extra,
        **{k: str(record.get(k) or "") for k in _MISSION_FIELDS},
    )


def system_from_records(root: dict, bodies: Iterable[dict],
                        missions: Iterable[dict] = ()) -> SolarSystem:
    return SolarSystem(
        root_from_record(root),
        [body_from_record(b) for b in bodies],
        [mission_from_record(m) for m in missions],
    )


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def build_solar_system() -> SolarSystem:
    """Default system from the bundled tables."""
    from catalogs.solar_system_data import ROOT_DATA, BODY_DATA, MISSION_DATA

    root_id, root_size, root_color = ROOT_DATA
    bodies = []
    for body_id, kind, orbit, size, period, color, moons in BODY_DATA:
        bodies.append({
            "id": body_id, "kind": kind, "orbit": orbit, "size": size,
            "period": period, "color": color,
            "moons": [
                {"name": n, "orbit": o, "period": p, "size": s, "color": c}
                for n, o, p, s, c in moons
            ],
        })

    system = system_from_records(
        {"id": root_id, "size": root_size, "color": root_color},
        bodies, MISSION_DATA)
    print(f"Solar system loaded: {len(system.bodies)} bodies, "
          f"{len(system.missions)} missions")
    return system


def load_system(path: Union[str, Path]) -> SolarSystem:
    """
    Load a system from a JSON file.

    Raises FileNotFoundError / json.JSONDecodeError for unreadable files and
    ValueError for malformed records.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or "bodies" not in data:
        raise ValueError(f"{path.name}: expected an object with a 'bodies' list")

    system = system_from_records(
        data.get("root", {"id": "Sun"}),
        data["bodies"],
        data.get("missions", []),
    )
    print(f"Solar system loaded from {path.name}: {len(system.bodies)} bodies, "
          f"{len(system.missions)} missions")
    return system
