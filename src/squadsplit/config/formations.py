"""Formation templates, slot coordinates and jersey preferences."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .positions import PositionCode


@dataclass(frozen=True)
class FieldPosition:
    """Slot location as percentages of the field width (x) and length (y)."""

    x: float
    y: float


@dataclass(frozen=True)
class JerseyPreference:
    primary: int | None
    secondary: Tuple[int, ...] = ()


DEFAULT_TEMPLATE_SIZE = 11
MAX_TEMPLATE_SIZE = 15

UNPLACED_POSITION = FieldPosition(x=51, y=55)
UNPLACED_JERSEY_SLOT = PositionCode.CM

FIELD_MIN = 2.0
FIELD_MAX = 98.0


def _template(*names: str) -> Tuple[PositionCode, ...]:
    return tuple(PositionCode(name) for name in names)


_FORMATION_TEMPLATES: Dict[int, Tuple[PositionCode, ...]] = {
    1: _template("GK"),
    2: _template("GK", "CB"),
    3: _template("GK", "CB", "CM"),
    4: _template("GK", "LB", "RB", "CM"),
    5: _template("GK", "LB", "CB", "RB", "CM"),
    6: _template("GK", "LB", "RB", "LW", "RW", "SS"),  # 2-2-1
    7: _template("GK", "LB", "RB", "CM", "LW", "RW", "SS"),  # 2-3-1
    8: _template("GK", "LB", "CB", "RB", "CM", "LW", "RW", "SS"),  # 3-3-1
    9: _template("GK", "LB", "CB", "RB", "CM", "LW", "RW", "SS", "ST"),  # 3-3-2
    10: _template("GK", "LB", "CB", "RB", "LCM", "RCM", "LW", "RW", "SS", "ST"),  # 3-4-2
    11: _template("GK", "LB", "LCB", "RCB", "RB", "CM", "LW", "RW", "CAM", "SS", "ST"),
    12: _template("GK", "LB", "LCB", "RCB", "RB", "LCM", "RCM", "LW", "RW", "CAM", "SS", "ST"),
    13: _template(
        "GK", "LB", "LCB", "CB", "RCB", "RB", "LCM", "RCM", "LW", "RW", "CAM", "SS", "ST"
    ),
    14: _template(
        "GK", "LB", "LCB", "CB", "RCB", "RB", "CDM", "LCM", "RCM", "LW", "RW", "CAM", "SS", "ST"
    ),
    15: _template(
        "GK", "LB", "LCB", "CB", "RCB", "RB", "CDM", "LCM", "CM", "RCM", "LW", "RW", "CAM", "SS", "ST"
    ),
}

FORMATION_TEMPLATES: Mapping[int, Tuple[PositionCode, ...]] = MappingProxyType(_FORMATION_TEMPLATES)

SLOT_COORDINATES: Mapping[PositionCode, FieldPosition] = MappingProxyType(
    {
        PositionCode.GK: FieldPosition(51, 95),
        PositionCode.SW: FieldPosition(51, 89),
        PositionCode.LB: FieldPosition(18, 72),
        PositionCode.LCB: FieldPosition(35, 78),
        PositionCode.CB: FieldPosition(51, 80),
        PositionCode.RCB: FieldPosition(67, 78),
        PositionCode.RB: FieldPosition(84, 72),
        PositionCode.LWB: FieldPosition(18, 68),
        PositionCode.CDM: FieldPosition(51, 68),
        PositionCode.RWB: FieldPosition(84, 68),
        PositionCode.LM: FieldPosition(18, 55),
        PositionCode.LCM: FieldPosition(35, 55),
        PositionCode.CM: FieldPosition(51, 50),
        PositionCode.RCM: FieldPosition(67, 55),
        PositionCode.RM: FieldPosition(84, 55),
        PositionCode.LW: FieldPosition(18, 40),
        PositionCode.CAM: FieldPosition(51, 40),
        PositionCode.RW: FieldPosition(84, 40),
        PositionCode.SS: FieldPosition(51, 20),
        PositionCode.CF: FieldPosition(35, 18),
        PositionCode.ST: FieldPosition(67, 18),
    }
)

JERSEY_PREFERENCES: Mapping[PositionCode, JerseyPreference] = MappingProxyType(
    {
        PositionCode.GK: JerseyPreference(1),
        PositionCode.RWB: JerseyPreference(2),
        PositionCode.LWB: JerseyPreference(3),
        PositionCode.RCB: JerseyPreference(4, (4, 6)),
        PositionCode.RB: JerseyPreference(4, (4, 2)),
        PositionCode.CM: JerseyPreference(5, (5, 10)),
        PositionCode.LCB: JerseyPreference(6, (6, 4)),
        PositionCode.LB: JerseyPreference(6, (6, 3)),
        PositionCode.RM: JerseyPreference(7, (7, 8)),
        PositionCode.RW: JerseyPreference(7, (7, 11)),
        PositionCode.RCM: JerseyPreference(8, (8, 10)),
        PositionCode.SS: JerseyPreference(9),
        PositionCode.LCM: JerseyPreference(10, (10, 5)),
        PositionCode.LM: JerseyPreference(11, (11, 10)),
        PositionCode.LW: JerseyPreference(11, (11, 7)),
    }
)

_NO_PREFERENCE = JerseyPreference(None)


def get_formation_template(team_size: int) -> Tuple[PositionCode, ...]:
    """Fetch the slot template for a team size, falling back to the 11-a-side shape."""

    template = FORMATION_TEMPLATES.get(team_size)
    if template is None:
        return FORMATION_TEMPLATES[DEFAULT_TEMPLATE_SIZE]
    return template


def get_slot_coordinate(code: str) -> FieldPosition:
    if code not in SLOT_COORDINATES:
        raise KeyError(f"No field coordinate configured for position {code!r}")
    return SLOT_COORDINATES[code]  # type: ignore[index]


def get_jersey_preference(code: str) -> JerseyPreference:
    """Return the jersey preference for a slot; codes without one get an empty preference."""

    return JERSEY_PREFERENCES.get(code, _NO_PREFERENCE)  # type: ignore[call-overload]
