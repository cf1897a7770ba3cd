"""Position codes and the two category tables built over them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Literal, Mapping, Optional, Tuple


class PositionCode(str, Enum):
    GK = "GK"
    SW = "SW"
    LB = "LB"
    LCB = "LCB"
    CB = "CB"
    RCB = "RCB"
    RB = "RB"
    LWB = "LWB"
    RWB = "RWB"
    CDM = "CDM"
    LM = "LM"
    LCM = "LCM"
    CM = "CM"
    RCM = "RCM"
    RM = "RM"
    CAM = "CAM"
    LW = "LW"
    RW = "RW"
    SS = "SS"
    CF = "CF"
    ST = "ST"

    def __str__(self) -> str:
        return self.value


BalanceCategory = Literal["defensive", "midfield", "attacking"]
FormationRole = Literal["goalkeeper", "forward", "midfield", "defense"]

BALANCE_CATEGORY_ORDER: Tuple[BalanceCategory, ...] = ("defensive", "midfield", "attacking")


def _codes(*names: str) -> FrozenSet[PositionCode]:
    return frozenset(PositionCode(name) for name in names)


# Fairness scoring groups CDM with the back line and both wingers with midfield.
BALANCE_CATEGORIES: Mapping[str, FrozenSet[PositionCode]] = MappingProxyType(
    {
        "defensive": _codes("GK", "SW", "LB", "LCB", "CB", "RCB", "RB", "LWB", "RWB", "CDM"),
        "midfield": _codes("LM", "LCM", "CM", "RCM", "RM", "CAM", "LW", "RW"),
        "attacking": _codes("SS", "CF", "ST"),
    }
)

# Slot filling keeps the goalkeeper apart from the defenders. Do not merge with
# BALANCE_CATEGORIES.
FORMATION_ROLES: Mapping[str, FrozenSet[PositionCode]] = MappingProxyType(
    {
        "forward": _codes("SS", "ST", "CF"),
        "midfield": _codes("LM", "LCM", "CM", "RCM", "RM", "CAM", "LW", "RW"),
        "defense": _codes("LB", "LCB", "CB", "RCB", "RB", "SW", "CDM", "RWB", "LWB"),
        "goalkeeper": _codes("GK"),
    }
)


@dataclass(frozen=True)
class AttributeWeights:
    technical: float
    mental: float
    physical: float


ATTRIBUTE_WEIGHTS: Mapping[str, AttributeWeights] = MappingProxyType(
    {
        "defensive": AttributeWeights(technical=0.25, mental=0.35, physical=0.40),
        "midfield": AttributeWeights(technical=0.40, mental=0.35, physical=0.25),
        "attacking": AttributeWeights(technical=0.45, mental=0.25, physical=0.30),
    }
)


def balance_category_for_code(code: str) -> Optional[BalanceCategory]:
    """Return the balance category containing ``code``, or None if no table lists it."""

    for category in BALANCE_CATEGORY_ORDER:
        if code in BALANCE_CATEGORIES[category]:
            return category
    return None


def get_role_for_code(code: str) -> FormationRole:
    """Return the formation role for a slot code, raising KeyError if unknown."""

    for role, codes in FORMATION_ROLES.items():
        if code in codes:
            return role  # type: ignore[return-value]
    raise KeyError(f"No formation role configured for position {code!r}")


def get_attribute_weights(category: str) -> AttributeWeights:
    if category not in ATTRIBUTE_WEIGHTS:
        raise KeyError(f"No attribute weights configured for category {category!r}")
    return ATTRIBUTE_WEIGHTS[category]
