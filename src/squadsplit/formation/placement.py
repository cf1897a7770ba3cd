"""Place a partitioned team onto a size-specific formation template.

Roles are filled forward first, then midfield, defense and finally the
goalkeeper. For outfield roles each slot takes the best remaining player from
the first priority level that has a match; the goalkeeper slot goes to the
most composed (highest ``mental``) natural keeper, or the most composed
player overall when the squad has no keeper left.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import AbstractSet, Dict, List, Mapping, Optional, Sequence, Tuple

from squadsplit.config.formations import (
    FIELD_MAX,
    FIELD_MIN,
    UNPLACED_JERSEY_SLOT,
    UNPLACED_POSITION,
    FieldPosition,
    get_formation_template,
    get_jersey_preference,
    get_slot_coordinate,
)
from squadsplit.config.positions import PositionCode, get_role_for_code
from squadsplit.models import Player


logger = logging.getLogger(__name__)

_FIELD_MIN_ENV = "SQUADSPLIT_FIELD_MIN"
_FIELD_MAX_ENV = "SQUADSPLIT_FIELD_MAX"

JERSEY_RANGE = range(1, 100)

ROLE_ORDER: Tuple[str, ...] = ("forward", "midfield", "defense", "goalkeeper")


@dataclass(frozen=True)
class PriorityLevel:
    """One rung of a role's fallback chain. An empty code set accepts anyone."""

    codes: AbstractSet[str] = frozenset()

    @property
    def is_fallback(self) -> bool:
        return not self.codes

    def matches(self, player: Player) -> bool:
        return self.is_fallback or player.plays(self.codes)

    def select(self, candidates: Sequence[Player]) -> Optional[Player]:
        """Pick the best matching candidate, or None if nobody matches.

        Primary-position matches beat secondary ones; the attribute sum breaks
        the remaining ties and the earliest player wins an exact tie.
        """

        matching = [player for player in candidates if self.matches(player)]
        if not matching:
            return None
        if self.is_fallback:
            return max(matching, key=lambda p: p.attribute_sum)
        return max(
            matching,
            key=lambda p: (p.primary_position in self.codes, p.attribute_sum),
        )


def _level(*names: str) -> PriorityLevel:
    return PriorityLevel(frozenset(PositionCode(name) for name in names))


_CENTRAL_MIDFIELD = ("LM", "LCM", "CM", "RCM", "RM")

PLAYER_PRIORITIES: Mapping[str, Tuple[PriorityLevel, ...]] = MappingProxyType(
    {
        "forward": (
            _level("SS", "ST", "CF"),
            _level("CAM", "RW", "LW"),
            _level(*_CENTRAL_MIDFIELD),
            PriorityLevel(),
        ),
        "midfield": (
            _level(*_CENTRAL_MIDFIELD),
            _level("CAM", "RW", "LW"),
            _level("SS", "CF", "ST"),
            PriorityLevel(),
        ),
        "defense": (
            _level("LB", "LCB", "CB", "RCB", "RB", "SW", "CDM", "RWB", "LWB"),
            _level(*_CENTRAL_MIDFIELD),
            _level("LW", "CAM", "RW"),
            PriorityLevel(),
        ),
    }
)


@dataclass(frozen=True)
class FormationPlacement:
    """Coordinates, jersey numbers and slots keyed by player id."""

    formation: Tuple[PositionCode, ...]
    positions: Mapping[str, FieldPosition]
    jerseys: Mapping[str, int]
    slots: Mapping[str, PositionCode] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def unplaced(self) -> List[str]:
        return [player_id for player_id in self.jerseys if player_id not in self.slots]

    def with_override(self, player_id: str, position: FieldPosition) -> "FormationPlacement":
        if player_id not in self.positions:
            raise KeyError(f"Player {player_id!r} is not part of this placement")
        positions = dict(self.positions)
        positions[player_id] = position
        return replace(self, positions=MappingProxyType(positions))


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default


def field_bounds() -> Tuple[float, float]:
    low = _env_float(_FIELD_MIN_ENV, FIELD_MIN)
    high = _env_float(_FIELD_MAX_ENV, FIELD_MAX)
    if low > high:
        logger.warning(
            "Field bounds %.2f..%.2f are inverted; using %.2f..%.2f", low, high, FIELD_MIN, FIELD_MAX
        )
        return FIELD_MIN, FIELD_MAX
    return low, high


def assign_jersey_number(slot: str, used: AbstractSet[int]) -> int:
    """Pick the slot's preferred free number, else the lowest free number in 1-99."""

    preference = get_jersey_preference(slot)
    if preference.primary is not None and preference.primary not in used:
        return preference.primary
    for number in preference.secondary:
        if number not in used:
            return number
    for number in JERSEY_RANGE:
        if number not in used:
            return number
    raise ValueError("All jersey numbers 1-99 are already in use")


def get_best_player_for_category(role: str, available: Sequence[Player]) -> Optional[Player]:
    if not available:
        return None
    for level in PLAYER_PRIORITIES[role]:
        chosen = level.select(available)
        if chosen is not None:
            return chosen
    return None


def select_goalkeeper(available: Sequence[Player]) -> Optional[Player]:
    if not available:
        return None
    keepers = [player for player in available if player.primary_position == PositionCode.GK]
    return max(keepers or available, key=lambda p: p.mental)


def assign_player_positions(team: Sequence[Player]) -> FormationPlacement:
    """Map every player in ``team`` to a slot coordinate and a unique jersey number."""

    template = get_formation_template(len(team))
    slots_by_role: Dict[str, List[PositionCode]] = {role: [] for role in ROLE_ORDER}
    for slot in template:
        slots_by_role[get_role_for_code(slot)].append(slot)

    positions: Dict[str, FieldPosition] = {}
    jerseys: Dict[str, int] = {}
    slots: Dict[str, PositionCode] = {}
    used_numbers: set[int] = set()
    available: List[Player] = list(team)

    for role in ROLE_ORDER:
        for slot in slots_by_role[role]:
            if role == "goalkeeper":
                chosen = select_goalkeeper(available)
            else:
                chosen = get_best_player_for_category(role, available)
            if chosen is None:
                logger.debug("No player left for %s slot %s", role, slot)
                continue

            number = assign_jersey_number(slot, used_numbers)
            used_numbers.add(number)
            positions[chosen.player_id] = get_slot_coordinate(slot)
            jerseys[chosen.player_id] = number
            slots[chosen.player_id] = slot
            available = [player for player in available if player.player_id != chosen.player_id]
            logger.debug(
                "%s: assigned %s (%s) to %s with #%s",
                role.capitalize(),
                chosen.name,
                chosen.primary_position,
                slot,
                number,
            )

    for player in available:
        logger.warning("Player %s could not be assigned a formation slot", player.name)
        number = assign_jersey_number(UNPLACED_JERSEY_SLOT, used_numbers)
        used_numbers.add(number)
        positions[player.player_id] = UNPLACED_POSITION
        jerseys[player.player_id] = number

    return FormationPlacement(
        formation=template,
        positions=MappingProxyType(positions),
        jerseys=MappingProxyType(jerseys),
        slots=MappingProxyType(slots),
    )


def apply_position_override(
    placement: FormationPlacement,
    player_id: str,
    x: float,
    y: float,
) -> FormationPlacement:
    """Replace one player's coordinate, clamped to the playable field area."""

    low, high = field_bounds()
    position = FieldPosition(x=max(low, min(high, x)), y=max(low, min(high, y)))
    return placement.with_override(player_id, position)


__all__ = [
    "FormationPlacement",
    "PLAYER_PRIORITIES",
    "PriorityLevel",
    "ROLE_ORDER",
    "apply_position_override",
    "assign_jersey_number",
    "assign_player_positions",
    "field_bounds",
    "get_best_player_for_category",
    "select_goalkeeper",
]
