"""Per-team rating and positional statistics."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean
from typing import Dict, List, Sequence, Tuple

from squadsplit.config.positions import (
    BALANCE_CATEGORY_ORDER,
    BalanceCategory,
    balance_category_for_code,
    get_attribute_weights,
)
from squadsplit.models import Player


@dataclass(frozen=True)
class PositionalRatings:
    defensive: float = 0.0
    midfield: float = 0.0
    attacking: float = 0.0


@dataclass(frozen=True)
class PositionDistribution:
    defensive: int = 0
    midfield: int = 0
    attacking: int = 0


@dataclass(frozen=True)
class TeamAnalysis:
    """Aggregated view of one team, rebuilt from scratch on every call."""

    players: Tuple[Player, ...]
    total_rating: int
    technical_avg: float
    mental_avg: float
    physical_avg: float
    positional_ratings: PositionalRatings
    position_distribution: PositionDistribution


def get_position_category(player: Player) -> BalanceCategory:
    """Classify a player for fairness scoring.

    The primary position is checked against the defensive, midfield and
    attacking tables in that order. Secondary positions are scanned with the
    same ordered check when the primary one is not listed. Players matching
    nothing count as midfield.
    """

    for code in (player.primary_position, *player.secondary_positions):
        category = balance_category_for_code(code)
        if category is not None:
            return category

    return "midfield"


def get_positional_rating(player: Player, category: str) -> float:
    weights = get_attribute_weights(category)
    return (
        player.technical * weights.technical
        + player.mental * weights.mental
        + player.physical * weights.physical
    )


def group_by_category(players: Sequence[Player]) -> Dict[BalanceCategory, List[Player]]:
    """Split players by balance category, keeping roster order inside each group."""

    groups: Dict[BalanceCategory, List[Player]] = {category: [] for category in BALANCE_CATEGORY_ORDER}
    for player in players:
        groups[get_position_category(player)].append(player)
    return groups


def analyze_team(players: Sequence[Player]) -> TeamAnalysis:
    if not players:
        return TeamAnalysis(
            players=(),
            total_rating=0,
            technical_avg=0.0,
            mental_avg=0.0,
            physical_avg=0.0,
            positional_ratings=PositionalRatings(),
            position_distribution=PositionDistribution(),
        )

    groups = group_by_category(players)

    ratings: Dict[str, float] = {}
    for category, members in groups.items():
        if members:
            ratings[category] = fmean(get_positional_rating(p, category) for p in members)
        else:
            ratings[category] = 0.0

    return TeamAnalysis(
        players=tuple(players),
        total_rating=sum(p.overall for p in players),
        technical_avg=fmean(p.technical for p in players),
        mental_avg=fmean(p.mental for p in players),
        physical_avg=fmean(p.physical for p in players),
        positional_ratings=PositionalRatings(**ratings),
        position_distribution=PositionDistribution(
            **{category: len(members) for category, members in groups.items()}
        ),
    )
