"""Scenario generation: run every strategy, score the splits and rank them."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from squadsplit.config_loader import BalanceProfile
from squadsplit.models import Player

from .analysis import TeamAnalysis, analyze_team, group_by_category
from .scoring import score_breakdown
from .strategies import STRATEGIES


logger = logging.getLogger(__name__)


class RosterValidationError(ValueError):
    """Raised when a roster cannot be split into two equal squads."""


@dataclass(frozen=True)
class BalancedTeam:
    players: Tuple[Player, ...]
    formation: str
    total_rating: int
    technical_avg: float
    mental_avg: float
    physical_avg: float
    positions: Dict[str, List[Player]]


@dataclass(frozen=True)
class TeamScenario:
    scenario_id: int
    strategy: str
    team_a: BalancedTeam
    team_b: BalancedTeam
    balance_score: float


@dataclass(frozen=True)
class TeamReport:
    scenarios: Tuple[TeamScenario, ...]
    total_players: int
    players_per_team: int


def validate_roster(players: Sequence[Player]) -> None:
    if len(players) < 2 or len(players) % 2 != 0:
        raise RosterValidationError(
            f"Even number of players required (minimum 2), got {len(players)}"
        )

    counts = Counter(player.player_id for player in players)
    duplicates = sorted(pid for pid, count in counts.items() if count > 1)
    if duplicates:
        raise RosterValidationError(f"Duplicate player ids in roster: {', '.join(duplicates)}")


def determine_formation(players: Sequence[Player]) -> str:
    """Return a ``D-M-A`` label, or ``Flexible`` when a line is empty."""

    groups = group_by_category(players)
    defensive, midfield, attacking = (
        len(groups["defensive"]),
        len(groups["midfield"]),
        len(groups["attacking"]),
    )
    if defensive > 0 and midfield > 0 and attacking > 0:
        return f"{defensive}-{midfield}-{attacking}"
    return "Flexible"


def group_players_by_position(players: Sequence[Player]) -> Dict[str, List[Player]]:
    positions: Dict[str, List[Player]] = {}
    for player in players:
        positions.setdefault(player.primary_position.value, []).append(player)
    return positions


def _balanced_team(analysis: TeamAnalysis) -> BalancedTeam:
    return BalancedTeam(
        players=analysis.players,
        formation=determine_formation(analysis.players),
        total_rating=analysis.total_rating,
        technical_avg=analysis.technical_avg,
        mental_avg=analysis.mental_avg,
        physical_avg=analysis.physical_avg,
        positions=group_players_by_position(analysis.players),
    )


def _create_scenario(
    scenario_id: int,
    strategy: str,
    team_a: Sequence[Player],
    team_b: Sequence[Player],
    profile: Optional[BalanceProfile],
) -> TeamScenario:
    analysis_a = analyze_team(team_a)
    analysis_b = analyze_team(team_b)
    breakdown = score_breakdown(analysis_a, analysis_b, profile)
    logger.debug(
        "Scenario %s (%s): overall=%.2f attribute=%.2f positional=%.2f distribution=%.2f total=%.2f",
        scenario_id,
        strategy,
        breakdown.overall,
        breakdown.attribute,
        breakdown.positional,
        breakdown.distribution,
        breakdown.total,
    )
    return TeamScenario(
        scenario_id=scenario_id,
        strategy=strategy,
        team_a=_balanced_team(analysis_a),
        team_b=_balanced_team(analysis_b),
        balance_score=breakdown.total,
    )


def generate_scenarios(
    players: Sequence[Player],
    profile: Optional[BalanceProfile] = None,
) -> List[TeamScenario]:
    """Split ``players`` with every strategy and return the scenarios best-first.

    Scenario ids follow strategy order (snake draft, positional balance,
    attribute balance). The sort is stable, so equal scores keep id order.
    """

    validate_roster(players)

    scenarios: List[TeamScenario] = []
    for scenario_id, (name, strategy) in enumerate(STRATEGIES, start=1):
        team_a, team_b = strategy(players)
        scenarios.append(_create_scenario(scenario_id, name, team_a, team_b, profile))

    scenarios.sort(key=lambda scenario: scenario.balance_score, reverse=True)

    best = scenarios[0]
    logger.info(
        "Generated %s scenarios for %s players; best is %s (%s) at %.2f",
        len(scenarios),
        len(players),
        best.scenario_id,
        best.strategy,
        best.balance_score,
    )
    return scenarios


def generate_team_report(
    players: Sequence[Player],
    profile: Optional[BalanceProfile] = None,
) -> TeamReport:
    scenarios = generate_scenarios(players, profile)
    return TeamReport(
        scenarios=tuple(scenarios),
        total_players=len(players),
        players_per_team=len(players) // 2,
    )
