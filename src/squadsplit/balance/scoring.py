"""Multi-factor balance score for a pair of analyzed teams."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from squadsplit.config_loader import BalanceProfile, load_profile

from .analysis import TeamAnalysis


@dataclass(frozen=True)
class ScoreBreakdown:
    overall: float
    attribute: float
    positional: float
    distribution: float
    total: float


def _round_half_up(value: float, places: int = 2) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def score_breakdown(
    team_a: TeamAnalysis,
    team_b: TeamAnalysis,
    profile: Optional[BalanceProfile] = None,
) -> ScoreBreakdown:
    """Return each sub-score alongside the weighted total."""

    profile = profile or load_profile()

    overall_diff = abs(team_a.total_rating - team_b.total_rating)
    overall_score = max(0.0, 100 - overall_diff * profile.overall_penalty)

    attribute_diff = (
        abs(team_a.technical_avg - team_b.technical_avg)
        + abs(team_a.mental_avg - team_b.mental_avg)
        + abs(team_a.physical_avg - team_b.physical_avg)
    )
    attribute_score = max(0.0, 100 - attribute_diff * profile.attribute_penalty)

    ratings_a, ratings_b = team_a.positional_ratings, team_b.positional_ratings
    positional_diff = (
        abs(ratings_a.defensive - ratings_b.defensive)
        + abs(ratings_a.midfield - ratings_b.midfield)
        + abs(ratings_a.attacking - ratings_b.attacking)
    )
    positional_score = max(0.0, 100 - positional_diff * profile.positional_penalty)

    dist_a, dist_b = team_a.position_distribution, team_b.position_distribution
    distribution_diff = (
        abs(dist_a.defensive - dist_b.defensive)
        + abs(dist_a.midfield - dist_b.midfield)
        + abs(dist_a.attacking - dist_b.attacking)
    )
    distribution_score = max(0.0, 100 - distribution_diff * profile.distribution_penalty)

    total = (
        overall_score * profile.overall_weight
        + attribute_score * profile.attribute_weight
        + positional_score * profile.positional_weight
        + distribution_score * profile.distribution_weight
    )

    return ScoreBreakdown(
        overall=overall_score,
        attribute=attribute_score,
        positional=positional_score,
        distribution=distribution_score,
        total=_round_half_up(total),
    )


def calculate_advanced_balance_score(
    team_a: TeamAnalysis,
    team_b: TeamAnalysis,
    profile: Optional[BalanceProfile] = None,
) -> float:
    """Score how evenly two teams are matched; higher is more balanced, 100 at most."""

    return score_breakdown(team_a, team_b, profile).total


__all__ = ["ScoreBreakdown", "calculate_advanced_balance_score", "score_breakdown"]
