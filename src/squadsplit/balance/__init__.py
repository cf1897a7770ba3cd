"""Two-team partitioning, team analysis and balance scoring."""

from .analysis import (
    PositionalRatings,
    PositionDistribution,
    TeamAnalysis,
    analyze_team,
    get_position_category,
    get_positional_rating,
)
from .scoring import ScoreBreakdown, calculate_advanced_balance_score, score_breakdown
from .service import (
    BalancedTeam,
    RosterValidationError,
    TeamReport,
    TeamScenario,
    determine_formation,
    generate_scenarios,
    generate_team_report,
    group_players_by_position,
)
from .strategies import (
    STRATEGIES,
    attribute_balance_assignment,
    positional_balance_assignment,
    snake_draft_assignment,
)

__all__ = [
    "BalancedTeam",
    "PositionDistribution",
    "PositionalRatings",
    "RosterValidationError",
    "STRATEGIES",
    "ScoreBreakdown",
    "TeamAnalysis",
    "TeamReport",
    "TeamScenario",
    "analyze_team",
    "attribute_balance_assignment",
    "calculate_advanced_balance_score",
    "determine_formation",
    "generate_scenarios",
    "generate_team_report",
    "get_position_category",
    "get_positional_rating",
    "group_players_by_position",
    "positional_balance_assignment",
    "score_breakdown",
    "snake_draft_assignment",
]
