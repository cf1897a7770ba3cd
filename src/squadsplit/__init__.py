"""Balanced two-team partitioning and formation slot assignment."""

from squadsplit.balance import (
    BalancedTeam,
    RosterValidationError,
    TeamReport,
    TeamScenario,
    generate_scenarios,
    generate_team_report,
)
from squadsplit.formation import FormationPlacement, apply_position_override, assign_player_positions
from squadsplit.models import Player

__all__ = [
    "BalancedTeam",
    "FormationPlacement",
    "Player",
    "RosterValidationError",
    "TeamReport",
    "TeamScenario",
    "apply_position_override",
    "assign_player_positions",
    "generate_scenarios",
    "generate_team_report",
]
