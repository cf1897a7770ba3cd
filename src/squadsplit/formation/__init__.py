"""Formation slot assignment for a single partitioned team."""

from .placement import (
    FormationPlacement,
    PriorityLevel,
    apply_position_override,
    assign_jersey_number,
    assign_player_positions,
    get_best_player_for_category,
    select_goalkeeper,
)

__all__ = [
    "FormationPlacement",
    "PriorityLevel",
    "apply_position_override",
    "assign_jersey_number",
    "assign_player_positions",
    "get_best_player_for_category",
    "select_goalkeeper",
]
