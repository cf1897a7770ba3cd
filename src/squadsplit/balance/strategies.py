"""Deterministic heuristics that split a roster into two equal squads.

Every strategy expects an even roster of at least two players with unique
ids; :func:`squadsplit.balance.service.generate_scenarios` checks that before
calling them. Sorting is always stable, so players with equal keys keep their
roster order.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from squadsplit.config.positions import BALANCE_CATEGORY_ORDER
from squadsplit.models import Player

from .analysis import group_by_category

Partition = Tuple[List[Player], List[Player]]
Strategy = Callable[[Sequence[Player]], Partition]


def snake_draft_assignment(players: Sequence[Player]) -> Partition:
    """Assign by overall rating in pairs: A, A, B, B, A, A, B, B, ..."""

    ordered = sorted(players, key=lambda p: p.overall, reverse=True)
    team_a: List[Player] = []
    team_b: List[Player] = []

    pick_for_a = True
    for index, player in enumerate(ordered):
        (team_a if pick_for_a else team_b).append(player)
        if (index + 1) % 2 == 0:
            pick_for_a = not pick_for_a

    return team_a, team_b


def positional_balance_assignment(players: Sequence[Player]) -> Partition:
    """Alternate within each balance category, restarting at team A per category.

    Every odd-sized category hands its extra player to team A, so the squads
    are only the same size when each category has an even head count.
    """

    groups = group_by_category(players)
    team_a: List[Player] = []
    team_b: List[Player] = []

    for category in BALANCE_CATEGORY_ORDER:
        ordered = sorted(groups[category], key=lambda p: p.overall, reverse=True)
        for index, player in enumerate(ordered):
            (team_a if index % 2 == 0 else team_b).append(player)

    return team_a, team_b


def attribute_balance_assignment(players: Sequence[Player]) -> Partition:
    """Rotate over technical, physical and mental rankings, alternating teams.

    The view index moves on every round whether or not a player was found.
    Each view ranks the whole roster, so a round only comes up empty once
    everyone is assigned and the loop ends after ``len(players)`` rounds.
    """

    views = (
        sorted(players, key=lambda p: p.technical, reverse=True),
        sorted(players, key=lambda p: p.physical, reverse=True),
        sorted(players, key=lambda p: p.mental, reverse=True),
    )
    team_a: List[Player] = []
    team_b: List[Player] = []
    assigned: set[str] = set()

    view_index = 0
    assign_to_a = True
    while len(assigned) < len(players):
        view = views[view_index % len(views)]
        candidate = next((p for p in view if p.player_id not in assigned), None)
        if candidate is not None:
            (team_a if assign_to_a else team_b).append(candidate)
            assigned.add(candidate.player_id)
            assign_to_a = not assign_to_a
        view_index += 1

    return team_a, team_b


STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("snake_draft", snake_draft_assignment),
    ("positional_balance", positional_balance_assignment),
    ("attribute_balance", attribute_balance_assignment),
)


__all__ = [
    "Partition",
    "STRATEGIES",
    "Strategy",
    "attribute_balance_assignment",
    "positional_balance_assignment",
    "snake_draft_assignment",
]
