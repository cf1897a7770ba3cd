import random

import pytest

from squadsplit.balance import (
    STRATEGIES,
    attribute_balance_assignment,
    positional_balance_assignment,
    snake_draft_assignment,
)
from squadsplit.config import PositionCode

from tests.helpers import make_player, rated


def _random_roster(size: int, seed: int):
    rng = random.Random(seed)
    codes = list(PositionCode)
    return [
        make_player(
            f"p{index}",
            rng.choice(codes).value,
            technical=rng.randint(20, 99),
            mental=rng.randint(20, 99),
            physical=rng.randint(20, 99),
        )
        for index in range(size)
    ]


def _ids(players):
    return [player.player_id for player in players]


def test_strategy_order():
    assert [name for name, _ in STRATEGIES] == [
        "snake_draft",
        "positional_balance",
        "attribute_balance",
    ]


def test_snake_draft_pairs_cadence():
    roster = [rated(f"r{value}", value) for value in (90, 80, 70, 60, 50, 40, 30, 20)]
    team_a, team_b = snake_draft_assignment(roster)

    assert [p.overall for p in team_a] == [90, 80, 50, 40]
    assert [p.overall for p in team_b] == [70, 60, 30, 20]


def test_snake_draft_sorts_unordered_roster():
    roster = [rated(f"r{value}", value) for value in (20, 90, 50, 70, 30, 80, 40, 60)]
    team_a, team_b = snake_draft_assignment(roster)

    assert sorted(p.overall for p in team_a) == [40, 50, 80, 90]
    assert sorted(p.overall for p in team_b) == [20, 30, 60, 70]


def test_snake_draft_keeps_roster_order_on_ties():
    roster = [rated(pid, 60) for pid in ("a", "b", "c", "d")]
    team_a, team_b = snake_draft_assignment(roster)
    assert _ids(team_a) == ["a", "b"]
    assert _ids(team_b) == ["c", "d"]


def test_positional_balance_alternates_within_each_category():
    roster = [
        rated("m1", 75, "CM"),
        rated("d1", 80, "CB"),
        rated("a1", 85, "ST"),
        rated("d2", 70, "LB"),
        rated("m2", 65, "LW"),
        rated("a2", 60, "CF"),
        rated("d3", 60, "GK"),
        rated("d4", 50, "CDM"),
    ]
    team_a, team_b = positional_balance_assignment(roster)

    assert _ids(team_a) == ["d1", "d3", "m1", "a1"]
    assert _ids(team_b) == ["d2", "d4", "m2", "a2"]


def test_positional_balance_restarts_at_team_a_for_every_category():
    roster = [
        rated("d1", 80, "CB"),
        rated("d2", 70, "RB"),
        rated("d3", 60, "GK"),
        rated("m1", 75, "CM"),
        rated("m2", 65, "CAM"),
        rated("a1", 85, "ST"),
    ]
    team_a, team_b = positional_balance_assignment(roster)

    assert _ids(team_a) == ["d1", "d3", "m1", "a1"]
    assert _ids(team_b) == ["d2", "m2"]


def test_attribute_balance_rotates_over_views():
    roster = [
        make_player("p1", technical=90, physical=10, mental=50),
        make_player("p2", technical=80, physical=20, mental=60),
        make_player("p3", technical=10, physical=90, mental=40),
        make_player("p4", technical=20, physical=80, mental=95),
    ]
    team_a, team_b = attribute_balance_assignment(roster)

    assert _ids(team_a) == ["p1", "p4"]
    assert _ids(team_b) == ["p3", "p2"]


@pytest.mark.parametrize("size", [2, 4, 10, 22, 40])
@pytest.mark.parametrize("strategy", [snake_draft_assignment, attribute_balance_assignment])
def test_rank_based_strategies_split_evenly(strategy, size):
    roster = _random_roster(size, seed=size)
    team_a, team_b = strategy(roster)

    assert len(team_a) == len(team_b) == size // 2
    assert sorted(_ids(team_a) + _ids(team_b)) == sorted(_ids(roster))


def test_positional_balance_covers_roster():
    roster = _random_roster(30, seed=7)
    team_a, team_b = positional_balance_assignment(roster)

    assert len(team_a) + len(team_b) == 30
    assert sorted(_ids(team_a) + _ids(team_b)) == sorted(_ids(roster))


@pytest.mark.parametrize("name, strategy", STRATEGIES)
def test_strategies_are_deterministic(name, strategy):
    roster = _random_roster(16, seed=3)
    assert strategy(roster) == strategy(list(roster))
