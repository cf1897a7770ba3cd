import pytest
from pydantic import ValidationError

from squadsplit.config import PositionCode
from squadsplit.models import Player

from tests.helpers import make_player


def test_player_is_frozen():
    player = make_player("p1")

    with pytest.raises((TypeError, ValidationError)):
        player.technical = 90  # type: ignore[misc]


def test_overall_is_rounded_mean():
    assert make_player("a", technical=50, mental=50, physical=51).overall == 50
    assert make_player("b", technical=50, mental=51, physical=51).overall == 51
    assert make_player("c", technical=100, mental=100, physical=100).overall == 100
    assert make_player("d", technical=0, mental=0, physical=0).overall == 0


def test_attribute_sum():
    assert make_player("p", technical=70, mental=60, physical=50).attribute_sum == 180


@pytest.mark.parametrize("field", ["technical", "mental", "physical"])
@pytest.mark.parametrize("value", [-1, 101])
def test_attributes_must_be_in_range(field, value):
    with pytest.raises(ValidationError):
        make_player("p", **{field: value})


def test_unknown_position_rejected():
    with pytest.raises(ValidationError):
        make_player("p", position="QB")

    with pytest.raises(ValidationError):
        make_player("p", secondary=["CM", "WB"])


def test_secondary_positions_are_deduplicated_in_order():
    player = make_player("p", position="CM", secondary=["ST", "LW", "ST", "CM"])
    assert player.secondary_positions == (PositionCode.ST, PositionCode.LW, PositionCode.CM)


def test_secondary_positions_accept_comma_separated_string():
    player = make_player("p", secondary="LW, RW,,LW")
    assert player.secondary_positions == (PositionCode.LW, PositionCode.RW)


def test_empty_player_id_rejected():
    with pytest.raises(ValidationError):
        make_player("")


def test_plays_checks_primary_and_secondary():
    player = make_player("p", position="CB", secondary=["CDM"])
    assert player.plays({PositionCode.CB})
    assert player.plays({PositionCode.CDM, PositionCode.ST})
    assert not player.plays({PositionCode.ST})


def test_dump_includes_overall():
    payload = make_player("p", technical=90, mental=60, physical=60).model_dump()
    assert payload["overall"] == 70
    assert Player.model_validate(
        {k: v for k, v in payload.items() if k != "overall"}
    ).overall == 70
