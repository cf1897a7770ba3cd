from __future__ import annotations

from squadsplit.models import Player


def make_player(
    player_id: str,
    position: str = "CM",
    *,
    technical: int = 50,
    mental: int = 50,
    physical: int = 50,
    secondary=(),
    name: str | None = None,
) -> Player:
    return Player(
        player_id=player_id,
        name=name or f"Player {player_id}",
        technical=technical,
        mental=mental,
        physical=physical,
        primary_position=position,
        secondary_positions=secondary,
    )


def rated(player_id: str, rating: int, position: str = "CM") -> Player:
    """Player whose three attributes (and so overall) all equal ``rating``."""

    return make_player(player_id, position, technical=rating, mental=rating, physical=rating)
