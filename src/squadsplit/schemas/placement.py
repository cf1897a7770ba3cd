from __future__ import annotations

from dataclasses import asdict
from typing import Dict, List

from pydantic import BaseModel, Field

from squadsplit.formation.placement import FormationPlacement, apply_position_override


class FieldPositionPayload(BaseModel):
    x: float = Field(..., ge=0.0, le=100.0)
    y: float = Field(..., ge=0.0, le=100.0)


class PlacementResponse(BaseModel):
    formation: List[str]
    positions: Dict[str, FieldPositionPayload]
    jerseys: Dict[str, int]
    slots: Dict[str, str]


class PositionOverrideRequest(BaseModel):
    player_id: str = Field(..., min_length=1)
    x: float = Field(..., ge=0.0, le=100.0)
    y: float = Field(..., ge=0.0, le=100.0)


def placement_response(placement: FormationPlacement) -> PlacementResponse:
    return PlacementResponse(
        formation=[slot.value for slot in placement.formation],
        positions={
            player_id: FieldPositionPayload.model_validate(asdict(position))
            for player_id, position in placement.positions.items()
        },
        jerseys=dict(placement.jerseys),
        slots={player_id: slot.value for player_id, slot in placement.slots.items()},
    )


def apply_override_request(
    placement: FormationPlacement,
    request: PositionOverrideRequest,
) -> FormationPlacement:
    return apply_position_override(placement, request.player_id, request.x, request.y)
