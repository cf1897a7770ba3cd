"""Pydantic models for handing results to a transport layer."""

from .placement import (
    FieldPositionPayload,
    PlacementResponse,
    PositionOverrideRequest,
    apply_override_request,
    placement_response,
)
from .scenario import (
    BalancedTeamResponse,
    TeamGenerationRequest,
    TeamGenerationResponse,
    TeamScenarioResponse,
    scenario_response,
    team_generation_response,
)

__all__ = [
    "BalancedTeamResponse",
    "FieldPositionPayload",
    "PlacementResponse",
    "PositionOverrideRequest",
    "TeamGenerationRequest",
    "TeamGenerationResponse",
    "TeamScenarioResponse",
    "apply_override_request",
    "placement_response",
    "scenario_response",
    "team_generation_response",
]
