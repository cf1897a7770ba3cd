from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from squadsplit.balance.service import BalancedTeam, TeamReport, TeamScenario
from squadsplit.models import Player


class TeamGenerationRequest(BaseModel):
    players: List[Player]

    @field_validator("players")
    @classmethod
    def _even_roster(cls, value: List[Player]) -> List[Player]:
        if len(value) < 2 or len(value) % 2 != 0:
            raise ValueError("Even number of players required (minimum 2)")
        return value


class BalancedTeamResponse(BaseModel):
    players: List[Player]
    formation: str
    total_rating: int
    technical_avg: float
    mental_avg: float
    physical_avg: float
    positions: Dict[str, List[Player]]


class TeamScenarioResponse(BaseModel):
    id: int
    strategy: str
    team_a: BalancedTeamResponse
    team_b: BalancedTeamResponse
    balance_score: float = Field(..., ge=0.0, le=100.0)


class TeamGenerationResponse(BaseModel):
    scenarios: List[TeamScenarioResponse]
    total_players: int
    players_per_team: int


def _team_response(team: BalancedTeam) -> BalancedTeamResponse:
    return BalancedTeamResponse(
        players=list(team.players),
        formation=team.formation,
        total_rating=team.total_rating,
        technical_avg=team.technical_avg,
        mental_avg=team.mental_avg,
        physical_avg=team.physical_avg,
        positions={code: list(members) for code, members in team.positions.items()},
    )


def scenario_response(scenario: TeamScenario) -> TeamScenarioResponse:
    return TeamScenarioResponse(
        id=scenario.scenario_id,
        strategy=scenario.strategy,
        team_a=_team_response(scenario.team_a),
        team_b=_team_response(scenario.team_b),
        balance_score=scenario.balance_score,
    )


def team_generation_response(report: TeamReport) -> TeamGenerationResponse:
    return TeamGenerationResponse(
        scenarios=[scenario_response(scenario) for scenario in report.scenarios],
        total_players=report.total_players,
        players_per_team=report.players_per_team,
    )
