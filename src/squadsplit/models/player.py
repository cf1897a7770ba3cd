"""Canonical player model shared by the balancing and formation layers."""

from __future__ import annotations

from typing import Any, Tuple

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic.config import ConfigDict

from squadsplit.config.positions import PositionCode


class Player(BaseModel):
    """Rated roster entry. Attributes are summary ratings on a 0-100 scale."""

    player_id: str = Field(..., min_length=1)
    name: str
    technical: int = Field(..., ge=0, le=100)
    mental: int = Field(..., ge=0, le=100)
    physical: int = Field(..., ge=0, le=100)
    primary_position: PositionCode
    secondary_positions: Tuple[PositionCode, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("secondary_positions", mode="before")
    @classmethod
    def _drop_duplicate_positions(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [part.strip() for part in value.split(",") if part.strip()]
        seen: list = []
        for code in value:
            if code not in seen:
                seen.append(code)
        return tuple(seen)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall(self) -> int:
        return round((self.technical + self.mental + self.physical) / 3)

    @property
    def attribute_sum(self) -> int:
        return self.technical + self.mental + self.physical

    def plays(self, codes) -> bool:
        """True when the primary or any secondary position is in ``codes``."""

        if self.primary_position in codes:
            return True
        return any(code in codes for code in self.secondary_positions)
