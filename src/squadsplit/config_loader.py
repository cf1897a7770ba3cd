"""Persist and load balance scoring profiles."""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

PROFILE_ENV = "SQUADSPLIT_PROFILE"


@dataclass(frozen=True)
class BalanceProfile:
    """Weights and difference multipliers for the four balance sub-scores."""

    overall_weight: float = 0.20
    attribute_weight: float = 0.30
    positional_weight: float = 0.40
    distribution_weight: float = 0.10
    overall_penalty: float = 0.5
    attribute_penalty: float = 2.0
    positional_penalty: float = 1.5
    distribution_penalty: float = 10.0

    def __post_init__(self) -> None:
        for field in fields(self):
            if getattr(self, field.name) < 0:
                raise ValueError(f"{field.name} must be non-negative")
        total = (
            self.overall_weight
            + self.attribute_weight
            + self.positional_weight
            + self.distribution_weight
        )
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ValueError(f"Sub-score weights must sum to 1.0, got {total:.6f}")

    @classmethod
    def load(cls, path: Path) -> "BalanceProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown profile keys in %s: %s", path, ", ".join(unknown))
        return cls(**{key: float(value) for key, value in data.items() if key in known})

    def save(self, path: Path) -> None:
        path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")


DEFAULT_PROFILE = BalanceProfile()


def load_profile(path: Optional[Path] = None) -> BalanceProfile:
    """Return the profile at ``path``, the one named by SQUADSPLIT_PROFILE, or the default."""

    if path is None:
        raw = os.getenv(PROFILE_ENV)
        if not raw:
            return DEFAULT_PROFILE
        path = Path(raw)
    return BalanceProfile.load(path)
