"""Static position, category and formation tables."""

from .formations import (
    FieldPosition,
    JerseyPreference,
    get_formation_template,
    get_jersey_preference,
    get_slot_coordinate,
)
from .positions import (
    AttributeWeights,
    PositionCode,
    balance_category_for_code,
    get_attribute_weights,
    get_role_for_code,
)

__all__ = [
    "AttributeWeights",
    "FieldPosition",
    "JerseyPreference",
    "PositionCode",
    "balance_category_for_code",
    "get_attribute_weights",
    "get_formation_template",
    "get_jersey_preference",
    "get_role_for_code",
    "get_slot_coordinate",
]
