"""Core foundation layer: categorical entities, reference tables, numeric helpers."""

from oncoguide.core.entities import (
    ActivityLevel,
    CancerType,
    CareTier,
    Condition,
    Gender,
    IncomeBand,
    SmokingStatus,
    SortOrder,
    Stage,
    Treatment,
)
from oncoguide.core.numeric import format_number, round_half_up

__all__ = [
    "ActivityLevel",
    "CancerType",
    "CareTier",
    "Condition",
    "Gender",
    "IncomeBand",
    "SmokingStatus",
    "SortOrder",
    "Stage",
    "Treatment",
    "format_number",
    "round_half_up",
]
