"""Model layer: survival statistics, health profile, cancer catalogue."""

from oncoguide.model.survival import (
    hazard_ratio,
    combined_hazard_ratio,
    adjust_survival_rate,
    survival_curve,
    adjusted_survival_curve,
)
from oncoguide.model.profile import (
    HealthProfile,
    load_profile,
    comorbidities_from_blob,
    calculate_age,
)
from oncoguide.model.catalogue import (
    CancerCard,
    DEFAULT_CATALOGUE,
    filter_cards,
    sort_cards,
    filter_and_sort,
)

__all__ = [
    "hazard_ratio",
    "combined_hazard_ratio",
    "adjust_survival_rate",
    "survival_curve",
    "adjusted_survival_curve",
    "HealthProfile",
    "load_profile",
    "comorbidities_from_blob",
    "calculate_age",
    "CancerCard",
    "DEFAULT_CATALOGUE",
    "filter_cards",
    "sort_cards",
    "filter_and_sort",
]
