"""Results layer: treatment cost estimation and comparison."""

from oncoguide.results.costs import (
    CostConfig,
    CostBreakdown,
    estimate,
    is_subsidy_eligible,
    compare_treatments,
    format_currency,
)

__all__ = [
    "CostConfig",
    "CostBreakdown",
    "estimate",
    "is_subsidy_eligible",
    "compare_treatments",
    "format_currency",
]
