"""Treatment cost estimation.

This module turns the cost calculator's four selections (disease stage,
care tier, treatment regimen, income band) into a monetary breakdown.
The estimate is a pure table lookup: it never raises for unrecognised
selections, falling back to documented defaults instead.

Key features:
- Gross cost from a treatment x care-tier table, scaled by stage
- Insurance (MediShield-equivalent) coverage by care tier
- Means-tested (MAF-equivalent) subsidy for high-cost drug regimens
- Side-by-side comparison of every regimen for one set of selections
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

import pandas as pd

from oncoguide.core.entities import CareTier, IncomeBand, Stage, Treatment
from oncoguide.core.numeric import round_half_up
from oncoguide.core.tables import (
    FALLBACK_BASE_COST,
    INSURANCE_RATES,
    STAGE_MULTIPLIERS,
    SUBSIDY_ELIGIBLE_TREATMENTS,
    SUBSIDY_RATES,
    SUBSIDY_SHARE,
    TREATMENT_COSTS,
)

logger = logging.getLogger(__name__)


# Currency symbols for display
CURRENCY_SYMBOLS = {
    "SGD": "$",
    "USD": "US$",
    "GBP": "£",
    "EUR": "€",
}

StageLike = Union[Stage, str, None]
CareTierLike = Union[CareTier, str, None]
TreatmentLike = Union[Treatment, str, None]
IncomeBandLike = Union[IncomeBand, str, None]


@dataclass
class CostConfig:
    """Cost estimation configuration.

    Defaults reproduce the published calculator. Amounts are annual
    estimates in whole currency units.
    """

    currency: str = "SGD"

    fallback_base_cost: int = FALLBACK_BASE_COST
    # Base cost when the treatment/care tier pair is not tabulated

    subsidy_share: float = SUBSIDY_SHARE
    # Subsidy = post-insurance balance x income-band rate x this share

    insurance_rates: Dict[CareTier, float] = field(
        default_factory=lambda: dict(INSURANCE_RATES)
    )

    default_insurance_rate: float = INSURANCE_RATES[CareTier.PRIVATE]
    # Applied when the care tier is not recognised

    def __post_init__(self):
        if self.fallback_base_cost < 0:
            raise ValueError(
                f"fallback_base_cost must be non-negative, got {self.fallback_base_cost}"
            )
        if not 0.0 <= self.subsidy_share <= 1.0:
            raise ValueError(f"subsidy_share must be in [0, 1], got {self.subsidy_share}")
        rates = list(self.insurance_rates.values()) + [self.default_insurance_rate]
        for rate in rates:
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"insurance rates must be in [0, 1], got {rate}")

    def get_currency_symbol(self) -> str:
        """Get the currency symbol for display."""
        return CURRENCY_SYMBOLS.get(self.currency, self.currency)

    def insurance_rate(self, care_tier: CareTierLike) -> float:
        """Insurance coverage fraction for a care tier."""
        tier = CareTier.parse(care_tier)
        if tier is None:
            return self.default_insurance_rate
        return self.insurance_rates.get(tier, self.default_insurance_rate)


@dataclass
class CostBreakdown:
    """Monetary breakdown of one treatment estimate.

    ``out_of_pocket`` always equals ``gross - insurance_coverage - subsidy``.
    """

    gross: int
    insurance_coverage: int
    subsidy: int
    currency: str = "SGD"

    @property
    def out_of_pocket(self) -> int:
        """Amount left for the patient after coverage and subsidy."""
        return self.gross - self.insurance_coverage - self.subsidy

    @property
    def total_support(self) -> int:
        """Insurance coverage plus subsidy."""
        return self.insurance_coverage + self.subsidy

    @property
    def out_of_pocket_share(self) -> float:
        """Out-of-pocket as a fraction of gross (0.0 when gross is 0)."""
        if self.gross == 0:
            return 0.0
        return self.out_of_pocket / self.gross

    def get_currency_symbol(self) -> str:
        """Get the currency symbol for display."""
        return CURRENCY_SYMBOLS.get(self.currency, self.currency)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "currency": self.currency,
            "gross": self.gross,
            "insurance_coverage": self.insurance_coverage,
            "subsidy": self.subsidy,
            "out_of_pocket": self.out_of_pocket,
        }

    def to_display(self) -> Dict[str, str]:
        """Formatted strings for the four result fields.

        Deductions are shown with a leading minus, as on the calculator.
        """
        symbol = self.get_currency_symbol()
        return {
            "gross": format_currency(self.gross, symbol),
            "insurance_coverage": "-" + format_currency(self.insurance_coverage, symbol),
            "subsidy": "-" + format_currency(self.subsidy, symbol),
            "out_of_pocket": format_currency(self.out_of_pocket, symbol),
        }


def is_subsidy_eligible(care_tier: CareTierLike, treatment: TreatmentLike) -> bool:
    """Check whether a selection qualifies for the means-tested subsidy.

    Only subsidised public care on a targeted, immunotherapy or combined
    regimen qualifies.
    """
    return (
        CareTier.parse(care_tier) is CareTier.PUBLIC_SUBSIDISED
        and Treatment.parse(treatment) in SUBSIDY_ELIGIBLE_TREATMENTS
    )


def get_base_cost(
    treatment: TreatmentLike,
    care_tier: CareTierLike,
    config: Optional[CostConfig] = None,
) -> int:
    """Look up the annual base cost for a regimen in a care tier.

    Args:
        treatment: Treatment regimen code.
        care_tier: Care tier code.
        config: Cost configuration (defaults if None).

    Returns:
        Tabulated cost, or ``config.fallback_base_cost`` if either code
        is not recognised.
    """
    config = config or CostConfig()
    parsed_treatment = Treatment.parse(treatment)
    parsed_tier = CareTier.parse(care_tier)

    if parsed_treatment is None or parsed_tier is None:
        logger.debug(
            f"No tabulated cost for treatment={treatment!r} care_tier={care_tier!r}; "
            f"using fallback {config.fallback_base_cost}"
        )
        return config.fallback_base_cost
    return TREATMENT_COSTS[parsed_treatment][parsed_tier]


def get_stage_multiplier(stage: StageLike) -> float:
    """Stage cost multiplier, 1.0 for an unrecognised stage."""
    parsed = Stage.parse(stage)
    if parsed is None:
        logger.debug(f"Unrecognised stage {stage!r}; using multiplier 1.0")
        return 1.0
    return STAGE_MULTIPLIERS[parsed]


def get_subsidy_rate(income_band: IncomeBandLike) -> float:
    """Subsidy rate for an income band, 0.0 for an unrecognised band."""
    parsed = IncomeBand.parse(income_band)
    if parsed is None:
        logger.debug(f"Unrecognised income band {income_band!r}; using subsidy rate 0")
        return 0.0
    return SUBSIDY_RATES[parsed]


def estimate(
    stage: StageLike,
    care_tier: CareTierLike,
    treatment: TreatmentLike,
    income_band: IncomeBandLike,
    config: Optional[CostConfig] = None,
) -> CostBreakdown:
    """Estimate annual treatment costs for a set of calculator selections.

    Args:
        stage: Disease stage ("early", "advanced", "metastatic").
        care_tier: Care tier ("public-sub", "public-priv", "private").
        treatment: Treatment regimen code.
        income_band: PCHI band code.
        config: Cost configuration (defaults if None).

    Returns:
        CostBreakdown with gross, insurance coverage, subsidy and
        out-of-pocket amounts.
    """
    config = config or CostConfig()

    base_cost = get_base_cost(treatment, care_tier, config)
    gross = round_half_up(base_cost * get_stage_multiplier(stage))

    insurance_coverage = round_half_up(gross * config.insurance_rate(care_tier))

    subsidy = 0
    if is_subsidy_eligible(care_tier, treatment):
        subsidy_rate = get_subsidy_rate(income_band)
        subsidy = round_half_up(
            (gross - insurance_coverage) * subsidy_rate * config.subsidy_share
        )

    return CostBreakdown(
        gross=gross,
        insurance_coverage=insurance_coverage,
        subsidy=subsidy,
        currency=config.currency,
    )


def compare_treatments(
    stage: StageLike,
    care_tier: CareTierLike,
    income_band: IncomeBandLike,
    config: Optional[CostConfig] = None,
) -> pd.DataFrame:
    """Estimate every treatment regimen for the same selections.

    Args:
        stage: Disease stage code.
        care_tier: Care tier code.
        income_band: PCHI band code.
        config: Cost configuration (same for every regimen).

    Returns:
        DataFrame with one row per regimen and columns ``treatment``,
        ``gross``, ``insurance_coverage``, ``subsidy``, ``out_of_pocket``
        and ``subsidy_eligible``, sorted by out-of-pocket cost.
    """
    rows = []
    for treatment in Treatment:
        breakdown = estimate(stage, care_tier, treatment, income_band, config)
        row = breakdown.to_dict()
        del row["currency"]
        row["treatment"] = treatment.value
        row["subsidy_eligible"] = is_subsidy_eligible(care_tier, treatment)
        rows.append(row)

    df = pd.DataFrame(rows, columns=[
        "treatment",
        "gross",
        "insurance_coverage",
        "subsidy",
        "out_of_pocket",
        "subsidy_eligible",
    ])
    return df.sort_values("out_of_pocket", kind="stable").reset_index(drop=True)


def format_currency(value: float, symbol: str = "$", decimals: int = 0) -> str:
    """Format a value as currency string.

    Args:
        value: The monetary value.
        symbol: Currency symbol (default $).
        decimals: Decimal places (default 0 for whole numbers).

    Returns:
        Formatted currency string (e.g., "$1,234", "-$1,234").
    """
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"
