"""Static reference tables.

All tables are wrapped in ``MappingProxyType`` so they are read-only at
runtime. Keys are enum members; since the enums are ``str``-valued the
tables can also be indexed with the raw form codes.
"""

from types import MappingProxyType
from typing import Mapping, Union

from oncoguide.core.entities import (
    CancerType,
    CareTier,
    Condition,
    IncomeBand,
    SmokingStatus,
    Stage,
    Treatment,
)


# Annual gross treatment cost estimates by regimen and care tier
TREATMENT_COSTS: Mapping[Treatment, Mapping[CareTier, int]] = MappingProxyType({
    treatment: MappingProxyType(dict(zip(CareTier, costs)))
    for treatment, costs in {
        Treatment.SURGERY: (8000, 25000, 45000),
        Treatment.CHEMO: (12000, 40000, 80000),
        Treatment.RADIATION: (12000, 30000, 50000),
        Treatment.SURGERY_CHEMO: (18000, 55000, 100000),
        Treatment.SURGERY_CHEMO_RAD: (28000, 75000, 140000),
        Treatment.TARGETED: (50000, 90000, 120000),
        Treatment.IMMUNO: (80000, 150000, 200000),
        Treatment.COMBINED: (120000, 200000, 300000),
    }.items()
})

# Used when the treatment/care tier combination is not in TREATMENT_COSTS
FALLBACK_BASE_COST = 50000

STAGE_MULTIPLIERS: Mapping[Stage, float] = MappingProxyType({
    Stage.EARLY: 0.6,
    Stage.ADVANCED: 1.0,
    Stage.METASTATIC: 1.5,
})

# MediShield-equivalent coverage as a fraction of gross cost
INSURANCE_RATES: Mapping[CareTier, float] = MappingProxyType({
    CareTier.PUBLIC_SUBSIDISED: 0.50,
    CareTier.PUBLIC_PRIVATE: 0.30,
    CareTier.PRIVATE: 0.15,
})

# MAF-equivalent subsidy rate, falling as income rises
SUBSIDY_RATES: Mapping[IncomeBand, float] = MappingProxyType({
    IncomeBand.BAND_0_1200: 0.75,
    IncomeBand.BAND_1201_2000: 0.75,
    IncomeBand.BAND_2001_2800: 0.60,
    IncomeBand.BAND_2801_3600: 0.50,
    IncomeBand.BAND_3601_4500: 0.50,
    IncomeBand.BAND_4501_5500: 0.40,
    IncomeBand.BAND_5501_6500: 0.40,
    IncomeBand.ABOVE_6500: 0.0,
})

# Only these drug regimens attract the means-tested subsidy
SUBSIDY_ELIGIBLE_TREATMENTS = frozenset({
    Treatment.TARGETED,
    Treatment.IMMUNO,
    Treatment.COMBINED,
})

# Fraction of the post-insurance balance the subsidy rate applies to
SUBSIDY_SHARE = 0.5

HazardRatio = Union[float, Mapping[SmokingStatus, float]]

HAZARD_RATIOS: Mapping[Condition, HazardRatio] = MappingProxyType({
    Condition.DIABETES: 1.41,
    Condition.HYPERTENSION: 1.15,
    Condition.HEART_DISEASE: 1.30,
    Condition.KIDNEY_DISEASE: 1.50,
    Condition.LIVER_DISEASE: 1.45,
    Condition.COPD: 1.35,
    Condition.OBESITY: 1.20,
    Condition.SMOKING: MappingProxyType({
        SmokingStatus.CURRENT: 2.15,
        SmokingStatus.FORMER: 1.45,
        SmokingStatus.NEVER: 1.0,
    }),
    Condition.LOW_ACTIVITY: 1.59,
})

# Minimum survival percentage ever displayed
MIN_SURVIVAL_PCT = 5

SURVIVAL_TIMEPOINTS = ("Diagnosis", "1 Year", "3 Years", "5 Years", "10 Years")
SURVIVAL_YEARS = (0, 1, 3, 5, 10)
SURVIVAL_STAGES = ("Stage I", "Stage II", "Stage III", "Stage IV")

# Percent surviving at each of SURVIVAL_TIMEPOINTS, per stage
SURVIVAL_DATA: Mapping[CancerType, Mapping[str, tuple]] = MappingProxyType({
    CancerType.BREAST: MappingProxyType({
        "Stage I": (100, 99, 98, 98, 95),
        "Stage II": (100, 97, 92, 90, 82),
        "Stage III": (100, 90, 75, 72, 55),
        "Stage IV": (100, 65, 40, 28, 15),
    }),
    CancerType.COLORECTAL: MappingProxyType({
        "Stage I": (100, 98, 94, 91, 85),
        "Stage II": (100, 94, 85, 82, 70),
        "Stage III": (100, 88, 72, 65, 50),
        "Stage IV": (100, 50, 22, 14, 8),
    }),
    CancerType.LUNG: MappingProxyType({
        "Stage I": (100, 88, 72, 63, 45),
        "Stage II": (100, 75, 52, 45, 30),
        "Stage III": (100, 55, 28, 18, 10),
        "Stage IV": (100, 30, 10, 6, 3),
    }),
    CancerType.PROSTATE: MappingProxyType({
        "Stage I": (100, 100, 99, 99, 98),
        "Stage II": (100, 99, 99, 98, 95),
        "Stage III": (100, 98, 95, 92, 80),
        "Stage IV": (100, 75, 50, 32, 18),
    }),
})

# Chart colours per stage (green to red)
STAGE_COLOURS: Mapping[str, str] = MappingProxyType({
    "Stage I": "#22c55e",
    "Stage II": "#84cc16",
    "Stage III": "#eab308",
    "Stage IV": "#ef4444",
})
