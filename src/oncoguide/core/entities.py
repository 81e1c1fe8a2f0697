"""Core entity definitions for OncoGuide.

This module contains the categorical enums shared across the codebase,
placed here to avoid circular imports. Values are the codes submitted by
the site's form controls, so every enum is ``str``-valued.
"""

from enum import Enum
from typing import Optional, Union


class _CodeEnum(str, Enum):
    """String enum that can be looked up leniently from a form code."""

    @classmethod
    def parse(cls, value: Union[str, "_CodeEnum", None]) -> Optional["_CodeEnum"]:
        """Return the member for ``value`` or None if it is not recognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Stage(_CodeEnum):
    """Disease stage as used by the cost calculator."""
    EARLY = "early"
    ADVANCED = "advanced"
    METASTATIC = "metastatic"


class CareTier(_CodeEnum):
    """Billing class for the treating hospital."""
    PUBLIC_SUBSIDISED = "public-sub"    # Subsidised ward in a public hospital
    PUBLIC_PRIVATE = "public-priv"      # Private ward in a public hospital
    PRIVATE = "private"                 # Private hospital


class Treatment(_CodeEnum):
    """Treatment regimen codes."""
    SURGERY = "surgery"
    CHEMO = "chemo"
    RADIATION = "radiation"
    SURGERY_CHEMO = "surgery-chemo"
    SURGERY_CHEMO_RAD = "surgery-chemo-rad"
    TARGETED = "targeted"
    IMMUNO = "immuno"
    COMBINED = "combined"


class IncomeBand(_CodeEnum):
    """Per-capita household income (PCHI) bands, monthly."""
    BAND_0_1200 = "0-1200"
    BAND_1201_2000 = "1201-2000"
    BAND_2001_2800 = "2001-2800"
    BAND_2801_3600 = "2801-3600"
    BAND_3601_4500 = "3601-4500"
    BAND_4501_5500 = "4501-5500"
    BAND_5501_6500 = "5501-6500"
    ABOVE_6500 = "above-6500"


class Condition(_CodeEnum):
    """Comorbidity codes recognised by the survival adjuster."""
    DIABETES = "diabetes"
    HYPERTENSION = "hypertension"
    HEART_DISEASE = "heartDisease"
    KIDNEY_DISEASE = "kidneyDisease"
    LIVER_DISEASE = "liverDisease"
    COPD = "copd"
    OBESITY = "obesity"
    SMOKING = "smoking"
    LOW_ACTIVITY = "lowActivity"


class SmokingStatus(_CodeEnum):
    CURRENT = "current"
    FORMER = "former"
    NEVER = "never"


class ActivityLevel(_CodeEnum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class CancerType(_CodeEnum):
    """Cancer types with charted survival data."""
    BREAST = "breast"
    COLORECTAL = "colorectal"
    LUNG = "lung"
    PROSTATE = "prostate"


class Gender(_CodeEnum):
    """Gender tag on catalogue cards. ALL is only meaningful as a filter."""
    ALL = "all"
    BOTH = "both"
    MALE = "male"
    FEMALE = "female"


class SortOrder(_CodeEnum):
    """Catalogue sort options."""
    PREVALENCE = "prevalence"   # Most common first
    SURVIVAL = "survival"       # Highest survival first
    ALPHA = "alpha"             # By name
