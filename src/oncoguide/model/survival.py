"""Survival statistics and comorbidity adjustment.

Survival curves are static per-cancer, per-stage percentages at fixed
timepoints after diagnosis. The adjustment divides a survival percentage
by the hazard ratio of each comorbidity present. This is a simplified
display model, not a clinical prognosis.
"""

import logging
import math
import numbers
from typing import Iterable, Optional, Union

import numpy as np
import pandas as pd

from oncoguide.core.entities import CancerType, Condition, SmokingStatus
from oncoguide.core.numeric import round_half_up
from oncoguide.core.tables import (
    HAZARD_RATIOS,
    MIN_SURVIVAL_PCT,
    SURVIVAL_DATA,
    SURVIVAL_TIMEPOINTS,
    SURVIVAL_YEARS,
)

logger = logging.getLogger(__name__)


def hazard_ratio(
    condition: Union[Condition, str],
    smoking_status: Union[SmokingStatus, str] = SmokingStatus.CURRENT,
) -> Optional[float]:
    """Look up the hazard ratio for a condition.

    Args:
        condition: Condition code (e.g. "diabetes", "heartDisease").
        smoking_status: Sub-ratio to use for conditions keyed by smoking
            status. Defaults to current smoker.

    Returns:
        The ratio, or None if the condition (or smoking status) is not
        recognised.
    """
    parsed = Condition.parse(condition)
    if parsed is None:
        return None

    ratio = HAZARD_RATIOS[parsed]
    if isinstance(ratio, float):
        return ratio

    status = SmokingStatus.parse(smoking_status)
    if status is None:
        return None
    return ratio[status]


def _distinct(comorbidities: Optional[Iterable[str]]) -> list:
    # First-seen order; None or a non-iterable means no conditions
    if comorbidities is None:
        return []
    if isinstance(comorbidities, str):
        comorbidities = [comorbidities]
    try:
        codes = iter(comorbidities)
    except TypeError:
        logger.debug(f"Ignoring non-iterable comorbidities {comorbidities!r}")
        return []

    seen = []
    for code in codes:
        if code not in seen:
            seen.append(code)
    return seen


def combined_hazard_ratio(
    comorbidities: Optional[Iterable[Union[Condition, str]]],
) -> float:
    """Product of the hazard ratios of every distinct recognised condition.

    Unrecognised codes contribute nothing (a factor of 1.0).
    """
    combined = 1.0
    for code in _distinct(comorbidities):
        ratio = hazard_ratio(code)
        if ratio is None:
            logger.debug(f"Ignoring unrecognised condition {code!r}")
            continue
        combined *= ratio
    return combined


def adjust_survival_rate(
    base_survival: float,
    comorbidities: Optional[Iterable[Union[Condition, str]]],
    floor: int = MIN_SURVIVAL_PCT,
) -> int:
    """Adjust a survival percentage for comorbid conditions.

    Each distinct recognised condition divides the survival value by its
    hazard ratio; smoking uses the current-smoker ratio. The result is
    rounded half-up and never drops below ``floor``.
    A baseline that is not a finite number yields ``floor``.

    Args:
        base_survival: Baseline survival percentage.
        comorbidities: Condition codes; unrecognised codes are ignored and
            None means no conditions.
        floor: Minimum percentage to return.

    Returns:
        Adjusted survival percentage as an integer.

    Example:
        >>> adjust_survival_rate(100, {"diabetes"})
        71
    """
    if not isinstance(base_survival, numbers.Real) or not math.isfinite(base_survival):
        logger.debug(f"Unusable baseline survival {base_survival!r}; using floor {floor}")
        return floor

    adjusted = base_survival / combined_hazard_ratio(comorbidities)
    return max(floor, round_half_up(adjusted))


def survival_curve(cancer_type: Union[CancerType, str]) -> pd.DataFrame:
    """Survival curve for each stage of a cancer type.

    Args:
        cancer_type: One of the charted cancer types.

    Returns:
        Long-format DataFrame with columns ``timepoint``, ``years``,
        ``stage`` and ``survival`` (percent), one row per stage and
        timepoint.

    Raises:
        KeyError: If there is no survival data for ``cancer_type``.
    """
    parsed = CancerType.parse(cancer_type)
    if parsed is None:
        raise KeyError(f"No survival data for cancer type {cancer_type!r}")

    rows = []
    for stage, values in SURVIVAL_DATA[parsed].items():
        for timepoint, years, survival in zip(SURVIVAL_TIMEPOINTS, SURVIVAL_YEARS, values):
            rows.append({
                "timepoint": timepoint,
                "years": years,
                "stage": stage,
                "survival": survival,
            })
    return pd.DataFrame(rows)


def adjusted_survival_curve(
    cancer_type: Union[CancerType, str],
    comorbidities: Iterable[Union[Condition, str]],
    floor: int = MIN_SURVIVAL_PCT,
) -> pd.DataFrame:
    """Survival curve with an added comorbidity-adjusted column.

    The diagnosis point (year 0) stays at its baseline; every later point
    is adjusted the same way as :func:`adjust_survival_rate`.

    Args:
        cancer_type: One of the charted cancer types.
        comorbidities: Condition codes; unrecognised codes are ignored.
        floor: Minimum percentage for adjusted points.

    Returns:
        The :func:`survival_curve` frame plus an integer ``adjusted`` column.
    """
    df = survival_curve(cancer_type)
    ratio = combined_hazard_ratio(comorbidities)

    survival = df["survival"].to_numpy(dtype=float)
    adjusted = np.maximum(floor, np.floor(survival / ratio + 0.5))
    df["adjusted"] = np.where(df["years"].to_numpy() == 0, survival, adjusted).astype(int)
    return df
