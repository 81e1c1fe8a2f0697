"""Health profile saved from the assessment form.

The profile is persisted for the session as a JSON object string. Loading
is forgiving: anything that does not parse to a JSON object is treated as
"no profile available".
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from oncoguide.core.entities import ActivityLevel, Condition, SmokingStatus

logger = logging.getLogger(__name__)


# Checkbox conditions on the assessment form, in display order
FLAG_CONDITIONS = (
    Condition.DIABETES,
    Condition.HYPERTENSION,
    Condition.HEART_DISEASE,
    Condition.KIDNEY_DISEASE,
    Condition.LIVER_DISEASE,
    Condition.COPD,
)


def _is_checked(value: Any) -> bool:
    """Any truthy stored value ("on", True, 1, "yes") counts as ticked."""
    return bool(value)


@dataclass
class HealthProfile:
    """Answers from the health assessment form.

    Attributes:
        conditions: Condition codes ticked on the form.
        smoking_status: "current", "former", "never" or None.
        activity_level: "low", "moderate", "high" or None.
        birth_date: ISO date string, if given.
        extra: Any other form fields, kept so they round-trip.
    """

    conditions: List[str] = field(default_factory=list)
    smoking_status: Optional[str] = None
    activity_level: Optional[str] = None
    birth_date: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_form(cls, data: Dict[str, Any]) -> "HealthProfile":
        """Build a profile from flat form data (field name -> value)."""
        remaining = dict(data)
        conditions = [
            condition.value
            for condition in FLAG_CONDITIONS
            if _is_checked(remaining.pop(condition.value, None))
        ]
        return cls(
            conditions=conditions,
            smoking_status=remaining.pop("smokingStatus", None) or None,
            activity_level=remaining.pop("activityLevel", None) or None,
            birth_date=remaining.pop("birthDate", None) or None,
            extra=remaining,
        )

    def to_form(self) -> Dict[str, Any]:
        """Flatten back to form data, the inverse of :meth:`from_form`."""
        data: Dict[str, Any] = dict(self.extra)
        for condition in FLAG_CONDITIONS:
            data[condition.value] = condition.value in self.conditions
        if self.smoking_status is not None:
            data["smokingStatus"] = self.smoking_status
        if self.activity_level is not None:
            data["activityLevel"] = self.activity_level
        if self.birth_date is not None:
            data["birthDate"] = self.birth_date
        return data

    def to_json(self) -> str:
        """Serialise for the session store."""
        return json.dumps(self.to_form())

    def comorbidities(self) -> List[str]:
        """Condition codes to feed the survival adjuster.

        Ticked conditions, plus ``smoking`` for current smokers and
        ``lowActivity`` for a low activity level.
        """
        result = [c.value for c in FLAG_CONDITIONS if c.value in self.conditions]
        if SmokingStatus.parse(self.smoking_status) is SmokingStatus.CURRENT:
            result.append(Condition.SMOKING.value)
        if ActivityLevel.parse(self.activity_level) is ActivityLevel.LOW:
            result.append(Condition.LOW_ACTIVITY.value)
        return result

    def age(self, today: Optional[date] = None) -> Optional[int]:
        """Age in whole years, or None if no valid birth date is recorded."""
        if not self.birth_date:
            return None
        try:
            birth = date.fromisoformat(self.birth_date)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid birth date {self.birth_date!r}")
            return None
        return calculate_age(birth, today)


def load_profile(blob: Optional[str]) -> Optional[HealthProfile]:
    """Parse a persisted profile blob.

    Args:
        blob: JSON object string, as written by :meth:`HealthProfile.to_json`.

    Returns:
        The profile, or None if there is no blob or it cannot be parsed
        into a JSON object.
    """
    if not blob:
        return None

    try:
        data = json.loads(blob)
    except (TypeError, ValueError) as e:
        logger.warning(f"Error loading saved profile: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Saved profile is not an object: {type(data).__name__}")
        return None

    return HealthProfile.from_form(data)


def comorbidities_from_blob(blob: Optional[str]) -> List[str]:
    """Comorbidity codes from a persisted profile, empty if none is available."""
    profile = load_profile(blob)
    if profile is None:
        return []
    return profile.comorbidities()


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """Age in whole years on ``today`` (defaults to the current date).

    Args:
        birth_date: Date of birth.
        today: Reference date.

    Returns:
        Completed years; one less if this year's birthday is still ahead.
    """
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age
