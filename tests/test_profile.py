"""Tests for the session health profile."""

import json
import logging
from datetime import date

import pytest

from oncoguide.model.profile import (
    HealthProfile,
    calculate_age,
    comorbidities_from_blob,
    load_profile,
)


class TestLoadProfile:
    """Tests for parsing a persisted profile blob."""

    def test_parses_form_data(self, profile_blob):
        """Checkbox values "on" and True both count as ticked."""
        profile = load_profile(profile_blob)

        assert profile is not None
        assert profile.conditions == ["diabetes", "copd"]
        assert profile.smoking_status == "current"
        assert profile.activity_level == "low"
        assert profile.birth_date == "1970-03-01"

    @pytest.mark.parametrize("blob", [None, ""])
    def test_missing_blob(self, blob):
        """No blob means no profile."""
        assert load_profile(blob) is None

    @pytest.mark.parametrize("blob", ["{not json", "[1, 2, 3]", "null", "42", b"\xff"])
    def test_unparseable_blob(self, blob, caplog):
        """Malformed or non-object JSON gives None and a warning."""
        with caplog.at_level(logging.WARNING, logger="oncoguide.model.profile"):
            assert load_profile(blob) is None

        assert caplog.records
        assert caplog.records[0].levelno == logging.WARNING

    def test_extra_fields_kept(self):
        """Fields the profile does not model are preserved."""
        profile = load_profile(json.dumps({"name": "Sam", "diabetes": "on"}))

        assert profile.extra == {"name": "Sam"}
        assert profile.to_form()["name"] == "Sam"

    def test_json_round_trip(self, profile_blob):
        """to_json output loads back to an equal profile."""
        profile = load_profile(profile_blob)
        assert load_profile(profile.to_json()) == profile


class TestComorbidities:
    """Tests for deriving comorbidity codes from a profile."""

    def test_all_sources(self, profile_blob):
        """Ticked conditions, current smoking and low activity are included."""
        profile = load_profile(profile_blob)
        assert profile.comorbidities() == ["diabetes", "copd", "smoking", "lowActivity"]

    def test_former_smoker_not_included(self):
        """Only current smokers get the smoking condition."""
        profile = HealthProfile.from_form({"smokingStatus": "former", "activityLevel": "high"})
        assert profile.comorbidities() == []

    def test_all_flags(self):
        """Every form checkbox maps to its condition code."""
        flags = ["diabetes", "hypertension", "heartDisease",
                 "kidneyDisease", "liverDisease", "copd"]
        profile = HealthProfile.from_form({flag: True for flag in flags})
        assert profile.comorbidities() == flags

    def test_unchecked_values(self):
        """Falsy stored values are not ticked."""
        profile = HealthProfile.from_form(
            {"diabetes": False, "hypertension": 0, "copd": "", "liverDisease": None}
        )
        assert profile.comorbidities() == []

    def test_truthy_values_ticked(self):
        """Any truthy stored value counts as ticked."""
        profile = HealthProfile.from_form({"diabetes": 1, "copd": "yes"})
        assert profile.comorbidities() == ["diabetes", "copd"]

    def test_from_blob(self, profile_blob):
        """comorbidities_from_blob parses and derives in one step."""
        assert comorbidities_from_blob(profile_blob) == [
            "diabetes", "copd", "smoking", "lowActivity",
        ]

    def test_from_bad_blob(self):
        """An unreadable blob gives no comorbidities."""
        assert comorbidities_from_blob("{broken") == []
        assert comorbidities_from_blob(None) == []


class TestAge:
    """Tests for age calculation."""

    def test_birthday_passed(self):
        """Birthday already reached this year."""
        assert calculate_age(date(1990, 6, 15), today=date(2026, 6, 15)) == 36

    def test_birthday_ahead(self):
        """Birthday still to come this year."""
        assert calculate_age(date(1990, 6, 15), today=date(2026, 6, 14)) == 35

    def test_leap_day(self):
        """Leap-day birthdays count on 1 March in non-leap years."""
        assert calculate_age(date(2000, 2, 29), today=date(2025, 2, 28)) == 24
        assert calculate_age(date(2000, 2, 29), today=date(2025, 3, 1)) == 25

    def test_profile_age(self, profile_blob):
        """Profile age uses the stored birth date."""
        profile = load_profile(profile_blob)
        assert profile.age(today=date(2026, 10, 18)) == 56

    def test_profile_age_missing_or_invalid(self):
        """No or invalid birth date gives None."""
        assert HealthProfile().age() is None
        assert HealthProfile(birth_date="not-a-date").age() is None
