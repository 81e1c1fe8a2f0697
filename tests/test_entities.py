"""Tests for categorical entities and numeric helpers."""

import pytest

from oncoguide.core.entities import CareTier, Condition, IncomeBand, Stage, Treatment
from oncoguide.core.numeric import format_number, round_half_up
from oncoguide.core.tables import TREATMENT_COSTS


class TestParse:
    """Tests for lenient enum lookup."""

    def test_code(self):
        """Form codes map to members."""
        assert CareTier.parse("public-sub") is CareTier.PUBLIC_SUBSIDISED
        assert Treatment.parse("surgery-chemo-rad") is Treatment.SURGERY_CHEMO_RAD
        assert Condition.parse("heartDisease") is Condition.HEART_DISEASE

    def test_member_passthrough(self):
        """Members are returned as-is."""
        assert Stage.parse(Stage.EARLY) is Stage.EARLY

    @pytest.mark.parametrize("value", [None, "", "EARLY", "stage-1", 3, ["early"]])
    def test_unrecognised(self, value):
        """Anything else gives None rather than raising."""
        assert Stage.parse(value) is None

    def test_other_enum_member(self):
        """A member of a different enum is not recognised."""
        assert Treatment.parse(CareTier.PRIVATE) is None

    def test_counts(self):
        """Closed sets have the expected sizes."""
        assert len(Stage) == 3
        assert len(CareTier) == 3
        assert len(Treatment) == 8
        assert len(IncomeBand) == 8


class TestTables:
    """Tests for reference table access."""

    def test_string_keys(self):
        """Tables can be indexed with raw codes."""
        assert TREATMENT_COSTS["chemo"]["public-priv"] == 40000

    def test_read_only(self):
        """Nested tables cannot be modified."""
        with pytest.raises(TypeError):
            TREATMENT_COSTS[Treatment.CHEMO][CareTier.PRIVATE] = 1


class TestNumeric:
    """Tests for rounding and formatting helpers."""

    @pytest.mark.parametrize("value, expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (4.6, 5),
        (70.92, 71),
        (1.49, 1),
        (-0.5, 0),
        (-1.6, -2),
    ])
    def test_round_half_up(self, value, expected):
        """Halves round towards positive infinity."""
        assert round_half_up(value) == expected

    def test_format_number(self):
        """Thousands separators, integer floats without decimals."""
        assert format_number(1234567) == "1,234,567"
        assert format_number(40000.0) == "40,000"
        assert format_number(999) == "999"
        assert format_number(1234.5) == "1,234.5"
