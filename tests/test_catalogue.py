"""Tests for cancer catalogue filtering and sorting."""

from oncoguide.core.entities import CancerType, Gender, SortOrder
from oncoguide.model.catalogue import (
    DEFAULT_CATALOGUE,
    CancerCard,
    filter_and_sort,
    filter_cards,
    sort_cards,
)


def names(cards):
    return [card.name for card in cards]


class TestFilterCards:
    """Tests for gender filtering."""

    def test_all(self, sample_cards):
        """The "all" filter keeps everything."""
        assert filter_cards(sample_cards, "all") == sample_cards
        assert filter_cards(sample_cards, Gender.ALL) == sample_cards

    def test_empty_filter_means_all(self, sample_cards):
        """None or empty filter behaves like "all"."""
        assert filter_cards(sample_cards, None) == sample_cards
        assert filter_cards(sample_cards, "") == sample_cards

    def test_female(self, sample_cards):
        """Female filter keeps female and both-gender cards."""
        assert names(filter_cards(sample_cards, "female")) == [
            "Lung Cancer", "Breast Cancer", "Rare Cancer",
        ]

    def test_male(self, sample_cards):
        """Male filter keeps male and both-gender cards."""
        assert names(filter_cards(sample_cards, Gender.MALE)) == [
            "Lung Cancer", "Prostate Cancer", "Rare Cancer",
        ]


class TestSortCards:
    """Tests for card ordering."""

    def test_prevalence(self, sample_cards):
        """Most common first, unranked last."""
        assert names(sort_cards(sample_cards, "prevalence")) == [
            "Breast Cancer", "Lung Cancer", "Prostate Cancer", "Rare Cancer",
        ]

    def test_survival(self, sample_cards):
        """Highest survival first, unknown last."""
        assert names(sort_cards(sample_cards, SortOrder.SURVIVAL)) == [
            "Prostate Cancer", "Breast Cancer", "Lung Cancer", "Rare Cancer",
        ]

    def test_alpha_case_insensitive(self):
        """Names sort without regard to case."""
        cards = [CancerCard("bone"), CancerCard("Anal"), CancerCard("Cervical")]
        assert names(sort_cards(cards, "alpha")) == ["Anal", "bone", "Cervical"]

    def test_unknown_order_keeps_input(self, sample_cards):
        """An unrecognised sort keeps the input order."""
        assert sort_cards(sample_cards, "random") == sample_cards

    def test_stable_ties(self):
        """Equal keys keep their input order."""
        cards = [CancerCard("B", survival=50), CancerCard("A", survival=50)]
        assert names(sort_cards(cards, "survival")) == ["B", "A"]

    def test_does_not_mutate_input(self, sample_cards):
        """Sorting returns a new list."""
        original = list(sample_cards)
        sort_cards(sample_cards, "alpha")
        assert sample_cards == original


class TestFilterAndSort:
    """Tests for the combined operation."""

    def test_male_by_survival(self, sample_cards):
        """Filter then sort."""
        assert names(filter_and_sort(sample_cards, "male", "survival")) == [
            "Prostate Cancer", "Lung Cancer", "Rare Cancer",
        ]

    def test_default_catalogue(self):
        """Default catalogue links every charted cancer type."""
        assert {card.cancer_type for card in DEFAULT_CATALOGUE} == set(CancerType)

        by_type = {card.cancer_type: card for card in DEFAULT_CATALOGUE}
        assert by_type[CancerType.BREAST].survival == 98
        assert by_type[CancerType.LUNG].survival == 63

        ordered = filter_and_sort(DEFAULT_CATALOGUE)
        assert [card.prevalence_rank for card in ordered] == [1, 2, 3, 4]
