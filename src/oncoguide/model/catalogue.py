"""Cancer type catalogue: filtering and sorting of cancer cards."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from oncoguide.core.entities import CancerType, Gender, SortOrder
from oncoguide.core.tables import SURVIVAL_DATA, SURVIVAL_TIMEPOINTS

# Cards without a prevalence rank sort after every ranked card
UNRANKED = 999


@dataclass(frozen=True)
class CancerCard:
    """One cancer type as listed in the catalogue.

    Attributes:
        name: Display name.
        gender: Who the cancer affects: "male", "female" or "both".
        prevalence_rank: 1 = most common. None if not ranked.
        survival: Headline 5-year survival percent. None if unknown.
        cancer_type: Link to charted survival data, if any.
    """

    name: str
    gender: str = Gender.BOTH.value
    prevalence_rank: Optional[int] = None
    survival: Optional[int] = None
    cancer_type: Optional[CancerType] = None


def _five_year_stage_one(cancer_type: CancerType) -> int:
    return SURVIVAL_DATA[cancer_type]["Stage I"][SURVIVAL_TIMEPOINTS.index("5 Years")]


DEFAULT_CATALOGUE = (
    CancerCard("Colorectal Cancer", "both", 1,
               _five_year_stage_one(CancerType.COLORECTAL), CancerType.COLORECTAL),
    CancerCard("Breast Cancer", "female", 2,
               _five_year_stage_one(CancerType.BREAST), CancerType.BREAST),
    CancerCard("Lung Cancer", "both", 3,
               _five_year_stage_one(CancerType.LUNG), CancerType.LUNG),
    CancerCard("Prostate Cancer", "male", 4,
               _five_year_stage_one(CancerType.PROSTATE), CancerType.PROSTATE),
)


def filter_cards(
    cards: Iterable[CancerCard],
    gender: Union[Gender, str, None] = Gender.ALL,
) -> List[CancerCard]:
    """Keep cards relevant to a gender.

    A card is kept when the filter is "all" (or empty), the card applies
    to both genders, or the card's gender matches the filter.
    """
    wanted = gender or Gender.ALL.value
    return [
        card for card in cards
        if wanted == Gender.ALL
        or (card.gender or Gender.BOTH.value) == Gender.BOTH
        or card.gender == wanted
    ]


def sort_cards(
    cards: Iterable[CancerCard],
    order: Union[SortOrder, str, None] = SortOrder.PREVALENCE,
) -> List[CancerCard]:
    """Sort cards for display.

    Args:
        cards: Cards to sort.
        order: "prevalence" (rank ascending, unranked last), "survival"
            (highest first, unknown as 0) or "alpha" (by name). Any other
            value keeps the input order.

    Returns:
        New sorted list; ties keep their input order.
    """
    cards = list(cards)
    parsed = SortOrder.parse(order or SortOrder.PREVALENCE.value)

    if parsed is SortOrder.PREVALENCE:
        return sorted(cards, key=lambda c: c.prevalence_rank or UNRANKED)
    if parsed is SortOrder.SURVIVAL:
        return sorted(cards, key=lambda c: c.survival or 0, reverse=True)
    if parsed is SortOrder.ALPHA:
        return sorted(cards, key=lambda c: c.name.casefold())
    return cards


def filter_and_sort(
    cards: Iterable[CancerCard],
    gender: Union[Gender, str, None] = Gender.ALL,
    order: Union[SortOrder, str, None] = SortOrder.PREVALENCE,
) -> List[CancerCard]:
    """Apply :func:`filter_cards` then :func:`sort_cards`."""
    return sort_cards(filter_cards(cards, gender), order)
