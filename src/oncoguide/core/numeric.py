"""Rounding and number formatting helpers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up.

    Unlike the built-in ``round`` (banker's rounding, ``round(2.5) == 2``),
    ``round_half_up(2.5) == 3``.

    Args:
        value: The number to round.

    Returns:
        Nearest integer, with x.5 rounded towards positive infinity.
    """
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Format a number with thousands separators (e.g. 1234567 -> "1,234,567")."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"
