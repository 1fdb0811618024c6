"""Utility functions for money handling and display."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENT = Decimal("0.01")


def to_money(value: Union[Decimal, float, int, str]) -> Decimal:
    """
    Quantize a value to whole cents.

    Floats are converted through ``str`` so 0.1 stays 0.1.

    Examples:
        >>> to_money(12.345)
        Decimal('12.35')
        >>> to_money(Decimal("-3"))
        Decimal('-3.00')
    """
    if isinstance(value, float):
        value = Decimal(str(value))
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_cost(cost: Union[Decimal, float]) -> str:
    """
    Format a currency amount with thousand separators and no cents.

    Args:
        cost: Amount to format

    Returns:
        Formatted string like "$12,346" or "-$1,250,000"

    Examples:
        >>> format_cost(12345.67)
        '$12,346'
        >>> format_cost(Decimal("-1250000"))
        '-$1,250,000'
    """
    amount = to_money(cost)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_percent_change(multiplier: float) -> str:
    """Render a multiplier as a signed percentage, e.g. 1.15 -> '+15%'."""
    percent = int(round((multiplier - 1.0) * 100))
    return f"{'+' if percent > 0 else ''}{percent}%"
