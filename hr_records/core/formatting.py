"""Helper functions for formatting numbers, currencies and dates."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, ROUND_HALF_UP


def format_number(value: int | float | Decimal | None, decimals: int = 0) -> str:
    """Format a number with thousands separators.

    Whole values drop their fractional part unless ``decimals`` asks for it,
    so ``75000.00`` renders as ``75,000`` and ``2884.62`` as ``2,884.62``.
    """
    if value is None:
        return "0"
    d = Decimal(str(value))
    if d == d.to_integral() and decimals == 0:
        return f"{d.quantize(Decimal('1'), rounding=ROUND_HALF_UP):,f}"
    places = max(decimals, 2)
    return f"{d.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP):,f}"


def format_currency(value: int | float | Decimal | None, symbol: str = "$") -> str:
    """Format a currency amount, e.g. ``$108,359``."""
    text = format_number(value)
    if text.startswith("-"):
        return f"-{symbol}{text[1:]}"
    return f"{symbol}{text}"


def format_date(value: date | None) -> str:
    if value is None:
        return ""
    return f"{value.month}/{value.day}/{value.year}"
