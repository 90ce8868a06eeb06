from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places. Only call this when presenting a value."""
    return Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    return f"{round_money(value):,.2f}"
