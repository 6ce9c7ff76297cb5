"""
Delivery Data

Static reference data (limits, prompt bounds, currency convention).

Structure:
    - reference/: Static configuration constants
"""

from decimal import Decimal

from .reference.limits import (
    MAX_WEIGHT_KG,
    MAX_DISTANCE_KM,
    PROMPT_MIN_WEIGHT_KG,
    PROMPT_MIN_DISTANCE_KM,
    MAX_INPUT_VALUE,
)
from .reference.currency import CURRENCY_SYMBOL, CENTS, ROUNDING


def round_cents(amount: Decimal) -> Decimal:
    """Round an amount to whole cents."""
    return amount.quantize(CENTS, rounding=ROUNDING)


def format_currency(amount: Decimal) -> str:
    """Format an amount as currency, e.g. Decimal("1234.5") -> "$1,234.50"."""
    return f"{CURRENCY_SYMBOL}{round_cents(amount):,.2f}"


__all__ = [
    "MAX_WEIGHT_KG",
    "MAX_DISTANCE_KM",
    "PROMPT_MIN_WEIGHT_KG",
    "PROMPT_MIN_DISTANCE_KM",
    "MAX_INPUT_VALUE",
    "CURRENCY_SYMBOL",
    "CENTS",
    "ROUNDING",
    "round_cents",
    "format_currency",
]
