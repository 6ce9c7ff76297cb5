"""
Currency Formatting

Costs are shown as "$1,234.50" regardless of the machine locale.
"""

from decimal import Decimal, ROUND_HALF_UP

CURRENCY_SYMBOL = "$"
CENTS = Decimal("0.01")
ROUNDING = ROUND_HALF_UP
