"""
Night Shipping

Out-of-hours delivery with a flat $25 fee.
"""

from decimal import Decimal

from .base import PricingPolicy


class NIGHT(PricingPolicy):
    """Night delivery - $25 out-of-hours fee."""

    # Identity
    name = "Night Shipping"
    code = "night"
    menu_key = "4"

    # Pricing
    weight_rate = Decimal("0.8")
    distance_rate = Decimal("0.3")
    flat_fee = Decimal("25")
