"""
International Shipping

Covers customs handling with a flat $15 fee.
"""

from decimal import Decimal

from .base import PricingPolicy


class INTERNATIONAL(PricingPolicy):
    """International - $15 customs fee."""

    # Identity
    name = "International Shipping"
    code = "international"
    menu_key = "3"

    # Pricing
    weight_rate = Decimal("1.0")
    distance_rate = Decimal("0.5")
    flat_fee = Decimal("15")
