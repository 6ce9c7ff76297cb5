"""
Express Shipping

Higher per-unit rates plus a flat fee for speed.
"""

from decimal import Decimal

from .base import PricingPolicy


class EXPRESS(PricingPolicy):
    """Express - $10 speed fee."""

    # Identity
    name = "Express Shipping"
    code = "express"
    menu_key = "2"

    # Pricing
    weight_rate = Decimal("0.75")
    distance_rate = Decimal("0.2")
    flat_fee = Decimal("10")
