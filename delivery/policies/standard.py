"""
Standard Shipping

Cheapest tier, no flat fee.
"""

from decimal import Decimal

from .base import PricingPolicy


class STANDARD(PricingPolicy):
    """Standard - weight and distance only."""

    # Identity
    name = "Standard Shipping"
    code = "standard"
    menu_key = "1"

    # Pricing
    weight_rate = Decimal("0.5")
    distance_rate = Decimal("0.1")
