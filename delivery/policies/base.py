"""
Pricing Policy Base Class

Shared base class for all delivery tiers.
"""

from abc import ABC
from decimal import Decimal


class PricingPolicy(ABC):
    """
    Base class for all pricing policies.

    Every tier prices linearly on weight and distance, plus an optional
    flat fee:

        cost = weight * weight_rate + distance * distance_rate + flat_fee

    Attributes:
        IDENTITY
            name          - Display name (e.g., "Express Shipping")
            code          - Short code used in batch files (e.g., "express")
            menu_key      - Choice shown in the interactive menu (e.g., "2")

        PRICING
            weight_rate   - Cost per kg
            distance_rate - Cost per km
            flat_fee      - Fixed fee added to every shipment
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    code: str
    menu_key: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    weight_rate: Decimal
    distance_rate: Decimal
    flat_fee: Decimal = Decimal("0")

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def cost(cls, weight: Decimal, distance: Decimal) -> Decimal:
        """
        Cost for a shipment. No validation is done here.

        Args:
            weight: Package weight in kg
            distance: Delivery distance in km

        Returns:
            Unrounded cost
        """
        return weight * cls.weight_rate + distance * cls.distance_rate + cls.flat_fee
