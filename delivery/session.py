"""
Delivery Session

Holds the currently selected pricing policy and guards cost calculation:
no cost without a policy, and no cost for out-of-bounds shipments.

USAGE
-----
    from delivery.policies import EXPRESS
    from delivery.session import DeliverySession

    session = DeliverySession()
    session.select(EXPRESS)
    session.compute_cost(Decimal("50"), Decimal("200"))   # Decimal("87.50")
"""

from decimal import Decimal
from typing import NamedTuple, Optional

from .data import MAX_WEIGHT_KG, MAX_DISTANCE_KM
from .policies import PricingPolicy


NOT_SET = "Strategy not set"


# =============================================================================
# ERRORS
# =============================================================================

class NoPolicySelected(RuntimeError):
    """Raised when a cost is requested before any policy is selected."""

    def __init__(self):
        super().__init__("Shipping strategy is not set.")


class InvalidInput(ValueError):
    """
    Weight or distance outside the allowed domain.

    Attributes:
        kind  - Which rule failed (one of the *_NOT_POSITIVE / *_TOO_LARGE constants)
        field - "weight" or "distance"
    """

    WEIGHT_NOT_POSITIVE = "weight_not_positive"
    DISTANCE_NOT_POSITIVE = "distance_not_positive"
    WEIGHT_TOO_LARGE = "weight_too_large"
    DISTANCE_TOO_LARGE = "distance_too_large"

    def __init__(self, kind: str, field: str, message: str):
        self.kind = kind
        self.field = field
        super().__init__(message)


# =============================================================================
# QUOTE
# =============================================================================

class Quote(NamedTuple):
    """A single priced shipment."""
    policy_name: str
    weight: Decimal
    distance: Decimal
    cost: Decimal


# =============================================================================
# SESSION
# =============================================================================

class DeliverySession:
    """Run-time holder of the active pricing policy."""

    def __init__(self):
        self._policy: Optional[type[PricingPolicy]] = None

    @property
    def policy(self) -> Optional[type[PricingPolicy]]:
        return self._policy

    def select(self, policy: type[PricingPolicy]) -> None:
        """Replace the current policy."""
        self._policy = policy

    def clear(self) -> None:
        self._policy = None

    def current_policy_name(self) -> str:
        if self._policy is None:
            return NOT_SET
        return self._policy.name

    def compute_cost(self, weight: Decimal, distance: Decimal) -> Decimal:
        """
        Cost of a shipment under the selected policy.

        Raises:
            NoPolicySelected: No policy has been selected
            InvalidInput: Weight or distance not positive, or above its maximum
        """
        if self._policy is None:
            raise NoPolicySelected()

        validate_shipment(weight, distance)

        return self._policy.cost(weight, distance)

    def quote(self, weight: Decimal, distance: Decimal) -> Quote:
        cost = self.compute_cost(weight, distance)
        return Quote(self._policy.name, weight, distance, cost)


def validate_shipment(weight: Decimal, distance: Decimal) -> None:
    """
    Check weight and distance against session limits.

    Checked in order: weight positive, distance positive, weight max,
    distance max. The first failing rule is raised.
    """
    if weight <= 0:
        raise InvalidInput(InvalidInput.WEIGHT_NOT_POSITIVE, "weight",
                           "Weight must be positive.")

    if distance <= 0:
        raise InvalidInput(InvalidInput.DISTANCE_NOT_POSITIVE, "distance",
                           "Distance must be positive.")

    if weight > MAX_WEIGHT_KG:
        raise InvalidInput(InvalidInput.WEIGHT_TOO_LARGE, "weight",
                           f"Weight exceeds maximum of {MAX_WEIGHT_KG} kg.")

    if distance > MAX_DISTANCE_KM:
        raise InvalidInput(InvalidInput.DISTANCE_TOO_LARGE, "distance",
                           f"Distance exceeds maximum of {MAX_DISTANCE_KM} km.")


__all__ = [
    "NOT_SET",
    "NoPolicySelected",
    "InvalidInput",
    "Quote",
    "DeliverySession",
    "validate_shipment",
]
