"""
Policies Package

Exports all pricing policy classes and lookup helpers.

Menu order follows ALL: Standard (1), Express (2), International (3), Night (4).
"""

from .base import PricingPolicy
from .standard import STANDARD
from .express import EXPRESS
from .international import INTERNATIONAL
from .night import NIGHT


# All policies, in menu order
ALL = [STANDARD, EXPRESS, INTERNATIONAL, NIGHT]


# =============================================================================
# HELPERS
# =============================================================================

def get_policy(key: str) -> type[PricingPolicy]:
    """
    Resolve a menu key ("2") or code ("Express") to a policy.

    Raises:
        KeyError: If no policy matches
    """
    needle = str(key).strip().lower()
    for p in ALL:
        if needle == p.menu_key or needle == p.code:
            return p
    raise KeyError(f"Unknown delivery type: {key!r}")


# =============================================================================
# VALIDATION
# =============================================================================

def validate_policies() -> None:
    """
    Validate policy configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    menu_keys = [p.menu_key for p in ALL]
    codes = [p.code for p in ALL]
    if len(set(menu_keys)) != len(menu_keys):
        errors.append(f"duplicate menu keys: {menu_keys}")
    if len(set(codes)) != len(codes):
        errors.append(f"duplicate codes: {codes}")

    for p in ALL:
        # "0" is reserved for exit in the interactive menu
        if p.menu_key == "0":
            errors.append(f"{p.name}: menu_key '0' is reserved for exit")

        for attr in ("weight_rate", "distance_rate", "flat_fee"):
            if getattr(p, attr) < 0:
                errors.append(f"{p.name}: {attr} must not be negative")

    if errors:
        raise ValueError("Policy configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_policies()

__all__ = [
    # Base
    "PricingPolicy",
    # Policy classes
    "STANDARD",
    "EXPRESS",
    "INTERNATIONAL",
    "NIGHT",
    # Lists
    "ALL",
    # Helpers
    "get_policy",
]
