"""
Shipment Limits

Hard limits enforced by the session, and the (tighter) bounds the
interactive calculator asks for.
"""

from decimal import Decimal

# Session limits (inclusive maximums, values must be > 0)
MAX_WEIGHT_KG = Decimal("1000")
MAX_DISTANCE_KM = Decimal("50000")

# Prompt bounds used by the interactive calculator
PROMPT_MIN_WEIGHT_KG = Decimal("0.1")
PROMPT_MIN_DISTANCE_KM = Decimal("1")

# Largest magnitude accepted from text input (96-bit decimal range)
MAX_INPUT_VALUE = Decimal("79228162514264337593543950335")
