"""
Numeric Input Parsing

Turns raw text into an exact Decimal, classifying the ways it can fail.
Shared by the interactive calculator (which re-prompts on failure) and
batch pricing (which records the message against the row).
"""

import re
from decimal import Decimal

from .data import MAX_INPUT_VALUE


# Optional sign, ASCII digits, optional fraction ("12", "-3.5", ".5", "5.")
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


# =============================================================================
# ERRORS
# =============================================================================

class InputError(ValueError):
    """Base class for rejected numeric input. str(e) is the user-facing message."""


class EmptyInput(InputError):
    def __init__(self):
        super().__init__("Input cannot be empty. Please try again.")


class NumberFormatError(InputError):
    def __init__(self, text: str):
        self.text = text
        super().__init__("Invalid number format. Please enter a numeric value.")


class NumberTooLarge(InputError):
    def __init__(self, text: str):
        self.text = text
        super().__init__("The number entered is too large. Please enter a smaller value.")


class OutOfRange(InputError):
    """Value parsed fine but falls outside the caller's bounds."""

    def __init__(self, value: Decimal, minimum: Decimal, maximum: Decimal):
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if value < minimum:
            message = f"Value cannot be less than {minimum}. Please try again."
        else:
            message = f"Value cannot be greater than {maximum}. Please try again."
        super().__init__(message)


# =============================================================================
# PARSING
# =============================================================================

def parse_decimal(text) -> Decimal:
    """
    Parse text into a Decimal.

    Args:
        text: Raw input (None is treated as empty)

    Returns:
        Parsed value, exactly as written

    Raises:
        EmptyInput: Blank or whitespace-only text
        NumberFormatError: Not plain decimal notation (no exponents, underscores,
            NaN, Infinity or non-ASCII digits)
        NumberTooLarge: Larger in magnitude than MAX_INPUT_VALUE
    """
    if text is None or not str(text).strip():
        raise EmptyInput()

    text = str(text).strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise NumberFormatError(text)

    value = Decimal(text)
    if value.copy_abs() > MAX_INPUT_VALUE:
        raise NumberTooLarge(text)

    return value


def check_range(value: Decimal, minimum: Decimal, maximum: Decimal) -> Decimal:
    """Return value unchanged if minimum <= value <= maximum, else raise OutOfRange."""
    if value < minimum or value > maximum:
        raise OutOfRange(value, minimum, maximum)
    return value


__all__ = [
    "InputError",
    "EmptyInput",
    "NumberFormatError",
    "NumberTooLarge",
    "OutOfRange",
    "parse_decimal",
    "check_range",
]
