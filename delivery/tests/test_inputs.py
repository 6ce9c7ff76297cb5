"""
Unit Tests for Numeric Input Parsing

Run with: pytest delivery/tests/test_inputs.py -v
"""

import pytest
from decimal import Decimal

from delivery.inputs import (
    EmptyInput,
    InputError,
    NumberFormatError,
    NumberTooLarge,
    OutOfRange,
    check_range,
    parse_decimal,
)


class TestParseDecimal:

    @pytest.mark.parametrize("text,expected", [
        ("50", Decimal("50")),
        ("  12.5 ", Decimal("12.5")),
        ("0.1", Decimal("0.1")),
        ("-3", Decimal("-3")),
        ("+7", Decimal("7")),
        (".5", Decimal("0.5")),
        ("5.", Decimal("5")),
    ])
    def test_valid(self, text, expected):
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
    def test_empty(self, text):
        with pytest.raises(EmptyInput, match="cannot be empty"):
            parse_decimal(text)

    @pytest.mark.parametrize("text", [
        "abc",
        "12kg",
        "1,5",
        "--1",
        "NaN",
        "Infinity",
        "-inf",
        "1e2",
        "5E+2",
        "1_000",
        "\u0661\u0662",
        "1e99999999999999999999",
    ])
    def test_bad_format(self, text):
        with pytest.raises(NumberFormatError, match="Invalid number format"):
            parse_decimal(text)

    @pytest.mark.parametrize("text", [
        "79228162514264337593543950336",
        "-79228162514264337593543950336",
        "1" + "0" * 40,
    ])
    def test_too_large(self, text):
        with pytest.raises(NumberTooLarge, match="too large"):
            parse_decimal(text)

    @pytest.mark.parametrize("text", [
        "79228162514264337593543950335",
        "-79228162514264337593543950335",
    ])
    def test_largest_accepted(self, text):
        """29-digit boundary is compared exactly, not rounded to 28 digits."""
        assert parse_decimal(text) == Decimal(text)

    def test_all_errors_are_input_errors(self):
        for text in ["", "abc", "1" + "0" * 40]:
            with pytest.raises(InputError):
                parse_decimal(text)


class TestCheckRange:

    def test_inside(self):
        assert check_range(Decimal("5"), Decimal("1"), Decimal("10")) == Decimal("5")

    def test_bounds_inclusive(self):
        assert check_range(Decimal("1"), Decimal("1"), Decimal("10")) == Decimal("1")
        assert check_range(Decimal("10"), Decimal("1"), Decimal("10")) == Decimal("10")

    def test_below(self):
        with pytest.raises(OutOfRange, match="cannot be less than 0.1"):
            check_range(Decimal("0.05"), Decimal("0.1"), Decimal("1000"))

    def test_above(self):
        with pytest.raises(OutOfRange, match="cannot be greater than 1000"):
            check_range(Decimal("1000.5"), Decimal("0.1"), Decimal("1000"))
