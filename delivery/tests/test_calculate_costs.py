"""
Unit Tests for Batch Pricing

Run with: pytest delivery/tests/test_calculate_costs.py -v
"""

import pytest
import polars as pl

from delivery.calculate_costs import calculate_costs, summarize
from delivery.version import VERSION


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def shipments():
    """One shipment per tier, 10 kg over 100 km, numbers as text."""
    return pl.DataFrame({
        "delivery_type": ["1", "express", "International", "4"],
        "weight_kg": ["10", "10", "10", "10"],
        "distance_km": ["100", "100", "100", "100"],
    })


# =============================================================================
# PRICING TESTS
# =============================================================================

class TestCalculateCosts:

    def test_costs_per_tier(self, shipments):
        df = calculate_costs(shipments)
        assert df["cost"].to_list() == pytest.approx([15.0, 37.5, 75.0, 63.0])
        assert df["error"].null_count() == 4

    def test_policy_names(self, shipments):
        df = calculate_costs(shipments)
        assert df["policy_name"].to_list() == [
            "Standard Shipping",
            "Express Shipping",
            "International Shipping",
            "Night Shipping",
        ]

    def test_keeps_input_columns(self, shipments):
        df = calculate_costs(shipments.with_columns(pl.lit("A1").alias("order_id")))
        assert df["order_id"][0] == "A1"
        assert len(df) == 4

    def test_version_stamped(self, shipments):
        df = calculate_costs(shipments)
        assert df["calculator_version"][0] == VERSION

    def test_numeric_columns(self):
        df = calculate_costs(pl.DataFrame({
            "delivery_type": ["2"],
            "weight_kg": [50],
            "distance_km": [200.0],
        }))
        assert df["cost"][0] == pytest.approx(87.5)

    def test_rounded_to_cents(self):
        """0.333 kg Standard over 1 km = 0.1665 + 0.1 -> 0.27."""
        df = calculate_costs(pl.DataFrame({
            "delivery_type": ["1"],
            "weight_kg": ["0.333"],
            "distance_km": ["1"],
        }))
        assert df["cost"][0] == pytest.approx(0.27)


class TestRowErrors:

    @pytest.fixture
    def mixed(self):
        return pl.DataFrame({
            "delivery_type": ["1", "overnight", "2", "3", "4", None],
            "weight_kg": ["10", "10", "abc", "0", "10", "10"],
            "distance_km": ["100", "100", "100", "100", "50001", "100"],
        })

    def test_bad_rows_do_not_stop_batch(self, mixed):
        df = calculate_costs(mixed)
        assert df["cost"][0] == pytest.approx(15.0)
        assert df["cost"][1:].null_count() == 5

    def test_error_messages(self, mixed):
        errors = calculate_costs(mixed)["error"].to_list()
        assert errors[0] is None
        assert "Unknown delivery type" in errors[1]
        assert "Invalid number format" in errors[2]
        assert errors[3] == "Weight must be positive."
        assert errors[4] == "Distance exceeds maximum of 50000 km."
        assert "Unknown delivery type" in errors[5]

    def test_unknown_tier_has_no_policy_name(self, mixed):
        df = calculate_costs(mixed)
        assert df["policy_name"][1] is None
        assert df["policy_name"][2] == "Express Shipping"

    def test_missing_column(self):
        with pytest.raises(ValueError, match="distance_km"):
            calculate_costs(pl.DataFrame({"delivery_type": ["1"], "weight_kg": ["1"]}))


# =============================================================================
# SUMMARY TESTS
# =============================================================================

class TestSummarize:

    def test_summary(self):
        df = calculate_costs(pl.DataFrame({
            "delivery_type": ["1", "2", "9"],
            "weight_kg": ["10", "10", "10"],
            "distance_km": ["100", "100", "100"],
        }))
        summary = summarize(df)
        assert summary["rows"] == 3
        assert summary["priced"] == 2
        assert summary["failed"] == 1
        assert summary["total_cost"] == pytest.approx(52.5)
