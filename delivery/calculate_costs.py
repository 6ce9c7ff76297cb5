"""
Batch Shipping Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (CSV,
manual creation) as long as it contains the required columns. The output is
the same DataFrame with the pricing columns appended.

REQUIRED INPUT COLUMNS
----------------------
    delivery_type   - Menu key ("1".."4") or code ("standard", "express", ...)
    weight_kg       - Package weight in kg (text or number)
    distance_km     - Delivery distance in km (text or number)

Pass numbers as text where possible: they are parsed as exact decimals,
while float columns carry binary rounding into the parse.

OUTPUT COLUMNS ADDED
--------------------
    policy_name         - Display name of the resolved tier (null if unknown)
    cost                - Cost rounded to cents (null on error)
    error               - Why the row could not be priced (null on success)
    calculator_version

Rows are priced independently; one bad row never stops the batch. Rows go
through a Python loop over the session instead of polars expressions, since
prices are computed with exact Decimal parsing and arithmetic.

USAGE
-----
    from delivery.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import polars as pl

from .version import VERSION
from .data import round_cents
from .inputs import InputError, parse_decimal
from .policies import get_policy
from .session import DeliverySession, InvalidInput


REQUIRED_COLUMNS = ["delivery_type", "weight_kg", "distance_km"]


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Price every shipment in a DataFrame.

    Args:
        df: Shipment DataFrame with required columns (see module docstring)

    Returns:
        DataFrame with policy_name, cost, error and calculator_version appended

    Raises:
        ValueError: If a required column is missing
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    session = DeliverySession()
    names, costs, errors = [], [], []

    for row in df.select(REQUIRED_COLUMNS).iter_rows(named=True):
        name, cost, error = _price_row(session, row)
        names.append(name)
        costs.append(cost)
        errors.append(error)

    df = df.with_columns([
        pl.Series("policy_name", names, dtype=pl.Utf8),
        pl.Series("cost", costs, dtype=pl.Float64),
        pl.Series("error", errors, dtype=pl.Utf8),
    ])

    return _stamp_version(df)


def _price_row(session: DeliverySession, row: dict) -> tuple:
    """
    Price one row.

    Returns:
        (policy_name, cost, error) - cost and error are mutually exclusive
    """
    session.clear()

    try:
        policy = get_policy(row["delivery_type"] or "")
    except KeyError as e:
        return None, None, e.args[0]

    session.select(policy)

    try:
        weight = parse_decimal(row["weight_kg"])
        distance = parse_decimal(row["distance_km"])
    except InputError as e:
        return policy.name, None, str(e)

    try:
        cost = session.compute_cost(weight, distance)
    except InvalidInput as e:
        return policy.name, None, str(e)

    return policy.name, float(round_cents(cost)), None


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Add calculator version column."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


# =============================================================================
# SUMMARY
# =============================================================================

def summarize(df: pl.DataFrame) -> dict:
    """
    Summarize a priced DataFrame.

    Returns:
        Dict with rows, priced, failed and total_cost (sum over priced rows)
    """
    failed = df["error"].is_not_null().sum()
    total = df["cost"].sum()
    return {
        "rows": len(df),
        "priced": len(df) - failed,
        "failed": failed,
        "total_cost": total if total is not None else 0.0,
    }
