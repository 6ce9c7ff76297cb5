"""
Batch Quote Shipments
=====================

Prices every row of a shipment CSV and prints a summary. Optionally writes
the priced rows back out.

Input CSV columns:
    delivery_type   - "1".."4" or standard / express / international / night
    weight_kg       - Package weight in kg
    distance_km     - Delivery distance in km

Usage:
    python -m delivery.scripts.quote_batch shipments.csv
    python -m delivery.scripts.quote_batch shipments.csv --output priced.csv
    python -m delivery.scripts.quote_batch shipments.csv --delivery-type express
"""

import argparse
import sys
from decimal import Decimal
from pathlib import Path

import polars as pl

from delivery.calculate_costs import calculate_costs, summarize
from delivery.data import format_currency
from delivery.policies import get_policy


def load_shipments(path: Path) -> pl.DataFrame:
    """Read a shipment CSV with every column as text, so numbers parse exactly."""
    return pl.read_csv(path, infer_schema_length=0)


def print_summary(df: pl.DataFrame) -> None:
    summary = summarize(df)

    print("\n" + "=" * 50)
    print("BATCH RESULTS")
    print("=" * 50)
    print(f"Rows:       {summary['rows']:,}")
    print(f"Priced:     {summary['priced']:,}")
    print(f"Failed:     {summary['failed']:,}")
    print(f"Total cost: {format_currency(Decimal(str(summary['total_cost'])))}")

    if summary["failed"]:
        print("\n--- Failed Rows ---")
        failed = df.with_row_index("row").filter(pl.col("error").is_not_null())
        for row in failed.head(20).iter_rows(named=True):
            print(f"  row {row['row'] + 1}: {row['error']}")
        if summary["failed"] > 20:
            print(f"  ... and {summary['failed'] - 20:,} more")
    print()


def main():
    parser = argparse.ArgumentParser(description="Price a CSV of shipments")
    parser.add_argument("input", type=Path, help="Shipment CSV")
    parser.add_argument("--output", type=Path, help="Write priced rows to this CSV")
    parser.add_argument(
        "--delivery-type",
        help="Price every row under this tier, ignoring the delivery_type column",
    )
    args = parser.parse_args()

    if args.delivery_type is not None:
        try:
            get_policy(args.delivery_type)
        except KeyError as e:
            parser.error(e.args[0])

    if not args.input.exists():
        print(f"Input file not found: {args.input}")
        sys.exit(1)

    df = load_shipments(args.input)
    print(f"Loaded {len(df):,} shipments from {args.input}")

    if args.delivery_type is not None:
        df = df.with_columns(pl.lit(args.delivery_type).alias("delivery_type"))

    try:
        df = calculate_costs(df)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print_summary(df)

    if args.output is not None:
        df.write_csv(args.output)
        print(f"Wrote {len(df):,} rows to {args.output}")


if __name__ == "__main__":
    main()
