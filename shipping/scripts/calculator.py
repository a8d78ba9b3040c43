"""
Shipping Cost Calculator
========================

CLI tool to calculate shipping costs for one or more shipment weights.

Usage:
    python -m shipping.scripts.calculator --mode Ground --weight 10
    python -m shipping.scripts.calculator --mode Air --weight 2.5 10 40
"""

import argparse

import polars as pl

from shipping.calculate_costs import calculate_costs
from shipping.strategies import get_modes
from shipping.version import VERSION


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Calculate shipping costs by mode and weight",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m shipping.scripts.calculator --mode Ground --weight 10
  python -m shipping.scripts.calculator --mode Air --weight 2.5 10 40
        """
    )
    parser.add_argument(
        "--mode",
        required=True,
        choices=get_modes(),
        help="Shipping mode"
    )
    parser.add_argument(
        "--weight",
        required=True,
        nargs="+",
        type=float,
        help="Shipment weight(s) in lbs"
    )
    return parser.parse_args(argv)


def create_shipment_df(weights: list[float]) -> pl.DataFrame:
    """Create a DataFrame with one row per weight."""
    return pl.DataFrame({"weight_lbs": weights}, schema={"weight_lbs": pl.Float64})


def print_results(df: pl.DataFrame) -> None:
    """Print calculation results."""
    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)
    print(f"Version: {VERSION}")

    for row in df.iter_rows(named=True):
        print(f"\nShipment: {row['weight_lbs']} lbs ({row['shipping_mode']})")
        print(f"Rate:               ${row['rate_per_lb']:>8.2f} / lb")
        print(f"                    {'=' * 9}")
        print(f"TOTAL:              ${row['cost_total']:>8.2f}")

    if len(df) > 1:
        print("\n" + "-" * 50)
        print(f"{len(df)} shipments, combined: ${df['cost_total'].sum():.2f}")
    print()


def main(argv: list[str] | None = None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        df = create_shipment_df(args.weight)
        df = calculate_costs(df, mode=args.mode)
        print_results(df)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
