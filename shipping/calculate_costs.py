"""
Shipping Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (CSV, manual
creation, a ShippingService) as long as it contains the required columns. The
output is the same DataFrame with calculation columns and costs appended.

REQUIRED INPUT COLUMNS
----------------------
    weight_lbs          - Actual weight in pounds (non-negative)
    shipping_mode       - Mode name ("Ground", "Air"); not required when
                          a mode is passed to calculate_costs()

OUTPUT COLUMNS ADDED
--------------------
    - shipping_mode (overwritten when a mode is passed)
    - rate_per_lb
    - cost_shipping, cost_total
    - calculator_version

USAGE
-----
    from shipping.calculate_costs import calculate_costs
    result = calculate_costs(df)                 # per-row shipping_mode
    result = calculate_costs(df, mode="Air")     # every row priced as Air
"""

import polars as pl

from .version import VERSION
from .strategies import (
    ALL,
    MODES,
    WEIGHT_COL,
    InvalidMode,
    ShippingStrategy,
    create_strategy,
)


MODE_COL = "shipping_mode"


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    mode: str | None = None
) -> pl.DataFrame:
    """
    Calculate shipping costs for a shipment DataFrame.

    Args:
        df: Shipment DataFrame with required columns (see module docstring)
        mode: Price every row with this mode. If None, each row is priced
            by its own shipping_mode value.

    Returns:
        DataFrame with rates, costs and version appended

    Raises:
        InvalidMode: if mode, or any shipping_mode value, is not registered
        ValueError: if required columns are missing
    """
    if mode is not None:
        return apply_strategy(df, create_strategy(mode))

    _check_columns(df, [WEIGHT_COL, MODE_COL])
    _check_modes(df)

    df = _add_rates(df)
    df = _calculate_shipping(df)
    df = _calculate_total(df)
    df = _stamp_version(df)

    return df


def apply_strategy(
    df: pl.DataFrame,
    strategy: type[ShippingStrategy]
) -> pl.DataFrame:
    """
    Price every shipment with a single strategy.

    The strategy does not have to be registered, so a ShippingService can
    hold any ShippingStrategy subclass.
    """
    _check_columns(df, [WEIGHT_COL])

    df = df.with_columns([
        pl.lit(strategy.name).alias(MODE_COL),
        pl.lit(float(strategy.rate_per_lb)).alias("rate_per_lb"),
        strategy.expression().cast(pl.Float64).alias("cost_shipping"),
    ])
    df = _calculate_total(df)
    df = _stamp_version(df)

    return df


# =============================================================================
# VALIDATION
# =============================================================================

def _check_columns(df: pl.DataFrame, columns: list[str]) -> None:
    """Raise ValueError listing any required columns missing from df."""
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(
            f"Missing required column(s): {', '.join(missing)}. "
            f"Got: {', '.join(df.columns) or '(none)'}"
        )


def _check_modes(df: pl.DataFrame) -> None:
    """
    Raise InvalidMode for the first shipping_mode value (in row order) that
    is not a registered strategy. Nulls count as invalid.
    """
    valid = pl.col(MODE_COL).cast(pl.Utf8).is_in(list(MODES)).fill_null(False)
    unknown = (
        df
        .filter(~valid)
        .get_column(MODE_COL)
        .unique(maintain_order=True)
        .to_list()
    )
    if unknown:
        raise InvalidMode(unknown[0])


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def _add_rates(df: pl.DataFrame) -> pl.DataFrame:
    """Add rate_per_lb for each row's shipping_mode."""
    return df.with_columns(
        _by_mode(lambda s: pl.lit(float(s.rate_per_lb))).alias("rate_per_lb")
    )


def _calculate_shipping(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_shipping with each row's strategy expression."""
    return df.with_columns(
        _by_mode(lambda s: s.expression().cast(pl.Float64)).alias("cost_shipping")
    )


def _by_mode(value) -> pl.Expr:
    """
    Build a when/then chain choosing value(strategy) by shipping_mode.

    Rows are validated beforehand, so the otherwise branch is never taken.
    """
    expr = None
    for s in ALL:
        condition = pl.col(MODE_COL).cast(pl.Utf8) == s.name
        if expr is None:
            expr = pl.when(condition).then(value(s))
        else:
            expr = expr.when(condition).then(value(s))
    return expr.otherwise(pl.lit(None, dtype=pl.Float64))


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_total (same as cost_shipping - no surcharges)."""
    return df.with_columns(
        pl.col("cost_shipping").alias("cost_total")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "MODE_COL",
    "calculate_costs",
    "apply_strategy",
]
