"""
Shipping Service

Holds the active shipping strategy and calculates costs with it. The
strategy can be swapped at any time; the swap only affects later calls.

Not thread-safe: callers sharing a service across threads must lock around
set_strategy() and the calculate methods.
"""

import polars as pl

from .calculate_costs import apply_strategy
from .strategies import ShippingStrategy


class ShippingService:
    """Calculate shipping costs with an interchangeable strategy."""

    def __init__(self, strategy: type[ShippingStrategy]):
        self._strategy = _require(strategy)

    @property
    def strategy(self) -> type[ShippingStrategy]:
        """The active strategy."""
        return self._strategy

    def set_strategy(self, strategy: type[ShippingStrategy]) -> None:
        """Replace the active strategy for all subsequent calculations."""
        self._strategy = _require(strategy)

    def calculate_cost(self, weight: float) -> float:
        """
        Shipping cost for a single weight under the active strategy.

        Weight is assumed non-negative; it is not validated here.
        """
        return self._strategy.cost(weight)

    def calculate_costs(self, df: pl.DataFrame) -> pl.DataFrame:
        """Price every shipment in df with the active strategy."""
        return apply_strategy(df, self._strategy)

    def __repr__(self) -> str:
        return f"ShippingService(strategy={self._strategy.name})"


def _require(strategy):
    if not (isinstance(strategy, type) and issubclass(strategy, ShippingStrategy)):
        raise ValueError(
            f"ShippingService requires a ShippingStrategy subclass, got {strategy!r}"
        )
    return strategy


__all__ = ["ShippingService"]
