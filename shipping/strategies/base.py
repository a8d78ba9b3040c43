"""
Shipping Strategy Base Class

Shared base class for all shipping modes.
"""

from abc import ABC

import polars as pl


# Column the DataFrame expressions read weight from
WEIGHT_COL = "weight_lbs"


# =============================================================================
# BASE CLASS
# =============================================================================

class ShippingStrategy(ABC):
    """
    Base class for all shipping strategies.

    Strategies are never instantiated. The class itself is the strategy:
    pricing lives in class attributes and is read through classmethods, so
    a strategy cannot change once defined.

    Attributes:
        IDENTITY
            name        - Mode name used by create_strategy (e.g., "Ground")

        PRICING
            rate_per_lb - Cost per pound of weight
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    rate_per_lb: float

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def cost(cls, weight: float) -> float:
        """Shipping cost for a single weight (weight * rate_per_lb)."""
        return weight * cls.rate_per_lb

    @classmethod
    def expression(cls, weight_col: str = WEIGHT_COL) -> pl.Expr:
        """
        Polars expression for the shipping cost of each row.

        Must agree with cost() for every weight.
        """
        return pl.col(weight_col) * cls.rate_per_lb
