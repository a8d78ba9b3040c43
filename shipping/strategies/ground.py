"""
Ground Shipping

Cheapest mode, priced per pound of actual weight.
"""

from .base import ShippingStrategy


class Ground(ShippingStrategy):
    """Ground shipping - 1.50 per lb."""

    # Identity
    name = "Ground"

    # Pricing
    rate_per_lb = 1.5
