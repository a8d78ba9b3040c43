"""
Air Shipping

Expedited mode, priced per pound at twice the ground rate.
"""

from .base import ShippingStrategy


class Air(ShippingStrategy):
    """Air shipping - 3.00 per lb."""

    # Identity
    name = "Air"

    # Pricing
    rate_per_lb = 3.0
