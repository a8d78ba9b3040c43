"""
Shipping Strategies

Shipping cost calculator built from interchangeable pricing strategies.
"""

from .calculate_costs import calculate_costs
from .service import ShippingService
from .strategies import InvalidMode, create_strategy
from .version import VERSION

__all__ = [
    "calculate_costs",
    "create_strategy",
    "InvalidMode",
    "ShippingService",
    "VERSION",
]
