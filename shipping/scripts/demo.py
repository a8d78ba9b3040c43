"""
Strategy and Factory Demo
=========================

Prints shipping costs for a 10 lb shipment, first with strategies picked
directly, then with strategies created by the factory.

Usage:
    python -m shipping.scripts.demo
"""

from shipping.service import ShippingService
from shipping.strategies import Air, Ground, create_strategy


WEIGHT = 10


def main():
    """Main entry point."""
    print("Strategy Pattern without Factory:")

    # Pick the strategy directly
    service = ShippingService(Ground)
    print(f"Ground shipping cost: {service.calculate_cost(WEIGHT)}")

    # Swap at runtime
    service.set_strategy(Air)
    print(f"Air shipping cost: {service.calculate_cost(WEIGHT)}")

    print("\nStrategy Pattern with Factory:")

    # Let the factory resolve the strategy from its mode name
    factory_service = ShippingService(create_strategy("Ground"))
    print(f"Factory-created Ground shipping cost: {factory_service.calculate_cost(WEIGHT)}")

    factory_service.set_strategy(create_strategy("Air"))
    print(f"Factory-created Air shipping cost: {factory_service.calculate_cost(WEIGHT)}")


if __name__ == "__main__":
    main()
