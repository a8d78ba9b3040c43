"""
Unit Tests for ShippingService

Tests strategy swapping and cost calculation on the service.
"""

import pytest
import polars as pl

from shipping.service import ShippingService
from shipping.strategies import Air, Ground, ShippingStrategy, create_strategy


class Freight(ShippingStrategy):
    """Unregistered strategy for testing the service with any subclass."""

    name = "Freight"
    rate_per_lb = 0.8


@pytest.fixture
def shipments():
    """Three shipments of different weights."""
    return pl.DataFrame({"weight_lbs": [1.0, 10.0, 25.5]})


# =============================================================================
# CONSTRUCTION TESTS
# =============================================================================

class TestConstruction:
    """Tests for creating a service."""

    def test_initial_strategy(self):
        service = ShippingService(Ground)
        assert service.strategy is Ground

    def test_none_strategy_rejected(self):
        with pytest.raises(ValueError):
            ShippingService(None)

    @pytest.mark.parametrize("strategy", ["Ground", Ground.cost, object, 1.5])
    def test_non_strategy_rejected(self, strategy):
        """Only ShippingStrategy subclasses can be the active strategy."""
        with pytest.raises(ValueError, match="ShippingStrategy subclass"):
            ShippingService(strategy)

    def test_repr(self):
        assert repr(ShippingService(Air)) == "ShippingService(strategy=Air)"


# =============================================================================
# CALCULATE TESTS
# =============================================================================

class TestCalculateCost:
    """Tests for single-weight calculation."""

    def test_ground_10_lbs(self):
        assert ShippingService(Ground).calculate_cost(10) == pytest.approx(15.0)

    def test_air_10_lbs(self):
        assert ShippingService(Air).calculate_cost(10) == pytest.approx(30.0)

    def test_factory_created(self):
        service = ShippingService(create_strategy("Ground"))
        assert service.calculate_cost(10) == pytest.approx(15.0)

    def test_unregistered_strategy(self):
        assert ShippingService(Freight).calculate_cost(10) == pytest.approx(8.0)


# =============================================================================
# STRATEGY SWAP TESTS
# =============================================================================

class TestSetStrategy:
    """Tests for swapping the active strategy."""

    def test_swap_changes_later_results(self):
        service = ShippingService(Ground)
        assert service.calculate_cost(10) == pytest.approx(15.0)

        service.set_strategy(Air)
        assert service.strategy is Air
        assert service.calculate_cost(10) == pytest.approx(30.0)

    def test_swap_does_not_change_earlier_results(self):
        service = ShippingService(Ground)
        before = service.calculate_cost(4)
        service.set_strategy(Air)
        assert before == pytest.approx(6.0)

    def test_swap_back(self):
        service = ShippingService(Ground)
        service.set_strategy(Air)
        service.set_strategy(Ground)
        assert service.calculate_cost(2) == pytest.approx(3.0)

    def test_swap_to_none_keeps_active_strategy(self):
        service = ShippingService(Air)
        with pytest.raises(ValueError):
            service.set_strategy(None)
        assert service.strategy is Air

    def test_swap_to_non_strategy_keeps_active_strategy(self):
        service = ShippingService(Ground)
        with pytest.raises(ValueError):
            service.set_strategy("Air")
        assert service.strategy is Ground
        assert service.calculate_cost(10) == pytest.approx(15.0)


# =============================================================================
# DATAFRAME TESTS
# =============================================================================

class TestCalculateCosts:
    """Tests for pricing a DataFrame with the active strategy."""

    def test_prices_all_rows(self, shipments):
        df = ShippingService(Air).calculate_costs(shipments)
        assert df["cost_total"].to_list() == pytest.approx([3.0, 30.0, 76.5])
        assert df["shipping_mode"].to_list() == ["Air", "Air", "Air"]

    def test_earlier_frame_unchanged_by_swap(self, shipments):
        service = ShippingService(Ground)
        first = service.calculate_costs(shipments)
        service.set_strategy(Air)
        second = service.calculate_costs(shipments)

        assert first["cost_total"].to_list() == pytest.approx([1.5, 15.0, 38.25])
        assert second["cost_total"].to_list() == pytest.approx([3.0, 30.0, 76.5])

    def test_unregistered_strategy(self, shipments):
        df = ShippingService(Freight).calculate_costs(shipments)
        assert df["shipping_mode"][0] == "Freight"
        assert df["cost_total"][1] == pytest.approx(8.0)

    def test_input_not_modified(self, shipments):
        ShippingService(Ground).calculate_costs(shipments)
        assert shipments.columns == ["weight_lbs"]
