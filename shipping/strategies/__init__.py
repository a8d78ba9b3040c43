"""
Shipping Strategies Package

Exports all strategy classes and the factory that resolves a mode name to
its strategy.

Usage:
    from shipping.strategies import create_strategy
    strategy = create_strategy("Ground")
    strategy.cost(10)  # 15.0
"""

from .base import ShippingStrategy, WEIGHT_COL
from .ground import Ground
from .air import Air


# All strategies - add classes here as they are implemented
ALL: list[type[ShippingStrategy]] = [Ground, Air]

# Mode name -> strategy
MODES: dict[str, type[ShippingStrategy]] = {s.name: s for s in ALL}


# =============================================================================
# ERRORS
# =============================================================================

class InvalidMode(ValueError):
    """Raised when a mode name does not match any registered strategy."""

    def __init__(self, mode):
        self.mode = mode
        self.valid_modes = get_modes()
        super().__init__(
            f"Invalid shipping mode: {mode!r}. "
            f"Valid modes: {', '.join(self.valid_modes)}"
        )


# =============================================================================
# FACTORY
# =============================================================================

def create_strategy(mode: str) -> type[ShippingStrategy]:
    """
    Resolve a mode name to its shipping strategy.

    Matching is exact and case-sensitive ("Ground", not "ground").

    Raises:
        InvalidMode: if mode is not a registered strategy name
    """
    if not isinstance(mode, str) or mode not in MODES:
        raise InvalidMode(mode)
    return MODES[mode]


def get_modes() -> list[str]:
    """Registered mode names, sorted."""
    return sorted(MODES)


# =============================================================================
# VALIDATION
# =============================================================================

def validate_strategies() -> None:
    """
    Validate strategy configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []
    seen = set()

    for s in ALL:
        name = getattr(s, "name", None)
        rate = getattr(s, "rate_per_lb", None)

        # Check name is set and unique
        if not isinstance(name, str) or not name:
            errors.append(f"{s.__name__}: name must be a non-empty string")
        elif name in seen:
            errors.append(f"{s.__name__}: duplicate name '{name}'")
        else:
            seen.add(name)

        # Check rate is a non-negative number
        if isinstance(rate, bool) or not isinstance(rate, (int, float)):
            errors.append(f"{s.__name__}: rate_per_lb must be a number")
        elif rate < 0:
            errors.append(f"{s.__name__}: rate_per_lb must be non-negative, got {rate}")

    if errors:
        raise ValueError("Strategy configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_strategies()

__all__ = [
    # Base
    "ShippingStrategy",
    "WEIGHT_COL",
    # Strategy classes
    "Air",
    "Ground",
    # Registry
    "ALL",
    "MODES",
    # Factory
    "InvalidMode",
    "create_strategy",
    "get_modes",
    "validate_strategies",
]
