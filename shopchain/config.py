"""Scenario configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShoppingConfig:
    """Fixed parameters of a shopping run.

    - fuel_to_store / fuel_to_home: fuel burnt on each leg
    - store_supply: items the store has in stock
    - unit_price: dollars per item
    - initial_fuel / initial_funds: what the shopper starts with
    - quantity_wanted: items to buy
    """

    fuel_to_store: int = 5
    fuel_to_home: int = 4
    store_supply: int = 24
    unit_price: int = 1
    initial_fuel: int = 15
    initial_funds: int = 10
    quantity_wanted: int = 6


DEFAULT_CONFIG = ShoppingConfig()
