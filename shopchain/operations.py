"""
Shopping operations.

Each operation takes the current ShopperState plus one argument and returns a
Result. Failures are returned, never raised.
"""

from .config import DEFAULT_CONFIG
from .errors import InsufficientFuel, InsufficientFunds, InsufficientSupply
from .result import Result


def drive(state, distance_cost):
    """
    Burn ``distance_cost`` fuel.

    If the tank runs dry the shopper is left with zero fuel and the result
    carries an InsufficientFuel with the missing amount.
    """
    remaining = state.fuel - distance_cost
    if remaining < 0:
        return Result.fail(InsufficientFuel(shortfall=-remaining), state.replace(fuel=0))

    return Result.ok(state.replace(fuel=remaining))


def buy_items(state, quantity, config=DEFAULT_CONFIG):
    """
    Buy ``quantity`` items at ``config.unit_price`` each.

    Checks store supply first, then funds. On either failure the state is
    returned untouched.

    Args:
        state: Current ShopperState
        quantity: Number of items to buy
        config: ShoppingConfig providing store_supply and unit_price

    Returns:
        Result with the updated state, or a failure carrying
        InsufficientSupply / InsufficientFunds
    """
    if quantity > config.store_supply:
        return Result.fail(InsufficientSupply(available=config.store_supply, requested=quantity), state)

    total_cost = quantity * config.unit_price

    if total_cost > state.funds:
        return Result.fail(
            InsufficientFunds(available=state.funds, required=total_cost, quantity=quantity),
            state,
        )

    return Result.ok(state.replace(
        items_acquired=state.items_acquired + quantity,
        funds=state.funds - total_cost,
    ))
