"""
ShopperState - The value threaded through every step of a shopping run.
"""

from dataclasses import dataclass, replace


COUNTERS = ('fuel', 'funds', 'items_acquired')


@dataclass(frozen=True)
class ShopperState:
    """
    Fuel, money and item counters of a shopper.

    Instances are immutable: operations build a new state with ``replace``
    instead of mutating the one they were given.
    """

    fuel: int
    funds: int
    items_acquired: int = 0

    @classmethod
    def new(cls, fuel, funds):
        """
        Create a shopper with the given fuel and funds and no items yet.

        Args:
            fuel: Fuel in the car
            funds: Dollars in the wallet

        Returns:
            ShopperState
        """
        return cls(fuel=fuel, funds=funds, items_acquired=0)

    def replace(self, **changes):
        """Return a copy of this state with the given counters changed."""
        return replace(self, **changes)

    def negative_fields(self):
        """Return (field, value) pairs for every counter below zero."""
        return [(name, getattr(self, name)) for name in COUNTERS if getattr(self, name) < 0]

    def to_dict(self):
        """Return the counters as a plain dictionary."""
        return {name: getattr(self, name) for name in COUNTERS}

    def __str__(self):
        return f"fuel={self.fuel}, funds={self.funds}, items={self.items_acquired}"
