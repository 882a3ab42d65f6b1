"""
Shopping errors and process exit codes.

Operations never raise these for domain failures; they are carried inside a
Result and handed back to the caller.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    FAILURE = 1


class ShoppingError(Exception):
    """Base class for every way a shopping run can fail."""

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message and self.details == other.details

    def __hash__(self):
        return hash((type(self), self.message))

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.__class__.__name__}({fields})"


class InsufficientFuel(ShoppingError):
    """The car ran dry before reaching its destination."""

    def __init__(self, shortfall):
        super().__init__(f"ran out of gas {shortfall} from destination", shortfall=shortfall)
        self.shortfall = shortfall


class InsufficientSupply(ShoppingError):
    """The store stocks fewer items than requested."""

    def __init__(self, available, requested):
        super().__init__(
            f"there are only {available} items available, but we need {requested}",
            available=available,
            requested=requested,
        )
        self.available = available
        self.requested = requested


class InsufficientFunds(ShoppingError):
    """The wallet cannot cover the purchase."""

    def __init__(self, available, required, quantity):
        super().__init__(
            f"only have {available} dollars, but need {required} to buy {quantity} items",
            available=available,
            required=required,
            quantity=quantity,
        )
        self.available = available
        self.required = required
        self.quantity = quantity


class InvariantViolation(ShoppingError):
    """A state counter went negative."""

    def __init__(self, field, value, phase="post"):
        super().__init__(f"{phase}: {field} is negative ({value})", field=field, value=value, phase=phase)
        self.field = field
        self.value = value
        self.phase = phase
