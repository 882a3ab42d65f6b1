"""
Step - Base class for one unit of work in a shopping chain, plus the binding helper
that turns a two-argument operation into a step.
"""

from .result import Result

class Step:
    """
    Base class for steps in a step chain.
    A step takes the current ShopperState and returns a Result carrying the next one.

    Steps should be stateless - all state flows through the ShopperState.
    """

    def execute(self, state):
        """
        Execute the step logic.

        Args:
            state: ShopperState to transform

        Returns:
            Result carrying the produced state and outcome

        Raises:
            NotImplementedError: This method must be implemented by subclasses
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement execute()")

    @property
    def name(self):
        return self.__class__.__name__

    def __call__(self, state):
        return self.execute(state)

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.name


class FunctionStep(Step):
    """Adapts a plain ``state -> Result`` callable to the Step interface."""

    def __init__(self, func, name=None):
        self._func = func
        self._name = name or getattr(func, '__name__', func.__class__.__name__)

    def execute(self, state):
        return self._func(state)

    @property
    def name(self):
        return self._name

    def __repr__(self):
        return f"FunctionStep({self._name})"


class BoundStep(Step):
    """
    A two-argument operation with its second argument fixed.

    Nothing is computed until execute() is called, and nothing is remembered
    between calls.
    """

    def __init__(self, operation, arg, name=None, **kwargs):
        """
        Args:
            operation: Callable taking (state, arg, **kwargs) and returning a Result
            arg: Value bound as the operation's second argument
            name: Optional display name (default: "<operation>(<arg>)")
            **kwargs: Extra keyword arguments forwarded on every call
        """
        self.operation = operation
        self.arg = arg
        self.kwargs = dict(kwargs)
        self._name = name or f"{getattr(operation, '__name__', 'operation')}({arg!r})"

    def execute(self, state):
        return self.operation(state, self.arg, **self.kwargs)

    @property
    def name(self):
        return self._name

    def __repr__(self):
        return f"BoundStep({self._name})"


def bind(operation, arg, name=None, **kwargs):
    """
    Fix the second argument of an operation, producing a step.

    Args:
        operation: Callable taking (state, arg) and returning a Result
        arg: Value to bind
        name: Optional step name used by middleware and logs
        **kwargs: Extra keyword arguments forwarded to the operation

    Returns:
        BoundStep ready to be added to a StepChain

    Example:
        drive_to_store = bind(drive, 5, name='drive_to_store')
        result = drive_to_store(ShopperState.new(15, 10))
    """
    return BoundStep(operation, arg, name=name, **kwargs)


def as_step(step):
    """Return ``step`` as a Step, wrapping bare callables in a FunctionStep."""
    if isinstance(step, Step):
        return step
    if callable(step):
        return FunctionStep(step)
    raise TypeError(f"steps must be Step instances or callables, got {type(step).__name__}")


def check_result(step, result):
    """Ensure a step handed back a Result."""
    if not isinstance(result, Result):
        raise TypeError(f"step {step.name} returned {type(result).__name__}, expected Result")
    return result
