"""
Result - The outcome of running a step against a shopper state.
"""

class Result:
    """
    Represents the outcome of a step execution.
    Carries the state the step produced, the success flag and the failure (if any).
    """

    def __init__(self, success, state=None, error=None, data=None):
        """
        Initialize a Result.

        Args:
            success: Boolean indicating if the step succeeded
            state: ShopperState produced by the step
            error: Optional ShoppingError (or message) describing the failure
            data: Optional additional data about the result
        """
        self.success = success
        self.state = state
        self.error = error
        self.data = data

    @staticmethod
    def ok(state, data=None):
        """
        Create a successful result.

        Args:
            state: The state reached by the step
            data: Optional data to include with the success result

        Returns:
            Result instance indicating success
        """
        return Result(True, state=state, data=data)

    @staticmethod
    def fail(error, state, data=None):
        """
        Create a failed result.

        Args:
            error: ShoppingError instance or message
            state: The state as left by the failing step
            data: Optional additional data about the failure

        Returns:
            Result instance indicating failure
        """
        return Result(False, state=state, error=error, data=data)

    def is_success(self):
        """Return True if the result indicates success."""
        return self.success

    def is_failure(self):
        """Return True if the result indicates failure."""
        return not self.success

    def unwrap(self):
        """
        Return the state of a successful result.

        Raises:
            The carried error (with a fresh traceback) when it is an
            exception, RuntimeError otherwise
        """
        if self.success:
            return self.state
        if isinstance(self.error, BaseException):
            raise self.error.with_traceback(None)
        raise RuntimeError(str(self.error))

    def __bool__(self):
        """Allow Result to be used in boolean context (if result: ...)"""
        return self.success

    def __repr__(self):
        if self.success:
            return f"Result.ok(state={self.state!r}, data={self.data})"
        else:
            return f"Result.fail(error={self.error!r}, state={self.state!r}, data={self.data})"

    def __str__(self):
        if self.success:
            return "Success"
        else:
            return f"Failure: {self.error}"
