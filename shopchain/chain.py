"""
StepChain - Runs steps in order through middleware, stopping at the first failure.
"""

from .result import Result
from .step import as_step, check_result


class StepChain:
    """
    Orchestrates sequential execution of steps through a middleware pipeline.

    The chain manages:
    - Sequential step execution, each step fed the previous step's state
    - Middleware pipeline (first registered is outermost)
    - Short-circuit on the first failed step
    """

    def __init__(self):
        self._steps = []
        self._middleware = []
        self._pipeline = None
        self._pipeline_built = False

    def add_step(self, step):
        """
        Add a step to the chain.

        Args:
            step: Step instance or callable ``state -> Result``

        Returns:
            self (for method chaining)
        """
        self._steps.append(as_step(step))
        self._pipeline_built = False  # Invalidate cached pipeline
        return self

    def add_steps(self, *steps):
        """Add several steps in order."""
        for step in steps:
            self.add_step(step)
        return self

    def use_middleware(self, middleware):
        """
        Add middleware to the chain.
        The first middleware registered is the outermost wrapper.

        Args:
            middleware: Middleware instance to add

        Returns:
            self (for method chaining)
        """
        self._middleware.append(middleware)
        self._pipeline_built = False  # Invalidate cached pipeline
        return self

    def execute(self, initial_state):
        """
        Execute all steps in the chain through the middleware pipeline.

        Args:
            initial_state: ShopperState handed to the first step

        Returns:
            The failing step's Result if any step fails (later steps are
            never run), otherwise Result.ok with the final state
        """
        if not self._pipeline_built:
            self._pipeline = self._build_pipeline()
            self._pipeline_built = True

        state = initial_state
        for step in self._steps:
            result = check_result(step, self._pipeline(step, state))
            if not result.success:
                return result
            state = result.state

        return Result.ok(state)

    def _build_pipeline(self):
        """
        Build the middleware pipeline.
        Wraps in reverse so the first registered middleware ends up outermost.

        Returns:
            Function that executes a step through all middleware
        """
        def execute_step(step, state):
            return check_result(step, step.execute(state))

        pipeline = execute_step

        for middleware in reversed(self._middleware):
            pipeline = self._create_middleware_wrapper(middleware, pipeline)

        return pipeline

    def _create_middleware_wrapper(self, middleware, next_pipeline):
        def wrapper(step, state):
            return middleware.execute(
                step,
                state,
                lambda st: next_pipeline(step, st)
            )
        return wrapper

    def clear_steps(self):
        """Remove all steps from the chain."""
        self._steps.clear()
        self._pipeline_built = False
        return self

    def clear_middleware(self):
        """Remove all middleware from the chain."""
        self._middleware.clear()
        self._pipeline_built = False
        return self

    def reset(self):
        """Clear both steps and middleware."""
        self.clear_steps()
        self.clear_middleware()
        return self

    def step_count(self):
        """Return the number of steps in the chain."""
        return len(self._steps)

    def middleware_count(self):
        """Return the number of middleware in the chain."""
        return len(self._middleware)

    def __repr__(self):
        return (f"StepChain(steps={len(self._steps)}, "
                f"middleware={len(self._middleware)})")


def run_steps(initial_state, *steps):
    """
    Run ``steps`` against ``initial_state``, stopping at the first failure.

    Args:
        initial_state: ShopperState to start from
        *steps: Steps or ``state -> Result`` callables

    Returns:
        Result carrying the last state reached and the failure, if any
    """
    return StepChain().add_steps(*steps).execute(initial_state)
