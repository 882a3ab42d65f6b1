"""
Middleware - Cross-cutting behaviour wrapped around each step execution.

Provided middleware:
- Logging of step start/outcome
- Non-negative counter validation
- Performance profiling
"""

import logging
import time

from .errors import InvariantViolation
from .result import Result


class Middleware:
    """
    Base class for middleware that wraps step execution.

    The first middleware registered wraps all later ones - like gift wrapping.
    """

    def execute(self, step, state, next_callable):
        """
        Execute the middleware logic.

        Args:
            step: The Step about to run (use step.name for reporting)
            state: ShopperState handed to the step
            next_callable: Function ``state -> Result`` continuing the chain (must be called)

        Returns:
            Result from the next callable (or modified result)

        Example:
            def execute(self, step, state, next_callable):
                # Before logic
                result = next_callable(state)
                # After logic
                return result
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement execute()")

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__class__.__name__


class LoggingMiddleware(Middleware):
    """Log every step and its outcome."""

    def __init__(self, logger=None, level=logging.INFO):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def execute(self, step, state, next_callable):
        self.logger.log(self.level, "starting %s (%s)", step.name, state)

        result = next_callable(state)

        if result.success:
            self.logger.log(self.level, "completed %s (%s)", step.name, result.state)
        else:
            self.logger.log(self.level, "failed %s: %s", step.name, result.error)

        return result


class ValidationMiddleware(Middleware):
    """
    Check that no counter of the shopper state is negative.

    The state is checked before the step runs and again on the state it
    produced, failed steps included.
    """

    def __init__(self, strict=True, logger=None):
        """
        Initialize the ValidationMiddleware.

        Args:
            strict: If True, fail on validation errors. If False, warn only.
            logger: Logger used for warnings (default: module logger)
        """
        self.strict = strict
        self.logger = logger or logging.getLogger(__name__)
        self.validation_errors = []

    def execute(self, step, state, next_callable):
        pre_errors = self._validate(state, step, 'pre')
        if pre_errors and self.strict:
            return Result.fail(pre_errors[0], state)

        result = next_callable(state)

        post_errors = self._validate(result.state, step, 'post')
        if post_errors and self.strict and result.success:
            return Result.fail(post_errors[0], result.state)

        return result

    def _validate(self, state, step, phase):
        errors = [InvariantViolation(field, value, phase=phase) for field, value in state.negative_fields()]
        for error in errors:
            self.logger.warning("%s: %s", step.name, error)
        self.validation_errors.extend(errors)
        return errors

    def get_errors(self):
        """Return all validation errors."""
        return self.validation_errors.copy()

    def clear_errors(self):
        """Clear validation errors."""
        self.validation_errors.clear()


class PerformanceProfilerMiddleware(Middleware):
    """
    Profile the execution time of each step.

    Tracks time per step (min, max, avg), call counts and failures.
    """

    def __init__(self):
        self.timings = {}
        self.call_counts = {}
        self.failures = {}

    def execute(self, step, state, next_callable):
        start = time.perf_counter()
        result = next_callable(state)
        elapsed = (time.perf_counter() - start) * 1000  # Convert to ms

        name = step.name
        if name not in self.timings:
            self.timings[name] = []
            self.call_counts[name] = 0
            self.failures[name] = 0

        self.timings[name].append(elapsed)
        self.call_counts[name] += 1
        if not result.success:
            self.failures[name] += 1

        return result

    def get_report(self):
        """Generate a performance report, one entry per step name."""
        report = []

        for name, times in sorted(self.timings.items()):
            report.append({
                'step': name,
                'avg_ms': sum(times) / len(times),
                'min_ms': min(times),
                'max_ms': max(times),
                'total_ms': sum(times),
                'calls': self.call_counts[name],
                'failures': self.failures[name],
            })

        return report

    def print_report(self):
        """Print a formatted performance report."""
        print("\n" + "=" * 80)
        print("Step Profiling Report")
        print("=" * 80)
        print(f"{'Step':<30} {'Avg (ms)':>10} {'Min (ms)':>10} {'Max (ms)':>10} "
              f"{'Calls':>8} {'Failed':>8}")
        print("-" * 80)

        for entry in self.get_report():
            print(f"{entry['step']:<30} "
                  f"{entry['avg_ms']:>10.3f} "
                  f"{entry['min_ms']:>10.3f} "
                  f"{entry['max_ms']:>10.3f} "
                  f"{entry['calls']:>8} "
                  f"{entry['failures']:>8}")

        print("=" * 80)

    def reset(self):
        """Reset all timing data."""
        self.timings.clear()
        self.call_counts.clear()
        self.failures.clear()
