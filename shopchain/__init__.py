"""
shopchain - Short-circuiting step chains for a shopping run

A shopper with fuel, funds and an item count drives to the store, buys items
and drives home. Each step can fail, and the run stops at the first failure.

- Steps transform an immutable ShopperState and return a Result
- bind() fixes an operation's argument to turn it into a step
- Middleware adds reusable behaviors around step execution
- StepChain orchestrates the sequential flow

Example:
    from shopchain import ShopperState, bind, drive, buy_items, run_steps

    result = run_steps(
        ShopperState.new(fuel=15, funds=10),
        bind(drive, 5),
        bind(buy_items, 6),
        bind(drive, 4),
    )
    print(result.state)  # fuel=6, funds=4, items=6
"""

__version__ = "1.0.0"
__author__ = "shopchain Contributors"

from .chain import StepChain, run_steps
from .config import DEFAULT_CONFIG, ShoppingConfig
from .errors import (
    ExitCode,
    InsufficientFuel,
    InsufficientFunds,
    InsufficientSupply,
    InvariantViolation,
    ShoppingError,
)
from .middleware import (
    LoggingMiddleware,
    Middleware,
    PerformanceProfilerMiddleware,
    ValidationMiddleware,
)
from .operations import buy_items, drive
from .result import Result
from .state import ShopperState
from .step import BoundStep, FunctionStep, Step, bind

__all__ = [
    'StepChain',
    'run_steps',
    'ShoppingConfig',
    'DEFAULT_CONFIG',
    'ShopperState',
    'Result',
    'Step',
    'FunctionStep',
    'BoundStep',
    'bind',
    'drive',
    'buy_items',
    'Middleware',
    'LoggingMiddleware',
    'ValidationMiddleware',
    'PerformanceProfilerMiddleware',
    'ShoppingError',
    'InsufficientFuel',
    'InsufficientSupply',
    'InsufficientFunds',
    'InvariantViolation',
    'ExitCode',
]
