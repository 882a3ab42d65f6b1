"""
The shopping run: drive to the store, buy items, drive home.
"""

import logging
import sys

from .chain import StepChain
from .config import DEFAULT_CONFIG
from .errors import ExitCode
from .log import setup_logger
from .middleware import LoggingMiddleware, ValidationMiddleware
from .operations import buy_items, drive
from .state import ShopperState
from .step import bind

logger = logging.getLogger(__name__)


def build_shopping_chain(config=DEFAULT_CONFIG, middleware=None):
    """
    Build the three-step shopping chain for ``config``.

    Args:
        config: ShoppingConfig with distances, quantity and store parameters
        middleware: Optional list of middleware; defaults to debug-level step
            logging plus strict counter validation

    Returns:
        StepChain
    """
    if middleware is None:
        middleware = [ValidationMiddleware(), LoggingMiddleware(level=logging.DEBUG)]

    chain = (StepChain()
        .add_step(bind(drive, config.fuel_to_store, name='drive_to_store'))
        .add_step(bind(buy_items, config.quantity_wanted, name='buy_items', config=config))
        .add_step(bind(drive, config.fuel_to_home, name='drive_home')))

    for mw in middleware:
        chain.use_middleware(mw)

    return chain


def run_scenario(config=DEFAULT_CONFIG, middleware=None):
    """Run the shopping chain from the configured starting state and return its Result."""
    shopper = ShopperState.new(config.initial_fuel, config.initial_funds)
    return build_shopping_chain(config, middleware).execute(shopper)


def main(config=DEFAULT_CONFIG):
    """
    Run the scenario and report the outcome through logging.

    Returns:
        ExitCode.SUCCESS when every step succeeded, ExitCode.FAILURE otherwise
    """
    shopper = ShopperState.new(config.initial_fuel, config.initial_funds)

    logger.info("gonna try and buy items")
    logger.info("shopper: %s", shopper)

    result = build_shopping_chain(config).execute(shopper)

    if not result.success:
        logger.error("could not complete shopping: %s", result.error)
        return ExitCode.FAILURE

    logger.info("got the items!")
    logger.info("shopper: %s", result.state)
    return ExitCode.SUCCESS


def cli():
    """Console entry point."""
    setup_logger()
    sys.exit(int(main(DEFAULT_CONFIG)))
