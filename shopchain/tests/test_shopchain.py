"""
Unit tests for shopchain core components.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from shopchain import (
    StepChain, Step, Result, ShopperState, ShoppingConfig, DEFAULT_CONFIG,
    bind, drive, buy_items, run_steps,
    InsufficientFuel, InsufficientSupply, InsufficientFunds,
    LoggingMiddleware, ValidationMiddleware,
)


# Test Steps
class RecordingStep(Step):
    def __init__(self, log, label):
        self.log = log
        self.label = label

    def execute(self, state):
        self.log.append(self.label)
        return Result.ok(state)


class FailingStep(Step):
    def execute(self, state):
        return Result.fail("Intentional failure", state.replace(funds=0))


# Tests
def test_shopper_state():
    print("Testing ShopperState...")

    state = ShopperState.new(15, 10)
    assert state.items_acquired == 0
    assert str(state) == "fuel=15, funds=10, items=0"
    assert state.to_dict() == {'fuel': 15, 'funds': 10, 'items_acquired': 0}

    changed = state.replace(fuel=3)
    assert changed.fuel == 3
    assert state.fuel == 15  # original untouched

    assert ShopperState(fuel=-1, funds=2, items_acquired=0).negative_fields() == [('fuel', -1)]

    print("  ✓ ShopperState tests passed")


def test_result():
    print("Testing Result...")

    state = ShopperState.new(1, 1)
    success = Result.ok(state)
    assert success.success
    assert success.is_success()
    assert not success.is_failure()
    assert success.unwrap() is state

    error = InsufficientFuel(shortfall=2)
    failure = Result.fail(error, state)
    assert not failure
    assert failure.is_failure()
    assert failure.error is error
    assert str(failure) == "Failure: ran out of gas 2 from destination"

    try:
        failure.unwrap()
    except InsufficientFuel as e:
        assert e.shortfall == 2
    else:
        raise AssertionError("unwrap should raise the carried error")

    print("  ✓ Result tests passed")


def test_drive_success():
    print("Testing drive with enough fuel...")

    for fuel in range(0, 12):
        for cost in range(0, fuel + 1):
            result = drive(ShopperState.new(fuel, 10), cost)
            assert result.success
            assert result.state.fuel == fuel - cost
            assert result.state.fuel >= 0
            assert result.state.funds == 10

    print("  ✓ drive success passed")


def test_drive_failure_clamps_fuel():
    print("Testing drive running out of gas...")

    for fuel in range(0, 8):
        for cost in range(fuel + 1, 12):
            result = drive(ShopperState(fuel=fuel, funds=7, items_acquired=2), cost)
            assert not result.success
            assert isinstance(result.error, InsufficientFuel)
            assert result.error.shortfall == cost - fuel
            assert result.state == ShopperState(fuel=0, funds=7, items_acquired=2)

    assert str(drive(ShopperState.new(3, 0), 5).error) == "ran out of gas 2 from destination"

    print("  ✓ drive failure passed")


def test_buy_items_supply_bound():
    print("Testing buy_items beyond store supply...")

    state = ShopperState.new(10, 100)
    result = buy_items(state, 25, config=ShoppingConfig(store_supply=24))

    assert not result.success
    assert isinstance(result.error, InsufficientSupply)
    assert result.error.available == 24
    assert result.error.requested == 25
    assert result.state == state
    assert str(result.error) == "there are only 24 items available, but we need 25"

    print("  ✓ supply bound passed")


def test_buy_items_funds_bound():
    print("Testing buy_items without enough money...")

    state = ShopperState.new(10, 3)
    result = buy_items(state, 6, config=ShoppingConfig(unit_price=1))

    assert not result.success
    assert isinstance(result.error, InsufficientFunds)
    assert result.error.available == 3
    assert result.error.required == 6
    assert result.state == state
    assert str(result.error) == "only have 3 dollars, but need 6 to buy 6 items"

    print("  ✓ funds bound passed")


def test_buy_items_supply_checked_before_funds():
    result = buy_items(ShopperState.new(0, 0), 30)
    assert isinstance(result.error, InsufficientSupply)


def test_buy_items_success():
    print("Testing successful purchase...")

    result = buy_items(ShopperState.new(10, 10), 6)

    assert result.success
    assert result.state == ShopperState(fuel=10, funds=4, items_acquired=6)

    pricey = buy_items(ShopperState.new(0, 10), 3, config=ShoppingConfig(unit_price=3))
    assert pricey.state == ShopperState(fuel=0, funds=1, items_acquired=3)

    print("  ✓ successful purchase passed")


def test_end_to_end_scenario():
    print("Testing end-to-end shopping run...")

    result = run_steps(
        ShopperState.new(DEFAULT_CONFIG.initial_fuel, DEFAULT_CONFIG.initial_funds),
        bind(drive, 5),
        bind(buy_items, 6),
        bind(drive, 4),
    )

    assert result.success
    assert result.error is None
    assert result.state == ShopperState(fuel=6, funds=4, items_acquired=6)

    print("  ✓ end-to-end scenario passed")


def test_chain_short_circuit():
    print("Testing StepChain short-circuit...")

    log = []
    chain = (StepChain()
        .add_step(RecordingStep(log, 'first'))
        .add_step(FailingStep())
        .add_step(RecordingStep(log, 'never')))

    result = chain.execute(ShopperState.new(5, 5))

    assert not result.success
    assert log == ['first']
    assert result.state == ShopperState(fuel=5, funds=0, items_acquired=0)
    assert result.error == "Intentional failure"

    print("  ✓ short-circuit passed")


def test_short_circuit_returns_failing_step_state():
    print("Testing state returned after a failed drive...")

    calls = []

    def spy(state):
        calls.append(state)
        return Result.ok(state.replace(funds=999))

    result = run_steps(ShopperState.new(3, 10), bind(drive, 5), spy)

    assert not result.success
    assert calls == []
    assert result.state == ShopperState(fuel=0, funds=10, items_acquired=0)
    assert result.error.shortfall == 2

    print("  ✓ failed drive state passed")


def test_empty_chain():
    state = ShopperState.new(1, 2)
    result = StepChain().execute(state)
    assert result.success
    assert result.state is state


def test_non_result_step_rejected():
    chain = StepChain().add_step(lambda state: state)
    try:
        chain.execute(ShopperState.new(1, 1))
    except TypeError:
        pass
    else:
        raise AssertionError("expected TypeError")


def test_non_result_step_rejected_through_middleware():
    for middleware in (LoggingMiddleware(), ValidationMiddleware()):
        chain = StepChain().add_step(lambda state: state).use_middleware(middleware)
        try:
            chain.execute(ShopperState.new(1, 1))
        except TypeError:
            pass
        else:
            raise AssertionError(f"expected TypeError with {middleware}")


def test_unwrap_traceback_does_not_grow():
    failure = drive(ShopperState.new(1, 0), 3)

    depths = []
    for _ in range(3):
        try:
            failure.unwrap()
        except InsufficientFuel as e:
            depth = 0
            tb = e.__traceback__
            while tb is not None:
                depth += 1
                tb = tb.tb_next
            depths.append(depth)

    assert len(depths) == 3
    assert len(set(depths)) == 1


def test_add_step_rejects_non_callables():
    try:
        StepChain().add_step(42)
    except TypeError:
        pass
    else:
        raise AssertionError("expected TypeError")


def test_bind_is_lazy_and_repeatable():
    print("Testing bind...")

    calls = []

    def op(state, arg):
        calls.append(arg)
        return drive(state, arg)

    step = bind(op, 7)
    assert calls == []  # nothing runs at bind time

    state = ShopperState.new(4, 1)
    first = step(state)
    second = bind(op, 7)(state)
    third = step(state)

    assert calls == [7, 7, 7]
    for result in (second, third):
        assert result.success == first.success
        assert result.state == first.state
        assert result.error == first.error

    print("  ✓ bind passed")


def test_bind_names_and_kwargs():
    step = bind(buy_items, 2, config=ShoppingConfig(unit_price=5))
    assert step.name == "buy_items(2)"
    assert bind(drive, 5, name='drive_to_store').name == 'drive_to_store'
    assert step(ShopperState.new(0, 10)).state.funds == 0


def test_chain_management():
    chain = StepChain().add_steps(bind(drive, 1), bind(drive, 1))
    assert chain.step_count() == 2
    assert repr(chain) == "StepChain(steps=2, middleware=0)"

    assert chain.execute(ShopperState.new(2, 0)).state.fuel == 0

    chain.clear_steps()
    assert chain.step_count() == 0

    chain.reset()
    assert chain.middleware_count() == 0


def run_all_tests():
    print("=" * 60)
    print("Running shopchain Tests")
    print("=" * 60)
    print()

    tests = [
        test_shopper_state,
        test_result,
        test_drive_success,
        test_drive_failure_clamps_fuel,
        test_buy_items_supply_bound,
        test_buy_items_funds_bound,
        test_buy_items_supply_checked_before_funds,
        test_buy_items_success,
        test_end_to_end_scenario,
        test_chain_short_circuit,
        test_short_circuit_returns_failing_step_state,
        test_empty_chain,
        test_non_result_step_rejected,
        test_non_result_step_rejected_through_middleware,
        test_unwrap_traceback_does_not_grow,
        test_add_step_rejects_non_callables,
        test_bind_is_lazy_and_repeatable,
        test_bind_names_and_kwargs,
        test_chain_management,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except AssertionError as e:
            print(f"  ✗ Test failed: {e}")
            failed += 1
        except Exception as e:
            print(f"  ✗ Test error: {e}")
            failed += 1

    print()
    print("=" * 60)
    print(f"Results: {passed} passed, {failed} failed")
    print("=" * 60)

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
