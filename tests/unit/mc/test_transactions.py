import numpy as np
import pytest

from bootstrap_scenario_engine.exceptions import (
    ConfigValidationError,
    InsufficientDataError,
    InvalidPriceError,
)
from bootstrap_scenario_engine.mc.transactions import extract_transactions
from bootstrap_scenario_engine.models.transaction import DailyTransaction


@pytest.mark.parametrize("k", [2, 3, 4, 7, 8, 11])
def test_disjoint_pairing_count_and_positions(k):
    prices = [100.0 + i for i in range(k)]
    txns = extract_transactions(prices)
    assert len(txns) == k // 2
    for i, txn in enumerate(txns):
        assert txn.start_price == prices[2 * i]
        assert txn.end_price == prices[2 * i + 1]


def test_disjoint_pairing_drops_trailing_price():
    txns = extract_transactions([10.0, 11.0, 12.0, 13.0, 14.0])
    assert txns == [DailyTransaction(10.0, 11.0), DailyTransaction(12.0, 13.0)]


def test_sliding_pairing_uses_every_adjacent_pair():
    prices = np.array([100.0, 110.0, 99.0, 120.0])
    txns = extract_transactions(prices, pairing="sliding")
    assert txns == [
        DailyTransaction(100.0, 110.0),
        DailyTransaction(110.0, 99.0),
        DailyTransaction(99.0, 120.0),
    ]


def test_transactions_hold_plain_floats():
    txns = extract_transactions(np.array([1.0, 2.0]))
    assert type(txns[0].start_price) is float


@pytest.mark.parametrize("prices", [[], [100.0]])
def test_too_few_prices_is_rejected(prices):
    with pytest.raises(InsufficientDataError):
        extract_transactions(prices)
    with pytest.raises(InsufficientDataError):
        extract_transactions(prices, pairing="sliding")


@pytest.mark.parametrize("prices", [[100.0, 0.0], [100.0, -1.0], [100.0, float("nan")], [[1.0, 2.0]]])
def test_invalid_prices_are_rejected(prices):
    with pytest.raises(InvalidPriceError):
        extract_transactions(prices)


def test_unknown_pairing_is_rejected():
    with pytest.raises(ConfigValidationError):
        extract_transactions([1.0, 2.0], pairing="overlap")  # type: ignore[arg-type]
