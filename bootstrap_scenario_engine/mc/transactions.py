"""Conversion of a price path into daily transactions."""

from __future__ import annotations

from typing import Literal, Sequence

import numpy as np

from bootstrap_scenario_engine.exceptions import (
    ConfigValidationError,
    InsufficientDataError,
    InvalidPriceError,
)
from bootstrap_scenario_engine.models.transaction import DailyTransaction
from bootstrap_scenario_engine.utils.logging import get_logger

log = get_logger(__name__, component="mc.transactions")

Pairing = Literal["disjoint", "sliding"]
PAIRINGS = ("disjoint", "sliding")


def _as_price_array(prices: Sequence[float] | np.ndarray) -> np.ndarray:
    array = np.asarray(prices, dtype=np.float64)
    if array.ndim != 1:
        raise InvalidPriceError(f"price sequence must be 1D, got shape {array.shape}")
    if array.size < 2:
        raise InsufficientDataError(
            f"at least 2 prices are required to form a transaction, got {array.size}"
        )
    if not np.isfinite(array).all() or (array <= 0).any():
        raise InvalidPriceError("price sequence contains non-positive or non-finite values")
    return array


def extract_transactions(
    prices: Sequence[float] | np.ndarray,
    pairing: Pairing = "disjoint",
) -> list[DailyTransaction]:
    """Pair consecutive prices into transactions.

    ``disjoint`` pairing walks the path two prices at a time, so transaction
    ``i`` spans ``prices[2i]`` to ``prices[2i + 1]`` and a trailing unpaired
    price is dropped. ``sliding`` pairing emits one transaction per adjacent
    pair, ``prices[i]`` to ``prices[i + 1]``.

    Raises:
        InsufficientDataError: fewer than two prices.
        InvalidPriceError: non-1D input or non-positive/non-finite prices.
        ConfigValidationError: unknown pairing.
    """
    if pairing not in PAIRINGS:
        raise ConfigValidationError(f"pairing must be one of {list(PAIRINGS)}")

    array = _as_price_array(prices)

    if pairing == "sliding":
        starts, ends = array[:-1], array[1:]
    else:
        usable = array.size - array.size % 2
        if usable != array.size:
            log.debug("Dropping trailing unpaired price", extra={"transaction_count": usable // 2})
        starts, ends = array[0:usable:2], array[1:usable:2]

    return [DailyTransaction(float(start), float(end)) for start, end in zip(starts, ends)]


__all__ = ["Pairing", "PAIRINGS", "extract_transactions"]
