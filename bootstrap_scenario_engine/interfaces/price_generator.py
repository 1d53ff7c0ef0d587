"""Price generator interface for simulated price paths."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class PriceGenerator(ABC):
    """Base class for single-asset price path generators.

    The resampling core treats implementations as opaque, deterministic-per-seed
    oracles: the same arguments must always produce the same prices.
    """

    @abstractmethod
    def generate_prices(
        self,
        initial_price: float,
        days: int,
        time_step: float,
        drift: float,
        volatility: float,
        seed: int,
    ) -> np.ndarray:
        """Return an ordered 1D array of ``days + 1`` prices starting at ``initial_price``."""

    def __call__(
        self,
        initial_price: float,
        days: int,
        time_step: float,
        drift: float,
        volatility: float,
        seed: int,
    ) -> np.ndarray:
        return self.generate_prices(initial_price, days, time_step, drift, volatility, seed)
