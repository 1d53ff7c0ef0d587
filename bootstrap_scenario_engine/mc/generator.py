"""Geometric Brownian motion price path generator.

Stand-in for a strategy-driven price path: produces a single daily path from a
seed and lognormal parameters.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.random import PCG64, Generator

from bootstrap_scenario_engine.exceptions import ConfigValidationError, PathGenerationError
from bootstrap_scenario_engine.interfaces.price_generator import PriceGenerator


def _validate_inputs(initial_price: float, days: int, time_step: float, volatility: float, seed: int) -> None:
    if initial_price <= 0:
        raise ConfigValidationError("initial_price must be > 0")
    if days <= 0:
        raise ConfigValidationError("days must be > 0")
    if time_step <= 0:
        raise ConfigValidationError("time_step must be > 0")
    if volatility < 0:
        raise ConfigValidationError("volatility must be >= 0")
    if seed < 0:
        raise ConfigValidationError("seed must be >= 0")


class GBMPriceGenerator(PriceGenerator):
    """Ito-discretised GBM over ``days`` equal steps spanning ``time_step`` years."""

    def generate_prices(
        self,
        initial_price: float,
        days: int,
        time_step: float,
        drift: float,
        volatility: float,
        seed: int,
    ) -> np.ndarray:
        _validate_inputs(initial_price, days, time_step, volatility, seed)

        dt = time_step / days
        rng = Generator(PCG64(seed))
        shocks = rng.standard_normal(days) * math.sqrt(dt)
        log_returns = (drift - 0.5 * volatility**2) * dt + volatility * shocks

        prices = np.empty(days + 1, dtype=np.float64)
        prices[0] = initial_price
        prices[1:] = initial_price * np.exp(log_returns.cumsum())

        if not np.isfinite(prices).all() or (prices <= 0).any():
            raise PathGenerationError("Generated path contains non-positive or non-finite values")

        return prices


_DEFAULT_GENERATOR = GBMPriceGenerator()


def generate_prices(
    initial_price: float,
    days: int,
    time_step: float,
    drift: float,
    volatility: float,
    seed: int,
) -> np.ndarray:
    """Generate ``days + 1`` GBM prices with the default generator."""

    return _DEFAULT_GENERATOR.generate_prices(initial_price, days, time_step, drift, volatility, seed)


__all__ = ["GBMPriceGenerator", "generate_prices"]
