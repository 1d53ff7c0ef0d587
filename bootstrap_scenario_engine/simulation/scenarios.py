"""End-to-end scenario run: price path -> transactions -> scenarios -> report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

import numpy as np

from bootstrap_scenario_engine.analysis.inspector import ScenarioReport, inspect_scenarios
from bootstrap_scenario_engine.exceptions import ConfigValidationError
from bootstrap_scenario_engine.interfaces.price_generator import PriceGenerator
from bootstrap_scenario_engine.mc.generator import generate_prices
from bootstrap_scenario_engine.mc.sampling import (
    SAMPLING_MODES,
    SamplingMode,
    ScenarioSet,
    generate_scenarios,
)
from bootstrap_scenario_engine.mc.transactions import Pairing, extract_transactions
from bootstrap_scenario_engine.models.transaction import DailyTransaction
from bootstrap_scenario_engine.schema.run_config import ScenarioRunConfig
from bootstrap_scenario_engine.utils.logging import get_logger
from bootstrap_scenario_engine.utils.profiling import track_time

log = get_logger(__name__, component="simulation.scenarios")

PriceSource = Union[PriceGenerator, Callable[[float, int, float, float, float, int], Sequence[float]]]


@dataclass
class ScenarioRun:
    config: ScenarioRunConfig
    prices: np.ndarray
    base: list[DailyTransaction]
    scenario_set: ScenarioSet
    report: ScenarioReport


def _simulate_prices(
    days: int,
    market_price: float,
    drift: float,
    volatility: float,
    seed: int,
    time_step: float,
    generator: Optional[PriceSource],
) -> np.ndarray:
    source = generator if generator is not None else generate_prices
    prices = source(market_price, days, time_step, drift, volatility, seed)
    return np.asarray(prices, dtype=np.float64)


def generate_simulated_path(
    days: int,
    market_price: float,
    drift: float,
    volatility: float,
    seed: int,
    *,
    time_step: float = 1.0,
    generator: Optional[PriceSource] = None,
    pairing: Pairing = "sliding",
) -> list[DailyTransaction]:
    """Simulate one price path and convert it to the base transaction path.

    ``days`` counts the days in addition to the start date, so the generator
    returns ``days + 1`` prices. ``generator`` defaults to the GBM stand-in;
    any ``PriceGenerator`` or callable with the same signature may be injected.
    """
    prices = _simulate_prices(days, market_price, drift, volatility, seed, time_step, generator)
    return extract_transactions(prices, pairing=pairing)


def run_scenarios(
    config: ScenarioRunConfig,
    mode: SamplingMode,
    generator: Optional[PriceSource] = None,
) -> ScenarioRun:
    """Build the base path from ``config`` and resample it in one mode."""

    if mode not in SAMPLING_MODES:
        raise ConfigValidationError(f"mode must be one of {list(SAMPLING_MODES)}")

    log.info(
        "Starting scenario run",
        extra={"mode": mode, "days": config.days, "seed": config.seed, "scenario_count": config.num_scenarios},
    )
    with track_time(f"path.{mode}"):
        prices = _simulate_prices(
            config.days,
            config.market_price,
            config.drift,
            config.volatility,
            config.seed,
            config.time_step,
            generator,
        )
        base = extract_transactions(prices, pairing=config.pairing)

    with track_time(f"sampling.{mode}"):
        scenario_set = generate_scenarios(base, config.seeds(), mode, max_workers=config.max_workers)

    report = inspect_scenarios(scenario_set)
    log.info(
        "Scenario run finished",
        extra={"mode": mode, "scenario_count": len(scenario_set), "transaction_count": len(base)},
    )
    return ScenarioRun(config=config, prices=prices, base=base, scenario_set=scenario_set, report=report)


def run_without_replacement(
    config: ScenarioRunConfig, generator: Optional[PriceSource] = None
) -> ScenarioRun:
    return run_scenarios(config, "without_replacement", generator)


def run_with_replacement(
    config: ScenarioRunConfig, generator: Optional[PriceSource] = None
) -> ScenarioRun:
    return run_scenarios(config, "with_replacement", generator)


def run_all(config: ScenarioRunConfig, generator: Optional[PriceSource] = None) -> list[ScenarioRun]:
    """Run without replacement, then with replacement, on the same base path."""
    return [run_scenarios(config, mode, generator) for mode in SAMPLING_MODES]


__all__ = [
    "PriceSource",
    "ScenarioRun",
    "generate_simulated_path",
    "run_all",
    "run_scenarios",
    "run_with_replacement",
    "run_without_replacement",
]
