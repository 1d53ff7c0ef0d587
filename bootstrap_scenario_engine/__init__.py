"""Seeded bootstrap scenario generation from a simulated daily price path."""

from __future__ import annotations

from bootstrap_scenario_engine.analysis.inspector import (
    ScenarioReport,
    format_report,
    inspect_scenarios,
)
from bootstrap_scenario_engine.mc.generator import GBMPriceGenerator, generate_prices
from bootstrap_scenario_engine.mc.sampling import (
    ScenarioSet,
    generate_scenarios,
    make_seeds,
    sample_with_replacement,
    sample_without_replacement,
)
from bootstrap_scenario_engine.mc.transactions import extract_transactions
from bootstrap_scenario_engine.models.transaction import DailyTransaction
from bootstrap_scenario_engine.schema.run_config import ScenarioRunConfig
from bootstrap_scenario_engine.simulation.scenarios import (
    generate_simulated_path,
    run_all,
    run_scenarios,
    run_with_replacement,
    run_without_replacement,
)

__version__ = "0.1.0"

__all__ = [
    "DailyTransaction",
    "GBMPriceGenerator",
    "ScenarioReport",
    "ScenarioRunConfig",
    "ScenarioSet",
    "extract_transactions",
    "format_report",
    "generate_prices",
    "generate_scenarios",
    "generate_simulated_path",
    "inspect_scenarios",
    "make_seeds",
    "run_all",
    "run_scenarios",
    "run_with_replacement",
    "run_without_replacement",
    "sample_with_replacement",
    "sample_without_replacement",
]
