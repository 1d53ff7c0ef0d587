"""Shared option resolution for scenario commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from bootstrap_scenario_engine.config.loader import load_config_with_precedence
from bootstrap_scenario_engine.schema.run_config import ScenarioRunConfig

ENV_PREFIX = "BSE_"

RUN_DEFAULTS: dict[str, Any] = ScenarioRunConfig().to_dict()

RUN_CASTERS = {
    "days": int,
    "market_price": float,
    "drift": float,
    "volatility": float,
    "seed": int,
    "num_scenarios": int,
    "time_step": float,
    "initial_seed": int,
    "pairing": str,
    "max_workers": int,
}


def resolve_run_config(config: Path | None, cli_values: dict[str, Any]) -> ScenarioRunConfig:
    cfg = load_config_with_precedence(
        config_path=config,
        env_prefix=ENV_PREFIX,
        cli_values=cli_values,
        defaults=RUN_DEFAULTS,
        casters=RUN_CASTERS,
    )
    return ScenarioRunConfig.from_dict(cfg)
