"""Run CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console

from bootstrap_scenario_engine.analysis.inspector import format_report, render_table
from bootstrap_scenario_engine.cli.commands.options import resolve_run_config
from bootstrap_scenario_engine.cli.validation import resolve_modes, validate_output_format
from bootstrap_scenario_engine.simulation.scenarios import run_scenarios
from bootstrap_scenario_engine.utils.logging import get_logger

log = get_logger(__name__, component="cli_run")


def run(
    config: Path | None = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    mode: str = typer.Option("both", "--mode", help="Sampling mode: without, with or both"),
    days: int | None = typer.Option(None, help="Days simulated after the start date"),
    market_price: float | None = typer.Option(None, "--market-price", help="Starting price"),
    drift: float | None = typer.Option(None, help="Annualised drift"),
    volatility: float | None = typer.Option(None, help="Annualised volatility"),
    seed: int | None = typer.Option(None, help="Seed for the simulated price path"),
    scenarios: int | None = typer.Option(None, "--scenarios", help="Number of resampled scenarios"),
    time_step: float | None = typer.Option(None, "--time-step", help="Path horizon in years"),
    initial_seed: int | None = typer.Option(None, "--initial-seed", help="First scenario seed"),
    pairing: str | None = typer.Option(None, help="Price pairing: sliding or disjoint"),
    max_workers: int | None = typer.Option(None, "--max-workers", help="Worker threads for sampling"),
    output_format: str = typer.Option("text", "--format", help="Output format: text, table or json"),
) -> None:
    modes = resolve_modes(mode)
    fmt = validate_output_format(output_format)
    run_config = resolve_run_config(
        config,
        {
            "days": days,
            "market_price": market_price,
            "drift": drift,
            "volatility": volatility,
            "seed": seed,
            "num_scenarios": scenarios,
            "time_step": time_step,
            "initial_seed": initial_seed,
            "pairing": pairing,
            "max_workers": max_workers,
        },
    )

    log.info("Starting run command", extra={"days": run_config.days, "scenario_count": run_config.num_scenarios})
    results = [run_scenarios(run_config, m) for m in modes]

    if fmt == "json":
        payload = {
            "config": run_config.to_dict(),
            "reports": [r.report.to_dict() for r in results],
        }
        typer.echo(json.dumps(payload, indent=2))
    elif fmt == "table":
        console = Console()
        for result in results:
            console.print(render_table(result.report))
    else:
        for result in results:
            typer.echo(format_report(result.report), nl=False)
