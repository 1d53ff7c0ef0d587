"""Path CLI command: show the base transaction path."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from bootstrap_scenario_engine.cli.commands.options import resolve_run_config
from bootstrap_scenario_engine.simulation.scenarios import generate_simulated_path


def path(
    config: Path | None = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    days: int | None = typer.Option(None, help="Days simulated after the start date"),
    market_price: float | None = typer.Option(None, "--market-price", help="Starting price"),
    drift: float | None = typer.Option(None, help="Annualised drift"),
    volatility: float | None = typer.Option(None, help="Annualised volatility"),
    seed: int | None = typer.Option(None, help="Seed for the simulated price path"),
    time_step: float | None = typer.Option(None, "--time-step", help="Path horizon in years"),
    pairing: str | None = typer.Option(None, help="Price pairing: sliding or disjoint"),
) -> None:
    cfg = resolve_run_config(
        config,
        {
            "days": days,
            "market_price": market_price,
            "drift": drift,
            "volatility": volatility,
            "seed": seed,
            "time_step": time_step,
            "pairing": pairing,
        },
    )
    txns = generate_simulated_path(
        cfg.days,
        cfg.market_price,
        cfg.drift,
        cfg.volatility,
        cfg.seed,
        time_step=cfg.time_step,
        pairing=cfg.pairing,
    )

    table = Table(title=f"Base path (seed {cfg.seed}, {len(txns)} transactions)")
    table.add_column("#", justify="right")
    table.add_column("start", justify="right")
    table.add_column("end", justify="right")
    table.add_column("return", justify="right")
    for i, txn in enumerate(txns):
        table.add_row(str(i), f"{txn.start_price:.4f}", f"{txn.end_price:.4f}", f"{txn.simple_return():.6f}")
    Console().print(table)
