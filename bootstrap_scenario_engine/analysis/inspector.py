"""Diagnostic summary of a generated scenario set.

Reports the sampling mode, scenario count, transactions per scenario and the
matrix of per-transaction returns. This is a shape/content check on the
resampled scenarios, not a statistical analysis of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np
import pandas as pd
from rich.table import Table

from bootstrap_scenario_engine.exceptions import ConfigValidationError, InsufficientDataError
from bootstrap_scenario_engine.mc.sampling import MODE_LABELS, SamplingMode, ScenarioSet
from bootstrap_scenario_engine.models.transaction import DailyTransaction
from bootstrap_scenario_engine.utils.logging import get_logger

log = get_logger(__name__, component="analysis.inspector")

REPORT_BANNER = "***** Check results of generated scenarios *****"


@dataclass(slots=True)
class ScenarioReport:
    mode: SamplingMode
    scenario_count: int
    transactions_per_scenario: int
    returns: np.ndarray
    seeds: list[int] | None = field(default=None)

    @property
    def mode_label(self) -> str:
        return MODE_LABELS[self.mode]

    def to_frame(self) -> pd.DataFrame:
        """Returns matrix as a DataFrame, one row per scenario, one column per position."""
        columns = [f"t{i}" for i in range(self.returns.shape[1])]
        index = pd.Index(self.seeds if self.seeds is not None else range(self.scenario_count), name="seed")
        return pd.DataFrame(self.returns, index=index, columns=columns)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode,
            "mode_label": self.mode_label,
            "scenario_count": self.scenario_count,
            "transactions_per_scenario": self.transactions_per_scenario,
            "seeds": self.seeds,
            "returns": [[None if np.isnan(v) else float(v) for v in row] for row in self.returns],
        }


def _resolve_mode(mode: SamplingMode | bool | None, scenarios: object) -> SamplingMode:
    set_mode = scenarios.mode if isinstance(scenarios, ScenarioSet) else None
    if mode is None:
        if set_mode is None:
            raise ConfigValidationError("mode is required when inspecting a plain scenario list")
        return set_mode
    if isinstance(mode, bool):
        resolved = "with_replacement" if mode else "without_replacement"
    elif mode in MODE_LABELS:
        resolved = mode
    else:
        raise ConfigValidationError(f"mode must be one of {sorted(MODE_LABELS)}")
    if set_mode is not None and resolved != set_mode:
        raise ConfigValidationError(f"mode {resolved!r} does not match scenario set mode {set_mode!r}")
    return resolved


def _returns_matrix(scenarios: Sequence[Sequence[DailyTransaction]]) -> np.ndarray:
    width = max(len(scenario) for scenario in scenarios)
    matrix = np.full((len(scenarios), width), np.nan, dtype=float)
    for row, scenario in enumerate(scenarios):
        matrix[row, : len(scenario)] = [txn.simple_return() for txn in scenario]
    return matrix


def inspect_scenarios(
    scenarios: ScenarioSet | Sequence[Sequence[DailyTransaction]],
    mode: SamplingMode | bool | None = None,
) -> ScenarioReport:
    """Summarise a scenario collection.

    ``mode`` may be a sampling mode name or the boolean ``replacement`` flag;
    it defaults to the mode recorded on a ``ScenarioSet``. The transaction
    count is taken from the first scenario; ragged rows are padded with NaN.
    """
    resolved = _resolve_mode(mode, scenarios)
    rows = list(scenarios)
    if not rows:
        raise InsufficientDataError("cannot inspect an empty scenario collection")

    seeds = list(scenarios.seeds) if isinstance(scenarios, ScenarioSet) else None
    report = ScenarioReport(
        mode=resolved,
        scenario_count=len(rows),
        transactions_per_scenario=len(rows[0]),
        returns=_returns_matrix(rows),
        seeds=seeds,
    )
    if any(len(row) != report.transactions_per_scenario for row in rows):
        log.warning("Scenario lengths are not uniform", extra={"mode": resolved, "scenario_count": len(rows)})
    log.info(
        "Scenario report",
        extra={
            "mode": resolved,
            "scenario_count": report.scenario_count,
            "transaction_count": report.transactions_per_scenario,
        },
    )
    return report


def format_report(report: ScenarioReport) -> str:
    """Render the human-readable report block, terminated by a blank line."""
    lines = [
        REPORT_BANNER,
        f"Scenarios generated {report.mode_label}.",
        f"Number of scenarios generated: {report.scenario_count}",
        f"Number of transactions in each scenario: {report.transactions_per_scenario}",
        "Matrix of daily transaction returns:",
    ]
    for row in report.returns:
        lines.append("\t".join(f"{value:g}" for value in row if not np.isnan(value)))
    return "\n".join(lines) + "\n\n"


def render_table(report: ScenarioReport, *, precision: int = 6) -> Table:
    table = Table(
        title=f"Scenarios {report.mode_label} "
        f"({report.scenario_count} x {report.transactions_per_scenario})"
    )
    table.add_column("seed", justify="right")
    for i in range(report.returns.shape[1]):
        table.add_column(f"t{i}", justify="right")
    seeds = report.seeds if report.seeds is not None else list(range(report.scenario_count))
    for seed, row in zip(seeds, report.returns):
        table.add_row(str(seed), *("" if np.isnan(v) else f"{v:.{precision}f}" for v in row))
    return table


__all__ = ["REPORT_BANNER", "ScenarioReport", "format_report", "inspect_scenarios", "render_table"]
