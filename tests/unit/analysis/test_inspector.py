import math

import numpy as np
import pytest
from rich.table import Table

from bootstrap_scenario_engine.analysis.inspector import (
    REPORT_BANNER,
    format_report,
    inspect_scenarios,
    render_table,
)
from bootstrap_scenario_engine.exceptions import ConfigValidationError, InsufficientDataError
from bootstrap_scenario_engine.mc.sampling import generate_scenarios
from bootstrap_scenario_engine.models.transaction import DailyTransaction

BASE = [
    DailyTransaction(100.0, 110.0),
    DailyTransaction(100.0, 90.0),
    DailyTransaction(50.0, 55.0),
]


def test_inspect_scenario_set_reports_shape_and_returns():
    scenario_set = generate_scenarios(BASE, [0, 1, 2, 3], "without_replacement")
    report = inspect_scenarios(scenario_set)

    assert report.mode == "without_replacement"
    assert report.mode_label == "without replacement"
    assert report.scenario_count == 4
    assert report.transactions_per_scenario == 3
    assert report.seeds == [0, 1, 2, 3]
    assert report.returns.shape == (4, 3)
    for row, scenario in zip(report.returns, scenario_set):
        assert row.tolist() == pytest.approx([txn() for txn in scenario])


def test_inspect_plain_list_with_replacement_flag():
    report = inspect_scenarios([BASE, list(reversed(BASE))], True)
    assert report.mode == "with_replacement"
    assert report.seeds is None
    assert report.returns[1].tolist() == pytest.approx([0.1, -0.1, 0.1])


def test_inspect_requires_mode_for_plain_lists():
    with pytest.raises(ConfigValidationError):
        inspect_scenarios([BASE])
    with pytest.raises(ConfigValidationError):
        inspect_scenarios([BASE], "sometimes")  # type: ignore[arg-type]


def test_explicit_mode_must_match_scenario_set():
    scenario_set = generate_scenarios(BASE, [0, 1], "with_replacement")
    assert inspect_scenarios(scenario_set, "with_replacement").mode == "with_replacement"
    assert inspect_scenarios(scenario_set, True).mode == "with_replacement"
    with pytest.raises(ConfigValidationError):
        inspect_scenarios(scenario_set, "without_replacement")
    with pytest.raises(ConfigValidationError):
        inspect_scenarios(scenario_set, False)


def test_inspect_empty_collection_fails():
    with pytest.raises(InsufficientDataError):
        inspect_scenarios([], "with_replacement")


def test_ragged_scenarios_are_padded_and_logged(caplog):
    with caplog.at_level("WARNING"):
        report = inspect_scenarios([BASE, BASE[:1]], "without_replacement")
    assert report.transactions_per_scenario == 3
    assert math.isnan(report.returns[1, 2])
    assert any("not uniform" in r.message for r in caplog.records)


def test_format_report_layout():
    report = inspect_scenarios([BASE[:2], BASE[1:]], False)
    text = format_report(report)
    lines = text.split("\n")

    assert lines[0] == REPORT_BANNER
    assert lines[1] == "Scenarios generated without replacement."
    assert lines[2] == "Number of scenarios generated: 2"
    assert lines[3] == "Number of transactions in each scenario: 2"
    assert lines[4] == "Matrix of daily transaction returns:"
    assert [float(v) for v in lines[5].split("\t")] == pytest.approx([0.1, -0.1])
    assert [float(v) for v in lines[6].split("\t")] == pytest.approx([-0.1, 0.1])
    assert text.endswith("\n\n")


def test_structured_outputs():
    scenario_set = generate_scenarios(BASE, [5, 6], "with_replacement")
    report = inspect_scenarios(scenario_set)

    frame = report.to_frame()
    assert list(frame.index) == [5, 6]
    assert list(frame.columns) == ["t0", "t1", "t2"]
    assert np.allclose(frame.to_numpy(), report.returns)

    payload = report.to_dict()
    assert payload["mode_label"] == "with replacement"
    assert payload["scenario_count"] == 2
    assert len(payload["returns"]) == 2

    table = render_table(report)
    assert isinstance(table, Table)
    assert table.row_count == 2
    assert len(table.columns) == 4
