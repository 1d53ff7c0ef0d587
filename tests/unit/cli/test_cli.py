import json
import sys

import pytest
from typer.testing import CliRunner

from bootstrap_scenario_engine.cli import main as cli_main
from bootstrap_scenario_engine.cli.main import app
from bootstrap_scenario_engine.cli.validation import resolve_modes, validate_output_format
from bootstrap_scenario_engine.exceptions import ConfigValidationError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for key in ("BSE_DAYS", "BSE_NUM_SCENARIOS", "BSE_SEED", "BSE_PAIRING", "BSE_MAX_WORKERS"):
        monkeypatch.delenv(key, raising=False)


def test_run_text_report_for_both_modes():
    result = runner.invoke(app, ["run", "--days", "5", "--scenarios", "3"])
    assert result.exit_code == 0, result.output
    assert "Scenarios generated without replacement." in result.output
    assert "Scenarios generated with replacement." in result.output
    assert result.output.count("Number of scenarios generated: 3") == 2
    assert "Number of transactions in each scenario: 5" in result.output


def test_run_json_output_is_structured():
    result = runner.invoke(app, ["run", "--mode", "with", "--scenarios", "4", "--format", "json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["config"]["num_scenarios"] == 4
    [report] = payload["reports"]
    assert report["mode"] == "with_replacement"
    assert report["seeds"] == [0, 1, 2, 3]
    assert len(report["returns"]) == 4
    assert all(len(row) == 7 for row in report["returns"])


def test_run_reads_yaml_config(tmp_path):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("days: 6\nnum_scenarios: 2\npairing: disjoint\n")
    result = runner.invoke(app, ["run", "--config", str(cfg), "--mode", "without", "--format", "json"])
    assert result.exit_code == 0, result.output
    report = json.loads(result.output)["reports"][0]
    assert report["scenario_count"] == 2
    assert report["transactions_per_scenario"] == 3


def test_run_table_output():
    result = runner.invoke(app, ["run", "--mode", "without", "--days", "2", "--scenarios", "2", "--format", "table"])
    assert result.exit_code == 0, result.output
    assert "seed" in result.output


def test_path_command_prints_base_path():
    result = runner.invoke(app, ["path", "--days", "3"])
    assert result.exit_code == 0, result.output
    assert "start" in result.output
    assert "return" in result.output


def test_invalid_input_surfaces_config_error():
    result = runner.invoke(app, ["run", "--days", "0"])
    assert result.exit_code != 0
    assert isinstance(result.exception, ConfigValidationError)


@pytest.mark.parametrize(
    "argv,code",
    [
        (["bse", "run", "--days", "0"], 1),
        (["bse", "run", "--mode", "sideways"], 1),
        (["bse", "run", "--seed", "-1"], 1),
        (["bse", "run", "--scenarios", "2", "--initial-seed", "-3"], 1),
        (["bse", "run", "--days", "2", "--scenarios", "1"], 0),
    ],
)
def test_main_maps_errors_to_exit_codes(monkeypatch, argv, code):
    monkeypatch.setattr(cli_main, "configure_logging", lambda **_: None)
    monkeypatch.setattr(sys, "argv", argv)
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main()
    assert excinfo.value.code == code


def test_validation_helpers():
    assert resolve_modes("Both") == ("without_replacement", "with_replacement")
    assert validate_output_format("JSON") == "json"
    with pytest.raises(ConfigValidationError):
        validate_output_format("csv")
