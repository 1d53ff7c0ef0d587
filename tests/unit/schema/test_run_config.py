import pytest

from bootstrap_scenario_engine.exceptions import ConfigValidationError
from bootstrap_scenario_engine.schema.run_config import ScenarioRunConfig


def test_defaults_match_reference_scenario():
    cfg = ScenarioRunConfig()
    assert (cfg.days, cfg.market_price, cfg.drift, cfg.volatility, cfg.seed, cfg.num_scenarios) == (
        7,
        100.0,
        0.15,
        0.25,
        106,
        15,
    )
    assert cfg.seeds() == list(range(15))


def test_round_trip_through_dict():
    cfg = ScenarioRunConfig(days=10, num_scenarios=3, initial_seed=5, pairing="disjoint")
    restored = ScenarioRunConfig.from_dict(cfg.to_dict())
    assert restored == cfg
    assert restored.seeds() == [5, 6, 7]


@pytest.mark.parametrize(
    "overrides",
    [
        {"days": 0},
        {"market_price": -1.0},
        {"volatility": -0.2},
        {"num_scenarios": 0},
        {"time_step": 0.0},
        {"initial_seed": -1},
        {"pairing": "zigzag"},
        {"max_workers": 0},
        {"seed": -1},
        {"days": 7.5},
        {"num_scenarios": 2.0},
        {"initial_seed": True},
        {"seed": "106"},
        {"max_workers": 1.5},
    ],
)
def test_invalid_values_raise(overrides):
    with pytest.raises(ConfigValidationError):
        ScenarioRunConfig(**overrides)


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigValidationError):
        ScenarioRunConfig.from_dict({"days": 3, "symbol": "XYZ"})
