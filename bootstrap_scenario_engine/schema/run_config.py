"""Run configuration schema and validation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from numbers import Integral
from typing import Optional

from bootstrap_scenario_engine.exceptions import ConfigValidationError
from bootstrap_scenario_engine.mc.sampling import make_seeds
from bootstrap_scenario_engine.mc.transactions import PAIRINGS, Pairing

INTEGER_FIELDS = ("days", "seed", "num_scenarios", "initial_seed", "max_workers")


@dataclass(slots=True)
class ScenarioRunConfig:
    days: int = 7
    market_price: float = 100.0
    drift: float = 0.15
    volatility: float = 0.25
    seed: int = 106
    num_scenarios: int = 15
    time_step: float = 1.0
    initial_seed: int = 0
    pairing: Pairing = "sliding"
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if self.seed is None:
            raise ConfigValidationError("seed is required for reproducibility")
        for name in INTEGER_FIELDS:
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, Integral)):
                raise ConfigValidationError(f"{name} must be an integer, got {value!r}")
        if self.days <= 0:
            raise ConfigValidationError("days must be > 0")
        if self.market_price <= 0:
            raise ConfigValidationError("market_price must be > 0")
        if self.volatility < 0:
            raise ConfigValidationError("volatility must be >= 0")
        if self.seed < 0:
            raise ConfigValidationError("seed must be >= 0")
        if self.num_scenarios <= 0:
            raise ConfigValidationError("num_scenarios must be > 0")
        if self.time_step <= 0:
            raise ConfigValidationError("time_step must be > 0")
        if self.initial_seed < 0:
            raise ConfigValidationError("initial_seed must be >= 0")
        if self.pairing not in PAIRINGS:
            raise ConfigValidationError(f"pairing must be one of {list(PAIRINGS)}")
        if self.max_workers is not None and self.max_workers <= 0:
            raise ConfigValidationError("max_workers must be positive when set")

    def seeds(self) -> list[int]:
        return make_seeds(self.num_scenarios, self.initial_seed)

    @classmethod
    def from_dict(cls, data: dict) -> "ScenarioRunConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(f"unknown config keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict:
        return asdict(self)
