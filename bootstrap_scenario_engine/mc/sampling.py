"""Bootstrap resampling of a base transaction path.

Every scenario draws from its own ``numpy`` generator seeded with an explicit
integer, so a scenario depends only on ``(base, seed, mode)``. That keeps runs
reproducible and lets scenarios be drawn concurrently without sharing engine
state.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Callable, Iterator, Literal, Sequence

import numpy as np
from numpy.random import PCG64, Generator

from bootstrap_scenario_engine.exceptions import ConfigValidationError, EmptyPathError
from bootstrap_scenario_engine.models.transaction import DailyTransaction
from bootstrap_scenario_engine.utils.logging import get_logger

log = get_logger(__name__, component="mc.sampling")

SamplingMode = Literal["without_replacement", "with_replacement"]
SAMPLING_MODES: tuple[SamplingMode, ...] = ("without_replacement", "with_replacement")
MODE_LABELS: dict[str, str] = {
    "without_replacement": "without replacement",
    "with_replacement": "with replacement",
}

Scenario = list[DailyTransaction]


@dataclass(slots=True)
class ScenarioSet:
    """Scenarios drawn from one base path, ``scenarios[i]`` seeded by ``seeds[i]``."""

    mode: SamplingMode
    seeds: list[int]
    scenarios: list[Scenario] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.seeds) != len(self.scenarios):
            raise ConfigValidationError("seeds and scenarios must have the same length")

    def __len__(self) -> int:
        return len(self.scenarios)

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self.scenarios)

    def __getitem__(self, index: int) -> Scenario:
        return self.scenarios[index]

    @property
    def label(self) -> str:
        return MODE_LABELS[self.mode]

    def returns_matrix(self) -> np.ndarray:
        """Simple returns as a ``(n_scenarios, n_transactions)`` array."""
        return np.array([[txn.simple_return() for txn in scenario] for scenario in self.scenarios], dtype=float)


def make_seeds(num_scenarios: int, initial_seed: int = 0) -> list[int]:
    """Contiguous seeds ``initial_seed .. initial_seed + num_scenarios - 1``."""
    if num_scenarios < 0:
        raise ConfigValidationError("num_scenarios must be >= 0")
    if initial_seed < 0:
        raise ConfigValidationError("initial_seed must be >= 0")
    return list(range(initial_seed, initial_seed + num_scenarios))


def _engine(seed: int) -> Generator:
    return Generator(PCG64(seed))


def permutation_indices(n: int, seed: int) -> np.ndarray:
    """Fisher-Yates permutation of ``range(n)`` drawn from a fresh engine."""
    return _engine(seed).permutation(n)


def bootstrap_indices(n: int, seed: int) -> np.ndarray:
    """``n`` uniform draws from the closed range ``[0, n - 1]``."""
    if n <= 0:
        raise EmptyPathError("cannot sample with replacement from an empty path")
    return _engine(seed).integers(0, n - 1, size=n, endpoint=True)


def sample_without_replacement(base: Sequence[DailyTransaction], seed: int) -> Scenario:
    """Return a reordered copy of ``base``; every transaction appears exactly once."""
    return [base[int(i)] for i in permutation_indices(len(base), seed)]


def sample_with_replacement(base: Sequence[DailyTransaction], seed: int) -> Scenario:
    """Return ``len(base)`` transactions drawn uniformly from ``base`` with repeats allowed."""
    return [base[int(i)] for i in bootstrap_indices(len(base), seed)]


_SAMPLERS: dict[str, Callable[[Sequence[DailyTransaction], int], Scenario]] = {
    "without_replacement": sample_without_replacement,
    "with_replacement": sample_with_replacement,
}


def _clamp_workers(max_workers: int | None) -> int:
    if max_workers is None:
        return 1
    cpu_count = os.cpu_count() or 1
    return max(1, min(int(max_workers), cpu_count))


def _validate_request(base: Sequence[DailyTransaction], seeds: Sequence[int], mode: str) -> None:
    if mode not in _SAMPLERS:
        raise ConfigValidationError(f"mode must be one of {list(SAMPLING_MODES)}")
    if any(isinstance(s, bool) or not isinstance(s, (int, np.integer)) for s in seeds):
        raise ConfigValidationError("seeds must be integers")
    if any(s < 0 for s in seeds):
        raise ConfigValidationError("seeds must be >= 0")
    if len(set(seeds)) != len(seeds):
        raise ConfigValidationError("seeds must be distinct within a run")
    if mode == "with_replacement" and len(base) == 0:
        raise EmptyPathError("cannot sample with replacement from an empty path")


def generate_scenarios(
    base: Sequence[DailyTransaction],
    seeds: Sequence[int],
    mode: SamplingMode,
    *,
    max_workers: int | None = None,
) -> ScenarioSet:
    """Draw one scenario per seed, preserving seed order in the result.

    With ``max_workers > 1`` the draws run on a thread pool; results are placed
    by seed position, not completion order. Any failing draw propagates and no
    partial set is returned.
    """

    _validate_request(base, seeds, mode)
    sampler = _SAMPLERS[mode]
    base = tuple(base)
    seed_list = [int(s) for s in seeds]
    worker_count = min(_clamp_workers(max_workers), max(len(seed_list), 1))

    log.info(
        "Generating scenarios",
        extra={
            "mode": mode,
            "scenario_count": len(seed_list),
            "transaction_count": len(base),
            "workers": worker_count,
        },
    )

    if worker_count == 1:
        scenarios = [sampler(base, seed) for seed in seed_list]
    else:
        slots: list[Scenario | None] = [None] * len(seed_list)
        with ThreadPoolExecutor(max_workers=worker_count) as executor:
            future_map = {
                executor.submit(sampler, base, seed): position
                for position, seed in enumerate(seed_list)
            }
            for future in as_completed(future_map):
                slots[future_map[future]] = future.result()
        scenarios = [scenario for scenario in slots if scenario is not None]

    return ScenarioSet(mode=mode, seeds=seed_list, scenarios=scenarios)


def without_replacement_scenarios(
    base: Sequence[DailyTransaction],
    seeds: Sequence[int],
    *,
    max_workers: int | None = None,
) -> ScenarioSet:
    return generate_scenarios(base, seeds, "without_replacement", max_workers=max_workers)


def with_replacement_scenarios(
    base: Sequence[DailyTransaction],
    seeds: Sequence[int],
    *,
    max_workers: int | None = None,
) -> ScenarioSet:
    return generate_scenarios(base, seeds, "with_replacement", max_workers=max_workers)


__all__ = [
    "MODE_LABELS",
    "SAMPLING_MODES",
    "SamplingMode",
    "Scenario",
    "ScenarioSet",
    "bootstrap_indices",
    "generate_scenarios",
    "make_seeds",
    "permutation_indices",
    "sample_with_replacement",
    "sample_without_replacement",
    "with_replacement_scenarios",
    "without_replacement_scenarios",
]
