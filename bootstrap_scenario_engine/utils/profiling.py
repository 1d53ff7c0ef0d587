"""Wall/CPU timing for pipeline segments."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from bootstrap_scenario_engine.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@dataclass
class Timing:
    wall: float
    cpu: float


def _now() -> Timing:
    return Timing(wall=time.perf_counter(), cpu=time.process_time())


@contextmanager
def track_time(name: str, *, warn_budget: float | None = None) -> Iterator[Timing]:
    """Log elapsed wall and CPU seconds for the wrapped block.

    Emits a warning instead of an info record once ``warn_budget`` seconds of
    wall time are exceeded.
    """
    start = _now()
    try:
        yield start
    finally:
        end = _now()
        wall_elapsed = end.wall - start.wall
        cpu_elapsed = end.cpu - start.cpu
        extra = {
            "segment": name,
            "wall_seconds": round(wall_elapsed, 4),
            "cpu_seconds": round(cpu_elapsed, 4),
        }
        if warn_budget is not None and wall_elapsed >= warn_budget:
            log.warning("Performance budget exceeded", extra=extra)
        else:
            log.info("Segment timing", extra=extra)
