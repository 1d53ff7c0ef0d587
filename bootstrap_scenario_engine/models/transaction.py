"""Daily transaction value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DailyTransaction:
    """One observation period: the price before and after a single day.

    Instances are immutable and compare by value, so scenarios can hold them
    freely without aliasing concerns. ``start_price`` must be non-zero for the
    return to be defined; the price generator and extractor guarantee this.
    """

    start_price: float
    end_price: float

    def simple_return(self) -> float:
        """Simple daily return ``(end - start) / start``."""
        return (self.end_price - self.start_price) / self.start_price

    def __call__(self) -> float:
        return self.simple_return()
