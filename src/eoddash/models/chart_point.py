"""Chart point model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ChartPoint:
    """A price bar paired with its aligned moving average value."""

    date: date
    open: float
    high: float
    low: float
    close: float
    volume: float
    moving_average: float | None = None
