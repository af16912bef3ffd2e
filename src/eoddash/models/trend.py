"""Trend analysis result model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TrendDirection(Enum):
    """Direction of the price move from oldest to newest close."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class TrendResult:
    """Overall trend of a series.

    Attributes:
        direction: UP when the newest close is strictly above the oldest.
        percentage_change: Oldest-to-newest change in percent, 2 decimals.
    """

    direction: TrendDirection
    percentage_change: float
