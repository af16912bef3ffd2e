"""Price series analytics: trend, moving average, volatility.

Every function takes a series ordered newest-first (index 0 is the most
recent trading day) and is pure: the same input always yields the same
output and nothing is cached between calls.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from eoddash.models.price_bar import PriceBar
from eoddash.models.trend import TrendDirection, TrendResult

DEFAULT_WINDOW_SIZE = 7

_CENTS = Decimal("0.01")


def round2(value: float) -> float:
    """Round to 2 decimals, half away from zero on the exact binary value."""
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def compute_trend(series: Sequence[PriceBar]) -> TrendResult | None:
    """Direction and percentage change from the oldest to the newest close.

    A flat series (newest close equal to oldest) is classified as DOWN.

    Returns:
        TrendResult, or None when the series has fewer than 2 bars.
    """
    if len(series) <= 1:
        return None

    latest = series[0].close
    earliest = series[-1].close
    change = (latest - earliest) / earliest * 100
    direction = TrendDirection.UP if latest > earliest else TrendDirection.DOWN
    return TrendResult(direction=direction, percentage_change=round2(change))


def compute_moving_average(
    series: Sequence[PriceBar],
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> list[float]:
    """Simple moving average of closes over a trailing newest-first window.

    Index ``i`` is eligible once ``i >= window_size - 1``; its value is the
    mean of ``series[i - window_size + 1 : i + 1]``. Ineligible indices are
    dropped, so the result has ``len(series) - window_size + 1`` values
    (or none when the window never fills).

    Raises:
        ValueError: If ``window_size`` is less than 1.
    """
    if window_size < 1:
        raise ValueError(f"window_size must be >= 1, got {window_size}")
    if len(series) <= 1:
        return []

    closes = [bar.close for bar in series]
    averages: list[float] = []
    for i in range(window_size - 1, len(closes)):
        window = closes[i - window_size + 1 : i + 1]
        averages.append(sum(window) / window_size)
    return averages


def compute_volatility(series: Sequence[PriceBar]) -> float | None:
    """Standard deviation of adjacent-bar returns, in percent.

    Each return is measured against the older bar of the pair:
    ``(series[i].close - series[i + 1].close) / series[i + 1].close``.
    Variance uses the population divisor (number of returns).

    Returns:
        Volatility rounded to 2 decimals, or None with fewer than 2 bars.
    """
    if len(series) <= 1:
        return None

    returns = [
        (series[i].close - series[i + 1].close) / series[i + 1].close
        for i in range(len(series) - 1)
    ]
    mean = sum(returns) / len(returns)
    variance = sum((r - mean) ** 2 for r in returns) / len(returns)
    return round2(math.sqrt(variance) * 100)


def compute_price_range(series: Sequence[PriceBar]) -> tuple[float, float]:
    """Highest and lowest close, rounded to 2 decimals.

    An empty series yields ``(0.0, 0.0)``.
    """
    if not series:
        return 0.0, 0.0
    closes = [bar.close for bar in series]
    return round2(max(closes)), round2(min(closes))
