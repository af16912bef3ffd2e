"""Chart data: oldest-first points with the aligned moving average."""

from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

import pandas as pd

from eoddash.models.chart_point import ChartPoint
from eoddash.models.price_bar import PriceBar

CHART_COLUMNS = ["date", "open", "high", "low", "close", "volume", "moving_average"]


def align_moving_average(
    series: Sequence[PriceBar],
    moving_average: Sequence[float],
) -> list[ChartPoint]:
    """Pair the oldest-first display series with moving average values.

    ``series`` is newest-first and ``moving_average`` is the output of
    ``compute_moving_average`` on it. Display position ``j`` takes
    ``moving_average[len(moving_average) - 1 - j]``; positions past the end
    of the moving average get None.
    """
    count = len(moving_average)
    points: list[ChartPoint] = []
    for j, bar in enumerate(reversed(series)):
        value = moving_average[count - 1 - j] if j < count else None
        points.append(ChartPoint(
            date=bar.date,
            open=bar.open,
            high=bar.high,
            low=bar.low,
            close=bar.close,
            volume=bar.volume,
            moving_average=value,
        ))
    return points


def points_to_frame(points: Sequence[ChartPoint]) -> pd.DataFrame:
    """Chart points as a DataFrame with a datetime ``date`` column."""
    if not points:
        return pd.DataFrame(columns=CHART_COLUMNS)
    df = pd.DataFrame([asdict(p) for p in points], columns=CHART_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    return df
