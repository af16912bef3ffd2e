"""Daily price bar model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PriceBar:
    """One trading day's end-of-day quote.

    Attributes:
        date: Trading day.
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Trading volume.
        symbol: Ticker symbol, when the source reports it.
    """

    date: date
    open: float
    high: float
    low: float
    close: float
    volume: float
    symbol: str | None = None
