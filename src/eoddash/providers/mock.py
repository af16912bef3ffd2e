"""Mock provider for testing and offline demos. No API key required."""

from __future__ import annotations

from datetime import date, timedelta

from eoddash.models.price_bar import PriceBar
from eoddash.models.ticker_listing import TickerListing
from eoddash.providers.base import BasePriceProvider

_DEFAULT_TICKERS = [
    TickerListing("AAPL", "Apple Inc", "NASDAQ"),
    TickerListing("AMZN", "Amazon.com Inc", "NASDAQ"),
    TickerListing("GOOGL", "Alphabet Inc - Class A", "NASDAQ"),
    TickerListing("MSFT", "Microsoft Corporation", "NASDAQ"),
    TickerListing("TSLA", "Tesla Inc", "NASDAQ"),
]


class MockProvider(BasePriceProvider):
    """In-memory provider that returns configurable static data.

    Use ``set_bars`` / ``set_tickers`` to pre-load data, or leave the
    defaults for a deterministic synthetic series.
    """

    def __init__(self, as_of: date | None = None) -> None:
        self.as_of = as_of or date(2024, 6, 28)
        self._bars: dict[str, list[PriceBar]] = {}
        self._tickers: list[TickerListing] = list(_DEFAULT_TICKERS)
        self.eod_calls = 0
        self.ticker_calls = 0

    # --- Pre-load helpers ---

    def set_bars(self, symbol: str, bars: list[PriceBar]) -> None:
        self._bars[symbol.upper()] = bars

    def set_tickers(self, tickers: list[TickerListing]) -> None:
        self._tickers = list(tickers)

    # --- Provider implementation ---

    def get_eod(self, symbol: str, limit: int = 100) -> list[PriceBar]:
        self.eod_calls += 1
        key = symbol.upper()
        if key in self._bars:
            return self._bars[key][:limit]
        return self._generate_bars(key, limit)

    def get_tickers(self, limit: int = 1000) -> list[TickerListing]:
        self.ticker_calls += 1
        return self._tickers[:limit]

    def capabilities(self) -> set[str]:
        return {"eod", "tickers"}

    # --- Synthetic data generation ---

    def _generate_bars(self, symbol: str, limit: int) -> list[PriceBar]:
        """Newest-first weekday bars with a gentle saw-tooth uptrend."""
        bars: list[PriceBar] = []
        day = self.as_of
        while len(bars) < limit:
            if day.weekday() < 5:
                age = len(bars)
                c = 150.0 - age * 0.25 + (age % 5) * 0.4
                bars.append(PriceBar(
                    date=day,
                    open=round(c - 0.3, 2),
                    high=round(c + 0.8, 2),
                    low=round(c - 0.9, 2),
                    close=round(c, 2),
                    volume=1_000_000.0 + age * 1_000,
                    symbol=symbol,
                ))
            day -= timedelta(days=1)
        return bars
