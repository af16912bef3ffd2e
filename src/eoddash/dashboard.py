"""Dashboard orchestration: fetch a series, run the analytics, return a render-ready result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

import pandas as pd

from eoddash.analytics import (
    compute_moving_average,
    compute_price_range,
    compute_trend,
    compute_volatility,
)
from eoddash.chart import align_moving_average, points_to_frame
from eoddash.config import DashboardConfig, ProviderType
from eoddash.errors import DashboardError, ErrorCode
from eoddash.models.chart_point import ChartPoint
from eoddash.models.price_bar import PriceBar
from eoddash.models.ticker_listing import TickerListing
from eoddash.models.trend import TrendResult
from eoddash.providers import create_provider
from eoddash.providers.base import BasePriceProvider
from eoddash.store import KeyValueStore, create_store
from eoddash.tickers import TickerDirectory

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DashboardResult:
    """Everything a renderer needs for one symbol.

    Either ``error`` is set and the analytics fields are empty, or
    ``series`` holds the fetched bars (newest first) and the derived
    fields are filled in. ``trend`` and ``volatility`` stay None and
    ``moving_average`` stays empty when the series has a single bar.
    """

    symbol: str
    series: list[PriceBar] = field(default_factory=list)
    trend: TrendResult | None = None
    moving_average: list[float] = field(default_factory=list)
    volatility: float | None = None
    high: float = 0.0
    low: float = 0.0
    chart: list[ChartPoint] = field(default_factory=list)
    window_size: int = 7
    error: str | None = None
    error_code: ErrorCode | None = None

    @property
    def has_data(self) -> bool:
        return self.error is None and bool(self.series)

    @property
    def latest_moving_average(self) -> float | None:
        """Average of the newest window, if one exists."""
        return self.moving_average[0] if self.moving_average else None

    def to_frame(self) -> pd.DataFrame:
        """Chart points, oldest first, as a DataFrame."""
        return points_to_frame(self.chart)


def _undefined_as_absent(
    name: str,
    compute: Callable[[list[PriceBar]], T],
    series: list[PriceBar],
) -> T | None:
    try:
        return compute(series)
    except ZeroDivisionError:
        logger.warning(f"{name} undefined: series contains a zero close")
        return None


def analyze(symbol: str, series: list[PriceBar], window_size: int = 7) -> DashboardResult:
    """Run the analytics pipeline over an already-fetched, non-empty series.

    A statistic that divides by a zero close is reported as absent.
    """
    moving_average = compute_moving_average(series, window_size)
    high, low = compute_price_range(series)
    return DashboardResult(
        symbol=symbol,
        series=list(series),
        trend=_undefined_as_absent("Trend", compute_trend, series),
        moving_average=moving_average,
        volatility=_undefined_as_absent("Volatility", compute_volatility, series),
        high=high,
        low=low,
        chart=align_moving_average(series, moving_average),
        window_size=window_size,
    )


class Dashboard:
    """Central orchestrator: provider -> non-empty check -> analytics.

    Usage::

        from eoddash import create_dashboard_from_env
        dash = create_dashboard_from_env()
        result = dash.load("AAPL")
        if result.error:
            print(result.error)
    """

    def __init__(
        self,
        config: DashboardConfig,
        provider: BasePriceProvider | None = None,
        store: KeyValueStore | None = None,
    ) -> None:
        self.config = config
        self.provider = provider if provider is not None else self._build_provider(config)
        self._store = store
        self._tickers: TickerDirectory | None = None

    @property
    def store(self) -> KeyValueStore:
        """Ticker store, created from config on first use."""
        if self._store is None:
            self._store = create_store(
                self.config.store_backend,
                base_path=self.config.store_dir,
                ttl_seconds=self.config.store_ttl_seconds,
            )
        return self._store

    @property
    def tickers(self) -> TickerDirectory:
        if self._tickers is None:
            self._tickers = TickerDirectory(self.provider, self.store)
        return self._tickers

    @staticmethod
    def _build_provider(config: DashboardConfig) -> BasePriceProvider:
        kwargs: dict[str, Any] = {}
        if config.provider is ProviderType.MARKETSTACK:
            kwargs["api_key"] = config.api_key
            kwargs["base_url"] = config.base_url
            kwargs["timeout"] = config.timeout
        return create_provider(config.provider, **kwargs)

    def fetch(self, symbol: str) -> list[PriceBar]:
        """Fetch the newest-first series, raising NO_DATA when it is empty."""
        series = self.provider.get_eod(symbol, limit=self.config.limit)
        if not series:
            raise DashboardError(
                f"No data returned for symbol {symbol}.",
                code=ErrorCode.NO_DATA,
            )
        return series

    def load(self, symbol: str | None = None) -> DashboardResult:
        """Fetch and analyze one symbol.

        Fetch-layer failures never propagate; they come back as
        ``DashboardResult.error`` with no retry.
        """
        symbol = (symbol or self.config.default_symbol).strip().upper()
        try:
            series = self.fetch(symbol)
        except DashboardError as exc:
            logger.error(f"Load failed for {symbol}: {exc.message}")
            return DashboardResult(
                symbol=symbol,
                window_size=self.config.window_size,
                error=exc.message,
                error_code=exc.code,
            )

        result = analyze(symbol, series, self.config.window_size)
        logger.info(
            f"Analyzed {len(series)} bars for {symbol} "
            f"(trend={result.trend}, volatility={result.volatility})"
        )
        return result

    def search(self, query: str, limit: int = 10) -> list[TickerListing]:
        """Autocomplete lookup over the cached ticker list."""
        return self.tickers.search(query, limit=limit)

    def close(self) -> None:
        self.provider.close()

    def __enter__(self) -> Dashboard:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
