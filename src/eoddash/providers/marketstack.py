"""Marketstack end-of-day data provider (REST via ``requests``)."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import requests

from eoddash.config import DEFAULT_BASE_URL
from eoddash.errors import DashboardError, ErrorCode
from eoddash.models.price_bar import PriceBar
from eoddash.models.ticker_listing import TickerListing
from eoddash.providers.base import BasePriceProvider

logger = logging.getLogger(__name__)


class MarketstackProvider(BasePriceProvider):
    """Fetch daily bars and the ticker list from marketstack.com.

    Capabilities: eod, tickers.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        if not api_key or api_key == "undefined":
            raise DashboardError(
                "API key is missing or invalid. Set MARKETSTACK_API_KEY in your .env file.",
                code=ErrorCode.AUTH_FAILED,
            )
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def capabilities(self) -> set[str]:
        return {"eod", "tickers"}

    def close(self) -> None:
        self.session.close()

    # ------------------------------------------------------------------- eod

    def get_eod(self, symbol: str, limit: int = 100) -> list[PriceBar]:
        symbol = symbol.strip().upper()
        if not symbol:
            raise DashboardError("Symbol is required.", code=ErrorCode.INVALID_INPUT)

        logger.info(f"Fetching {limit} EOD bars for {symbol}")
        data = self._get("eod", {"symbols": symbol, "limit": limit})
        try:
            bars = [self._row_to_bar(row) for row in data.get("data") or []]
        except (KeyError, TypeError, ValueError) as exc:
            raise DashboardError(
                f"Malformed EOD response for {symbol}: {exc}",
                code=ErrorCode.PROVIDER_ERROR,
            ) from exc

        bars.sort(key=lambda b: b.date, reverse=True)
        logger.info(f"  Received {len(bars)} bars for {symbol}")
        return bars

    # --------------------------------------------------------------- tickers

    def get_tickers(self, limit: int = 1000) -> list[TickerListing]:
        data = self._get("tickers", {"limit": limit})
        listings: list[TickerListing] = []
        for row in data.get("data") or []:
            symbol = row.get("symbol")
            if not symbol:
                continue
            exchange = row.get("stock_exchange") or {}
            listings.append(TickerListing(
                symbol=symbol.upper(),
                name=row.get("name") or symbol.upper(),
                exchange=exchange.get("acronym") or exchange.get("mic"),
            ))
        logger.info(f"Fetched {len(listings)} tickers")
        return listings

    # -------------------------------------------------------------- internal

    def _get(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint}"
        query = {"access_key": self.api_key, **params}
        try:
            resp = self.session.get(url, params=query, timeout=self.timeout)
        except requests.RequestException as exc:
            raise DashboardError(
                f"Marketstack request failed: {exc}",
                code=ErrorCode.PROVIDER_ERROR,
                retryable=True,
            ) from exc

        self._check_response(resp)
        try:
            return resp.json()
        except ValueError as exc:
            raise DashboardError(
                "Marketstack returned an invalid JSON body",
                code=ErrorCode.PROVIDER_ERROR,
            ) from exc

    @staticmethod
    def _check_response(resp: Any) -> None:
        if resp.status_code == 403:
            raise DashboardError(
                "Forbidden: Check if your plan supports this endpoint "
                "or if you've hit the request limit.",
                code=ErrorCode.FORBIDDEN,
            )
        if resp.status_code == 429:
            raise DashboardError(
                "Rate limit exceeded. Please try again later.",
                code=ErrorCode.RATE_LIMITED,
                retryable=True,
            )
        if not 200 <= resp.status_code < 300:
            raise DashboardError(
                f"API request failed with status {resp.status_code}",
                code=ErrorCode.PROVIDER_ERROR,
            )

    @staticmethod
    def _row_to_bar(row: dict[str, Any]) -> PriceBar:
        # Marketstack dates look like "2024-01-15T00:00:00+0000"
        day = datetime.strptime(row["date"][:10], "%Y-%m-%d").date()
        return PriceBar(
            date=day,
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=float(row.get("volume") or 0.0),
            symbol=row.get("symbol"),
        )
