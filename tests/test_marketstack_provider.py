"""Tests for MarketstackProvider: HTTP handling without network access."""

from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from eoddash.errors import DashboardError, ErrorCode
from eoddash.providers.marketstack import MarketstackProvider


def _response(status: int = 200, payload: dict | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload if payload is not None else {"data": []}
    return resp


def _row(day: str, close: float, symbol: str = "AAPL") -> dict:
    return {
        "date": f"{day}T00:00:00+0000",
        "open": close - 1,
        "high": close + 1,
        "low": close - 2,
        "close": close,
        "volume": 1_000_000,
        "symbol": symbol,
        "exchange": "XNAS",
    }


def _provider(resp: MagicMock) -> tuple[MarketstackProvider, MagicMock]:
    session = MagicMock()
    session.get.return_value = resp
    return MarketstackProvider(api_key="test-key", session=session), session


class TestApiKey:
    @pytest.mark.parametrize("key", [None, "", "undefined"])
    def test_missing_key(self, key):
        with pytest.raises(DashboardError) as exc_info:
            MarketstackProvider(api_key=key)
        assert exc_info.value.code is ErrorCode.AUTH_FAILED
        assert "API key is missing or invalid" in str(exc_info.value)


class TestGetEod:
    def test_request_parameters(self):
        provider, session = _provider(_response(payload={"data": [_row("2024-01-15", 100.0)]}))
        provider.get_eod("aapl", limit=100)

        url = session.get.call_args.args[0]
        params = session.get.call_args.kwargs["params"]
        assert url == "http://api.marketstack.com/v1/eod"
        assert params == {"access_key": "test-key", "symbols": "AAPL", "limit": 100}

    def test_parses_bars(self):
        provider, _ = _provider(_response(payload={"data": [_row("2024-01-15", 100.0)]}))
        bars = provider.get_eod("AAPL")
        assert len(bars) == 1
        bar = bars[0]
        assert bar.date == date(2024, 1, 15)
        assert bar.close == 100.0
        assert bar.high == 101.0
        assert bar.volume == 1_000_000.0
        assert bar.symbol == "AAPL"

    def test_sorted_newest_first(self):
        rows = [_row("2024-01-12", 98.0), _row("2024-01-16", 101.0), _row("2024-01-15", 100.0)]
        provider, _ = _provider(_response(payload={"data": rows}))
        bars = provider.get_eod("AAPL")
        assert [b.date for b in bars] == [date(2024, 1, 16), date(2024, 1, 15), date(2024, 1, 12)]

    def test_empty_data(self):
        provider, _ = _provider(_response(payload={"data": []}))
        assert provider.get_eod("NOPE") == []

    def test_null_volume(self):
        row = _row("2024-01-15", 100.0)
        row["volume"] = None
        provider, _ = _provider(_response(payload={"data": [row]}))
        assert provider.get_eod("AAPL")[0].volume == 0.0

    def test_malformed_row(self):
        provider, _ = _provider(_response(payload={"data": [{"date": "2024-01-15"}]}))
        with pytest.raises(DashboardError) as exc_info:
            provider.get_eod("AAPL")
        assert exc_info.value.code is ErrorCode.PROVIDER_ERROR

    def test_blank_symbol(self):
        provider, session = _provider(_response())
        with pytest.raises(DashboardError) as exc_info:
            provider.get_eod("   ")
        assert exc_info.value.code is ErrorCode.INVALID_INPUT
        session.get.assert_not_called()


class TestStatusMapping:
    def test_forbidden(self):
        provider, _ = _provider(_response(status=403))
        with pytest.raises(DashboardError) as exc_info:
            provider.get_eod("AAPL")
        assert exc_info.value.code is ErrorCode.FORBIDDEN
        assert str(exc_info.value).startswith("Forbidden:")

    def test_rate_limited(self):
        provider, _ = _provider(_response(status=429))
        with pytest.raises(DashboardError) as exc_info:
            provider.get_eod("AAPL")
        assert exc_info.value.code is ErrorCode.RATE_LIMITED
        assert exc_info.value.retryable
        assert str(exc_info.value) == "Rate limit exceeded. Please try again later."

    def test_other_status(self):
        provider, _ = _provider(_response(status=500))
        with pytest.raises(DashboardError) as exc_info:
            provider.get_eod("AAPL")
        assert exc_info.value.code is ErrorCode.PROVIDER_ERROR
        assert str(exc_info.value) == "API request failed with status 500"

    def test_transport_error(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("boom")
        provider = MarketstackProvider(api_key="test-key", session=session)
        with pytest.raises(DashboardError) as exc_info:
            provider.get_eod("AAPL")
        assert exc_info.value.code is ErrorCode.PROVIDER_ERROR
        assert exc_info.value.retryable
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_invalid_json(self):
        resp = _response()
        resp.json.side_effect = ValueError("not json")
        provider, _ = _provider(resp)
        with pytest.raises(DashboardError):
            provider.get_eod("AAPL")


class TestGetTickers:
    def test_parses_listings(self):
        payload = {"data": [
            {"symbol": "aapl", "name": "Apple Inc", "stock_exchange": {"acronym": "NASDAQ"}},
            {"symbol": "MSFT", "name": None, "stock_exchange": {"mic": "XNAS"}},
            {"symbol": "", "name": "Blank"},
        ]}
        provider, session = _provider(_response(payload=payload))
        listings = provider.get_tickers(limit=50)

        assert [t.symbol for t in listings] == ["AAPL", "MSFT"]
        assert listings[0].exchange == "NASDAQ"
        assert listings[1].name == "MSFT"
        assert listings[1].exchange == "XNAS"
        assert session.get.call_args.args[0].endswith("/tickers")
        assert session.get.call_args.kwargs["params"]["limit"] == 50


class TestLifecycle:
    def test_context_manager_closes_session(self):
        provider, session = _provider(_response())
        with provider:
            pass
        session.close.assert_called_once()

    def test_base_url_trailing_slash(self):
        session = MagicMock()
        session.get.return_value = _response()
        provider = MarketstackProvider(api_key="k", base_url="https://example.test/v1/", session=session)
        provider.get_eod("AAPL")
        assert session.get.call_args.args[0] == "https://example.test/v1/eod"
