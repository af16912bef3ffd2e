"""Tests for the ticker lookup table."""

from eoddash.models.ticker_listing import TickerListing
from eoddash.providers.base import BasePriceProvider
from eoddash.store import MemoryStore, NullStore
from eoddash.tickers import TickerDirectory


class _EodOnlyProvider(BasePriceProvider):
    def get_eod(self, symbol, limit=100):
        return []


class TestListings:
    def test_fetches_then_serves_from_store(self, mock_provider):
        directory = TickerDirectory(mock_provider, MemoryStore())
        first = directory.listings()
        second = directory.listings()
        assert first == second
        assert mock_provider.ticker_calls == 1

    def test_store_holds_plain_records(self, mock_provider):
        store = MemoryStore()
        TickerDirectory(mock_provider, store, key="lookup").listings()
        cached = store.get("lookup")
        assert {"symbol": "AAPL", "name": "Apple Inc", "exchange": "NASDAQ"} in cached

    def test_null_store_always_refetches(self, mock_provider):
        directory = TickerDirectory(mock_provider, NullStore())
        directory.listings()
        directory.listings()
        assert mock_provider.ticker_calls == 2

    def test_refresh(self, mock_provider):
        directory = TickerDirectory(mock_provider, MemoryStore())
        directory.listings()
        mock_provider.set_tickers([TickerListing("NEW", "New Listing")])
        assert directory.listings()[0].symbol != "NEW"
        assert directory.refresh() == [TickerListing("NEW", "New Listing")]

    def test_foreign_cache_shape_is_refetched(self, mock_provider):
        store = MemoryStore()
        store.set("tickers", [{"ticker": "AAPL", "company": "Apple Inc"}])
        listings = TickerDirectory(mock_provider, store).listings()

        assert mock_provider.ticker_calls == 1
        assert [t.symbol for t in listings][:2] == ["AAPL", "AMZN"]
        assert all("symbol" in row for row in store.get("tickers"))

    def test_provider_without_tickers(self):
        directory = TickerDirectory(_EodOnlyProvider(), MemoryStore())
        assert directory.listings() == []
        assert directory.search("a") == []


class TestSearch:
    def test_symbol_prefix(self, mock_provider):
        directory = TickerDirectory(mock_provider, MemoryStore())
        assert [t.symbol for t in directory.search("goo")] == ["GOOGL"]

    def test_name_match(self, mock_provider):
        directory = TickerDirectory(mock_provider, MemoryStore())
        assert [t.symbol for t in directory.search("micro")] == ["MSFT"]

    def test_symbol_matches_rank_first(self, mock_provider):
        mock_provider.set_tickers([
            TickerListing("XAPL", "Apple Extra"),
            TickerListing("APPX", "Appx Corp"),
        ])
        directory = TickerDirectory(mock_provider, MemoryStore())
        assert [t.symbol for t in directory.search("app")] == ["APPX", "XAPL"]

    def test_blank_query(self, mock_provider):
        directory = TickerDirectory(mock_provider, MemoryStore())
        assert directory.search("   ") == []
        assert mock_provider.ticker_calls == 0

    def test_limit(self, mock_provider):
        directory = TickerDirectory(mock_provider, MemoryStore())
        assert len(directory.search("a", limit=2)) == 2
