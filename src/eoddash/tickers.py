"""Ticker lookup table backing the symbol search widget."""

from __future__ import annotations

import logging
from dataclasses import asdict

from eoddash.models.ticker_listing import TickerListing
from eoddash.providers.base import BasePriceProvider
from eoddash.store import KeyValueStore

logger = logging.getLogger(__name__)


class TickerDirectory:
    """Symbol/name listings cached in a key-value store.

    The listing is fetched from the provider once and served from the
    store afterwards until ``refresh`` is called (or the store expires it).
    """

    def __init__(
        self,
        provider: BasePriceProvider,
        store: KeyValueStore,
        key: str = "tickers",
        limit: int = 1000,
    ) -> None:
        self.provider = provider
        self.store = store
        self.key = key
        self.limit = limit

    def listings(self) -> list[TickerListing]:
        """Return the lookup table: store -> provider -> store."""
        cached = self.store.get(self.key)
        if cached is not None:
            try:
                return [TickerListing(**row) for row in cached]
            except TypeError:
                logger.warning(f"Discarding ticker cache '{self.key}' with unexpected shape")
                self.store.delete(self.key)

        if "tickers" not in self.provider.capabilities():
            logger.warning("Provider has no ticker listing; search disabled")
            return []

        listings = self.provider.get_tickers(limit=self.limit)
        self.store.set(self.key, [asdict(t) for t in listings])
        logger.info(f"Cached {len(listings)} tickers under '{self.key}'")
        return listings

    def refresh(self) -> list[TickerListing]:
        self.store.delete(self.key)
        return self.listings()

    def search(self, query: str, limit: int = 10) -> list[TickerListing]:
        """Case-insensitive lookup for autocomplete.

        Symbols starting with the query come first, then listings whose
        name contains it. A blank query matches nothing.
        """
        needle = query.strip().upper()
        if not needle:
            return []

        by_symbol: list[TickerListing] = []
        by_name: list[TickerListing] = []
        for listing in self.listings():
            if listing.symbol.upper().startswith(needle):
                by_symbol.append(listing)
            elif needle in listing.name.upper():
                by_name.append(listing)
        return (by_symbol + by_name)[:limit]
