"""Abstract base class for end-of-day price providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from eoddash.models.price_bar import PriceBar
from eoddash.models.ticker_listing import TickerListing


class BasePriceProvider(ABC):
    """Abstract base for all price providers.

    Subclasses must implement ``get_eod``. ``get_tickers`` defaults to
    ``NotImplementedError``; providers that support it advertise
    ``tickers`` via ``capabilities()``.
    """

    @abstractmethod
    def get_eod(self, symbol: str, limit: int = 100) -> list[PriceBar]:
        """Fetch the most recent daily bars for a symbol.

        Args:
            symbol: Ticker symbol.
            limit: Maximum number of bars.

        Returns:
            List of PriceBar ordered by date descending (newest first).
            May be empty when the source has no data for the symbol.
        """
        ...

    def get_tickers(self, limit: int = 1000) -> list[TickerListing]:
        """Fetch the symbol/name lookup table."""
        raise NotImplementedError

    def capabilities(self) -> set[str]:
        """Return the set of supported features: ``eod``, ``tickers``."""
        return {"eod"}

    def close(self) -> None:
        """Release network resources. No-op by default."""

    def __enter__(self) -> BasePriceProvider:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
