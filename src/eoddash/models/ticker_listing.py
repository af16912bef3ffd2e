"""Ticker lookup model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TickerListing:
    """One row of the symbol/name lookup table.

    Attributes:
        symbol: Ticker symbol.
        name: Company or fund name.
        exchange: Exchange MIC or acronym, if known.
    """

    symbol: str
    name: str
    exchange: str | None = None
