"""Dashboard configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class ProviderType(Enum):
    """Supported price data backends."""

    MARKETSTACK = "marketstack"
    MOCK = "mock"


DEFAULT_BASE_URL = "http://api.marketstack.com/v1"
STORE_BACKENDS = ("json", "memory", "none")


@dataclass
class DashboardConfig:
    """Configuration for Dashboard.

    Attributes:
        provider: Price data backend.
        api_key: Marketstack access key.
        base_url: Marketstack API root.
        default_symbol: Symbol loaded when none is given.
        limit: Number of most recent daily bars to request.
        window_size: Moving average window, in bars.
        store_backend: Ticker list store: "json", "memory", or "none".
        store_dir: Directory for the JSON store.
        store_ttl_seconds: TTL for in-memory store entries.
        timeout: HTTP timeout in seconds.
    """

    provider: ProviderType = ProviderType.MARKETSTACK
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    default_symbol: str = "AAPL"
    limit: int = 100
    window_size: int = 7
    store_backend: str = "json"
    store_dir: str = "data/cache"
    store_ttl_seconds: int | None = 86400
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be >= 1, got {self.limit}")
        if self.window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {self.window_size}")
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"Unknown store backend: {self.store_backend!r}. Valid: {', '.join(STORE_BACKENDS)}"
            )

    @classmethod
    def from_env(cls) -> DashboardConfig:
        """Build a config from environment variables.

        Environment variables:
            EODDASH_PROVIDER: "marketstack" or "mock" (default: "marketstack").
            MARKETSTACK_API_KEY: Marketstack access key.
            MARKETSTACK_BASE_URL: API root (default: http://api.marketstack.com/v1).
            EODDASH_SYMBOL: Default symbol (default: "AAPL").
            EODDASH_LIMIT: Bars per request (default: 100).
            EODDASH_WINDOW: Moving average window (default: 7).
            EODDASH_STORE: Store backend (default: "json").
            EODDASH_STORE_DIR: Store directory (default: "data/cache").
            EODDASH_STORE_TTL: Memory store TTL in seconds (default: 86400).
        """
        return cls(
            provider=ProviderType(os.getenv("EODDASH_PROVIDER", "marketstack").strip().lower()),
            api_key=os.getenv("MARKETSTACK_API_KEY"),
            base_url=os.getenv("MARKETSTACK_BASE_URL", DEFAULT_BASE_URL),
            default_symbol=os.getenv("EODDASH_SYMBOL", "AAPL").upper(),
            limit=int(os.getenv("EODDASH_LIMIT", "100")),
            window_size=int(os.getenv("EODDASH_WINDOW", "7")),
            store_backend=os.getenv("EODDASH_STORE", "json"),
            store_dir=os.getenv("EODDASH_STORE_DIR", "data/cache"),
            store_ttl_seconds=int(os.getenv("EODDASH_STORE_TTL", "86400")),
        )
