"""eoddash: end-of-day stock trends dashboard.

Fetches daily bars from Marketstack and derives trend, moving average
and volatility for display.

Quick start::

    from eoddash import create_dashboard_from_env
    dash = create_dashboard_from_env()
    result = dash.load("AAPL")
    print(result.trend, result.volatility)
"""

from __future__ import annotations

from dotenv import load_dotenv

from eoddash.analytics import (
    compute_moving_average,
    compute_price_range,
    compute_trend,
    compute_volatility,
)
from eoddash.chart import align_moving_average, points_to_frame
from eoddash.config import DashboardConfig, ProviderType
from eoddash.dashboard import Dashboard, DashboardResult, analyze
from eoddash.errors import DashboardError, ErrorCode
from eoddash.models.chart_point import ChartPoint
from eoddash.models.price_bar import PriceBar
from eoddash.models.ticker_listing import TickerListing
from eoddash.models.trend import TrendDirection, TrendResult
from eoddash.report import format_trend, render_report
from eoddash.store import JsonFileStore, KeyValueStore, MemoryStore, NullStore, create_store
from eoddash.tickers import TickerDirectory

__version__ = "0.1.0"

__all__ = [
    # Orchestration
    "Dashboard",
    "DashboardResult",
    "analyze",
    "create_dashboard_from_env",
    # Analytics
    "compute_trend",
    "compute_moving_average",
    "compute_volatility",
    "compute_price_range",
    "align_moving_average",
    "points_to_frame",
    # Config
    "DashboardConfig",
    "ProviderType",
    # Errors
    "DashboardError",
    "ErrorCode",
    # Models
    "PriceBar",
    "TrendDirection",
    "TrendResult",
    "ChartPoint",
    "TickerListing",
    # Storage and lookup
    "KeyValueStore",
    "NullStore",
    "MemoryStore",
    "JsonFileStore",
    "create_store",
    "TickerDirectory",
    # Report
    "format_trend",
    "render_report",
]


def create_dashboard_from_env() -> Dashboard:
    """Zero-config factory: loads ``.env`` then reads DashboardConfig.from_env()."""
    load_dotenv()
    return Dashboard(DashboardConfig.from_env())
