"""Dashboard data models."""

from eoddash.models.chart_point import ChartPoint
from eoddash.models.price_bar import PriceBar
from eoddash.models.ticker_listing import TickerListing
from eoddash.models.trend import TrendDirection, TrendResult

__all__ = [
    "PriceBar",
    "TrendDirection",
    "TrendResult",
    "ChartPoint",
    "TickerListing",
]
