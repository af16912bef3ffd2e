"""Plain-text trends report for a DashboardResult."""

from __future__ import annotations

from eoddash.analytics import round2
from eoddash.dashboard import DashboardResult
from eoddash.models.trend import TrendDirection, TrendResult

NOT_AVAILABLE = "N/A"


def format_trend(trend: TrendResult | None) -> str:
    if trend is None:
        return NOT_AVAILABLE
    if trend.direction is TrendDirection.UP:
        return f"Upward trend: +{trend.percentage_change:.2f}%"
    return f"Downward trend: {trend.percentage_change:.2f}%"


def format_money(value: float | None) -> str:
    return NOT_AVAILABLE if value is None else f"${round2(value):.2f}"


def format_percent(value: float | None) -> str:
    return NOT_AVAILABLE if value is None else f"{round2(value):.2f}%"


def render_report(result: DashboardResult) -> str:
    """Render the trends panel; an error result renders its message only."""
    if result.error is not None:
        return f"Error: {result.error}"
    if not result.series:
        return f"No data for {result.symbol}."

    lines = [
        f"Trends Analysis for {result.symbol} (last {len(result.series)} days)",
        f"Price Trend: {format_trend(result.trend)}",
        f"Highest Price: {format_money(result.high)}",
        f"Lowest Price: {format_money(result.low)}",
        f"{result.window_size}-Day Moving Average (Latest): "
        f"{format_money(result.latest_moving_average)}",
        f"Volatility (Daily Returns): {format_percent(result.volatility)}",
    ]
    return "\n".join(lines)
