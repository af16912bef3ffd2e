"""Shared fixtures for eoddash tests."""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from eoddash.models.price_bar import PriceBar
from eoddash.providers.mock import MockProvider


def make_series(closes: list[float], newest: date = date(2024, 1, 31)) -> list[PriceBar]:
    """Newest-first series of calendar-day bars with the given closes."""
    bars = []
    for i, close in enumerate(closes):
        bars.append(PriceBar(
            date=newest - timedelta(days=i),
            open=close,
            high=close + 1.0,
            low=close - 1.0,
            close=close,
            volume=1000.0 + i,
            symbol="AAPL",
        ))
    return bars


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()


@pytest.fixture
def ten_bar_series() -> list[PriceBar]:
    """Closes 10, 9, ..., 1 (newest first)."""
    return make_series([float(c) for c in range(10, 0, -1)])


@pytest.fixture
def single_bar_series() -> list[PriceBar]:
    return make_series([123.45])
