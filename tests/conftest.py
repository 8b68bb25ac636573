"""Pytest configuration and fixtures."""

import pytest

from feedcheck.exchanges.protocol import ExchangeInstrument
from feedcheck.feeds import FeedCatalog


@pytest.fixture
def feeds_url():
    """Test feed catalog URL."""
    return "https://feeds.example.test/feeds.json"


@pytest.fixture
def sample_feeds_response():
    """Sample feed catalog response data."""
    return [
        {"feed": {"category": 1, "name": "BTC/USD"}, "sources": []},
        {"feed": {"category": 1, "name": "ETH/USD"}, "sources": []},
        {"feed": {"category": 1, "name": "eth/usd"}, "sources": []},
        {"feed": {"category": 1, "name": "XRP/USD"}, "sources": []},
    ]


@pytest.fixture
def feed_catalog(feeds_url):
    """Feed catalog holding BTC and ETH."""
    return FeedCatalog(feeds_url, ("BTC", "ETH"))


@pytest.fixture
def sample_instruments():
    """Instruments with one delisted pair."""
    return [
        ExchangeInstrument("BTC", "USDT", True),
        ExchangeInstrument("ETH", "USD", True),
        ExchangeInstrument("XRP", "USDT", False),
    ]
