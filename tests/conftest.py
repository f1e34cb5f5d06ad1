"""Shared fixtures: deterministic randomness, canned upstream documents, API client."""
import random
from typing import Any

import pytest
from fastapi.testclient import TestClient

from market_dashboard.main import app
from tests.fakes import FIXED_NOW, FakeSerpApi, ZeroRandom


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def zero_rng() -> random.Random:
    return ZeroRandom()


@pytest.fixture
def raw_markets() -> dict[str, Any]:
    return {
        "markets": {
            "us": [
                {"stock": ".DJI:INDEXDJX", "name": "Dow Jones", "price": 38000.5,
                 "price_movement": {"percentage": 0.4, "value": 150.2, "movement": "Up"}},
                {"stock": ".INX:INDEXSP", "name": "S&P 500", "price": 5000.1},
            ],
            "europe": [{"stock": "DAX:INDEXDB", "name": "DAX", "price": 17000.0}],
            "crypto": [{"stock": "BTC-USD", "name": "Bitcoin", "price": 64000.0}],
        },
        "market_trends": [
            {
                "title": "Americas",
                "results": [
                    {"stock": ".INX:INDEXSP", "name": "S&P 500 (trend)", "price": 5001.0},
                    {"stock": ".IXIC:INDEXNASDAQ", "name": "Nasdaq", "price": 16000.0},
                ],
            },
            {"title": "Asia Pacific", "results": [{"stock": "N225:INDEXNIKKEI", "price": 39000.0}]},
        ],
    }


@pytest.fixture
def raw_stock() -> dict[str, Any]:
    return {
        "search_metadata": {"status": "Success"},
        "title": "Apple Inc",
        "stock": "AAPL",
        "exchange": "NASDAQ",
        "summary": {
            "currency": "USD",
            "extracted_price": 190.5,
            "market": {
                "trading": "Closed",
                "price_movement": {"value": 2.5, "percentage": 1.33, "movement": "Up"},
            },
        },
        "graph": {
            "timespan": "1D",
            "previous_close": 188.0,
            "graph": [
                {"timestamp": FIXED_NOW - 120, "price": 189.0},
                {"timestamp": FIXED_NOW - 60, "price": 190.0},
                {"timestamp": FIXED_NOW, "price": 190.5},
            ],
        },
    }


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def override_upstream():
    """Swap the container's search API provider for a FakeSerpApi."""
    container = app.state.container

    def _override(fake: FakeSerpApi) -> FakeSerpApi:
        container.serpapi_provider.override(fake)
        return fake

    yield _override
    container.serpapi_provider.reset_override()
