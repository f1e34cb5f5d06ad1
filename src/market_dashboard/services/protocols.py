"""Protocols for the raw-document sources services depend on."""
from typing import Any, Protocol


class MarketsSource(Protocol):
    """Anything that can fetch a raw markets document for a region."""

    async def fetch_markets(self, region: str) -> dict[str, Any]:
        ...


class StockSource(Protocol):
    """Anything that can fetch a raw stock document for a symbol and range."""

    async def fetch_stock(self, symbol: str, time_range: str) -> dict[str, Any]:
        ...
