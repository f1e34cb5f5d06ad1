"""Pydantic schemas for API and runtime use. Nothing here is persisted."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from market_dashboard.providers.core.utils import parse_number

MARKET_BUCKETS = ("us", "europe", "asia", "currencies", "crypto", "futures")


def _text_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class PriceMovement(BaseModel):
    """Price change of an index or quote; value and direction are optional upstream."""

    percentage: float = 0.0
    value: float | None = None
    movement: str | None = None  # "Up" | "Down"

    @field_validator("percentage", mode="before")
    @classmethod
    def _coerce_percentage(cls, value: Any) -> float:
        return parse_number(value) or 0.0

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> float | None:
        return parse_number(value)

    @field_validator("movement", mode="before")
    @classmethod
    def _coerce_direction(cls, value: Any) -> str | None:
        return _text_or_none(value)


class MarketIndex(BaseModel):
    """One market listing (index, currency pair, coin, future).

    `stock` is the exchange-qualified identifier (e.g. ".DJI:INDEXDJX") and the
    deduplication key within a bucket. Unknown upstream fields are kept.
    """

    model_config = ConfigDict(extra="allow")

    stock: str = Field(min_length=1)
    name: str | None = None
    link: str | None = None
    serpapi_link: str | None = None
    price: float = Field(default=0.0, ge=0)
    currency: str | None = None
    price_movement: PriceMovement = Field(default_factory=PriceMovement)

    @field_validator("stock", mode="before")
    @classmethod
    def _coerce_stock(cls, value: Any) -> Any:
        # numeric tickers arrive unquoted; anything else fails min_length
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value.strip() if isinstance(value, str) else ""

    @field_validator("name", "link", "serpapi_link", "currency", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Any) -> float:
        number = parse_number(value)
        return number if number and number > 0 else 0.0

    @field_validator("price_movement", mode="before")
    @classmethod
    def _coerce_movement(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, PriceMovement)) else PriceMovement()


class MarketTrend(BaseModel):
    """Free-form regional grouping from the upstream `market_trends` list."""

    title: str = ""
    results: list[MarketIndex] = Field(default_factory=list)


class ProcessedMarketData(BaseModel):
    """The six fixed market buckets, each duplicate-free by identifier."""

    us: list[MarketIndex] = Field(default_factory=list)
    europe: list[MarketIndex] = Field(default_factory=list)
    asia: list[MarketIndex] = Field(default_factory=list)
    currencies: list[MarketIndex] = Field(default_factory=list)
    crypto: list[MarketIndex] = Field(default_factory=list)
    futures: list[MarketIndex] = Field(default_factory=list)

    def counts(self) -> dict[str, int]:
        """Number of entries per bucket."""
        return {bucket: len(getattr(self, bucket)) for bucket in MARKET_BUCKETS}

    def total_items(self) -> int:
        """Sum of all bucket lengths; zero tells the caller to use fallback data."""
        return sum(self.counts().values())


class StockPrice(BaseModel):
    """Canonical price block of a stock summary."""

    current: float = 0.0
    previous_close: float = 0.0
    change: float = 0.0
    change_percent: float = 0.0


class StockMarket(BaseModel):
    """Market status block with the resolved movement."""

    status: str = "Unknown"
    price_movement: PriceMovement | None = None


class StockSummary(BaseModel):
    currency: str = "$"
    price: StockPrice = Field(default_factory=StockPrice)
    market: StockMarket = Field(default_factory=StockMarket)


class GraphPoint(BaseModel):
    timestamp: int  # Unix seconds
    price: float
    date: str  # display label, resolution depends on the requested range


class StockGraph(BaseModel):
    """Price series for one request; real or synthesized, indistinguishable here."""

    timespan: str
    previous_close: float
    graph: list[GraphPoint] = Field(default_factory=list)


class StockData(BaseModel):
    """Normalized stock record returned by /api/stock."""

    title: str
    stock: str
    exchange: str
    summary: StockSummary
    graph: StockGraph


__all__ = [
    "MARKET_BUCKETS",
    "GraphPoint",
    "MarketIndex",
    "MarketTrend",
    "PriceMovement",
    "ProcessedMarketData",
    "StockData",
    "StockGraph",
    "StockMarket",
    "StockPrice",
    "StockSummary",
]
