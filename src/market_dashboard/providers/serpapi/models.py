"""Request parameter models for the Google Finance engines of the search API."""
from pydantic import BaseModel

# Ranges the google_finance engine accepts as `window`; others use its default.
SUPPORTED_WINDOWS = frozenset({"1D", "5D", "1M", "6M", "YTD", "1Y", "5Y", "MAX"})


class SerpApiMarketsParams(BaseModel):
    """Params for engine=google_finance_markets. Merge with 'api_key' at call site."""

    engine: str = "google_finance_markets"
    trend: str = "indexes"
    hl: str = "en"
    gl: str = "us"


class SerpApiQuoteParams(BaseModel):
    """Params for engine=google_finance (one ticker). Merge with 'api_key' at call site."""

    engine: str = "google_finance"
    q: str
    hl: str = "en"
    window: str | None = None

    @classmethod
    def for_range(cls, symbol: str, time_range: str) -> "SerpApiQuoteParams":
        window = time_range if time_range in SUPPORTED_WINDOWS else None
        return cls(q=symbol, window=window)
