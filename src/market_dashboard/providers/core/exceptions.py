"""Typed failures raised by providers and the normalization pipeline."""


class MarketDataError(Exception):
    """Base class for market data failures the HTTP layer knows how to map."""


class MissingSummaryError(MarketDataError):
    """The upstream stock document has no summary section."""

    def __init__(self, symbol: str | None = None) -> None:
        self.symbol = symbol
        detail = "Missing summary data in upstream response"
        if symbol:
            detail = f"{detail} for '{symbol}'"
        super().__init__(detail)


class UpstreamError(MarketDataError):
    """The upstream API answered, but reported a failed search."""

    def __init__(self, message: str, status: str | None = None) -> None:
        self.status = status
        super().__init__(message)


class ConfigurationError(MarketDataError):
    """Required configuration (e.g. the API key) is missing."""
