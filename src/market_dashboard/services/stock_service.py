"""Stock service: one normalized quote with chart series per request."""
import asyncio
import logging

import httpx

from market_dashboard.normalization import assemble_stock_data
from market_dashboard.providers.core import (MarketDataError,
                                             ProviderErrorMapper,
                                             UpstreamError)
from market_dashboard.schemas import StockData
from market_dashboard.services.protocols import StockSource

logger = logging.getLogger(__name__)

# Exceptions we map to HTTP; all others propagate (e.g. bugs).
_PROVIDER_EXCEPTIONS: tuple[type[Exception], ...] = (
    MarketDataError,
    httpx.HTTPError,
    asyncio.TimeoutError,
    TimeoutError,
    ValueError,
)

STOCK_NOT_FOUND = "Stock data not found. Please check the symbol format."


class StockService:
    """Fetches a raw stock document and assembles StockData; maps failures to HTTP."""

    def __init__(
        self,
        provider: StockSource,
        error_mapper: ProviderErrorMapper | None = None,
    ) -> None:
        self._provider = provider
        self._error_mapper = error_mapper or ProviderErrorMapper(
            "Stock", "Search API", not_found_detail=STOCK_NOT_FOUND
        )

    async def get_stock(self, symbol: str, time_range: str) -> StockData:
        """Get normalized stock data. Raises HTTPException on provider errors."""
        try:
            raw = await self._provider.fetch_stock(symbol, time_range)
            metadata = raw.get("search_metadata")
            if isinstance(metadata, dict) and metadata.get("status") != "Success":
                raise UpstreamError(
                    f"Search for '{symbol}' did not succeed", status=metadata.get("status")
                )
            return assemble_stock_data(raw, time_range, symbol)
        except _PROVIDER_EXCEPTIONS as e:
            logger.warning("Stock request for %s (%s) failed: %s", symbol, time_range, e)
            self._error_mapper.raise_http(e, symbol=symbol)
