"""Markets service: regional market buckets with fallback data on upstream trouble."""
import asyncio
import logging
from collections.abc import Callable

import httpx

from market_dashboard.normalization import process_markets_data
from market_dashboard.providers.core import (ConfigurationError,
                                             ProviderErrorMapper,
                                             UpstreamError)
from market_dashboard.schemas import ProcessedMarketData
from market_dashboard.services.protocols import MarketsSource

logger = logging.getLogger(__name__)

# Upstream failures answered with fallback data; anything else propagates.
_FALLBACK_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.HTTPError,
    asyncio.TimeoutError,
    TimeoutError,
    ValueError,
    UpstreamError,
)


class MarketsService:
    """Fetches and aggregates market listings; never leaves the dashboard empty.

    Upstream errors, an upstream `error` field, or an aggregate with zero
    items all produce the injected fallback dataset instead. Only missing
    configuration is surfaced as an HTTP error.
    """

    def __init__(
        self,
        provider: MarketsSource,
        fallback: Callable[[str], ProcessedMarketData],
        error_mapper: ProviderErrorMapper | None = None,
    ) -> None:
        self._provider = provider
        self._fallback = fallback
        self._error_mapper = error_mapper or ProviderErrorMapper("Markets", "Search API")

    async def get_markets(self, region: str) -> ProcessedMarketData:
        """Get the six market buckets for a region tab."""
        try:
            raw = await self._provider.fetch_markets(region)
        except ConfigurationError as e:
            self._error_mapper.raise_http(e)
        except _FALLBACK_EXCEPTIONS as e:
            logger.warning("Markets request for %s failed, returning fallback data: %s", region, e)
            return self._fallback(region)

        if raw.get("error"):
            logger.warning("Search API returned an error for %s: %s", region, raw["error"])
            return self._fallback(region)

        processed = process_markets_data(raw)
        if processed.total_items() == 0:
            logger.warning("No market data processed for %s, returning fallback data", region)
            return self._fallback(region)

        logger.info("Processed %d market items for %s", processed.total_items(), region)
        return processed
