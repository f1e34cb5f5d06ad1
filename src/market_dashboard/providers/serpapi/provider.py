"""Google Finance data via the SerpApi search endpoint."""
import logging
from typing import Any

import httpx

from market_dashboard.providers.core.exceptions import ConfigurationError
from market_dashboard.providers.core.utils import normalize_symbol
from market_dashboard.providers.serpapi.models import (SerpApiMarketsParams,
                                                       SerpApiQuoteParams)
from market_dashboard.regions import country_code_for_region, trend_for_region

logger = logging.getLogger(__name__)


class SerpApiProvider:
    """Fetches raw markets and stock documents from the search API.

    Returns the upstream JSON untouched (apart from requiring an object at the
    top level); normalization happens in market_dashboard.normalization.
    """

    DEFAULT_URL = "https://serpapi.com/search.json"

    def __init__(
        self,
        api_key: str | None = None,
        url: str = DEFAULT_URL,
        *,
        stock_timeout: float = 10.0,
        markets_timeout: float = 30.0,
        user_agent: str = "Mozilla/5.0 (compatible; MarketBot/1.0)",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: Search API key; requests fail with ConfigurationError when empty.
            url: Search endpoint URL.
            stock_timeout: Timeout in seconds for single-ticker requests.
            markets_timeout: Timeout in seconds for the markets overview request.
            user_agent: User-Agent header sent upstream.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
        """
        self._api_key = api_key or ""
        self._url = url
        self._stock_timeout = stock_timeout
        self._markets_timeout = markets_timeout
        self._client = httpx.AsyncClient(
            headers={"Accept": "application/json", "User-Agent": user_agent},
            transport=transport,
        )

    def _require_key(self) -> str:
        if not self._api_key:
            logger.error("SERP_API_KEY environment variable is not set")
            raise ConfigurationError("Missing API key configuration")
        return self._api_key

    async def _get(self, params: dict[str, Any], timeout: float) -> dict[str, Any]:
        logger.debug("Search API request: %s", params)
        response = await self._client.get(
            self._url,
            params=params | {"api_key": self._require_key()},
            timeout=timeout,
        )
        if response.is_error:
            logger.warning(
                "Search API request failed: %s %s",
                response.status_code,
                response.reason_phrase,
            )
        response.raise_for_status()
        data = response.json()
        return data if isinstance(data, dict) else {}

    async def fetch_markets(self, region: str) -> dict[str, Any]:
        """Fetch the raw markets overview document for a dashboard region."""
        params = SerpApiMarketsParams(
            trend=trend_for_region(region),
            gl=country_code_for_region(region),
        ).model_dump()
        logger.info("Fetching markets data for region %s (trend=%s)", region, params["trend"])
        return await self._get(params, self._markets_timeout)

    async def fetch_stock(self, symbol: str, time_range: str) -> dict[str, Any]:
        """Fetch the raw quote document for a symbol such as "AAPL:NASDAQ"."""
        sym = normalize_symbol(symbol)
        params = SerpApiQuoteParams.for_range(sym, time_range).model_dump(exclude_none=True)
        logger.info("Fetching stock data for %s (%s)", sym, time_range)
        return await self._get(params, self._stock_timeout)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "SerpApiProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()
