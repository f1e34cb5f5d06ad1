"""Domain concept for mapping provider exceptions to HTTP responses."""
import asyncio
from dataclasses import dataclass

import httpx
from fastapi import HTTPException

from market_dashboard.providers.core.exceptions import (ConfigurationError,
                                                        MissingSummaryError,
                                                        UpstreamError)


@dataclass(frozen=True)
class ProviderErrorMapper:
    """Maps provider/pipeline exceptions to HTTP (status_code, detail).

    Inject this into services to centralize error-to-HTTP mapping per resource
    with appropriate resource and API names.
    """

    resource_name: str = "Resource"
    api_name: str = "API"
    not_found_detail: str | None = None

    def _not_found(self, symbol: str | None) -> str:
        if self.not_found_detail:
            return self.not_found_detail
        if symbol is None:
            return f"{self.resource_name} not found"
        return f"{self.resource_name} '{symbol}' not found"

    def to_http(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> tuple[int, str]:
        """Map an exception to (status_code, detail) for HTTP responses.

        Args:
            exc: The exception raised by the provider or service.
            symbol: Optional symbol to include in detail (e.g. "AAPL:NASDAQ").

        Returns:
            (status_code, detail) suitable for HTTPException(status_code=..., detail=...).
        """
        if isinstance(exc, MissingSummaryError):
            return (404, self._not_found(symbol))
        if isinstance(exc, ConfigurationError):
            return (500, str(exc) or "API configuration error")
        if isinstance(exc, UpstreamError):
            return (502, f"Failed to fetch {self.resource_name.lower()} data from {self.api_name}")
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            if status == 404:
                return (404, self._not_found(symbol))
            if status >= 500:
                return (502, f"{self.api_name} error")
            return (status, f"{self.api_name} returned {status} error")
        if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
            return (504, "Request timeout - please try again")
        if isinstance(exc, httpx.RequestError):
            return (502, f"Could not reach {self.api_name}")
        return (500, "Internal server error")

    def raise_http(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> None:
        """Map exception to HTTP and raise HTTPException. Never returns."""
        status_code, detail = self.to_http(exc, symbol=symbol)
        raise HTTPException(status_code=status_code, detail=detail) from exc
