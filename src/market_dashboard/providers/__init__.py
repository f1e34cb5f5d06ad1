"""Upstream data providers.

- SerpApiProvider: Google Finance markets and quotes via the SerpApi search API

Providers return raw upstream documents; services hand them to
market_dashboard.normalization.

Example:
    async with SerpApiProvider(api_key="...") as provider:
        raw = await provider.fetch_stock("AAPL:NASDAQ", "1D")
"""
from market_dashboard.providers.core import ProviderErrorMapper
from market_dashboard.providers.serpapi import SerpApiProvider

__all__ = ["ProviderErrorMapper", "SerpApiProvider"]
