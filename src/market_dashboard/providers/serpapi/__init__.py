"""Search API (Google Finance engines) provider."""
from market_dashboard.providers.serpapi.provider import SerpApiProvider

__all__ = ["SerpApiProvider"]
