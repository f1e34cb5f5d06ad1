"""Core provider abstractions."""
from market_dashboard.providers.core.error_mapper import ProviderErrorMapper
from market_dashboard.providers.core.exceptions import (ConfigurationError,
                                                        MarketDataError,
                                                        MissingSummaryError,
                                                        UpstreamError)
from market_dashboard.providers.core.utils import parse_number, round2

__all__ = [
    "ConfigurationError",
    "MarketDataError",
    "MissingSummaryError",
    "ProviderErrorMapper",
    "UpstreamError",
    "parse_number",
    "round2",
]
