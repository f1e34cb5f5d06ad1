"""Region -> upstream query parameters for the markets endpoint."""

DEFAULT_REGION = "us"

_COUNTRY_CODES: dict[str, str] = {
    "us": "us",
    "americas": "us",
    "europe": "gb",
    "asia": "jp",
    "currencies": "us",
    "crypto": "us",
    "futures": "us",
}

_TRENDS: dict[str, str] = {
    "us": "indexes",
    "americas": "indexes",
    "europe": "indexes",
    "asia": "indexes",
    "currencies": "most-active",
    "crypto": "crypto",
    "futures": "most-active",
}


def country_code_for_region(region: str) -> str:
    """`gl` country code for a dashboard region tab; "us" when unknown."""
    return _COUNTRY_CODES.get(region.lower(), "us")


def trend_for_region(region: str) -> str:
    """`trend` parameter for a dashboard region tab; "indexes" when unknown."""
    return _TRENDS.get(region.lower(), "indexes")
