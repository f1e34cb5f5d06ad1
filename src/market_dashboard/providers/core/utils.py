"""Shared numeric helpers for upstream documents."""
import math
import re
from typing import Any

DECIMALS = 2

# Everything except digits, sign, decimal point and exponent marker.
_NON_NUMERIC = re.compile(r"[^0-9eE+\-.]")


def round2(x: float | None) -> float | None:
    """Round a value to 2 decimal places; preserve None."""
    if x is None:
        return None
    return round(float(x), DECIMALS)


def parse_number(value: Any) -> float | None:
    """Best-effort float from a number or a display string like "$1,234.50" or "-0.4%".

    Returns None when nothing numeric can be read; never raises.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        cleaned = _NON_NUMERIC.sub("", value.replace("−", "-"))
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def normalize_symbol(symbol: str) -> str:
    """Normalize a ticker query such as " aapl:nasdaq " to "AAPL:NASDAQ"."""
    return symbol.strip().upper()
