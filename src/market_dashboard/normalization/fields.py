"""Canonical price fields from an upstream stock summary.

The upstream summary moves fields around between API versions: the current
price may be a number (`extracted_price`), a nested object (`price.current`),
or a display string (`price: "$123.45"`). Each canonical field is therefore an
ordered tuple of accessor attempts over the raw dict; the first truthy value
wins and a fixed default is used when none of them produce anything.
"""
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from market_dashboard.providers.core.utils import parse_number, round2
from market_dashboard.schemas import (PriceMovement, StockMarket, StockPrice,
                                      StockSummary)

Accessor = Callable[[Mapping[str, Any]], Any]

DEFAULT_CURRENCY = "$"
DEFAULT_STATUS = "Unknown"


def _dig(document: Mapping[str, Any], keys: Sequence[str]) -> Any:
    node: Any = document
    for key in keys:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def numeric(*keys: str) -> Accessor:
    """Attempt that accepts only a real number at the given path."""

    def attempt(document: Mapping[str, Any]) -> float | None:
        value = _dig(document, keys)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return parse_number(value)

    return attempt


def parsed(*keys: str) -> Accessor:
    """Attempt that parses a stringified number (e.g. "$1,234.50") at the given path."""

    def attempt(document: Mapping[str, Any]) -> float | None:
        value = _dig(document, keys)
        return parse_number(value) if isinstance(value, str) else None

    return attempt


def text(*keys: str) -> Accessor:
    """Attempt that accepts a non-blank string at the given path."""

    def attempt(document: Mapping[str, Any]) -> str | None:
        value = _dig(document, keys)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    return attempt


def movement(*keys: str, field: str) -> Accessor:
    """Attempt reading `field` of a price-movement block, negated for "Down" moves.

    The upstream reports absolute values with a separate direction tag.
    """

    def attempt(document: Mapping[str, Any]) -> float | None:
        block = _dig(document, keys)
        if not isinstance(block, Mapping):
            return None
        value = parse_number(block.get(field))
        if value and value > 0 and str(block.get("movement", "")).lower() == "down":
            return -value
        return value

    return attempt


def first_truthy(
    document: Any, attempts: Sequence[Accessor], default: Any
) -> Any:
    """Return the first truthy result of `attempts` over `document`, else `default`."""
    if not isinstance(document, Mapping):
        return default
    for attempt in attempts:
        value = attempt(document)
        if value:
            return value
    return default


CURRENT_PRICE: tuple[Accessor, ...] = (
    numeric("extracted_price"),
    numeric("price", "current"),
    parsed("price"),
    parsed("price", "current"),
    numeric("market", "extracted_price"),
    parsed("market", "price"),
)

PREVIOUS_CLOSE: tuple[Accessor, ...] = (
    numeric("previous_close"),
    numeric("extracted_previous_close"),
    numeric("price", "previous_close"),
    parsed("previous_close"),
    parsed("price", "previous_close"),
)

MOVEMENT_VALUE: tuple[Accessor, ...] = (
    movement("market", "price_movement", field="value"),
    movement("price_movement", field="value"),
)

CHANGE: tuple[Accessor, ...] = (
    numeric("change"),
    numeric("price", "change"),
    parsed("change"),
    parsed("price", "change"),
    *MOVEMENT_VALUE,
)

CHANGE_PERCENT: tuple[Accessor, ...] = (
    numeric("change_percent"),
    numeric("price", "change_percent"),
    parsed("change_percent"),
    parsed("price", "change_percent"),
    movement("market", "price_movement", field="percentage"),
    movement("price_movement", field="percentage"),
)

CURRENCY: tuple[Accessor, ...] = (
    text("currency"),
    text("price", "currency"),
    text("market", "currency"),
)

MARKET_STATUS: tuple[Accessor, ...] = (
    text("market", "trading"),
    text("market", "status"),
    text("status"),
)


def extract_current_price(summary: Any) -> float:
    return float(first_truthy(summary, CURRENT_PRICE, 0.0))


def extract_previous_close(summary: Any) -> float:
    """Previous close; falls back to current price minus the reported movement."""
    previous = float(first_truthy(summary, PREVIOUS_CLOSE, 0.0))
    if previous:
        return previous
    current = extract_current_price(summary)
    moved = first_truthy(summary, MOVEMENT_VALUE, 0.0)
    if current > 0 and moved and current - moved > 0:
        return round2(current - moved)
    return 0.0


def extract_change(summary: Any) -> float:
    return float(first_truthy(summary, CHANGE, 0.0))


def extract_change_percent(summary: Any) -> float:
    return float(first_truthy(summary, CHANGE_PERCENT, 0.0))


def extract_currency(summary: Any) -> str:
    return first_truthy(summary, CURRENCY, DEFAULT_CURRENCY)


def extract_market_status(summary: Any) -> str:
    return first_truthy(summary, MARKET_STATUS, DEFAULT_STATUS)


def derive_change(
    current: float, previous_close: float, change: float, change_percent: float
) -> tuple[float, float]:
    """Fill in change figures the upstream left at zero.

    A non-zero change from upstream is kept as is; only a missing percentage
    is then derived from it.
    """
    if previous_close <= 0:
        return change, change_percent
    if not change and not change_percent and current > 0:
        change = current - previous_close
        change_percent = change / previous_close * 100
    elif change and not change_percent:
        change_percent = change / previous_close * 100
    return change, change_percent


def build_summary(summary: Any) -> StockSummary:
    """Resolve every canonical summary field, deriving change figures where needed."""
    current = extract_current_price(summary)
    previous_close = extract_previous_close(summary)
    change, change_percent = derive_change(
        current,
        previous_close,
        extract_change(summary),
        extract_change_percent(summary),
    )
    change = round2(change)
    change_percent = round2(change_percent)
    return StockSummary(
        currency=extract_currency(summary),
        price=StockPrice(
            current=current,
            previous_close=previous_close,
            change=change,
            change_percent=change_percent,
        ),
        market=StockMarket(
            status=extract_market_status(summary),
            price_movement=PriceMovement(
                value=change,
                percentage=change_percent,
                movement="Up" if change >= 0 else "Down",
            ),
        ),
    )
