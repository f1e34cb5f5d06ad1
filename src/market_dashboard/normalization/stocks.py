"""Assemble one normalized StockData record from a raw upstream stock document."""
import logging
import random
from typing import Any

from market_dashboard.normalization.dates import format_date_for_range
from market_dashboard.normalization.fields import build_summary
from market_dashboard.normalization.series import synthesize_series
from market_dashboard.providers.core.exceptions import MissingSummaryError
from market_dashboard.providers.core.utils import parse_number
from market_dashboard.schemas import GraphPoint, StockData, StockGraph

logger = logging.getLogger(__name__)

# 9999-12-31T23:59:59Z; anything larger is not a Unix-seconds timestamp.
MAX_TIMESTAMP = 253402300799


def real_graph_points(raw_graph: Any, time_range: str) -> list[GraphPoint]:
    """Points from an upstream graph block; points without a timestamp or price are skipped."""
    if not isinstance(raw_graph, dict):
        return []
    series = raw_graph.get("graph")
    if not isinstance(series, list):
        return []
    points: list[GraphPoint] = []
    for point in series:
        if not isinstance(point, dict):
            continue
        timestamp = parse_number(point.get("timestamp"))
        price = parse_number(point.get("price"))
        if timestamp is None or not 0 <= timestamp <= MAX_TIMESTAMP:
            continue
        if not price or price <= 0:
            continue
        points.append(
            GraphPoint(
                timestamp=int(timestamp),
                price=price,
                date=format_date_for_range(int(timestamp), time_range),
            )
        )
    return points


def _first_text(*values: Any) -> str | None:
    for value in values:
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _split_symbol(symbol: str) -> tuple[str, str]:
    ticker, _, exchange = symbol.partition(":")
    return ticker, exchange


def assemble_stock_data(
    raw: Any,
    time_range: str,
    symbol: str = "",
    *,
    rng: random.Random | None = None,
    now: float | None = None,
) -> StockData:
    """Normalize a raw stock document for the requested range.

    Args:
        raw: Upstream response document.
        time_range: Requested range token; becomes the graph's timespan label.
        symbol: Requested symbol ("AAPL:NASDAQ"), used for missing title fields.
        rng: Random source forwarded to the series synthesizer.
        now: Window anchor (Unix seconds) forwarded to the series synthesizer.

    Raises:
        MissingSummaryError: If the document has no summary section.
    """
    document = raw if isinstance(raw, dict) else {}
    raw_summary = document.get("summary")
    if not isinstance(raw_summary, dict):
        raise MissingSummaryError(symbol or None)

    summary = build_summary(raw_summary)
    raw_graph = document.get("graph")

    points = real_graph_points(raw_graph, time_range)
    if not points:
        logger.info("No graph data for %s, generating %s sample series", symbol or "stock", time_range)
        points = synthesize_series(
            summary.price.current,
            summary.price.previous_close,
            time_range,
            rng=rng,
            now=now,
        )

    upstream_close = parse_number(raw_graph.get("previous_close")) if isinstance(raw_graph, dict) else None
    if upstream_close is None or upstream_close <= 0:
        upstream_close = summary.price.previous_close
    graph = StockGraph(
        timespan=time_range,
        previous_close=upstream_close,
        graph=points,
    )

    ticker, exchange = _split_symbol(symbol)
    return StockData(
        title=_first_text(document.get("title"), raw_summary.get("title")) or f"{symbol} Stock".strip(),
        stock=_first_text(document.get("stock"), raw_summary.get("stock")) or ticker,
        exchange=_first_text(document.get("exchange"), raw_summary.get("exchange"), exchange) or "UNKNOWN",
        summary=summary,
        graph=graph,
    )
