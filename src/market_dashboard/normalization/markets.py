"""Merge per-region listings and free-form trend groups into the six market buckets."""
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from market_dashboard.schemas import (MARKET_BUCKETS, MarketIndex,
                                      MarketTrend, ProcessedMarketData)

logger = logging.getLogger(__name__)

# Checked in order; only these three buckets ever receive trend results.
TREND_PATTERNS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("us", ("americas", "america")),
    ("europe", ("europe", "emea")),
    ("asia", ("asia", "pacific")),
)


def classify_trend(title: Any) -> str | None:
    """Bucket for a trend title by case-insensitive substring match, or None."""
    if not isinstance(title, str):
        return None
    lowered = title.lower()
    for bucket, needles in TREND_PATTERNS:
        if any(needle in lowered for needle in needles):
            return bucket
    return None


def _parse_entries(entries: Iterable[Any], where: str) -> list[MarketIndex]:
    """Validate raw entries, skipping non-objects and entries without an identifier.

    Malformed optional fields resolve to their defaults on `MarketIndex`.
    """
    parsed: list[MarketIndex] = []
    for entry in entries:
        if isinstance(entry, MarketIndex):
            parsed.append(entry)
            continue
        if not isinstance(entry, dict):
            logger.debug("Skipping non-object %s entry: %r", where, entry)
            continue
        try:
            parsed.append(MarketIndex.model_validate(entry))
        except ValidationError:
            logger.debug("Skipping malformed %s entry: %r", where, entry)
    return parsed


def dedupe_by_identifier(items: Iterable[MarketIndex]) -> list[MarketIndex]:
    """Keep the first entry per `stock` identifier, preserving order."""
    seen: set[str] = set()
    unique: list[MarketIndex] = []
    for item in items:
        if item.stock in seen:
            continue
        seen.add(item.stock)
        unique.append(item)
    return unique


def process_markets_data(raw: Any) -> ProcessedMarketData:
    """Build ProcessedMarketData from a raw upstream markets document.

    Direct `markets.<bucket>` listings come first, then results of
    `market_trends` whose title names a region; each bucket is then
    deduplicated by identifier. Never raises on malformed input.
    """
    buckets: dict[str, list[MarketIndex]] = {bucket: [] for bucket in MARKET_BUCKETS}
    document = raw if isinstance(raw, dict) else {}

    markets = document.get("markets")
    if isinstance(markets, dict):
        logger.debug("Found markets data: %s", list(markets))
        for bucket in MARKET_BUCKETS:
            entries = markets.get(bucket)
            if isinstance(entries, list):
                listings = _parse_entries(entries, bucket)
                buckets[bucket].extend(listings)
                logger.debug("Added %d %s markets", len(listings), bucket)

    trends = document.get("market_trends")
    if isinstance(trends, list):
        logger.debug("Processing %d market trends", len(trends))
        for trend in trends:
            if not isinstance(trend, dict):
                continue
            results = trend.get("results")
            bucket = classify_trend(trend.get("title"))
            if bucket is None or not isinstance(results, list):
                logger.debug("Dropping trend %r", trend.get("title"))
                continue
            merged = MarketTrend(title=trend["title"], results=_parse_entries(results, bucket))
            logger.debug("Merging %d results of %r into %s", len(merged.results), merged.title, bucket)
            buckets[bucket].extend(merged.results)

    for bucket, items in buckets.items():
        unique = dedupe_by_identifier(items)
        if len(unique) != len(items):
            logger.debug("Removed %d duplicates from %s", len(items) - len(unique), bucket)
        buckets[bucket] = unique

    processed = ProcessedMarketData(**buckets)
    logger.info("Processed markets data. Total items: %d", processed.total_items())
    return processed
