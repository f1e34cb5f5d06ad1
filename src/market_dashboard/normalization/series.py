"""Synthetic price series for when the upstream returns no usable graph.

The series is only there so the chart has something continuous to draw: it
walks linearly from the previous close to the current price, with random
jitter plus a four-cycle sine wobble, and always ends on the current quote.
"""
import logging
import math
import random
import time

from market_dashboard.normalization.dates import format_date_for_range
from market_dashboard.providers.core.utils import round2
from market_dashboard.schemas import GraphPoint

logger = logging.getLogger(__name__)

HOUR = 60 * 60
DAY = 24 * HOUR

PLACEHOLDER_PRICE = 100.0
DEFAULT_RESOLUTION = (20, 6 * HOUR)

# range -> (number of points, seconds between points)
RESOLUTIONS: dict[str, tuple[int, int]] = {
    "1D": (24, HOUR),
    "5D": (30, 4 * HOUR),
    "1M": (30, DAY),
    "3M": (45, 2 * DAY),
    "6M": (52, int(3.5 * DAY)),
    "YTD": (52, 7 * DAY),
    "1Y": (52, 7 * DAY),
    "5Y": (60, 30 * DAY),
    "MAX": (100, 90 * DAY),
}


def resolution_for_range(time_range: str) -> tuple[int, int]:
    """(points, step seconds) for a range token; unknown tokens get the default."""
    return RESOLUTIONS.get(time_range, DEFAULT_RESOLUTION)


def synthesize_series(
    current_price: float,
    previous_close: float,
    time_range: str,
    *,
    rng: random.Random | None = None,
    now: float | None = None,
) -> list[GraphPoint]:
    """Generate a plausible series ending at `current_price`.

    Args:
        current_price: Latest quote; 100 is used when it is not positive.
        previous_close: Start of the trend; 99% of current when not positive.
        time_range: Range token (1D, 5D, 1M, ...) selecting density and span.
        rng: Random source; pass a seeded instance for repeatable output.
        now: Anchor of the window in Unix seconds; defaults to wall-clock time.

    Returns:
        Points ordered by timestamp, spanning roughly points x step before `now`.
    """
    rng = rng or random.Random()
    now = time.time() if now is None else now

    if current_price <= 0:
        current_price = PLACEHOLDER_PRICE
    if previous_close <= 0:
        previous_close = current_price * 0.99

    num_points, step = resolution_for_range(time_range)
    start = now - num_points * step
    total_change = current_price - previous_close
    volatility = max(abs(total_change) * 0.3, current_price * 0.02)
    floor = current_price * 0.1

    points: list[GraphPoint] = []
    for i in range(num_points):
        timestamp = int(start + i * step)
        progress = i / (num_points - 1)
        base_price = previous_close + total_change * progress

        random_factor = rng.uniform(-1.0, 1.0)
        wave = math.sin(i / num_points * math.pi * 4) * 0.3
        price = base_price + (random_factor + wave) * volatility

        # rounding must not undercut the floor
        points.append(
            GraphPoint(
                timestamp=timestamp,
                price=max(round2(max(price, floor)), floor),
                date=format_date_for_range(timestamp, time_range),
            )
        )

    points[-1].price = current_price

    logger.debug(
        "Generated %d sample points for %s (%.2f - %.2f)",
        len(points),
        time_range,
        min(p.price for p in points),
        max(p.price for p in points),
    )
    return points
