"""Display labels for chart points, with resolution chosen by the requested range."""
from datetime import datetime, timezone, tzinfo

INTRADAY_RANGES = frozenset({"1D"})
SHORT_RANGES = frozenset({"5D"})
MONTH_RANGES = frozenset({"1M", "3M", "6M", "YTD", "1Y"})
MULTI_YEAR_RANGES = frozenset({"5Y", "MAX"})


def format_date_for_range(
    timestamp: int | float, time_range: str, tz: tzinfo = timezone.utc
) -> str:
    """Format a Unix timestamp (seconds) as a label for the given range.

    1D -> "09:30 AM", 5D -> "Mon 09:30 AM", month-scale -> "Jan 5",
    5Y/MAX -> "Jan 2024", anything else -> "1/5/2024".
    The result depends only on the arguments.
    """
    moment = datetime.fromtimestamp(timestamp, tz=tz)
    if time_range in INTRADAY_RANGES:
        return moment.strftime("%I:%M %p")
    if time_range in SHORT_RANGES:
        return moment.strftime("%a %I:%M %p")
    if time_range in MONTH_RANGES:
        return f"{moment:%b} {moment.day}"
    if time_range in MULTI_YEAR_RANGES:
        return moment.strftime("%b %Y")
    return f"{moment.month}/{moment.day}/{moment.year}"
