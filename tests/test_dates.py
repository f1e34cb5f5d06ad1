"""Chart labels per range resolution."""
from datetime import timedelta, timezone

import pytest

from market_dashboard.normalization.dates import format_date_for_range

# Friday 2024-01-05 09:30:00 UTC
TS = 1_704_447_000


@pytest.mark.parametrize(
    ("time_range", "expected"),
    [
        ("1D", "09:30 AM"),
        ("5D", "Fri 09:30 AM"),
        ("1M", "Jan 5"),
        ("3M", "Jan 5"),
        ("6M", "Jan 5"),
        ("YTD", "Jan 5"),
        ("1Y", "Jan 5"),
        ("5Y", "Jan 2024"),
        ("MAX", "Jan 2024"),
        ("3Y", "1/5/2024"),
        ("bogus", "1/5/2024"),
    ],
)
def test_label_resolution_by_range(time_range, expected):
    assert format_date_for_range(TS, time_range) == expected


def test_same_input_same_label():
    assert format_date_for_range(TS, "1D") == format_date_for_range(TS, "1D")


def test_timezone_can_be_supplied():
    est = timezone(timedelta(hours=-5))
    assert format_date_for_range(TS, "1D", tz=est) == "04:30 AM"
