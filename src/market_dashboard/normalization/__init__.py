"""Normalization pipeline: raw upstream documents in, canonical schemas out.

Every function here is a synchronous transform of its inputs. Only the series
synthesizer reads randomness and wall-clock time, both injectable.
"""
from market_dashboard.normalization.dates import format_date_for_range
from market_dashboard.normalization.fields import build_summary
from market_dashboard.normalization.markets import (classify_trend,
                                                    dedupe_by_identifier,
                                                    process_markets_data)
from market_dashboard.normalization.series import (resolution_for_range,
                                                   synthesize_series)
from market_dashboard.normalization.stocks import assemble_stock_data

__all__ = [
    "assemble_stock_data",
    "build_summary",
    "classify_trend",
    "dedupe_by_identifier",
    "format_date_for_range",
    "process_markets_data",
    "resolution_for_range",
    "synthesize_series",
]
