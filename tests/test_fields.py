"""Field extraction: fallback order, defaults, and derived change figures."""
import pytest

from market_dashboard.normalization.fields import (build_summary,
                                                   derive_change,
                                                   extract_change,
                                                   extract_currency,
                                                   extract_current_price,
                                                   extract_market_status,
                                                   extract_previous_close)


def test_stringified_price_is_parsed_when_no_numeric_field():
    assert extract_current_price({"price": "123.45"}) == 123.45


def test_display_string_with_currency_and_commas():
    assert extract_current_price({"price": "$1,234.50"}) == 1234.5


def test_numeric_field_wins_over_nested_and_string():
    summary = {"extracted_price": 10.0, "price": {"current": 20.0}}
    assert extract_current_price(summary) == 10.0
    assert extract_current_price({"price": {"current": 20.0}}) == 20.0


def test_zero_values_fall_through_to_next_attempt():
    summary = {"extracted_price": 0, "price": {"current": 42.0}}
    assert extract_current_price(summary) == 42.0


def test_market_block_used_last():
    assert extract_current_price({"market": {"price": "$99.10"}}) == 99.1


@pytest.mark.parametrize("summary", [{}, None, "garbage", {"price": "n/a"}, {"price": True}])
def test_defaults_for_missing_or_malformed(summary):
    assert extract_current_price(summary) == 0.0
    assert extract_previous_close(summary) == 0.0
    assert extract_change(summary) == 0.0
    assert extract_currency(summary) == "$"
    assert extract_market_status(summary) == "Unknown"


def test_status_prefers_market_trading_then_status():
    assert extract_market_status({"market": {"status": "Open", "trading": "Closed"}}) == "Closed"
    assert extract_market_status({"market": {"status": "Open"}}) == "Open"


def test_down_movement_reads_as_negative_change():
    summary = {
        "extracted_price": 95.0,
        "market": {"price_movement": {"value": 5.0, "percentage": 5.0, "movement": "Down"}},
    }
    result = build_summary(summary)
    assert result.price.change == -5.0
    assert result.price.change_percent == -5.0
    assert result.market.price_movement.movement == "Down"


def test_previous_close_derived_from_movement():
    summary = {
        "extracted_price": 95.0,
        "market": {"price_movement": {"value": 5.0, "movement": "Down"}},
    }
    assert extract_previous_close(summary) == 100.0


def test_derived_change_when_upstream_reports_zero():
    summary = {"price": {"current": 110, "previous_close": 100, "change": 0}}
    result = build_summary(summary)
    assert result.price.change == 10.0
    assert result.price.change_percent == 10.0
    assert result.market.price_movement.movement == "Up"


def test_explicit_change_is_never_overwritten():
    summary = {"price": {"current": 110, "previous_close": 100, "change": -3}}
    result = build_summary(summary)
    assert result.price.change == -3.0
    assert result.price.change_percent == -3.0
    assert result.market.price_movement.movement == "Down"


def test_derive_change_needs_positive_prices():
    assert derive_change(0.0, 100.0, 0.0, 0.0) == (0.0, 0.0)
    assert derive_change(110.0, 0.0, 0.0, 0.0) == (0.0, 0.0)


def test_summary_is_fully_populated_from_empty_input():
    result = build_summary({})
    assert result.currency == "$"
    assert result.price.current == 0.0
    assert result.price.previous_close == 0.0
    assert result.market.status == "Unknown"
    assert result.market.price_movement.movement == "Up"
