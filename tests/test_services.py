"""Services: fallback policy for markets, HTTP error mapping for stocks."""
import httpx
import pytest
from fastapi import HTTPException

from market_dashboard.fallback import FALLBACK_MARKET_DATA, fallback_market_data
from market_dashboard.providers.core import ConfigurationError
from market_dashboard.services import MarketsService, StockService
from market_dashboard.services.stock_service import STOCK_NOT_FOUND
from tests.fakes import FakeSerpApi


def _status_error(status: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://serpapi.com/search.json")
    response = httpx.Response(status, request=request)
    return httpx.HTTPStatusError("boom", request=request, response=response)


@pytest.mark.asyncio
async def test_markets_processed_from_upstream(raw_markets):
    service = MarketsService(FakeSerpApi(markets=raw_markets), fallback_market_data)
    result = await service.get_markets("us")
    assert result.total_items() == 6


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fake",
    [
        FakeSerpApi(markets={}),
        FakeSerpApi(markets={"error": "Invalid API key"}),
        FakeSerpApi(error=httpx.ConnectError("down")),
        FakeSerpApi(error=httpx.ReadTimeout("slow")),
        FakeSerpApi(error=ValueError("bad json")),
    ],
)
async def test_markets_fallback_on_failure_or_empty(fake):
    service = MarketsService(fake, fallback_market_data)
    result = await service.get_markets("us")
    assert result == FALLBACK_MARKET_DATA


@pytest.mark.asyncio
async def test_markets_fallback_is_injected():
    canned = FALLBACK_MARKET_DATA.model_copy(update={"us": []})
    service = MarketsService(FakeSerpApi(markets={}), lambda region: canned)
    assert await service.get_markets("asia") is canned


@pytest.mark.asyncio
async def test_markets_missing_key_is_surfaced():
    service = MarketsService(FakeSerpApi(error=ConfigurationError("Missing API key configuration")),
                             fallback_market_data)
    with pytest.raises(HTTPException) as exc_info:
        await service.get_markets("us")
    assert exc_info.value.status_code == 500


def test_regional_fallback_trims_us_bucket():
    assert len(fallback_market_data("us").us) == 3
    assert len(fallback_market_data("europe").us) == 2
    assert len(fallback_market_data("asia").us) == 2
    assert fallback_market_data("crypto").total_items() == FALLBACK_MARKET_DATA.total_items()


def test_fallback_copies_are_independent():
    data = fallback_market_data("us")
    data.us.clear()
    assert len(FALLBACK_MARKET_DATA.us) == 3


@pytest.mark.asyncio
async def test_stock_assembled(raw_stock):
    fake = FakeSerpApi(stock=raw_stock)
    data = await StockService(fake).get_stock("AAPL:NASDAQ", "1D")
    assert data.stock == "AAPL"
    assert fake.calls == [("stock", "AAPL:NASDAQ", "1D")]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("fake", "status"),
    [
        (FakeSerpApi(stock={"search_metadata": {"status": "Success"}}), 404),
        (FakeSerpApi(stock={"search_metadata": {"status": "Error"}, "summary": {}}), 502),
        (FakeSerpApi(error=ConfigurationError("Missing API key configuration")), 500),
        (FakeSerpApi(error=_status_error(404)), 404),
        (FakeSerpApi(error=_status_error(401)), 401),
        (FakeSerpApi(error=_status_error(503)), 502),
        (FakeSerpApi(error=httpx.ReadTimeout("slow")), 504),
        (FakeSerpApi(error=httpx.ConnectError("down")), 502),
    ],
)
async def test_stock_errors_mapped_to_http(fake, status):
    with pytest.raises(HTTPException) as exc_info:
        await StockService(fake).get_stock("AAPL:NASDAQ", "1D")
    assert exc_info.value.status_code == status


@pytest.mark.asyncio
async def test_missing_summary_message():
    fake = FakeSerpApi(stock={"search_metadata": {"status": "Success"}})
    with pytest.raises(HTTPException) as exc_info:
        await StockService(fake).get_stock("NOPE", "1D")
    assert exc_info.value.detail == STOCK_NOT_FOUND
