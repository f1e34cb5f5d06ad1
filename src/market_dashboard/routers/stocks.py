"""Single stock quote route with chart series."""
from dependency_injector.wiring import inject
from fastapi import APIRouter, Query

from market_dashboard.container import StockServiceDep
from market_dashboard.schemas import StockData

router = APIRouter(prefix="/api/stock", tags=["stocks"])


@router.get("", response_model=StockData)
@inject
async def get_stock(
    service: StockServiceDep,
    symbol: str = Query(min_length=1, description='Ticker with exchange, e.g. "AAPL:NASDAQ"'),
    time_range: str = Query(default="1D", alias="timeRange", description="1D, 5D, 1M, 3M, 6M, YTD, 1Y, 5Y or MAX"),
) -> StockData:
    """Get the normalized quote and price series for a symbol.

    When the upstream has no graph for the range, a synthetic series ending at
    the current price is returned instead.
    """
    return await service.get_stock(symbol, time_range)
