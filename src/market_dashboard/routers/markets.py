"""Market overview routes: six regional buckets for the dashboard tabs."""
from dependency_injector.wiring import inject
from fastapi import APIRouter, Query

from market_dashboard.container import MarketsServiceDep
from market_dashboard.regions import DEFAULT_REGION
from market_dashboard.schemas import ProcessedMarketData

router = APIRouter(prefix="/api/markets", tags=["markets"])


@router.get("", response_model=ProcessedMarketData)
@inject
async def get_markets(
    service: MarketsServiceDep,
    region: str = Query(default=DEFAULT_REGION, description="Region tab (us, europe, asia, ...)"),
) -> ProcessedMarketData:
    """Get market indexes grouped into us/europe/asia/currencies/crypto/futures.

    Falls back to static data when the upstream fails or returns nothing.
    """
    return await service.get_markets(region)
