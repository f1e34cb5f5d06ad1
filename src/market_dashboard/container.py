"""DI container. Wire via init_container(); endpoints use Depends(Provide[Container.*])."""
from typing import Annotated

from dependency_injector import containers, providers
from dependency_injector.wiring import Provide
from fastapi import Depends

from market_dashboard.config import Settings, get_settings
from market_dashboard.fallback import fallback_market_data
from market_dashboard.providers import SerpApiProvider
from market_dashboard.services import MarketsService, StockService


def _create_serpapi_provider(settings: Settings) -> SerpApiProvider:
    return SerpApiProvider(
        api_key=settings.serp_api_key,
        url=settings.serp_api_url,
        stock_timeout=settings.stock_timeout_seconds,
        markets_timeout=settings.markets_timeout_seconds,
        user_agent=settings.user_agent,
    )


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        modules=[
            "market_dashboard.routers.markets",
            "market_dashboard.routers.stocks",
        ]
    )

    settings = providers.Singleton(get_settings)

    serpapi_provider = providers.Singleton(_create_serpapi_provider, settings)

    # Static table handed to the markets service; override to serve other canned data.
    fallback_data = providers.Object(fallback_market_data)

    markets_service = providers.Factory(
        MarketsService,
        provider=serpapi_provider,
        fallback=fallback_data,
    )
    stock_service = providers.Factory(StockService, provider=serpapi_provider)


# Type aliases for route injection (avoid repeating Annotated[...] in every route)
MarketsServiceDep = Annotated[MarketsService, Depends(Provide[Container.markets_service])]
StockServiceDep = Annotated[StockService, Depends(Provide[Container.stock_service])]


def init_container() -> Container:
    """Create container and wire to router modules."""
    container = Container()
    container.wire()
    return container
