"""Main module for the market dashboard backend."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from market_dashboard.config import get_settings
from market_dashboard.container import Container, init_container
from market_dashboard.routers import markets_router, stocks_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Close the upstream HTTP client on shutdown."""
    yield
    container: Container = fastapi_app.state.container
    try:
        await container.serpapi_provider().close()
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Error closing search API provider: %s", exc)


def create_app(container: Container | None = None) -> FastAPI:
    """Build the FastAPI app around a (wired) container."""
    fastapi_app = FastAPI(
        title="Market Dashboard",
        description="Market indexes and stock quotes normalized for the dashboard UI",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.container = container or init_container()
    fastapi_app.include_router(markets_router)
    fastapi_app.include_router(stocks_router)

    @fastapi_app.get("/")
    def health():
        """Return health check status."""
        return {"status": "ok"}

    return fastapi_app


app = create_app()


def run():
    """Run the server (uvicorn). Use for the `start` script."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("market_dashboard.main:app", host=settings.host, port=settings.port)
