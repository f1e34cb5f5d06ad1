"""API routers.

Includes routes for:
- /api/markets - Regional market indexes (with fallback data)
- /api/stock - One stock quote with its chart series
"""
from market_dashboard.routers.markets import router as markets_router
from market_dashboard.routers.stocks import router as stocks_router

__all__ = ["markets_router", "stocks_router"]
