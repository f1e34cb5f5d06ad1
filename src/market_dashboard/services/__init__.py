"""Service layer: upstream fetch, normalization, and exception-to-HTTP mapping."""
from market_dashboard.services.markets_service import MarketsService
from market_dashboard.services.stock_service import StockService

__all__ = ["MarketsService", "StockService"]
