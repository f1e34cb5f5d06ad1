"""Static market data served when the upstream is unavailable or returns nothing."""
from market_dashboard.schemas import MarketIndex, ProcessedMarketData


def _index(
    stock: str,
    name: str,
    price: float,
    currency: str,
    percentage: float,
    value: float,
) -> MarketIndex:
    return MarketIndex(
        stock=stock,
        name=name,
        link="#",
        serpapi_link="#",
        price=price,
        currency=currency,
        price_movement={
            "percentage": percentage,
            "value": value,
            "movement": "Up" if value >= 0 else "Down",
        },
    )


FALLBACK_MARKET_DATA = ProcessedMarketData(
    us=[
        _index(".DJI:INDEXDJX", "Dow Jones Industrial Average", 34000.0, "USD", 0.5, 170.0),
        _index(".INX:INDEXSP", "S&P 500", 4200.0, "USD", 0.3, 12.5),
        _index(".IXIC:INDEXNASDAQ", "NASDAQ Composite", 13000.0, "USD", -0.2, -26.0),
    ],
    europe=[
        _index("UKX:INDEXFTSE", "FTSE 100", 7500.0, "GBP", 0.4, 30.0),
        _index("DAX:INDEXDB", "DAX", 15000.0, "EUR", -0.1, -15.0),
    ],
    asia=[
        _index("N225:INDEXNIKKEI", "Nikkei 225", 28000.0, "JPY", 0.8, 224.0),
        _index("SENSEX:INDEXBOM", "BSE Sensex", 60000.0, "INR", 0.6, 360.0),
    ],
    currencies=[
        _index("EURUSD:CUR", "EUR/USD", 1.08, "USD", 0.2, 0.002),
        _index("GBPUSD:CUR", "GBP/USD", 1.25, "USD", -0.1, -0.001),
    ],
    crypto=[
        _index("BTC-USD:CRYPTO", "Bitcoin", 45000.0, "USD", 2.5, 1125.0),
        _index("ETH-USD:CRYPTO", "Ethereum", 3000.0, "USD", 1.8, 54.0),
    ],
    futures=[
        _index("CL=F:NYMEX", "Crude Oil", 75.0, "USD", -1.2, -0.9),
        _index("GC=F:COMEX", "Gold", 1950.0, "USD", 0.3, 5.85),
    ],
)


def fallback_market_data(region: str) -> ProcessedMarketData:
    """Fallback buckets for a region; non-US regions carry only two US indexes."""
    data = FALLBACK_MARKET_DATA.model_copy(deep=True)
    if region in ("europe", "asia"):
        data.us = data.us[:2]
    return data
