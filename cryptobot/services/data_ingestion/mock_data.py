"""
Mock Data Generator

Generates realistic mock market data for offline development and testing.
Each symbol gets its own seeded random walk, so repeated calls agree.
"""

import random
import zlib
from datetime import datetime, timedelta, timezone
from typing import Optional

from cryptobot.schemas.market import Candle, Ticker, Timeframe
from cryptobot.services.data_ingestion.interface import CandleSource


# Base prices for common symbols
SYMBOL_BASE_PRICES = {
    "BTC/USDT": 67000.0,
    "ETH/USDT": 3500.0,
    "BNB/USDT": 580.0,
    "SOL/USDT": 150.0,
    "XRP/USDT": 0.55,
    "ADA/USDT": 0.45,
    "DOGE/USDT": 0.15,
    "AVAX/USDT": 35.0,
}

# Timeframe to milliseconds
TIMEFRAME_MS = {
    Timeframe.M1: 60_000,
    Timeframe.M5: 300_000,
    Timeframe.M15: 900_000,
    Timeframe.M30: 1_800_000,
    Timeframe.H1: 3_600_000,
    Timeframe.H4: 14_400_000,
    Timeframe.D1: 86_400_000,
    Timeframe.W1: 604_800_000,
}


def _rng(symbol: str) -> random.Random:
    return random.Random(zlib.crc32(symbol.encode("utf-8")))


def get_base_price(symbol: str) -> float:
    """Get base price for a symbol."""
    return SYMBOL_BASE_PRICES.get(symbol, 10.0 + _rng(symbol).random() * 100)


def generate_mock_ohlcv(
    symbol: str,
    timeframe: Timeframe = Timeframe.H1,
    limit: int = 500,
    end_time: Optional[datetime] = None,
) -> list[Candle]:
    """Generate mock OHLCV candles, oldest first."""
    if end_time is None:
        end_time = datetime.now(timezone.utc)

    rng = _rng(symbol)
    candles = []
    interval_ms = TIMEFRAME_MS[Timeframe(timeframe)]
    price = get_base_price(symbol)
    timestamp = end_time - timedelta(milliseconds=interval_ms * limit)

    for _ in range(limit):
        # Random walk with 2% volatility
        volatility = price * 0.02
        change = (rng.random() - 0.5) * volatility

        open_price = price
        close_price = max(open_price + change, price * 0.5)
        high_price = max(open_price, close_price) + rng.random() * volatility * 0.5
        low_price = min(open_price, close_price) - rng.random() * volatility * 0.5
        low_price = max(low_price, close_price * 0.5)

        candles.append(
            Candle(
                timestamp=timestamp,
                open=open_price,
                high=high_price,
                low=low_price,
                close=close_price,
                volume=rng.uniform(100, 5_000),
            )
        )

        price = close_price
        timestamp += timedelta(milliseconds=interval_ms)

    return candles


def generate_mock_tickers() -> dict[str, Ticker]:
    """Generate 24h statistics for the known symbols."""
    tickers = {}
    for symbol, base_price in SYMBOL_BASE_PRICES.items():
        rng = _rng(symbol)
        tickers[symbol] = Ticker(
            symbol=symbol,
            last=base_price,
            percentage=round((rng.random() - 0.5) * 20, 2),
            base_volume=round(rng.uniform(1_000, 1_000_000), 2),
        )
    return tickers


class MockCandleSource(CandleSource):
    """Offline candle source backed by the mock generator."""

    name = "Mock"

    async def fetch_ohlcv(
        self, symbol: str, timeframe: Timeframe = Timeframe.H1, limit: int = 500
    ) -> list[Candle]:
        return generate_mock_ohlcv(symbol, timeframe, limit)

    async def fetch_tickers(self) -> dict[str, Ticker]:
        return generate_mock_tickers()
