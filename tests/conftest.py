"""
Shared fixtures: synthetic candle windows and an in-memory candle source.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from cryptobot.schemas.market import Candle, Ticker, Timeframe
from cryptobot.services.base import DataFetchError
from cryptobot.services.data_ingestion import CandleSource, DataIngestionService
from cryptobot.services.analysis import AnalysisService
from cryptobot.services.watchlist import WatchlistStore

START = datetime(2026, 1, 1, tzinfo=timezone.utc)


def build_candles(
    closes: list[float],
    highs: Optional[list[float]] = None,
    lows: Optional[list[float]] = None,
    volumes: Optional[list[float]] = None,
) -> list[Candle]:
    """Hourly candles from parallel price lists; high/low default to close +/- 1."""
    candles = []
    for i, close in enumerate(closes):
        candles.append(
            Candle(
                timestamp=START + timedelta(hours=i),
                open=closes[i - 1] if i else close,
                high=highs[i] if highs else close + 1,
                low=lows[i] if lows else close - 1,
                close=close,
                volume=volumes[i] if volumes else 1000.0,
            )
        )
    return candles


def wave_closes(n: int, base: float = 100.0) -> list[float]:
    """Trending sine wave, enough movement for every indicator to be non-trivial."""
    return [base + 10 * math.sin(i / 10) + i * 0.05 for i in range(n)]


class FakeCandleSource(CandleSource):
    """In-memory source. Unknown symbols get an empty window."""

    name = "Fake"

    def __init__(
        self,
        candles: Optional[dict[str, list[Candle]]] = None,
        tickers: Optional[dict[str, Ticker]] = None,
        errors: Optional[dict[str, Exception]] = None,
    ):
        self.candles = candles or {}
        self.tickers = tickers or {}
        self.errors = errors or {}
        self.calls: list[str] = []

    async def fetch_ohlcv(self, symbol: str, timeframe: Timeframe, limit: int) -> list[Candle]:
        self.calls.append(symbol)
        if symbol in self.errors:
            raise self.errors[symbol]
        return self.candles.get(symbol, [])

    async def fetch_tickers(self) -> dict[str, Ticker]:
        if "tickers" in self.errors:
            raise self.errors["tickers"]
        return self.tickers


@pytest.fixture
def candle_builder():
    return build_candles


@pytest.fixture
def wave_candles() -> list[Candle]:
    """300 candles, comfortably above the 200 minimum."""
    return build_candles(wave_closes(300))


@pytest.fixture
def fake_source(wave_candles) -> FakeCandleSource:
    return FakeCandleSource(
        candles={
            "BTC/USDT": wave_candles,
            "SHORT/USDT": wave_candles[:150],
        },
        errors={"DOWN/USDT": DataFetchError("Fake", "exchange unreachable")},
    )


@pytest.fixture
def analysis_service(fake_source) -> AnalysisService:
    return AnalysisService(
        data_service=DataIngestionService(source=fake_source),
        timeframe=Timeframe.H1,
        candle_limit=500,
        min_candles=200,
        lookback=50,
        concurrency=1,
    )


@pytest.fixture
def watchlist_store() -> WatchlistStore:
    return WatchlistStore()
