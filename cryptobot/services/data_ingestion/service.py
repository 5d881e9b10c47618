"""
Data Ingestion Service Implementation

Facade over the configured exchange source.
Primary: Binance public REST
Offline: Mock data (settings.use_mock_data)
"""

import logging
from typing import Optional

from cryptobot.core.config import settings
from cryptobot.schemas.market import Candle, Timeframe, TopPerformer
from cryptobot.services.base import DataFetchError
from cryptobot.services.data_ingestion.interface import (
    CandleRequest,
    CandleSource,
    DataIngestionServiceInterface,
)
from cryptobot.services.data_ingestion.binance_adapter import BinanceAdapter
from cryptobot.services.data_ingestion.mock_data import MockCandleSource

logger = logging.getLogger(__name__)


class DataIngestionService(DataIngestionServiceInterface):
    """
    Data Ingestion Service.

    Normalizes every fetch failure into DataFetchError.
    """

    def __init__(self, source: Optional[CandleSource] = None):
        if source is None:
            source = MockCandleSource() if settings.use_mock_data else BinanceAdapter()
        self._source = source

    @property
    def name(self) -> str:
        return "DataIngestionService"

    @property
    def source(self) -> CandleSource:
        return self._source

    async def execute(self, input_data: CandleRequest) -> list[Candle]:
        """Fetch a candle window."""
        return await self.get_candles(input_data.symbol, input_data.timeframe, input_data.limit)

    async def get_candles(
        self,
        symbol: str,
        timeframe: Timeframe = Timeframe.H1,
        limit: int = 500,
    ) -> list[Candle]:
        """
        Fetch candles for a symbol, oldest first.

        Raises:
            DataFetchError: if the source fails for any reason
        """
        try:
            return await self._source.fetch_ohlcv(symbol, timeframe, limit)
        except DataFetchError:
            raise
        except Exception as e:
            raise DataFetchError(
                self.name, f"Error fetching OHLCV for {symbol}: {e}"
            ) from e

    async def get_top_performers(self, limit: Optional[int] = None) -> list[TopPerformer]:
        """
        Best 24h movers among USDT pairs, highest change first.

        Returns an empty list if tickers cannot be fetched.
        """
        limit = limit or settings.top_performers_limit

        try:
            tickers = await self._source.fetch_tickers()
        except Exception as e:
            logger.error(f"Error fetching top performers: {e}")
            return []

        performers = [
            TopPerformer(
                symbol=symbol,
                price=ticker.last,
                change_24h=ticker.percentage,
                volume_24h=ticker.base_volume or 0,
            )
            for symbol, ticker in tickers.items()
            if "/USDT" in symbol and ticker.percentage is not None
        ]
        performers.sort(key=lambda p: p.change_24h, reverse=True)

        return performers[:limit]

    async def health_check(self) -> bool:
        """Check that the source answers a small candle request."""
        try:
            candles = await self._source.fetch_ohlcv("BTC/USDT", Timeframe.H1, 1)
            return len(candles) > 0
        except Exception as e:
            logger.warning(f"Data source health check failed: {e}")
            return False

    async def close(self) -> None:
        await self._source.close()


# Singleton instance
_service_instance: Optional[DataIngestionService] = None


def get_data_ingestion_service() -> DataIngestionService:
    """Get or create data ingestion service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = DataIngestionService()
    return _service_instance
