"""
Data Ingestion Service Interface

Defines the contract for exchange data sources and the ingestion layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cryptobot.services.base import BaseService
from cryptobot.schemas.market import Candle, Ticker, Timeframe


@dataclass
class CandleRequest:
    """Request for a candle window."""

    symbol: str
    timeframe: Timeframe = Timeframe.H1
    limit: int = 500


class CandleSource(ABC):
    """
    Exchange data source.

    Candles come back oldest to newest. Failures raise DataFetchError.
    """

    name: str = "CandleSource"

    @abstractmethod
    async def fetch_ohlcv(self, symbol: str, timeframe: Timeframe, limit: int) -> list[Candle]:
        """Fetch the latest `limit` candles for a unified symbol (e.g. BTC/USDT)."""
        pass

    @abstractmethod
    async def fetch_tickers(self) -> dict[str, Ticker]:
        """Fetch 24h statistics keyed by unified symbol."""
        pass

    async def close(self) -> None:
        """Release network resources."""
        pass


class DataIngestionServiceInterface(BaseService[CandleRequest, list[Candle]]):
    """
    Data Ingestion Service Contract.

    INPUT: CandleRequest
        - symbol: Unified market symbol
        - timeframe: Candle interval
        - limit: Number of candles

    OUTPUT: list[Candle]
        - Ascending by timestamp
    """

    @property
    def name(self) -> str:
        return "DataIngestionService"

    @abstractmethod
    async def execute(self, input_data: CandleRequest) -> list[Candle]:
        """Fetch a candle window."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check connectivity to the exchange."""
        pass
