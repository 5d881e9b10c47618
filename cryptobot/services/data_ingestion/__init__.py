"""
Data Ingestion Service

CONTRACT:
    Input:  CandleRequest
    Output: list[Candle]

RESPONSIBILITIES:
    - Fetch OHLCV candles and 24h tickers from Binance
    - Normalize exchange payloads to standard schemas
    - Build the top performers listing
    - Serve mock data when running offline
"""

from cryptobot.services.data_ingestion.interface import (
    CandleRequest,
    CandleSource,
    DataIngestionServiceInterface,
)
from cryptobot.services.data_ingestion.binance_adapter import BinanceAdapter
from cryptobot.services.data_ingestion.mock_data import MockCandleSource
from cryptobot.services.data_ingestion.service import (
    DataIngestionService,
    get_data_ingestion_service,
)

__all__ = [
    "CandleRequest",
    "CandleSource",
    "DataIngestionServiceInterface",
    "BinanceAdapter",
    "MockCandleSource",
    "DataIngestionService",
    "get_data_ingestion_service",
]
