"""
CONTRACT 1: Market Data

Raw exchange data normalized into standard records.
Produced by the data ingestion layer, consumed by the indicator engine.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class Timeframe(str, Enum):
    M1 = "1m"
    M5 = "5m"
    M15 = "15m"
    M30 = "30m"
    H1 = "1h"
    H4 = "4h"
    D1 = "1d"
    W1 = "1w"


# =============================================================================
# CANDLES
# =============================================================================


class Candle(BaseModel):
    """Single OHLCV candlestick. Sequences are ordered oldest to newest."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    open: float = Field(..., gt=0)
    high: float = Field(..., gt=0)
    low: float = Field(..., gt=0)
    close: float = Field(..., gt=0)
    volume: float = Field(..., ge=0)


# =============================================================================
# TICKERS
# =============================================================================


class Ticker(BaseModel):
    """24h rolling statistics for one market."""

    symbol: str = Field(..., description="Unified BASE/QUOTE symbol, e.g. BTC/USDT")
    last: float
    percentage: Optional[float] = Field(default=None, description="24h change %")
    base_volume: Optional[float] = None


class TopPerformer(BaseModel):
    """Entry of the top performers listing."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    price: float
    change_24h: float = Field(..., alias="change24h")
    volume_24h: float = Field(default=0.0, alias="volume24h")


# =============================================================================
# MARKET-WIDE SENTIMENT INDEX
# =============================================================================


class FearGreedIndex(BaseModel):
    """Crypto Fear & Greed index reading."""

    value: int = Field(..., ge=0, le=100)
    classification: str
    timestamp: str

    class Config:
        json_schema_extra = {
            "example": {
                "value": 72,
                "classification": "Greed",
                "timestamp": "1760832000",
            }
        }
