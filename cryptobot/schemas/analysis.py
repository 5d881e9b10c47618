"""
CONTRACT 3: Signals, Sentiment and Analysis

Input: list[Candle] + IndicatorSnapshot
Output: AnalysisResult

Signals are typed by a tagged enumeration carrying their score weight,
so sentiment aggregation is a direct lookup.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from cryptobot.schemas.indicators import IndicatorSnapshot


# =============================================================================
# ENUMS
# =============================================================================


class SignalType(str, Enum):
    STRONG_BUY = "STRONG BUY"
    BUY = "BUY"
    SELL = "SELL"
    STRONG_SELL = "STRONG SELL"

    @property
    def weight(self) -> int:
        """Contribution of one signal of this type to the sentiment score."""
        return SIGNAL_WEIGHTS[self]


SIGNAL_WEIGHTS = {
    SignalType.STRONG_BUY: 3,
    SignalType.BUY: 1,
    SignalType.SELL: -1,
    SignalType.STRONG_SELL: -3,
}


class SentimentLabel(str, Enum):
    VERY_BULLISH = "VERY BULLISH"
    BULLISH = "BULLISH"
    NEUTRAL = "NEUTRAL"
    BEARISH = "BEARISH"
    VERY_BEARISH = "VERY BEARISH"


# =============================================================================
# SIGNALS & SENTIMENT
# =============================================================================


class Signal(BaseModel):
    """Discrete trading signal emitted by one strategy."""

    model_config = ConfigDict(frozen=True)

    type: SignalType
    description: str
    strategy: Optional[str] = Field(default=None, description="Strategy that emitted it")


class SentimentResult(BaseModel):
    """Aggregate score of a signal list and its qualitative label."""

    model_config = ConfigDict(frozen=True)

    sentiment: SentimentLabel
    score: int


# =============================================================================
# OUTPUT: AnalysisResult (Complete Response)
# =============================================================================


class AnalysisResult(BaseModel):
    """
    Complete analysis for one symbol.
    Returned by: Analysis Service
    Consumed by: API callers
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "symbol": "BTC/USDT",
                "currentPrice": 67420.5,
                "volume24h": 812.4,
                "indicators": {"rsi": 31.2},
                "signals": [
                    {"type": "BUY", "description": "RSI oversold: 31.20", "strategy": "rsi"}
                ],
                "sentiment": {"sentiment": "NEUTRAL", "score": 1},
                "support": 66980.0,
                "resistance": 67610.0,
                "timestamp": "2026-10-19T10:30:00Z",
            }
        },
    )

    symbol: str
    current_price: float = Field(..., alias="currentPrice")
    volume_24h: float = Field(..., alias="volume24h")
    indicators: IndicatorSnapshot
    signals: list[Signal]
    sentiment: SentimentResult
    support: Optional[float] = None
    resistance: Optional[float] = None
    timestamp: datetime


# =============================================================================
# REQUESTS
# =============================================================================


class SymbolRequest(BaseModel):
    """Request body naming a single market symbol."""

    symbol: str = Field(..., min_length=1, description="Unified symbol, e.g. BTC/USDT")


class WatchlistResponse(BaseModel):
    """Watchlist state after a mutation."""

    success: bool = True
    watchlist: list[str]
