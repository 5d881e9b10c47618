"""
Crypto Signal Bot Schema Contracts

This module defines all JSON contracts between system components.
"""

from cryptobot.schemas.market import (
    Timeframe,
    Candle,
    Ticker,
    TopPerformer,
    FearGreedIndex,
)
from cryptobot.schemas.indicators import (
    IndicatorSnapshot,
    MACDData,
    BollingerBandsData,
    StochasticData,
)
from cryptobot.schemas.analysis import (
    SignalType,
    SentimentLabel,
    Signal,
    SentimentResult,
    AnalysisResult,
    SymbolRequest,
    WatchlistResponse,
)

__all__ = [
    # Market
    "Timeframe",
    "Candle",
    "Ticker",
    "TopPerformer",
    "FearGreedIndex",
    # Indicators
    "IndicatorSnapshot",
    "MACDData",
    "BollingerBandsData",
    "StochasticData",
    # Analysis
    "SignalType",
    "SentimentLabel",
    "Signal",
    "SentimentResult",
    "AnalysisResult",
    "SymbolRequest",
    "WatchlistResponse",
]
