"""
Signal Generation

CONTRACT:
    Input:  list[Candle] + IndicatorSnapshot
    Output: list[Signal] -> SentimentResult

Pure, side-effect-free functions. No I/O.
"""

from cryptobot.services.signals.strategies import (
    rsi_strategy,
    macd_strategy,
    bollinger_strategy,
    volume_breakout_strategy,
    run_strategies,
)
from cryptobot.services.signals.sentiment import aggregate_sentiment, classify_score

__all__ = [
    "rsi_strategy",
    "macd_strategy",
    "bollinger_strategy",
    "volume_breakout_strategy",
    "run_strategies",
    "aggregate_sentiment",
    "classify_score",
]
