"""
Indicator Engine Service

CONTRACT:
    Input:  list[Candle] (oldest to newest)
    Output: IndicatorSnapshot

RESPONSIBILITIES:
    - Calculate RSI, MACD, Bollinger Bands, SMA, EMA, Stochastic, ATR
    - Keep the latest value of each, zero when history is too short
    - Locate nearest support/resistance around the current price

Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from cryptobot.services.indicators.interface import IndicatorServiceInterface
from cryptobot.services.indicators.service import (
    IndicatorService,
    compute_indicators,
    get_indicator_service,
)
from cryptobot.services.indicators.calculations import nearest_support_resistance

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "compute_indicators",
    "get_indicator_service",
    "nearest_support_resistance",
]
