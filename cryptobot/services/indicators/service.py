"""
Indicator Engine Service Implementation

Calculates the latest value of each technical indicator from OHLCV data.
Pure Python/NumPy calculations.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from cryptobot.schemas.market import Candle
from cryptobot.schemas.indicators import (
    IndicatorSnapshot,
    MACDData,
    BollingerBandsData,
    StochasticData,
)
from cryptobot.services.base import ComputationError
from cryptobot.services.indicators.interface import IndicatorServiceInterface
from cryptobot.services.indicators.calculations import (
    sma,
    ema,
    rsi,
    macd,
    stochastic,
    atr,
    bollinger_bands,
    get_last_valid,
)

logger = logging.getLogger(__name__)

RSI_PERIOD = 14
RSI_DECIMALS = 2
MACD_FAST, MACD_SLOW, MACD_SIGNAL = 12, 26, 9
BB_PERIOD, BB_STD_DEV = 20, 2.0
SMA_PERIODS = (20, 50, 200)
EMA_PERIODS = (12, 26)
STOCH_K, STOCH_D = 14, 3
ATR_PERIOD = 14


def _ohlcv_to_arrays(candles: Sequence[Candle]) -> tuple:
    """Convert a candle list to numpy arrays."""
    highs = np.array([c.high for c in candles], dtype=float)
    lows = np.array([c.low for c in candles], dtype=float)
    closes = np.array([c.close for c in candles], dtype=float)
    volumes = np.array([c.volume for c in candles], dtype=float)
    return highs, lows, closes, volumes


def _latest(series: np.ndarray, name: str, degraded: list[str]) -> float:
    value = get_last_valid(series)
    if value is None:
        degraded.append(name)
        return 0.0
    return value


def _latest_group(
    series: Sequence[np.ndarray], name: str, degraded: list[str]
) -> Optional[list[float]]:
    """Latest values of a composite indicator, or None if any part is missing."""
    values = [get_last_valid(s) for s in series]
    if any(v is None for v in values):
        degraded.append(name)
        return None
    return values


def compute_indicators(candles: Sequence[Candle]) -> IndicatorSnapshot:
    """
    Compute the indicator snapshot for a candle window.

    Each indicator runs over the whole window; only its last value is kept.
    Indicators without enough history hold zero and are named in `degraded`.

    Raises:
        ComputationError: on any unrecoverable calculation error
    """
    try:
        highs, lows, closes, _ = _ohlcv_to_arrays(candles)
        degraded: list[str] = []

        # Thresholds compare against the value as displayed
        rsi_val = round(_latest(rsi(closes, RSI_PERIOD), "rsi", degraded), RSI_DECIMALS)

        macd_vals = _latest_group(
            macd(closes, MACD_FAST, MACD_SLOW, MACD_SIGNAL), "macd", degraded
        )
        macd_data = (
            MACDData(macd=macd_vals[0], signal=macd_vals[1], histogram=macd_vals[2])
            if macd_vals
            else MACDData()
        )

        bb_vals = _latest_group(bollinger_bands(closes, BB_PERIOD, BB_STD_DEV), "bb", degraded)
        bb_data = (
            BollingerBandsData(upper=bb_vals[0], middle=bb_vals[1], lower=bb_vals[2])
            if bb_vals
            else BollingerBandsData()
        )

        smas = {p: _latest(sma(closes, p), f"sma{p}", degraded) for p in SMA_PERIODS}
        emas = {p: _latest(ema(closes, p), f"ema{p}", degraded) for p in EMA_PERIODS}

        stoch_vals = _latest_group(
            stochastic(highs, lows, closes, STOCH_K, STOCH_D), "stoch", degraded
        )
        stoch_data = (
            StochasticData(k=stoch_vals[0], d=stoch_vals[1]) if stoch_vals else StochasticData()
        )

        atr_val = _latest(atr(highs, lows, closes, ATR_PERIOD), "atr", degraded)
    except Exception as e:
        logger.error(f"Error calculating indicators: {e}")
        raise ComputationError("IndicatorService", "Failed to calculate indicators") from e

    if degraded:
        logger.debug(f"Indicators defaulted for lack of history: {', '.join(degraded)}")

    return IndicatorSnapshot(
        rsi=rsi_val,
        macd=macd_data,
        bb=bb_data,
        sma20=smas[20],
        sma50=smas[50],
        sma200=smas[200],
        ema12=emas[12],
        ema26=emas[26],
        stoch=stoch_data,
        atr=atr_val,
        degraded=degraded,
    )


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    All calculations are deterministic and reproducible.
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def execute(self, input_data: list[Candle]) -> IndicatorSnapshot:
        """Calculate the indicator snapshot for a candle window."""
        return compute_indicators(input_data)

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
