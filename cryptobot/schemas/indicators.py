"""
CONTRACT 2: Indicator Engine

Input: list[Candle]
Output: IndicatorSnapshot

Holds only the most recent value of each indicator.
Indicators without enough history fall back to zero and are listed in `degraded`.
"""

from pydantic import BaseModel, ConfigDict, Field


class MACDData(BaseModel):
    """MACD indicator values."""

    model_config = ConfigDict(frozen=True)

    macd: float = 0.0
    signal: float = 0.0
    histogram: float = 0.0


class BollingerBandsData(BaseModel):
    """Bollinger Bands values."""

    model_config = ConfigDict(frozen=True)

    upper: float = 0.0
    middle: float = 0.0
    lower: float = 0.0


class StochasticData(BaseModel):
    """Stochastic oscillator values."""

    model_config = ConfigDict(frozen=True)

    k: float = 0.0
    d: float = 0.0


class IndicatorSnapshot(BaseModel):
    """
    Latest value of every supported indicator.
    Returned by: Indicator Service
    Consumed by: Strategy evaluators
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "rsi": 58.31,
                "macd": {"macd": 112.4, "signal": 98.7, "histogram": 13.7},
                "bb": {"upper": 68250.0, "middle": 67100.0, "lower": 65950.0},
                "sma20": 67100.0,
                "sma50": 66540.2,
                "sma200": 63010.8,
                "ema12": 67420.5,
                "ema26": 67308.1,
                "stoch": {"k": 71.2, "d": 65.9},
                "atr": 410.3,
                "degraded": [],
            }
        },
    )

    rsi: float = 0.0
    macd: MACDData = Field(default_factory=MACDData)
    bb: BollingerBandsData = Field(default_factory=BollingerBandsData)
    sma20: float = 0.0
    sma50: float = 0.0
    sma200: float = 0.0
    ema12: float = 0.0
    ema26: float = 0.0
    stoch: StochasticData = Field(default_factory=StochasticData)
    atr: float = 0.0
    degraded: list[str] = Field(
        default_factory=list,
        description="Indicators that lacked history and hold their zero default",
    )

    @property
    def is_degraded(self) -> bool:
        return bool(self.degraded)
