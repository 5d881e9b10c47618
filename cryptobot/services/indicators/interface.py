"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from cryptobot.services.base import BaseService
from cryptobot.schemas.market import Candle
from cryptobot.schemas.indicators import IndicatorSnapshot


class IndicatorServiceInterface(BaseService[list[Candle], IndicatorSnapshot]):
    """
    Indicator Engine Service Contract.

    INPUT: list[Candle]
        - Ordered oldest to newest; at least 200 for every indicator to be meaningful

    OUTPUT: IndicatorSnapshot
        - Latest value of RSI, MACD, Bollinger Bands, SMA/EMA, Stochastic, ATR
        - Short history degrades to zero defaults, never to an error

    RAISES: ComputationError on an unrecoverable internal error
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: list[Candle]) -> IndicatorSnapshot:
        """Calculate the indicator snapshot for a candle window."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
