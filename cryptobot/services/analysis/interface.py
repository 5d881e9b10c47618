"""
Analysis Service Interface

Orchestrates the signal-derivation pipeline for one symbol.
"""

from abc import abstractmethod
from typing import Optional, Sequence

from cryptobot.services.base import BaseService
from cryptobot.schemas.market import Candle
from cryptobot.schemas.analysis import AnalysisResult


class AnalysisServiceInterface(BaseService[str, Optional[AnalysisResult]]):
    """
    Analysis Service Contract.

    INPUT: symbol (unified, e.g. BTC/USDT)

    OUTPUT: AnalysisResult, or None when any stage fails

    PIPELINE:
        ┌─────────────────┐
        │     symbol      │
        └────────┬────────┘
                 │
                 ▼
        ┌─────────────────┐
        │ Data Ingestion  │ → list[Candle] (>= 200)
        └────────┬────────┘
                 │
                 ▼
        ┌─────────────────┐
        │ Indicator Engine│ → IndicatorSnapshot
        └────────┬────────┘
                 │
                 ▼
        ┌─────────────────┐
        │ Strategies (x4) │ → list[Signal]
        └────────┬────────┘
                 │
                 ▼
        ┌─────────────────┐
        │ Sentiment       │ → SentimentResult
        └────────┬────────┘
                 │
                 ▼
        ┌─────────────────┐
        │ AnalysisResult  │ ← support/resistance from the same window
        └─────────────────┘
    """

    @property
    def name(self) -> str:
        return "AnalysisService"

    @abstractmethod
    async def execute(self, input_data: str) -> Optional[AnalysisResult]:
        """Run the full pipeline for one symbol."""
        pass

    @abstractmethod
    async def analyze_candles(self, symbol: str, candles: Sequence[Candle]) -> AnalysisResult:
        """Run the pipeline on an already fetched candle window."""
        pass

    @abstractmethod
    async def analyze_watchlist(self, symbols: Sequence[str]) -> list[AnalysisResult]:
        """Analyze each symbol, omitting failures."""
        pass
