"""
Analysis Service Implementation

Orchestrates the signal-derivation pipeline:
    Data Ingestion → Indicators → Strategies → Sentiment (+ Support/Resistance)

Every analysis is a one-shot computation over a fixed candle window.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from cryptobot.core.config import settings
from cryptobot.schemas.market import Candle, Timeframe
from cryptobot.schemas.analysis import AnalysisResult
from cryptobot.services.base import InsufficientDataError, ServiceError
from cryptobot.services.analysis.interface import AnalysisServiceInterface
from cryptobot.services.data_ingestion import DataIngestionService, get_data_ingestion_service
from cryptobot.services.indicators import (
    IndicatorServiceInterface,
    get_indicator_service,
    nearest_support_resistance,
)
from cryptobot.services.signals import run_strategies, aggregate_sentiment

logger = logging.getLogger(__name__)


class AnalysisService(AnalysisServiceInterface):
    """
    Analysis Service.

    Any failure short-circuits the symbol's analysis: `analyze` returns None
    rather than a partial record.
    """

    def __init__(
        self,
        data_service: Optional[DataIngestionService] = None,
        indicator_service: Optional[IndicatorServiceInterface] = None,
        timeframe: Optional[Timeframe] = None,
        candle_limit: Optional[int] = None,
        min_candles: Optional[int] = None,
        lookback: Optional[int] = None,
        concurrency: Optional[int] = None,
    ):
        self._data_service = data_service
        self._indicator_service = indicator_service
        self.timeframe = Timeframe(
            timeframe if timeframe is not None else settings.default_timeframe
        )
        self.candle_limit = candle_limit if candle_limit is not None else settings.candle_limit
        self.min_candles = min_candles if min_candles is not None else settings.min_candles
        self.lookback = lookback if lookback is not None else settings.support_resistance_lookback
        self.concurrency = max(
            1, concurrency if concurrency is not None else settings.analysis_concurrency
        )

    @property
    def name(self) -> str:
        return "AnalysisService"

    @property
    def data_service(self) -> DataIngestionService:
        """Lazy load data ingestion service."""
        if self._data_service is None:
            self._data_service = get_data_ingestion_service()
        return self._data_service

    @property
    def indicator_service(self) -> IndicatorServiceInterface:
        """Lazy load indicator service."""
        if self._indicator_service is None:
            self._indicator_service = get_indicator_service()
        return self._indicator_service

    async def execute(self, input_data: str) -> Optional[AnalysisResult]:
        return await self.analyze(input_data)

    async def analyze(self, symbol: str) -> Optional[AnalysisResult]:
        """
        Fetch candles and run the full pipeline for one symbol.

        Returns None on data fetch failure, short history or computation error.
        """
        try:
            candles = await self.data_service.get_candles(
                symbol, self.timeframe, self.candle_limit
            )
            return await self.analyze_candles(symbol, candles)
        except ServiceError as e:
            logger.error(f"Error analyzing {symbol}: {e}")
            return None

    async def analyze_candles(self, symbol: str, candles: Sequence[Candle]) -> AnalysisResult:
        """
        Run the pipeline on a candle window (oldest first).

        Raises:
            InsufficientDataError: fewer than `min_candles` candles
            ComputationError: indicator engine failure
        """
        if not candles or len(candles) < self.min_candles:
            raise InsufficientDataError(
                self.name,
                "Insufficient data for analysis",
                {"symbol": symbol, "candles": len(candles or []), "required": self.min_candles},
            )

        indicators = await self.indicator_service.execute(list(candles))

        signals = run_strategies(candles, indicators)
        sentiment = aggregate_sentiment(signals)

        latest = candles[-1]
        support, resistance = nearest_support_resistance(
            [c.high for c in candles],
            [c.low for c in candles],
            latest.close,
            self.lookback,
        )

        logger.info(
            f"{symbol}: {sentiment.sentiment.value} (score {sentiment.score}, "
            f"{len(signals)} signals)"
        )

        return AnalysisResult(
            symbol=symbol,
            current_price=latest.close,
            volume_24h=latest.volume,
            indicators=indicators,
            signals=signals,
            sentiment=sentiment,
            support=support,
            resistance=resistance,
            timestamp=datetime.now(timezone.utc),
        )

    async def analyze_watchlist(self, symbols: Sequence[str]) -> list[AnalysisResult]:
        """
        Analyze every symbol, keeping input order and omitting failures.

        Runs strictly one after another unless `concurrency` > 1, in which
        case at most that many analyses are in flight.
        """
        if self.concurrency <= 1:
            results = []
            for symbol in symbols:
                try:
                    analysis = await self.analyze(symbol)
                except Exception as e:
                    logger.error(f"Error analyzing {symbol}: {e}")
                    continue
                if analysis:
                    results.append(analysis)
            return results

        semaphore = asyncio.Semaphore(self.concurrency)

        async def _bounded(symbol: str) -> Optional[AnalysisResult]:
            async with semaphore:
                return await self.analyze(symbol)

        outcomes = await asyncio.gather(
            *(_bounded(symbol) for symbol in symbols), return_exceptions=True
        )

        results = []
        for symbol, outcome in zip(symbols, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"Error analyzing {symbol}: {outcome}")
            elif outcome is not None:
                results.append(outcome)
        return results

    async def health_check(self) -> bool:
        """Check health of all dependent services."""
        return await self.indicator_service.health_check() and await self.data_service.health_check()


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance
