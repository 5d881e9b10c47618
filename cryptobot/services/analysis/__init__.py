"""
Analysis Orchestration Service

CONTRACT:
    Input:  symbol
    Output: AnalysisResult | None

RESPONSIBILITIES:
    - Orchestrate the pipeline:
        1. Data Ingestion -> list[Candle]
        2. Indicator Engine -> IndicatorSnapshot
        3. Strategies -> list[Signal]
        4. Sentiment -> SentimentResult
        5. Support/Resistance -> nearest levels
    - Turn any stage failure into a no-result
    - Run the watchlist batch with per-symbol isolation
"""

from cryptobot.services.analysis.interface import AnalysisServiceInterface
from cryptobot.services.analysis.service import AnalysisService, get_analysis_service

__all__ = [
    "AnalysisServiceInterface",
    "AnalysisService",
    "get_analysis_service",
]
