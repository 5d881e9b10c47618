"""
Analysis API Endpoints

Single-symbol signal analysis.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from cryptobot.schemas.analysis import AnalysisResult, SymbolRequest
from cryptobot.services.analysis import AnalysisService, get_analysis_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=Optional[AnalysisResult])
async def analyze_symbol(
    request: SymbolRequest,
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Run the full signal analysis for one symbol.

    Returns:
        - Latest indicator values
        - Strategy signals and aggregate sentiment
        - Nearest support/resistance
        - null when the symbol cannot be analyzed
    """
    try:
        return await service.analyze(request.symbol.strip().upper())
    except Exception as e:
        logger.error(f"Analyze endpoint failed for {request.symbol}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
