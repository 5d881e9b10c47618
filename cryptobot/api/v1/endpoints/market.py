"""
Market Data API Endpoints

Top performers and the market-wide Fear & Greed index.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from cryptobot.schemas.market import FearGreedIndex, TopPerformer
from cryptobot.services.data_ingestion import DataIngestionService, get_data_ingestion_service
from cryptobot.services.market_sentiment import FearGreedService, get_fear_greed_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/top-performers", response_model=list[TopPerformer])
async def get_top_performers(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    service: DataIngestionService = Depends(get_data_ingestion_service),
):
    """
    Best 24h movers among USDT pairs, highest change first.
    """
    try:
        return await service.get_top_performers(limit)
    except Exception as e:
        logger.error(f"Top performers endpoint failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/fear-greed", response_model=Optional[FearGreedIndex])
async def get_fear_greed(
    service: FearGreedService = Depends(get_fear_greed_service),
):
    """
    Latest crypto Fear & Greed index, or null when unavailable.
    """
    try:
        return await service.get_index()
    except Exception as e:
        logger.error(f"Fear & Greed endpoint failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
