"""
Watchlist API Endpoints

Symbol set management and bulk analysis.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from cryptobot.schemas.analysis import AnalysisResult, SymbolRequest, WatchlistResponse
from cryptobot.services.analysis import AnalysisService, get_analysis_service
from cryptobot.services.watchlist import WatchlistStore, get_watchlist_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[str])
async def get_watchlist(store: WatchlistStore = Depends(get_watchlist_store)):
    """List watched symbols in insertion order."""
    return store.list()


@router.post("/add", response_model=WatchlistResponse)
async def add_to_watchlist(
    request: SymbolRequest,
    store: WatchlistStore = Depends(get_watchlist_store),
):
    """Add a symbol. Adding a watched symbol again is a no-op."""
    return WatchlistResponse(watchlist=store.add(request.symbol))


@router.get("/analysis", response_model=list[AnalysisResult])
async def get_watchlist_analysis(
    store: WatchlistStore = Depends(get_watchlist_store),
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Analyze every watched symbol.

    Symbols that cannot be analyzed are left out of the response.
    """
    try:
        return await service.analyze_watchlist(store.list())
    except Exception as e:
        logger.error(f"Watchlist analysis failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{symbol:path}", response_model=WatchlistResponse)
async def remove_from_watchlist(
    symbol: str,
    store: WatchlistStore = Depends(get_watchlist_store),
):
    """Remove a symbol (e.g. BTC/USDT). Removing an unknown symbol is a no-op."""
    return WatchlistResponse(watchlist=store.remove(symbol))
