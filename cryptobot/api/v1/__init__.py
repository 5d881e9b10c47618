"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from cryptobot.api.v1.endpoints import analysis, market, watchlist

router = APIRouter()

# Include all endpoint routers
router.include_router(analysis.router, tags=["Analysis"])
router.include_router(market.router, prefix="/market", tags=["Market Data"])
router.include_router(watchlist.router, prefix="/watchlist", tags=["Watchlist"])
