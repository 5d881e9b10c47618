"""
Crypto Signal Bot Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cryptobot.core.config import settings
from cryptobot.api.v1 import router as api_v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Data source: {'mock' if settings.use_mock_data else 'Binance'}")

    yield

    # Shutdown
    logger.info("Shutting down...")
    from cryptobot.services.data_ingestion import get_data_ingestion_service
    from cryptobot.services.market_sentiment import get_fear_greed_service

    await get_data_ingestion_service().close()
    await get_fear_greed_service().close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Crypto Signal Bot API

    ## Pipeline
    - **Data Ingestion**: Fetches candles and tickers from Binance
    - **Indicator Engine**: RSI, MACD, Bollinger Bands, SMA/EMA, Stochastic, ATR (NumPy)
    - **Strategies**: RSI, MACD, Bollinger and volume breakout signals
    - **Sentiment**: Signals folded into a score and label
    - **Levels**: Nearest support/resistance

    ## Extras
    - Top performers (24h)
    - Fear & Greed index
    - Watchlist with bulk analysis
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Crypto Signal Bot API",
        "docs": "/docs",
        "health": "/health",
        "api": "/api/v1",
    }
