"""
Market Sentiment Index

Market-wide Fear & Greed index, independent of the signal pipeline.
"""

from cryptobot.services.market_sentiment.service import (
    FearGreedService,
    get_fear_greed_service,
    parse_fear_greed,
)

__all__ = [
    "FearGreedService",
    "get_fear_greed_service",
    "parse_fear_greed",
]
