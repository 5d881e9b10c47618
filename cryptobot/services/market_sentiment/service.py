"""
Market Sentiment Index Service

Fetches the crypto Fear & Greed index from alternative.me.
"""

import logging
from typing import Any, Optional

import aiohttp

from cryptobot.core.config import settings
from cryptobot.schemas.market import FearGreedIndex

logger = logging.getLogger(__name__)


def parse_fear_greed(payload: Any) -> FearGreedIndex:
    """Take the latest reading out of an alternative.me response."""
    data = payload["data"][0]
    return FearGreedIndex(
        value=int(data["value"]),
        classification=data["value_classification"],
        timestamp=str(data["timestamp"]),
    )


class FearGreedService:
    """
    Client for the market-wide Fear & Greed index.

    Failures are logged and reported as None.
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self._url = url or settings.fear_greed_url
        self._timeout = timeout or settings.http_timeout_seconds
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def get_index(self) -> Optional[FearGreedIndex]:
        """Latest Fear & Greed reading, or None if unavailable."""
        session = await self._ensure_session()

        try:
            async with session.get(self._url) as response:
                if response.status != 200:
                    logger.warning(f"Fear & Greed API returned status {response.status}")
                    return None
                payload = await response.json(content_type=None)

            return parse_fear_greed(payload)

        except Exception as e:
            logger.error(f"Error fetching Fear & Greed Index: {e}")
            return None


_service_instance: Optional[FearGreedService] = None


def get_fear_greed_service() -> FearGreedService:
    """Get the Fear & Greed service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = FearGreedService()
    return _service_instance
