"""
Binance Adapter

Fetches candles and 24h tickers from the Binance public REST API.
No API key needed.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Optional

import aiohttp

from cryptobot.core.config import settings
from cryptobot.schemas.market import Candle, Ticker, Timeframe
from cryptobot.services.base import DataFetchError, ExternalAPIError
from cryptobot.services.data_ingestion.interface import CandleSource

logger = logging.getLogger(__name__)

# Binance caps klines per request
MAX_KLINES_LIMIT = 1000


def to_exchange_symbol(symbol: str) -> str:
    """BTC/USDT -> BTCUSDT"""
    return symbol.replace("/", "").replace("-", "").upper()


def to_unified_symbol(exchange_symbol: str, quote_assets: list[str]) -> Optional[str]:
    """BTCUSDT -> BTC/USDT for a known quote asset, otherwise None."""
    for quote in quote_assets:
        if exchange_symbol.endswith(quote) and len(exchange_symbol) > len(quote):
            return f"{exchange_symbol[: -len(quote)]}/{quote}"
    return None


def parse_klines(raw_klines: Any) -> list[Candle]:
    """Normalize a klines payload into candles (Binance returns oldest first)."""
    if not isinstance(raw_klines, list):
        raise ValueError(f"Expected a list of klines, got {type(raw_klines).__name__}")

    candles = []
    for entry in raw_klines:
        if not isinstance(entry, list) or len(entry) < 6:
            raise ValueError(f"Malformed kline: {entry}")

        candles.append(
            Candle(
                timestamp=datetime.fromtimestamp(int(entry[0]) / 1000, tz=timezone.utc),
                open=float(entry[1]),
                high=float(entry[2]),
                low=float(entry[3]),
                close=float(entry[4]),
                volume=float(entry[5]),
            )
        )
    return candles


def parse_tickers(raw_tickers: Any, quote_assets: list[str]) -> dict[str, Ticker]:
    """Normalize a 24hr ticker payload, keeping only known quote assets."""
    if not isinstance(raw_tickers, list):
        raise ValueError(f"Expected a list of tickers, got {type(raw_tickers).__name__}")

    tickers: dict[str, Ticker] = {}
    for item in raw_tickers:
        unified = to_unified_symbol(str(item.get("symbol", "")), quote_assets)
        if unified is None:
            continue

        percentage = item.get("priceChangePercent")
        volume = item.get("volume")
        tickers[unified] = Ticker(
            symbol=unified,
            last=float(item.get("lastPrice", 0)),
            percentage=float(percentage) if percentage is not None else None,
            base_volume=float(volume) if volume is not None else None,
        )
    return tickers


class BinanceAdapter(CandleSource):
    """Binance spot market data over aiohttp."""

    name = "Binance"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        quote_assets: Optional[list[str]] = None,
    ):
        self._base_url = (base_url or settings.binance_base_url).rstrip("/")
        self._timeout = timeout or settings.http_timeout_seconds
        self._quote_assets = [q.upper() for q in (quote_assets or settings.quote_assets)]
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

    async def _get_json(self, path: str, params: Optional[dict] = None) -> Any:
        session = await self._ensure_session()
        url = f"{self._base_url}{path}"

        try:
            async with session.get(url, params=params) as response:
                if response.status != 200:
                    body = await response.text()
                    raise ExternalAPIError(
                        self.name,
                        f"{path} returned status {response.status}",
                        {"status": response.status, "body": body[:200]},
                    )
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DataFetchError(self.name, f"Request to {path} failed: {e}") from e

    async def fetch_ohlcv(
        self, symbol: str, timeframe: Timeframe = Timeframe.H1, limit: int = 500
    ) -> list[Candle]:
        """Fetch the latest candles for a symbol."""
        params = {
            "symbol": to_exchange_symbol(symbol),
            "interval": Timeframe(timeframe).value,
            "limit": min(limit, MAX_KLINES_LIMIT),
        }
        raw = await self._get_json("/api/v3/klines", params)

        try:
            candles = parse_klines(raw)
        except (ValueError, TypeError) as e:
            raise ExternalAPIError(self.name, f"Bad klines payload for {symbol}: {e}") from e

        logger.debug(f"Fetched {len(candles)} {params['interval']} candles for {symbol}")
        return candles

    async def fetch_tickers(self) -> dict[str, Ticker]:
        """Fetch 24h statistics for all markets."""
        raw = await self._get_json("/api/v3/ticker/24hr")

        try:
            return parse_tickers(raw, self._quote_assets)
        except (ValueError, TypeError, AttributeError) as e:
            raise ExternalAPIError(self.name, f"Bad ticker payload: {e}") from e
