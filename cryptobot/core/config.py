"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Crypto Signal Bot"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Exchange (Binance public REST)
    binance_base_url: str = "https://api.binance.com"
    http_timeout_seconds: float = 10.0

    # Market-wide Fear & Greed index
    fear_greed_url: str = "https://api.alternative.me/fng/"

    # Analysis window
    default_timeframe: str = "1h"
    candle_limit: int = 500
    min_candles: int = 200
    support_resistance_lookback: int = 50

    # Top performers listing
    top_performers_limit: int = 20
    quote_assets: list[str] = ["USDT"]

    # Watchlist batch analysis (1 = strictly sequential)
    analysis_concurrency: int = 1

    # Feature Flags
    use_mock_data: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
