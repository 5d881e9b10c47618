"""
Tests for the analysis orchestrator and the watchlist batch.
"""

import pytest

from cryptobot.schemas.analysis import SignalType
from cryptobot.services.analysis import AnalysisService
from cryptobot.services.base import ComputationError, InsufficientDataError
from cryptobot.services.data_ingestion import DataIngestionService
from cryptobot.services.indicators import compute_indicators


class BrokenIndicatorService:
    async def execute(self, candles):
        raise ComputationError("IndicatorService", "boom")

    async def health_check(self):
        return False


class TestAnalyze:

    async def test_happy_path(self, analysis_service, wave_candles):
        result = await analysis_service.analyze("BTC/USDT")

        assert result is not None
        assert result.symbol == "BTC/USDT"
        assert result.current_price == wave_candles[-1].close
        assert result.volume_24h == wave_candles[-1].volume
        assert result.indicators == compute_indicators(wave_candles)
        assert result.sentiment.score == sum(s.type.weight for s in result.signals)
        assert result.timestamp.tzinfo is not None

    async def test_levels_bracket_current_price(self, analysis_service):
        result = await analysis_service.analyze("BTC/USDT")

        if result.support is not None:
            assert result.support < result.current_price
        if result.resistance is not None:
            assert result.resistance > result.current_price

    async def test_insufficient_history_is_no_result(self, analysis_service):
        assert await analysis_service.analyze("SHORT/USDT") is None

    async def test_unknown_symbol_is_no_result(self, analysis_service):
        assert await analysis_service.analyze("NOPE/USDT") is None

    async def test_fetch_failure_is_no_result(self, analysis_service):
        assert await analysis_service.analyze("DOWN/USDT") is None

    async def test_unexpected_source_error_is_no_result(self, fake_source):
        fake_source.errors["WEIRD/USDT"] = RuntimeError("socket closed")
        service = AnalysisService(data_service=DataIngestionService(source=fake_source))
        assert await service.analyze("WEIRD/USDT") is None

    async def test_computation_failure_is_no_result(self, fake_source):
        service = AnalysisService(
            data_service=DataIngestionService(source=fake_source),
            indicator_service=BrokenIndicatorService(),
        )
        assert await service.analyze("BTC/USDT") is None


class TestAnalyzeCandles:

    async def test_raises_on_short_window(self, analysis_service, wave_candles):
        with pytest.raises(InsufficientDataError):
            await analysis_service.analyze_candles("BTC/USDT", wave_candles[:199])

    async def test_exactly_minimum_is_enough(self, analysis_service, wave_candles):
        result = await analysis_service.analyze_candles("BTC/USDT", wave_candles[:200])
        assert result.indicators.degraded == []

    async def test_explicit_zero_settings_are_kept(self, fake_source, wave_candles):
        service = AnalysisService(
            data_service=DataIngestionService(source=fake_source),
            min_candles=0,
            lookback=0,
        )
        assert service.min_candles == 0
        assert service.lookback == 0

        result = await service.analyze_candles("BTC/USDT", wave_candles[:30])
        assert result.support is None
        assert result.resistance is None

    async def test_idempotent_apart_from_timestamp(self, analysis_service, wave_candles):
        first = await analysis_service.analyze_candles("BTC/USDT", wave_candles)
        second = await analysis_service.analyze_candles("BTC/USDT", wave_candles)

        assert first.model_dump(exclude={"timestamp"}) == second.model_dump(exclude={"timestamp"})

    async def test_steady_decline_pins_rsi_oversold(self, analysis_service, candle_builder):
        closes = [200.0 - i * 0.5 for i in range(250)]
        result = await analysis_service.analyze_candles("DUMP/USDT", candle_builder(closes))

        # Monotonic decline: no gains at all
        assert result.indicators.rsi == pytest.approx(0.0)
        assert [s.strategy for s in result.signals][:1] == ["rsi"]
        assert result.signals[0].type == SignalType.STRONG_BUY

    async def test_serializes_with_camel_case_keys(self, analysis_service, wave_candles):
        result = await analysis_service.analyze_candles("BTC/USDT", wave_candles)
        payload = result.model_dump(by_alias=True)
        assert "currentPrice" in payload
        assert "volume24h" in payload


class TestAnalyzeWatchlist:

    async def test_failures_are_omitted(self, analysis_service, fake_source):
        results = await analysis_service.analyze_watchlist(
            ["BTC/USDT", "DOWN/USDT", "SHORT/USDT"]
        )
        assert [r.symbol for r in results] == ["BTC/USDT"]
        assert fake_source.calls == ["BTC/USDT", "DOWN/USDT", "SHORT/USDT"]

    async def test_unexpected_error_does_not_abort_batch(self, analysis_service, monkeypatch):
        original = analysis_service.analyze

        async def flaky(symbol):
            if symbol == "BAD/USDT":
                raise RuntimeError("bug")
            return await original(symbol)

        monkeypatch.setattr(analysis_service, "analyze", flaky)
        results = await analysis_service.analyze_watchlist(["BAD/USDT", "BTC/USDT"])
        assert [r.symbol for r in results] == ["BTC/USDT"]

    async def test_empty_watchlist(self, analysis_service):
        assert await analysis_service.analyze_watchlist([]) == []

    async def test_bounded_concurrency_keeps_order(self, fake_source, wave_candles):
        fake_source.candles["ETH/USDT"] = wave_candles[50:]
        service = AnalysisService(
            data_service=DataIngestionService(source=fake_source),
            concurrency=3,
        )

        results = await service.analyze_watchlist(
            ["ETH/USDT", "DOWN/USDT", "BTC/USDT", "SHORT/USDT"]
        )

        assert [r.symbol for r in results] == ["ETH/USDT", "BTC/USDT"]
