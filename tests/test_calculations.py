"""
Tests for the NumPy indicator calculations.
"""

import math

import numpy as np
import pytest

from cryptobot.services.indicators.calculations import (
    sma,
    ema,
    wilder,
    rsi,
    macd,
    stochastic,
    true_range,
    atr,
    bollinger_bands,
    nearest_support_resistance,
    get_last_valid,
)


class TestMovingAverages:
    """SMA / EMA / Wilder smoothing"""

    def test_sma_values(self):
        result = sma(np.array([1.0, 2.0, 3.0, 4.0, 5.0]), 3)
        assert np.isnan(result[:2]).all()
        assert list(result[2:]) == [2.0, 3.0, 4.0]

    def test_sma_short_input_is_all_nan(self):
        assert np.isnan(sma(np.array([1.0, 2.0]), 3)).all()

    def test_ema_seeded_with_sma(self):
        result = ema(np.array([1.0, 2.0, 3.0, 4.0, 5.0]), 3)
        assert np.isnan(result[:2]).all()
        assert list(result[2:]) == [2.0, 3.0, 4.0]

    def test_ema_skips_leading_nans(self):
        data = np.array([np.nan, np.nan, 1.0, 2.0, 3.0, 4.0])
        result = ema(data, 3)
        assert np.isnan(result[:4]).all()
        assert list(result[4:]) == [2.0, 3.0]

    def test_wilder_on_constant_series(self):
        result = wilder(np.full(30, 2.0), 14)
        assert get_last_valid(result) == 2.0


class TestMomentum:
    """RSI / MACD / Stochastic"""

    def test_rsi_only_gains_is_100(self):
        result = rsi(np.arange(1.0, 31.0), 14)
        assert np.isnan(result[:14]).all()
        assert (result[14:] == 100).all()

    def test_rsi_bounded(self):
        closes = np.array([100 + 5 * math.sin(i / 3) for i in range(100)])
        valid = rsi(closes, 14)[14:]
        assert ((valid >= 0) & (valid <= 100)).all()

    def test_rsi_needs_period_plus_one(self):
        assert get_last_valid(rsi(np.arange(1.0, 15.0), 14)) is None

    def test_macd_signal_line_resolves(self):
        closes = np.array([100 + 5 * math.sin(i / 5) for i in range(120)])
        macd_line, signal_line, histogram = macd(closes)
        # First MACD at index 25, first signal 8 values later
        assert np.isnan(signal_line[32])
        assert not np.isnan(signal_line[33])
        assert get_last_valid(histogram) == pytest.approx(
            get_last_valid(macd_line) - get_last_valid(signal_line)
        )

    def test_stochastic_flat_window_is_zero(self):
        flat = np.full(20, 10.0)
        k, d = stochastic(flat, flat, flat, 14, 3)
        assert get_last_valid(k) == 0
        assert get_last_valid(d) == 0

    def test_stochastic_close_at_high(self):
        closes = np.arange(1.0, 21.0)
        k, _ = stochastic(closes, closes - 1, closes, 14, 3)
        assert get_last_valid(k) == 100


class TestVolatility:
    """True range / ATR / Bollinger Bands"""

    def test_true_range_first_is_nan(self):
        tr = true_range(np.array([11.0, 12.0]), np.array([9.0, 10.0]), np.array([10.0, 11.0]))
        assert np.isnan(tr[0])
        assert tr[1] == 2.0

    def test_atr_constant_range(self):
        closes = np.full(30, 10.0)
        result = atr(closes + 1, closes - 1, closes, 14)
        assert get_last_valid(result) == 2.0
        # 14 true ranges are needed, starting from the second candle
        assert np.isnan(result[13])
        assert not np.isnan(result[14])

    def test_bollinger_constant_series_collapses(self):
        upper, middle, lower = bollinger_bands(np.full(25, 50.0), 20, 2.0)
        assert get_last_valid(upper) == get_last_valid(middle) == get_last_valid(lower) == 50.0

    def test_bollinger_uses_population_std(self):
        closes = np.array([1.0, 3.0] * 10)
        upper, middle, lower = bollinger_bands(closes, 20, 2.0)
        assert get_last_valid(middle) == 2.0
        assert get_last_valid(upper) == 4.0
        assert get_last_valid(lower) == 0.0


class TestSupportResistance:
    """Nearest floor / ceiling"""

    def test_nearest_levels(self):
        support, resistance = nearest_support_resistance(
            [105, 110, 120], [90, 95, 98], current_price=100
        )
        assert resistance == 105
        assert support == 98

    def test_strictly_above_and_below(self):
        support, resistance = nearest_support_resistance([100, 101], [100, 99], current_price=100)
        assert resistance == 101
        assert support == 99

    def test_no_qualifying_levels(self):
        support, resistance = nearest_support_resistance([90, 95], [101, 102], current_price=100)
        assert support is None
        assert resistance is None

    def test_only_lookback_window_is_scanned(self):
        highs = [101] + [150] * 50
        lows = [99] + [50] * 50
        support, resistance = nearest_support_resistance(highs, lows, 100, lookback=50)
        assert resistance == 150
        assert support == 50

    def test_zero_lookback_scans_nothing(self):
        support, resistance = nearest_support_resistance([101, 102], [98, 99], 100, lookback=0)
        assert support is None
        assert resistance is None
