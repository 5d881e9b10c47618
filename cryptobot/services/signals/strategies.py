"""
Strategy Evaluators

Four independent rule-based strategies. Each takes the candle window and
its indicator snapshot and returns its signals in rule-check order.
"""

from typing import Callable, Optional, Sequence

from cryptobot.schemas.market import Candle
from cryptobot.schemas.indicators import IndicatorSnapshot
from cryptobot.schemas.analysis import Signal, SignalType

Strategy = Callable[[Sequence[Candle], IndicatorSnapshot], list[Signal]]

# RSI thresholds
RSI_EXTREME_OVERSOLD = 25
RSI_OVERSOLD = 35
RSI_EXTREME_OVERBOUGHT = 75
RSI_OVERBOUGHT = 65

# Volume breakout
VOLUME_LOOKBACK = 20
VOLUME_SPIKE_MULTIPLIER = 2
BREAKOUT_MOVE_PERCENT = 2


def rsi_strategy(candles: Sequence[Candle], indicators: IndicatorSnapshot) -> list[Signal]:
    """RSI extremes. Thresholds are strict and checked in order."""
    value = indicators.rsi

    if value < RSI_EXTREME_OVERSOLD:
        signal_type, text = SignalType.STRONG_BUY, "RSI extremely oversold"
    elif value < RSI_OVERSOLD:
        signal_type, text = SignalType.BUY, "RSI oversold"
    elif value > RSI_EXTREME_OVERBOUGHT:
        signal_type, text = SignalType.STRONG_SELL, "RSI extremely overbought"
    elif value > RSI_OVERBOUGHT:
        signal_type, text = SignalType.SELL, "RSI overbought"
    else:
        return []

    return [Signal(type=signal_type, description=f"{text}: {value:.2f}", strategy="rsi")]


def macd_strategy(candles: Sequence[Candle], indicators: IndicatorSnapshot) -> list[Signal]:
    """MACD line vs signal line, gated on the histogram sign."""
    data = indicators.macd

    if data.macd > data.signal and data.histogram > 0:
        return [Signal(type=SignalType.BUY, description="MACD bullish crossover", strategy="macd")]
    if data.macd < data.signal and data.histogram < 0:
        return [Signal(type=SignalType.SELL, description="MACD bearish crossover", strategy="macd")]
    return []


def bollinger_strategy(candles: Sequence[Candle], indicators: IndicatorSnapshot) -> list[Signal]:
    """Close outside the Bollinger Bands. Touching a band emits nothing."""
    current_price = candles[-1].close
    bb = indicators.bb

    if current_price < bb.lower:
        return [
            Signal(
                type=SignalType.BUY,
                description="Price broke below lower Bollinger Band",
                strategy="bollinger",
            )
        ]
    if current_price > bb.upper:
        return [
            Signal(
                type=SignalType.SELL,
                description="Price broke above upper Bollinger Band",
                strategy="bollinger",
            )
        ]
    return []


def volume_breakout_strategy(
    candles: Sequence[Candle], indicators: Optional[IndicatorSnapshot] = None
) -> list[Signal]:
    """
    High-volume price move.

    The average covers the trailing 20 candles including the current one.
    A volume spike without a move beyond +/-2% emits nothing.
    """
    if len(candles) < VOLUME_LOOKBACK + 1:
        return []

    current = candles[-1]
    previous = candles[-2]
    avg_volume = sum(c.volume for c in candles[-VOLUME_LOOKBACK:]) / VOLUME_LOOKBACK
    price_change = ((current.close - previous.close) / previous.close) * 100

    if current.volume <= avg_volume * VOLUME_SPIKE_MULTIPLIER:
        return []

    if price_change > BREAKOUT_MOVE_PERCENT:
        return [
            Signal(
                type=SignalType.STRONG_BUY,
                description=f"High volume breakout: {price_change:.2f}% move",
                strategy="volume",
            )
        ]
    if price_change < -BREAKOUT_MOVE_PERCENT:
        return [
            Signal(
                type=SignalType.STRONG_SELL,
                description=f"High volume breakdown: {price_change:.2f}% move",
                strategy="volume",
            )
        ]
    return []


STRATEGIES: tuple[Strategy, ...] = (
    rsi_strategy,
    macd_strategy,
    bollinger_strategy,
    volume_breakout_strategy,
)


def run_strategies(candles: Sequence[Candle], indicators: IndicatorSnapshot) -> list[Signal]:
    """Run every strategy in fixed order and concatenate their signals."""
    signals: list[Signal] = []
    for strategy in STRATEGIES:
        signals.extend(strategy(candles, indicators))
    return signals
