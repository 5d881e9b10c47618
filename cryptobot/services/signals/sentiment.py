"""
Sentiment Aggregator

Folds a signal list into an integer score and a qualitative label.
"""

from typing import Iterable

from cryptobot.schemas.analysis import Signal, SentimentLabel, SentimentResult


def classify_score(score: int) -> SentimentLabel:
    """Map a score to its label. All bounds are strict."""
    if score > 5:
        return SentimentLabel.VERY_BULLISH
    elif score > 2:
        return SentimentLabel.BULLISH
    elif score < -5:
        return SentimentLabel.VERY_BEARISH
    elif score < -2:
        return SentimentLabel.BEARISH
    return SentimentLabel.NEUTRAL


def aggregate_sentiment(signals: Iterable[Signal]) -> SentimentResult:
    """Sum signal weights (STRONG +/-3, plain +/-1) and classify the total."""
    score = sum(signal.type.weight for signal in signals)
    return SentimentResult(sentiment=classify_score(score), score=score)
