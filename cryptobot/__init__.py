"""
Crypto Signal Bot Backend

Polls a crypto exchange for candles, derives technical indicators,
evaluates rule-based strategies and folds the signals into a sentiment score.
"""

__version__ = "0.1.0"
