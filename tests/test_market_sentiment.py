"""
Tests for the Fear & Greed index client.
"""

import pytest

from cryptobot.services.market_sentiment import parse_fear_greed


PAYLOAD = {
    "name": "Fear and Greed Index",
    "data": [
        {
            "value": "72",
            "value_classification": "Greed",
            "timestamp": "1760832000",
            "time_until_update": "3600",
        }
    ],
    "metadata": {"error": None},
}


class TestParseFearGreed:

    def test_latest_reading(self):
        index = parse_fear_greed(PAYLOAD)

        assert index.value == 72
        assert index.classification == "Greed"
        assert index.timestamp == "1760832000"

    def test_empty_data_raises(self):
        with pytest.raises(IndexError):
            parse_fear_greed({"data": []})
