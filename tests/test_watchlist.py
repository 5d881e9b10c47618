"""
Tests for the in-memory watchlist store.
"""

from cryptobot.services.watchlist import WatchlistStore


class TestWatchlistStore:

    def test_add_keeps_insertion_order(self, watchlist_store):
        watchlist_store.add("BTC/USDT")
        watchlist_store.add("ETH/USDT")
        assert watchlist_store.list() == ["BTC/USDT", "ETH/USDT"]

    def test_add_is_idempotent_and_normalized(self, watchlist_store):
        watchlist_store.add("btc/usdt")
        assert watchlist_store.add(" BTC/USDT ") == ["BTC/USDT"]
        assert len(watchlist_store) == 1

    def test_remove(self, watchlist_store):
        watchlist_store.add("BTC/USDT")
        watchlist_store.add("ETH/USDT")
        assert watchlist_store.remove("BTC/USDT") == ["ETH/USDT"]
        assert "BTC/USDT" not in watchlist_store

    def test_remove_missing_is_noop(self, watchlist_store):
        watchlist_store.add("BTC/USDT")
        assert watchlist_store.remove("DOGE/USDT") == ["BTC/USDT"]

    def test_initial_symbols_and_iteration(self):
        store = WatchlistStore(["sol/usdt", "SOL/USDT", "ada/usdt"])
        assert list(store) == ["SOL/USDT", "ADA/USDT"]
        assert "ada/usdt" in store

    def test_clear(self, watchlist_store):
        watchlist_store.add("BTC/USDT")
        watchlist_store.clear()
        assert watchlist_store.list() == []
