"""
Watchlist

In-memory symbol set driving the bulk analysis endpoint.
"""

from cryptobot.services.watchlist.store import WatchlistStore, get_watchlist_store

__all__ = ["WatchlistStore", "get_watchlist_store"]
