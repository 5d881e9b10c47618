"""
Watchlist Store

Process-lifetime ordered set of symbols to re-analyze.
Holds no analysis state.
"""

from typing import Iterator, Optional


class WatchlistStore:
    """Ordered, duplicate-free set of upper-cased symbols."""

    def __init__(self, symbols: Optional[list[str]] = None):
        self._symbols: dict[str, None] = {}
        for symbol in symbols or []:
            self.add(symbol)

    @staticmethod
    def _normalize(symbol: str) -> str:
        return symbol.strip().upper()

    def add(self, symbol: str) -> list[str]:
        """Add a symbol if absent. Returns the watchlist."""
        self._symbols.setdefault(self._normalize(symbol), None)
        return self.list()

    def remove(self, symbol: str) -> list[str]:
        """Remove a symbol if present. Returns the watchlist."""
        self._symbols.pop(self._normalize(symbol), None)
        return self.list()

    def list(self) -> list[str]:
        return list(self._symbols)

    def clear(self) -> None:
        self._symbols.clear()

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self._normalize(symbol) in self._symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._symbols)


_store_instance: Optional[WatchlistStore] = None


def get_watchlist_store() -> WatchlistStore:
    """Get the process-wide watchlist store."""
    global _store_instance
    if _store_instance is None:
        _store_instance = WatchlistStore()
    return _store_instance
