"""In-process implementation of ResponseCache.

This is the default cache backend. With the default settings it keeps
every entry for the life of the process; `max_entries` and `ttl` bound it.
"""

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from pokedex_cache.config import settings

logger = logging.getLogger(__name__)


class InMemoryResponseCache:
    """Dictionary-backed implementation of ResponseCache.

    This class satisfies the ResponseCache protocol through structural
    typing - no explicit inheritance needed.

    - `max_entries` > 0 evicts the least recently used entry once full
    - `ttl` > 0 expires entries `ttl` seconds after they were written
    - 0 disables either limit

    A threading.Lock guards the dictionary so the cache can be shared by
    worker threads as well as asyncio tasks.
    """

    def __init__(
        self,
        max_entries: int | None = None,
        ttl: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache.

        Args:
            max_entries: Capacity before LRU eviction. Defaults to settings.
            ttl: Entry lifetime in seconds. Defaults to settings.
            clock: Monotonic time source (seconds).
        """
        self._max_entries = settings.cache_max_entries if max_entries is None else max_entries
        self._ttl = settings.cache_ttl if ttl is None else ttl
        self._clock = clock
        self._entries: OrderedDict[str, tuple[Any, float | None]] = OrderedDict()
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        max_entries: int | None = None,
        ttl: int | None = None,
    ) -> "InMemoryResponseCache":
        """Factory method to create InMemoryResponseCache with defaults.

        Args:
            max_entries: Capacity. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured InMemoryResponseCache
        """
        return cls(max_entries=max_entries, ttl=ttl)

    async def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            value, expires_at = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._entries[key]
                logger.debug("Cache entry expired: %s", key)
                return None

            self._entries.move_to_end(key)
            return value

    async def set(self, key: str, value: Any) -> None:
        now = self._clock()
        expires_at = now + self._ttl if self._ttl > 0 else None

        with self._lock:
            self._purge_expired(now)
            self._entries[key] = (value, expires_at)
            self._entries.move_to_end(key)

            if self._max_entries > 0:
                while len(self._entries) > self._max_entries:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.debug("Evicted cache entry: %s", evicted)

    async def clear(self) -> int:
        now = self._clock()
        with self._lock:
            self._purge_expired(now)
            count = len(self._entries)
            self._entries.clear()
        return count

    async def count(self) -> int:
        now = self._clock()
        with self._lock:
            self._purge_expired(now)
            return len(self._entries)

    def _purge_expired(self, now: float) -> None:
        """Drop expired entries. Caller holds the lock."""
        if self._ttl <= 0:
            return

        expired = [
            key
            for key, (_, expires_at) in self._entries.items()
            if expires_at is not None and now >= expires_at
        ]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Purged %d expired cache entries", len(expired))

    async def health_check(self) -> bool:
        return True

    def get_stats(self) -> dict:
        """Get backend configuration.

        Returns:
            Dictionary with backend name, ttl and capacity
        """
        return {
            "backend": "memory",
            "ttl": self._ttl,
            "max_entries": self._max_entries,
        }
