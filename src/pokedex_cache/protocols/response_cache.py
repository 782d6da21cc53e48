"""Response cache protocol.

Defines the interface for any key-value backend that can hold previously
computed `getPokemon` responses.

Implementations can include:
- In-process dictionary (default)
- Redis
- Any other key-value store

Values are JSON-compatible (dicts, lists, strings, numbers, booleans).
Invalidation when the underlying Pokémon data changes is not part of
this contract: a hit is always treated as valid.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResponseCache(Protocol):
    """Protocol for response cache backends.

    Implementations must tolerate concurrent callers; the service layer
    does no locking of its own.

    Example:
        ```python
        from pokedex_cache.protocols import ResponseCache

        cache: ResponseCache = InMemoryResponseCache()
        cache: ResponseCache = RedisResponseCache(...)
        ```
    """

    async def get(self, key: str) -> Any | None:
        """Fetch a cached value.

        Args:
            key: The cache key

        Returns:
            The cached value, or None on a miss
        """
        ...

    async def set(self, key: str, value: Any) -> None:
        """Store a value under key, replacing any previous value.

        Args:
            key: The cache key
            value: JSON-compatible value to cache
        """
        ...

    async def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries deleted
        """
        ...

    async def count(self) -> int:
        """Count live entries.

        Returns:
            Number of cached entries
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
