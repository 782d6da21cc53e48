"""Pokémon query service for core business logic.

This service resolves getPokemon requests by coordinating the response
cache and the Pokémon store.
"""

import logging
from typing import Any

from pokedex_cache.config import settings
from pokedex_cache.entities import (
    AllQuery,
    ByNameQuery,
    ByNamesQuery,
    ByTypeQuery,
    PokemonEntity,
    PokemonPage,
    PokemonQuery,
)
from pokedex_cache.protocols import PokemonStore, ResponseCache

from .cache_keys import listing_cache_key, name_cache_key, names_cache_key, normalize_names

logger = logging.getLogger(__name__)


class PokemonQueryService:
    """Core query dispatch service.

    This service depends on PROTOCOLS, not concrete implementations:
    - PokemonStore: SQLite, or any other store
    - ResponseCache: in-process dict, Redis, etc.

    Caching policy differs per query shape:
    - names: empty results are NOT cached
    - name: the bare record is cached; a miss in the store is NOT cached
    - listing (all / type): every result is cached, including empty pages

    Example:
        ```python
        from pokedex_cache.repositories import InMemoryResponseCache, SqlitePokemonStore
        from pokedex_cache.services import PokemonQueryService

        service = PokemonQueryService.create(
            store=SqlitePokemonStore.create(),
            cache=InMemoryResponseCache.create(),
        )
        page = await service.get_pokemon(ByNameQuery(name="pikachu"))
        ```
    """

    def __init__(
        self,
        store: PokemonStore,
        cache: ResponseCache,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the query service.

        Args:
            store: Pokémon data store (required).
            cache: Response cache backend (required).
            key_prefix: Cache key namespace. Defaults to settings.
        """
        self._store = store
        self._cache = cache
        self._prefix = key_prefix or settings.cache_key_prefix
        self._hits = 0
        self._misses = 0

    @classmethod
    def create(
        cls,
        store: PokemonStore,
        cache: ResponseCache,
        key_prefix: str | None = None,
    ) -> "PokemonQueryService":
        """Factory method to create PokemonQueryService with defaults.

        Args:
            store: Pokémon data store (required).
            cache: Response cache backend (required).
            key_prefix: Cache key namespace. If None, uses settings.

        Returns:
            Configured PokemonQueryService
        """
        return cls(store=store, cache=cache, key_prefix=key_prefix)

    async def get_pokemon(self, query: PokemonQuery) -> PokemonPage:
        """Resolve a getPokemon request.

        Args:
            query: The active request variant

        Returns:
            The matching page; an empty page when nothing matched

        Raises:
            DataAccessError: If the store fails (no retry, no cache fallback)
        """
        if isinstance(query, ByNamesQuery):
            return await self._get_by_names(query)
        if isinstance(query, ByNameQuery):
            return await self._get_by_name(query)
        if isinstance(query, ByTypeQuery):
            return await self._get_listing(query.page, query.limit, query.type)
        if isinstance(query, AllQuery):
            return await self._get_listing(query.page, query.limit)
        raise TypeError(f"Unsupported query type: {type(query).__name__}")

    async def _get_by_names(self, query: ByNamesQuery) -> PokemonPage:
        names = normalize_names(query.names)
        key = names_cache_key(names, query.page, query.limit, self._prefix)

        cached = await self._lookup(key)
        if cached is not None:
            return PokemonPage.from_dict(cached)

        page = await self._store.find_by_names(names, query.page, query.limit)
        if page.is_empty:
            return PokemonPage.empty()

        await self._cache.set(key, page.to_dict())
        return page

    async def _get_by_name(self, query: ByNameQuery) -> PokemonPage:
        key = name_cache_key(query.name, self._prefix)

        cached = await self._lookup(key)
        if cached is not None:
            return PokemonPage.single(PokemonEntity.from_dict(cached))

        pokemon = await self._store.find_by_name(query.name)
        if pokemon is None:
            return PokemonPage.empty()

        await self._cache.set(key, pokemon.to_dict())
        return PokemonPage.single(pokemon)

    async def _get_listing(self, page: int, limit: int, type: str | None = None) -> PokemonPage:
        key = listing_cache_key(page, limit, type, self._prefix)

        cached = await self._lookup(key)
        if cached is not None:
            return PokemonPage.from_dict(cached)

        if type:
            result = await self._store.find_by_type(type, page, limit)
        else:
            result = await self._store.find_all(page, limit)

        await self._cache.set(key, result.to_dict())
        return result

    async def _lookup(self, key: str) -> Any | None:
        cached = await self._cache.get(key)
        if cached is None:
            self._misses += 1
            logger.debug("Cache miss: %s", key)
        else:
            self._hits += 1
            logger.debug("Cache hit: %s", key)
        return cached

    async def clear_cache(self) -> int:
        """Clear all cached responses.

        Returns:
            Number of entries deleted
        """
        count = await self._cache.clear()
        logger.info("Response cache cleared (%d entries)", count)
        return count

    async def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with entry count, hit/miss counters and backend settings
        """
        stats: dict[str, Any] = {}
        backend_stats = getattr(self._cache, "get_stats", None)
        if callable(backend_stats):
            stats.update(backend_stats())
        stats["total_entries"] = await self._cache.count()
        stats["hits"] = self._hits
        stats["misses"] = self._misses
        return stats

    async def is_healthy(self) -> dict[str, bool]:
        """Check store and cache health.

        Returns:
            Dictionary with "store" and "cache" health flags
        """
        return {
            "store": await self._store.health_check(),
            "cache": await self._cache.health_check(),
        }

    @property
    def store(self) -> PokemonStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def cache(self) -> ResponseCache:
        """Get the underlying cache (for testing)."""
        return self._cache
