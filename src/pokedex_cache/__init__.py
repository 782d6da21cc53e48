"""Pokédex Cache - paginated Pokémon lookup with a response cache.

This package provides a layered architecture for the getPokemon query:

Layers:
    - protocols: Interface contracts (PokemonStore, ResponseCache)
    - repositories: Data access implementations (SQLite, in-memory, Redis)
    - services: Business logic (query dispatch, cache keys)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from pokedex_cache.repositories import InMemoryResponseCache, SqlitePokemonStore
    from pokedex_cache.services import PokemonQueryService

    store = SqlitePokemonStore.create()
    await store.connect()
    service = PokemonQueryService.create(store=store, cache=InMemoryResponseCache.create())
    ```

For HTTP API:
    ```python
    from pokedex_cache.api.app import app
    ```
"""

from pokedex_cache.config import get_redis_client, settings
from pokedex_cache.dto import GetPokemonRequest, GetPokemonResponse
from pokedex_cache.entities import (
    AllQuery,
    ByNameQuery,
    ByNamesQuery,
    ByTypeQuery,
    PokemonEntity,
    PokemonPage,
    build_query,
)
from pokedex_cache.errors import DataAccessError, PokedexCacheError
from pokedex_cache.handlers import PokemonHandler
from pokedex_cache.protocols import PokemonStore, ResponseCache
from pokedex_cache.repositories import (
    InMemoryResponseCache,
    RedisResponseCache,
    SqlitePokemonStore,
)
from pokedex_cache.services import PokemonQueryService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Errors
    "PokedexCacheError",
    "DataAccessError",
    # Protocols (interfaces)
    "PokemonStore",
    "ResponseCache",
    # Services (business logic)
    "PokemonQueryService",
    # Handlers (HTTP)
    "PokemonHandler",
    # Repositories (data access)
    "SqlitePokemonStore",
    "InMemoryResponseCache",
    "RedisResponseCache",
    # Entities (domain models)
    "PokemonEntity",
    "PokemonPage",
    "AllQuery",
    "ByNameQuery",
    "ByNamesQuery",
    "ByTypeQuery",
    "build_query",
    # DTOs (API contracts)
    "GetPokemonRequest",
    "GetPokemonResponse",
]
