"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from pokedex_cache.config import settings
from pokedex_cache.handlers import PokemonHandler
from pokedex_cache.protocols import ResponseCache
from pokedex_cache.repositories import (
    InMemoryResponseCache,
    RedisResponseCache,
    SqlitePokemonStore,
)
from pokedex_cache.services import PokemonQueryService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> PokemonHandler:
    """Dependency injection for PokemonHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The PokemonHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "pokemon_handler", None)
    if handler is None:
        raise RuntimeError("PokemonHandler not initialized. Check lifespan setup.")
    return handler


def create_response_cache() -> ResponseCache:
    """Build the cache backend selected by CACHE_BACKEND."""
    if settings.cache_backend == "redis":
        return RedisResponseCache.create()
    return InMemoryResponseCache.create()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Store (data access) - connected SQLite database
    2. Cache (data access) - memory or Redis, per settings
    3. Service (business logic) - stored in app.state.query_service
    4. Handler (HTTP endpoints) - stored in app.state.pokemon_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes connections and removes all services from app.state on shutdown
    """
    store = SqlitePokemonStore.create()
    await store.connect()

    cache = create_response_cache()

    query_service = PokemonQueryService.create(store=store, cache=cache)
    pokemon_handler = PokemonHandler(query_service=query_service)

    # Store in app.state (FastAPI pattern)
    app.state.store = store
    app.state.cache = cache
    app.state.query_service = query_service
    app.state.pokemon_handler = pokemon_handler

    logger.info("Pokémon query service initialized")
    logger.info("Cache backend: %s (ttl=%ss)", settings.cache_backend, settings.cache_ttl)
    logger.info("Health: %s", await query_service.is_healthy())

    yield

    # Cleanup - close connections and remove from app.state
    if isinstance(cache, RedisResponseCache):
        await cache.close()
    await store.close()

    del app.state.pokemon_handler
    del app.state.query_service
    del app.state.cache
    del app.state.store
    logger.info("Pokémon query service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[PokemonHandler, Depends(get_handler)]
