from typing import Annotated, Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from pokedex_cache.api.dependencies import HandlerDep, lifespan
from pokedex_cache.config import configure_logging, settings
from pokedex_cache.dto import (
    CacheStatsResponse,
    ClearCacheResponse,
    GetPokemonRequest,
    GetPokemonResponse,
    HealthCheckResponse,
)

configure_logging()

app = FastAPI(
    title="Pokédex Cache API",
    description="Paginated Pokémon lookup with a response cache in front of SQLite",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Pokédex Cache API",
        "version": "0.1.0",
        "endpoints": {
            "getPokemon": "/rpc/getPokemon",
            "pokemon": "/pokemon",
            "stats": "/cache/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.post("/rpc/getPokemon", response_model=GetPokemonResponse)
async def get_pokemon_rpc(request: GetPokemonRequest, handler: HandlerDep) -> GetPokemonResponse:
    """
    Fetch Pokémon by name, by a list of names, or as a paginated listing.

    Args:
        request: getPokemon input (name, names, type, page, limit).

    Returns:
        The matching Pokémon and whether another page exists.
    """
    return await handler.get_pokemon(request)


@app.get("/pokemon", response_model=GetPokemonResponse)
async def get_pokemon(
    handler: HandlerDep,
    name: str | None = None,
    names: Annotated[list[str] | None, Query()] = None,
    type: str | None = None,
    page: Annotated[int | None, Query(ge=1)] = None,
    limit: Annotated[int | None, Query(ge=1, le=settings.max_limit)] = None,
) -> GetPokemonResponse:
    """getPokemon over query parameters (`names` may be repeated)."""
    request = GetPokemonRequest(name=name, names=names, type=type, page=page, limit=limit)
    return await handler.get_pokemon(request)


@app.get("/cache/stats", response_model=CacheStatsResponse)
async def get_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get response cache statistics."""
    return await handler.get_stats()


@app.delete("/cache/clear", response_model=ClearCacheResponse)
async def clear_cache(handler: HandlerDep) -> ClearCacheResponse:
    """Clear all cached responses."""
    return await handler.clear_cache()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pokedex_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
