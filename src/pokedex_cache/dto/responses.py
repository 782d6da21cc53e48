"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class PokemonItem(BaseModel):
    """Single Pokémon record (in pokemons array)."""

    id: int = Field(..., description="Store-assigned identifier")
    name: str = Field(..., description="Unique Pokémon name")
    types: list[str] = Field(default_factory=list, description="Elemental types")
    sprite: str | None = Field(None, description="Sprite image URL")


class GetPokemonResponse(BaseModel):
    """Response DTO for the getPokemon procedure."""

    model_config = ConfigDict(populate_by_name=True)

    pokemons: list[PokemonItem] = Field(
        default_factory=list,
        description="Matching Pokémon, in store order",
    )
    has_next: bool = Field(
        False,
        alias="hasNext",
        description="Whether another page of matches exists",
    )


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    backend: str = Field(..., description="Cache backend: 'memory' or 'redis'")
    total_entries: int = Field(..., description="Number of cached responses", ge=0)
    hits: int = Field(..., description="Cache hits since startup", ge=0)
    misses: int = Field(..., description="Cache misses since startup", ge=0)
    ttl_seconds: int = Field(..., description="Entry lifetime (0 = never expires)", ge=0)
    max_entries: int | None = Field(
        None,
        description="In-memory capacity (0 = unbounded); null for Redis",
        ge=0,
    )


class ClearCacheResponse(BaseModel):
    """Response DTO for cache clear operation."""

    success: bool = Field(..., description="Whether the operation succeeded")
    deleted_count: int = Field(..., description="Number of entries removed", ge=0)
    message: str = Field(..., description="Human-readable status message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the Pokémon store is reachable")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
