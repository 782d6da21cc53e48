"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import GetPokemonRequest
from .responses import (
    CacheStatsResponse,
    ClearCacheResponse,
    GetPokemonResponse,
    HealthCheckResponse,
    PokemonItem,
)

__all__ = [
    "GetPokemonRequest",
    "GetPokemonResponse",
    "PokemonItem",
    "CacheStatsResponse",
    "ClearCacheResponse",
    "HealthCheckResponse",
]
