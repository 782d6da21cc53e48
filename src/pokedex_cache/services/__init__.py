"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .cache_keys import build_cache_key, listing_cache_key, name_cache_key, names_cache_key
from .pokemon_service import PokemonQueryService

__all__ = [
    "PokemonQueryService",
    "build_cache_key",
    "listing_cache_key",
    "name_cache_key",
    "names_cache_key",
]
