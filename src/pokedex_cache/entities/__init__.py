"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .pokemon import PokemonEntity, PokemonPage
from .query import (
    AllQuery,
    ByNameQuery,
    ByNamesQuery,
    ByTypeQuery,
    PokemonQuery,
    build_query,
)

__all__ = [
    "PokemonEntity",
    "PokemonPage",
    "AllQuery",
    "ByNameQuery",
    "ByNamesQuery",
    "ByTypeQuery",
    "PokemonQuery",
    "build_query",
]
