"""Pokémon data store protocol.

Read-only access to the Pokémon collection. Every paged query pairs the
page fetch with a bounded look-ahead (offset = page * limit, at most one
row) to decide `has_next` without counting the full match set.
"""

from typing import Protocol, runtime_checkable

from pokedex_cache.entities import PokemonEntity, PokemonPage


@runtime_checkable
class PokemonStore(Protocol):
    """Protocol for Pokémon data stores.

    Implementations raise `DataAccessError` when the store is unreachable
    or a query fails, and never retry.
    """

    async def find_by_name(self, name: str) -> PokemonEntity | None:
        """Find a Pokémon by exact (case-sensitive) name.

        Args:
            name: The name to match

        Returns:
            The record, or None if no exact match exists
        """
        ...

    async def find_by_names(self, names: list[str], page: int, limit: int) -> PokemonPage:
        """Page through Pokémon whose name is in `names`.

        Args:
            names: Names to match
            page: 1-based page number
            limit: Page size

        Returns:
            The requested page
        """
        ...

    async def find_all(self, page: int, limit: int) -> PokemonPage:
        """Page through every Pokémon.

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            The requested page
        """
        ...

    async def find_by_type(self, type: str, page: int, limit: int) -> PokemonPage:
        """Page through Pokémon having `type` among their types.

        Args:
            type: Type to match, e.g. "fire"
            page: 1-based page number
            limit: Page size

        Returns:
            The requested page
        """
        ...

    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
