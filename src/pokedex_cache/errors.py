"""Exception types raised by the query/cache layer.

Absence of a record is not an error: lookups that match nothing return an
empty page instead.
"""


class PokedexCacheError(Exception):
    """Base class for errors raised by this package."""


class DataAccessError(PokedexCacheError):
    """Raised when the Pokémon store is unreachable or a query fails."""
