"""Repository layer for data access.

This layer abstracts external dependencies (SQLite, Redis) behind
protocol-based interfaces. This enables:
- Easy swapping of implementations (in-memory cache → Redis, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from pokedex_cache.protocols import PokemonStore, ResponseCache

from .memory_cache import InMemoryResponseCache
from .redis_cache import RedisResponseCache
from .sqlite_store import SqlitePokemonStore

__all__ = [
    "PokemonStore",
    "ResponseCache",
    "InMemoryResponseCache",
    "RedisResponseCache",
    "SqlitePokemonStore",
]
