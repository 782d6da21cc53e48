"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (in-memory → Redis, SQLite → another store)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .pokemon_store import PokemonStore
from .response_cache import ResponseCache

__all__ = [
    "PokemonStore",
    "ResponseCache",
]
