"""Fake PokemonStore implementations for tests."""

from collections import Counter

from pokedex_cache.entities import PokemonEntity, PokemonPage
from pokedex_cache.errors import DataAccessError


class CountingPokemonStore:
    """In-memory PokemonStore that records every store access.

    Records are kept in insertion order, which is the store default order.
    Name matching is exact (case-sensitive), as in the SQLite store.
    """

    def __init__(self, pokemons: list[PokemonEntity] | None = None) -> None:
        self.pokemons = list(pokemons or [])
        self.calls: Counter[str] = Counter()

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    async def find_by_name(self, name):
        self.calls["find_by_name"] += 1
        return next((p for p in self.pokemons if p.name == name), None)

    async def find_by_names(self, names, page, limit):
        self.calls["find_by_names"] += 1
        wanted = set(names)
        return self._paginate([p for p in self.pokemons if p.name in wanted], page, limit)

    async def find_all(self, page, limit):
        self.calls["find_all"] += 1
        return self._paginate(self.pokemons, page, limit)

    async def find_by_type(self, type, page, limit):
        self.calls["find_by_type"] += 1
        return self._paginate([p for p in self.pokemons if type in p.types], page, limit)

    async def health_check(self):
        return True

    @staticmethod
    def _paginate(matches, page, limit):
        offset = (page - 1) * limit
        ahead = matches[page * limit : page * limit + 1]
        return PokemonPage(pokemons=tuple(matches[offset : offset + limit]), has_next=len(ahead) > 0)

class FailingPokemonStore(CountingPokemonStore):
    """Store whose every query fails as if the database were down."""

    def _fail(self, method):
        self.calls[method] += 1
        raise DataAccessError("database is locked")

    async def find_by_name(self, name):
        self._fail("find_by_name")

    async def find_by_names(self, names, page, limit):
        self._fail("find_by_names")

    async def find_all(self, page, limit):
        self._fail("find_all")

    async def find_by_type(self, type, page, limit):
        self._fail("find_by_type")

    async def health_check(self):
        return False


BULBASAUR = PokemonEntity(id=1, name="bulbasaur", types=("grass", "poison"))
PIKACHU = PokemonEntity(id=2, name="pikachu", types=("electric",))
CHARMANDER = PokemonEntity(id=3, name="charmander", types=("fire",))
