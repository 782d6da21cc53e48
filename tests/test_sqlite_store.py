"""
Tests for the SQLite Pokémon store.
"""

import pytest
import pytest_asyncio

from pokedex_cache.errors import DataAccessError
from pokedex_cache.protocols import PokemonStore
from pokedex_cache.repositories import SqlitePokemonStore

SEED = [
    {"name": "bulbasaur", "types": ["grass", "poison"]},
    {"name": "pikachu", "types": ["electric"], "sprite": "https://img.example/25.png"},
    {"name": "gengar", "types": ["ghost", "poison"]},
    {"name": "charmander", "types": ["fire"]},
]


@pytest_asyncio.fixture
async def store():
    store = SqlitePokemonStore(database_path=":memory:")
    await store.connect()
    await store.upsert_many(SEED)
    yield store
    await store.close()


def test_satisfies_protocol():
    assert isinstance(SqlitePokemonStore(database_path=":memory:"), PokemonStore)


@pytest.mark.asyncio
class TestSqlitePokemonStore:
    async def test_find_by_name(self, store):
        pikachu = await store.find_by_name("pikachu")

        assert pikachu is not None
        assert pikachu.id == 2
        assert pikachu.types == ("electric",)
        assert pikachu.sprite == "https://img.example/25.png"

    async def test_find_by_name_is_case_sensitive(self, store):
        assert await store.find_by_name("Pikachu") is None
        assert await store.find_by_name("missingno") is None

    async def test_find_by_names_in_store_order(self, store):
        page = await store.find_by_names(["pikachu", "bulbasaur"], page=1, limit=4)

        assert [p.name for p in page.pokemons] == ["bulbasaur", "pikachu"]
        assert page.has_next is False

    async def test_find_by_names_paging(self, store):
        names = ["bulbasaur", "pikachu", "gengar"]

        first = await store.find_by_names(names, page=1, limit=2)
        second = await store.find_by_names(names, page=2, limit=2)

        assert [p.name for p in first.pokemons] == ["bulbasaur", "pikachu"]
        assert first.has_next is True
        assert [p.name for p in second.pokemons] == ["gengar"]
        assert second.has_next is False

    async def test_find_by_names_empty(self, store):
        assert (await store.find_by_names([], page=1, limit=10)).is_empty
        assert (await store.find_by_names(["missingno"], page=1, limit=10)).is_empty

    async def test_find_all_paging(self, store):
        first = await store.find_all(page=1, limit=3)
        second = await store.find_all(page=2, limit=3)

        assert [p.name for p in first.pokemons] == ["bulbasaur", "pikachu", "gengar"]
        assert first.has_next is True
        assert [p.name for p in second.pokemons] == ["charmander"]
        assert second.has_next is False

    async def test_exact_multiple_of_limit_has_no_next_page(self, store):
        page = await store.find_all(page=2, limit=2)

        assert len(page.pokemons) == 2
        assert page.has_next is False

    async def test_two_records_one_per_page(self):
        store = SqlitePokemonStore(database_path=":memory:")
        await store.connect()
        try:
            await store.upsert_many([{"name": "bulbasaur"}, {"name": "pikachu"}])

            first = await store.find_all(page=1, limit=1)
            second = await store.find_all(page=2, limit=1)

            assert [p.name for p in first.pokemons] == ["bulbasaur"]
            assert first.has_next is True
            assert [p.name for p in second.pokemons] == ["pikachu"]
            assert second.has_next is False
        finally:
            await store.close()

    async def test_page_beyond_integer_range_is_empty(self, store):
        page = await store.find_all(page=10**18, limit=100)

        assert page.is_empty
        assert page.has_next is False

        by_type = await store.find_by_type("poison", page=10**18, limit=100)
        assert by_type.is_empty

    async def test_next_page_offset_beyond_integer_range(self, store):
        # The page offset still fits; only the look-ahead offset overflows.
        page = await store.find_all(page=2, limit=2**62)

        assert page.is_empty
        assert page.has_next is False

    async def test_find_by_type(self, store):
        page = await store.find_by_type("poison", page=1, limit=1)

        assert [p.name for p in page.pokemons] == ["bulbasaur"]
        assert page.has_next is True

        last = await store.find_by_type("poison", page=2, limit=1)
        assert [p.name for p in last.pokemons] == ["gengar"]
        assert last.has_next is False

    async def test_find_by_type_matches_whole_type(self, store):
        assert (await store.find_by_type("pois", page=1, limit=10)).is_empty

    async def test_upsert_updates_in_place(self, store):
        await store.upsert_many([{"name": "pikachu", "types": ["electric", "fairy"]}])

        pikachu = await store.find_by_name("pikachu")
        assert pikachu.id == 2
        assert pikachu.types == ("electric", "fairy")

    async def test_health_check(self, store):
        assert await store.health_check() is True

    async def test_queries_fail_when_not_connected(self):
        store = SqlitePokemonStore(database_path=":memory:")

        with pytest.raises(DataAccessError):
            await store.find_all(page=1, limit=10)
        assert await store.health_check() is False
