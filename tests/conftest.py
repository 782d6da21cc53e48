import pytest

from pokedex_cache.repositories import InMemoryResponseCache
from pokedex_cache.services import PokemonQueryService

from .fakes import BULBASAUR, PIKACHU, CountingPokemonStore, FailingPokemonStore


@pytest.fixture
def pokemons():
    """Two records, in store order."""
    return [BULBASAUR, PIKACHU]


@pytest.fixture
def store(pokemons):
    return CountingPokemonStore(pokemons)


@pytest.fixture
def cache():
    """Unbounded, non-expiring cache regardless of environment settings."""
    return InMemoryResponseCache(max_entries=0, ttl=0)


@pytest.fixture
def service(store, cache):
    return PokemonQueryService(store=store, cache=cache, key_prefix="pokemon")


@pytest.fixture
def failing_store():
    return FailingPokemonStore()


@pytest.fixture
def failing_service(failing_store, cache):
    return PokemonQueryService(store=failing_store, cache=cache, key_prefix="pokemon")
