"""
Tests for the in-process response cache.
"""

import pytest

from pokedex_cache.protocols import ResponseCache
from pokedex_cache.repositories import InMemoryResponseCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_satisfies_protocol():
    assert isinstance(InMemoryResponseCache(max_entries=0, ttl=0), ResponseCache)


@pytest.mark.asyncio
class TestInMemoryResponseCache:
    async def test_get_set(self):
        cache = InMemoryResponseCache(max_entries=0, ttl=0)

        assert await cache.get("pokemon:name:name=eevee") is None

        await cache.set("pokemon:name:name=eevee", {"id": 1, "name": "eevee"})
        assert await cache.get("pokemon:name:name=eevee") == {"id": 1, "name": "eevee"}

    async def test_empty_page_is_a_hit(self):
        cache = InMemoryResponseCache(max_entries=0, ttl=0)
        await cache.set("pokemon:all:limit=10&page=9", {"pokemons": [], "hasNext": False})

        assert await cache.get("pokemon:all:limit=10&page=9") is not None

    async def test_unbounded_by_default(self):
        cache = InMemoryResponseCache(max_entries=0, ttl=0)
        for i in range(500):
            await cache.set(f"k{i}", i)

        assert await cache.count() == 500
        assert await cache.get("k0") == 0

    async def test_evicts_least_recently_used(self):
        cache = InMemoryResponseCache(max_entries=2, ttl=0)
        await cache.set("a", 1)
        await cache.set("b", 2)
        await cache.get("a")  # "b" is now the oldest
        await cache.set("c", 3)

        assert await cache.get("b") is None
        assert await cache.get("a") == 1
        assert await cache.get("c") == 3
        assert await cache.count() == 2

    async def test_entries_expire_after_ttl(self):
        clock = FakeClock()
        cache = InMemoryResponseCache(max_entries=0, ttl=60, clock=clock)
        await cache.set("a", 1)

        clock.now += 59
        assert await cache.get("a") == 1

        clock.now += 1
        assert await cache.count() == 0
        assert await cache.get("a") is None

    async def test_set_sweeps_expired_entries(self):
        clock = FakeClock()
        cache = InMemoryResponseCache(max_entries=0, ttl=60, clock=clock)
        for i in range(50):
            await cache.set(f"k{i}", i)

        clock.now += 60
        await cache.set("fresh", 1)

        assert len(cache._entries) == 1
        assert await cache.get("fresh") == 1

    async def test_clear_reports_live_entries_only(self):
        clock = FakeClock()
        cache = InMemoryResponseCache(max_entries=0, ttl=60, clock=clock)
        await cache.set("old", 1)
        clock.now += 30
        await cache.set("new", 2)

        clock.now += 30  # "old" expires, "new" has 30s left
        assert await cache.count() == 1
        assert await cache.clear() == 1
        assert await cache.count() == 0

    async def test_overwrite_keeps_latest_value(self):
        cache = InMemoryResponseCache(max_entries=0, ttl=0)
        await cache.set("a", 1)
        await cache.set("a", 2)

        assert await cache.get("a") == 2
        assert await cache.count() == 1

    async def test_clear(self):
        cache = InMemoryResponseCache(max_entries=0, ttl=0)
        await cache.set("a", 1)
        await cache.set("b", 2)

        assert await cache.clear() == 2
        assert await cache.count() == 0
        assert await cache.health_check() is True

    async def test_stats(self):
        cache = InMemoryResponseCache(max_entries=5, ttl=30)
        assert cache.get_stats() == {"backend": "memory", "ttl": 30, "max_entries": 5}
