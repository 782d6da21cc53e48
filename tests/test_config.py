"""
Tests for settings validation.
"""

import pytest

from pokedex_cache.config import Settings


def test_database_path_from_sqlite_url():
    assert Settings(database_url="sqlite:///data/pokemon.db").database_path == "data/pokemon.db"
    assert Settings(database_url="sqlite:///:memory:").database_path == ":memory:"


def test_non_sqlite_url_is_rejected():
    with pytest.raises(ValueError):
        _ = Settings(database_url="postgresql://localhost/pokemon").database_path


@pytest.mark.parametrize(
    "overrides",
    [
        {"cache_backend": "memcached"},
        {"cache_ttl": -1},
        {"cache_max_entries": -5},
        {"default_limit": 0},
        {"default_limit": 11, "max_limit": 10},
        {"default_page": 0},
    ],
)
def test_invalid_settings(overrides):
    with pytest.raises(ValueError):
        Settings(**overrides)


def test_unbounded_cache_by_default():
    settings = Settings(cache_ttl=0, cache_max_entries=0)
    assert settings.cache_ttl == 0
    assert settings.cache_max_entries == 0
