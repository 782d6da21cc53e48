#!/usr/bin/env python3
"""
Demo script for the Pokédex cache.

Seeds the configured SQLite database with a few Pokémon, then runs the
getPokemon query shapes twice to show cache hits.
"""

import asyncio

from pokedex_cache import (
    AllQuery,
    ByNameQuery,
    ByNamesQuery,
    ByTypeQuery,
    InMemoryResponseCache,
    PokemonQueryService,
    SqlitePokemonStore,
)
from pokedex_cache.config import configure_logging

SAMPLE_POKEMON = [
    {"name": "bulbasaur", "types": ["grass", "poison"]},
    {"name": "charmander", "types": ["fire"]},
    {"name": "squirtle", "types": ["water"]},
    {"name": "pikachu", "types": ["electric"]},
    {"name": "gengar", "types": ["ghost", "poison"]},
    {"name": "eevee", "types": ["normal"]},
]


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def run_query(service: PokemonQueryService, label: str, query) -> None:
    """Run a query and print the resulting names."""
    page = await service.get_pokemon(query)
    names = ", ".join(p.name for p in page.pokemons) or "(none)"
    print(f"  {label:<32} -> {names} | hasNext={page.has_next}")


async def main() -> None:
    """Run all demos."""
    configure_logging()

    store = SqlitePokemonStore.create()
    await store.connect()

    try:
        print_section("Seeding")
        count = await store.upsert_many(SAMPLE_POKEMON)
        print(f"  ✓ Upserted {count} Pokémon")

        service = PokemonQueryService.create(store=store, cache=InMemoryResponseCache.create())

        queries = [
            ("name=pikachu", ByNameQuery(name="pikachu")),
            ("name=Pikachu", ByNameQuery(name="Pikachu")),
            ("names=[squirtle, bulbasaur]", ByNamesQuery(names=("squirtle", "bulbasaur"))),
            ("all page=1 limit=4", AllQuery(page=1, limit=4)),
            ("all page=2 limit=4", AllQuery(page=2, limit=4)),
            ("type=poison", ByTypeQuery(type="poison")),
        ]

        for round_no in (1, 2):
            print_section(f"Round {round_no}")
            for label, query in queries:
                await run_query(service, label, query)

        print_section("Cache stats")
        for key, value in (await service.get_stats()).items():
            print(f"  {key}: {value}")

    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
