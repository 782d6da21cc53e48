"""SQLite implementation of PokemonStore.

Schema:
- **pokemon**: id (PK, insertion order), name (UNIQUE, case-sensitive),
  types (JSON list of strings), sprite (nullable URL).

Paged reads order by id. The look-ahead query that decides `has_next`
uses the same filter and ordering with offset = page * limit and LIMIT 1,
so the full match set is never counted.
"""

import asyncio
import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import aiosqlite

from pokedex_cache.config import settings
from pokedex_cache.entities import PokemonEntity, PokemonPage
from pokedex_cache.errors import DataAccessError

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, types, sprite"

# Largest value SQLite accepts as an INTEGER parameter
SQLITE_MAX_INTEGER = 2**63 - 1


class SqlitePokemonStore:
    """aiosqlite implementation of PokemonStore.

    This class satisfies the PokemonStore protocol through structural
    typing - no explicit inheritance needed.

    A single connection is shared; an asyncio.Lock serialises statements
    on it. Every aiosqlite error is logged and re-raised as DataAccessError.
    """

    def __init__(self, database_path: str | None = None) -> None:
        """Initialize the store.

        Args:
            database_path: SQLite file path or ":memory:". Defaults to
                the path from settings.database_url.
        """
        self._database_path = database_path or settings.database_path
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def create(cls, database_path: str | None = None) -> "SqlitePokemonStore":
        """Factory method to create SqlitePokemonStore with defaults.

        Args:
            database_path: Database location. If None, uses settings.

        Returns:
            Configured (not yet connected) SqlitePokemonStore
        """
        return cls(database_path=database_path)

    async def connect(self) -> None:
        """Open the connection and create the schema if needed.

        Raises:
            DataAccessError: If the database cannot be opened
        """
        if self._conn is not None:
            return

        if self._database_path != ":memory:":
            Path(self._database_path).parent.mkdir(parents=True, exist_ok=True)

        try:
            self._conn = await aiosqlite.connect(self._database_path)
            self._conn.row_factory = aiosqlite.Row
            await self._create_tables()
        except aiosqlite.Error as e:
            logger.error("Failed to open database %s: %s", self._database_path, e, exc_info=True)
            raise DataAccessError(f"Failed to open database: {e}") from e

        logger.info("Database connected (sqlite): %s", self._database_path)

    async def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.info("Database connection closed")

    async def _create_tables(self) -> None:
        async with self._lock:
            await self._conn.execute(  # type: ignore[union-attr]
                """
                CREATE TABLE IF NOT EXISTS pokemon (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL UNIQUE,
                    types TEXT NOT NULL DEFAULT '[]',
                    sprite TEXT
                )
                """
            )
            await self._conn.commit()  # type: ignore[union-attr]

    # ==================== QUERIES ====================

    async def find_by_name(self, name: str) -> PokemonEntity | None:
        rows = await self._fetchall(
            f"SELECT {_COLUMNS} FROM pokemon WHERE name = ?",
            (name,),
        )
        return self._row_to_entity(rows[0]) if rows else None

    async def find_by_names(self, names: list[str], page: int, limit: int) -> PokemonPage:
        if not names:
            return PokemonPage.empty()

        placeholders = ", ".join("?" for _ in names)
        return await self._paginate(f"WHERE name IN ({placeholders})", tuple(names), page, limit)

    async def find_all(self, page: int, limit: int) -> PokemonPage:
        return await self._paginate("", (), page, limit)

    async def find_by_type(self, type: str, page: int, limit: int) -> PokemonPage:
        return await self._paginate(
            "WHERE EXISTS (SELECT 1 FROM json_each(pokemon.types) WHERE json_each.value = ?)",
            (type,),
            page,
            limit,
        )

    async def _paginate(
        self,
        where: str,
        params: tuple[Any, ...],
        page: int,
        limit: int,
    ) -> PokemonPage:
        """Fetch one page plus the single-row look-ahead for the same filter."""
        offset = (page - 1) * limit
        next_offset = page * limit

        # No table can hold that many rows, so the page is past the end.
        if offset > SQLITE_MAX_INTEGER:
            return PokemonPage.empty()

        rows = await self._fetchall(
            f"SELECT {_COLUMNS} FROM pokemon {where} ORDER BY id LIMIT ? OFFSET ?",
            (*params, min(limit, SQLITE_MAX_INTEGER), offset),
        )

        has_next = False
        if next_offset <= SQLITE_MAX_INTEGER:
            ahead = await self._fetchall(
                f"SELECT COUNT(*) AS count FROM "
                f"(SELECT id FROM pokemon {where} ORDER BY id LIMIT 1 OFFSET ?)",
                (*params, next_offset),
            )
            has_next = ahead[0]["count"] > 0

        return PokemonPage(
            pokemons=tuple(self._row_to_entity(row) for row in rows),
            has_next=has_next,
        )

    async def _fetchall(self, sql: str, params: Sequence[Any]) -> list[aiosqlite.Row]:
        if self._conn is None:
            raise DataAccessError("Database is not connected. Call connect() first.")

        try:
            async with self._lock:
                cursor = await self._conn.execute(sql, params)
                return list(await cursor.fetchall())
        except aiosqlite.Error as e:
            logger.error("Pokémon query failed: %s", e, exc_info=True)
            raise DataAccessError(f"Pokémon query failed: {e}") from e

    @staticmethod
    def _row_to_entity(row: aiosqlite.Row) -> PokemonEntity:
        return PokemonEntity(
            id=row["id"],
            name=row["name"],
            types=tuple(json.loads(row["types"])),
            sprite=row["sprite"],
        )

    # ==================== SEEDING ====================

    async def upsert_many(self, pokemons: Iterable[dict[str, Any]]) -> int:
        """Insert or update Pokémon records, keyed by name.

        Existing rows keep their id, so store order is stable across reseeds.

        Args:
            pokemons: Dicts with "name", optional "types" and "sprite"

        Returns:
            Number of records written

        Raises:
            DataAccessError: If the write fails
        """
        if self._conn is None:
            raise DataAccessError("Database is not connected. Call connect() first.")

        rows = [
            (p["name"], json.dumps(list(p.get("types") or [])), p.get("sprite"))
            for p in pokemons
        ]

        try:
            async with self._lock:
                await self._conn.executemany(
                    """
                    INSERT INTO pokemon (name, types, sprite)
                    VALUES (?, ?, ?)
                    ON CONFLICT(name) DO UPDATE SET
                        types = excluded.types,
                        sprite = excluded.sprite
                    """,
                    rows,
                )
                await self._conn.commit()
        except aiosqlite.Error as e:
            logger.error("Failed to upsert Pokémon: %s", e, exc_info=True)
            raise DataAccessError(f"Failed to upsert Pokémon: {e}") from e

        logger.info("Upserted %d Pokémon", len(rows))
        return len(rows)

    async def health_check(self) -> bool:
        """Check if the database answers a trivial query.

        Returns:
            True if healthy, False otherwise
        """
        try:
            await self._fetchall("SELECT 1", ())
            return True
        except DataAccessError:
            return False

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with backend name and database path
        """
        return {
            "backend": "sqlite",
            "database_path": self._database_path,
        }
