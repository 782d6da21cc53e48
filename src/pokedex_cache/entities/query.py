"""Query request variants.

Exactly one variant describes a request. `build_query` picks it with the
priority: names > name > type > unrestricted listing.
"""

from dataclasses import dataclass

from pokedex_cache.config import settings


@dataclass(frozen=True)
class ByNameQuery:
    """Look up a single Pokémon by exact name."""

    name: str


@dataclass(frozen=True)
class ByNamesQuery:
    """Page through the Pokémon whose names are in `names`."""

    names: tuple[str, ...]
    page: int = settings.default_page
    limit: int = settings.default_limit


@dataclass(frozen=True)
class ByTypeQuery:
    """Page through the Pokémon having `type` among their types."""

    type: str
    page: int = settings.default_page
    limit: int = settings.default_limit


@dataclass(frozen=True)
class AllQuery:
    """Page through every Pokémon."""

    page: int = settings.default_page
    limit: int = settings.default_limit


PokemonQuery = ByNameQuery | ByNamesQuery | ByTypeQuery | AllQuery


def build_query(
    name: str | None = None,
    names: list[str] | tuple[str, ...] | None = None,
    type: str | None = None,
    page: int | None = None,
    limit: int | None = None,
) -> PokemonQuery:
    """Select the query variant for a set of request fields.

    Empty `names` and empty `name` count as absent. Range checks on page and
    limit happen at the API boundary, not here.

    Args:
        name: Single Pokémon name
        names: Pokémon names to fetch together
        type: Type filter for the listing
        page: 1-based page number (defaults to DEFAULT_PAGE)
        limit: Page size (defaults to DEFAULT_LIMIT)

    Returns:
        The active query variant
    """
    page = page or settings.default_page
    limit = limit or settings.default_limit

    if names:
        return ByNamesQuery(names=tuple(names), page=page, limit=limit)
    if name:
        return ByNameQuery(name=name)
    if type:
        return ByTypeQuery(type=type, page=page, limit=limit)
    return AllQuery(page=page, limit=limit)
