"""Pokémon record and paged result domain entities."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PokemonEntity:
    """Domain entity for a stored Pokémon record.

    Owned by the data store; the query layer only reads it.

    Attributes:
        id: Store-assigned primary key (insertion order)
        name: Unique name, stored case-sensitively
        types: Elemental types, e.g. ("grass", "poison")
        sprite: Optional sprite image URL
    """

    id: int
    name: str
    types: tuple[str, ...] = ()
    sprite: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "types": list(self.types),
            "sprite": self.sprite,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PokemonEntity":
        """Rebuild an entity from the output of to_dict()."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            types=tuple(data.get("types") or ()),
            sprite=data.get("sprite"),
        )


@dataclass(frozen=True)
class PokemonPage:
    """One page of Pokémon records.

    Attributes:
        pokemons: Records on this page, in store order (at most `limit`)
        has_next: Whether at least one matching record exists past this page
    """

    pokemons: tuple[PokemonEntity, ...] = field(default_factory=tuple)
    has_next: bool = False

    @classmethod
    def empty(cls) -> "PokemonPage":
        """The result returned when nothing matched."""
        return cls(pokemons=(), has_next=False)

    @classmethod
    def single(cls, pokemon: PokemonEntity) -> "PokemonPage":
        """Wrap a single record as a one-item page with no next page."""
        return cls(pokemons=(pokemon,), has_next=False)

    @property
    def is_empty(self) -> bool:
        return not self.pokemons

    def to_dict(self) -> dict[str, Any]:
        """Convert to the cached response shape ({pokemons, hasNext})."""
        return {
            "pokemons": [p.to_dict() for p in self.pokemons],
            "hasNext": self.has_next,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PokemonPage":
        """Rebuild a page from the output of to_dict()."""
        return cls(
            pokemons=tuple(PokemonEntity.from_dict(p) for p in data.get("pokemons", [])),
            has_next=bool(data.get("hasNext", False)),
        )
