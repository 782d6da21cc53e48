"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from pokedex_cache.config import settings


class GetPokemonRequest(BaseModel):
    """Request DTO for the getPokemon procedure.

    Priority when several fields are set: names > name > type > full listing.
    The handler converts this to a query variant for the service layer.
    """

    name: str | None = Field(None, description="Name of a single Pokémon to fetch")
    names: list[str] | None = Field(None, description="Names of Pokémon to fetch together")
    type: str | None = Field(None, description="Only list Pokémon of this type")
    page: int | None = Field(
        None, description=f"Page number (defaults to {settings.default_page})", ge=1
    )
    limit: int | None = Field(
        None,
        description=f"Items per page (defaults to {settings.default_limit}, max {settings.max_limit})",
        ge=1,
        le=settings.max_limit,
    )
