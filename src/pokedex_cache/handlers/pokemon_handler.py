"""HTTP handlers for Pokémon queries.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.
"""

import logging

from fastapi import HTTPException, status

from pokedex_cache.dto import (
    CacheStatsResponse,
    ClearCacheResponse,
    GetPokemonRequest,
    GetPokemonResponse,
    HealthCheckResponse,
    PokemonItem,
)
from pokedex_cache.entities import PokemonPage, build_query
from pokedex_cache.errors import DataAccessError
from pokedex_cache.services import PokemonQueryService

logger = logging.getLogger(__name__)


class PokemonHandler:
    """HTTP handlers for the getPokemon procedure and cache administration.

    This handler delegates business logic to PokemonQueryService
    and handles HTTP-specific concerns like:
    - Converting request DTOs to query variants
    - Converting entities to response DTOs
    - Mapping DataAccessError to 503 and anything else to 500

    Request validation (page >= 1, 1 <= limit <= 100) happens in the DTO,
    before the handler is reached.
    """

    def __init__(self, query_service: PokemonQueryService) -> None:
        """Initialize the Pokémon handler.

        Args:
            query_service: The query service for business logic (required).
        """
        self._service = query_service

    async def get_pokemon(self, request: GetPokemonRequest) -> GetPokemonResponse:
        """Handle getPokemon requests.

        Args:
            request: The validated request DTO

        Returns:
            GetPokemonResponse with the matching page

        Raises:
            HTTPException: 503 if the store is unavailable, 500 otherwise
        """
        query = build_query(
            name=request.name,
            names=request.names,
            type=request.type,
            page=request.page,
            limit=request.limit,
        )

        try:
            page = await self._service.get_pokemon(query)
        except DataAccessError as e:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Pokémon store unavailable: {e}",
            ) from e
        except Exception as e:
            logger.exception("getPokemon failed for %r", query)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get Pokémon: {e}",
            ) from e

        return self._to_response(page)

    @staticmethod
    def _to_response(page: PokemonPage) -> GetPokemonResponse:
        return GetPokemonResponse(
            pokemons=[
                PokemonItem(id=p.id, name=p.name, types=list(p.types), sprite=p.sprite)
                for p in page.pokemons
            ],
            has_next=page.has_next,
        )

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests.

        Returns:
            CacheStatsResponse with cache statistics

        Raises:
            HTTPException: If an error occurs while fetching stats
        """
        try:
            stats = await self._service.get_stats()

            return CacheStatsResponse(
                backend=stats.get("backend", "unknown"),
                total_entries=stats.get("total_entries", 0),
                hits=stats.get("hits", 0),
                misses=stats.get("misses", 0),
                ttl_seconds=stats.get("ttl", 0),
                max_entries=stats.get("max_entries"),
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get stats: {e}",
            ) from e

    async def clear_cache(self) -> ClearCacheResponse:
        """Handle DELETE /cache/clear requests.

        Returns:
            ClearCacheResponse with the number of deleted entries
        """
        try:
            count = await self._service.clear_cache()

            return ClearCacheResponse(
                success=True,
                deleted_count=count,
                message="Cache cleared successfully",
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to clear cache: {e}",
            ) from e

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse with store and cache health
        """
        health = await self._service.is_healthy()
        is_healthy = health["store"] and health["cache"]

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            store_healthy=health["store"],
            cache_healthy=health["cache"],
        )
