"""HTTP handlers for character lookups.

Handlers convert between service results and DTOs (API contracts).
They handle HTTP concerns like status codes and error responses.
"""

from typing import NoReturn

from fastapi import HTTPException, status

from character_catalog.dto import (
    CharacterListResponse,
    CharacterPageResponse,
    CharacterResponse,
    HealthCheckResponse,
    PageInfoItem,
    StoreStatsResponse,
)
from character_catalog.entities import Character, Failure
from character_catalog.errors import (
    CatalogError,
    DecodeError,
    HttpStatusError,
    InvalidRequestError,
    NotFoundError,
    StoreError,
    TransportError,
)
from character_catalog.services import CharacterService


def error_status(error: CatalogError) -> int:
    """Map a catalog error to the HTTP status this API answers with."""
    if isinstance(error, InvalidRequestError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, (TransportError, StoreError)):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    if isinstance(error, (DecodeError, HttpStatusError)):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _raise_for(failure: Failure) -> NoReturn:
    raise HTTPException(
        status_code=error_status(failure.error),
        detail=failure.error.message,
    ) from failure.error


def _list_response(characters: list[Character]) -> CharacterListResponse:
    items = [CharacterResponse.from_entity(c) for c in characters]
    return CharacterListResponse(count=len(items), characters=items)


class CharacterHandler:
    """HTTP handlers for character operations.

    This handler delegates business logic to CharacterService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Turning Failure results into HTTPException with a fitting status
    """

    def __init__(self, character_service: CharacterService) -> None:
        """Initialize the character handler.

        Args:
            character_service: The service for business logic (required).
        """
        self._service = character_service

    async def list_characters(self) -> CharacterListResponse:
        """Handle GET /characters requests."""
        result = await self._service.get_characters()
        if isinstance(result, Failure):
            _raise_for(result)

        return _list_response(result.value)

    async def get_character(self, character_id: int) -> CharacterResponse:
        """Handle GET /characters/{id} requests."""
        result = await self._service.get_character_by_id(character_id)
        if isinstance(result, Failure):
            _raise_for(result)

        return CharacterResponse.from_entity(result.value)

    async def get_page(self, page: int) -> CharacterPageResponse:
        """Handle GET /pages/{page} requests."""
        result = await self._service.get_page(page)
        if isinstance(result, Failure):
            _raise_for(result)

        fetched = result.value
        return CharacterPageResponse(
            page=fetched.page,
            info=PageInfoItem.from_entity(fetched.info) if fetched.info else None,
            results=[CharacterResponse.from_entity(c) for c in fetched.results],
        )

    async def search(self, query: str) -> CharacterListResponse:
        """Handle GET /characters/search requests (cache only)."""
        try:
            characters = self._service.search_cached(query)
        except StoreError as e:
            _raise_for(Failure(e))

        return _list_response(characters)

    async def filter_characters(self, status: str | None, species: str | None) -> CharacterListResponse:
        """Handle GET /characters/filter requests (cache only)."""
        try:
            characters = self._service.filter_cached(status=status, species=species)
        except StoreError as e:
            _raise_for(Failure(e))

        return _list_response(characters)

    async def get_stats(self) -> StoreStatsResponse:
        """Handle GET /stats requests.

        Raises:
            HTTPException: 503 if the store cannot be queried
        """
        try:
            stats = self._service.get_stats()
        except StoreError as e:
            _raise_for(Failure(e))

        return StoreStatsResponse(
            backend=stats.get("backend", "unknown"),
            total_characters=stats.get("total_characters", 0),
            cached_pages=stats.get("cached_pages", 0),
            key_prefix=stats.get("key_prefix"),
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        health = await self._service.is_healthy()
        is_healthy = health["store"] and health["source"]

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            store_healthy=health["store"],
            source_healthy=health["source"],
        )
