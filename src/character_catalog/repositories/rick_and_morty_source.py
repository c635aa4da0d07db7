"""Rick and Morty API character source.

Fetches characters from the public catalog at https://rickandmortyapi.com.

Endpoints:
    - ``GET /character?page={n}``: page envelope ``{info, results}``
    - ``GET /character/{id}``: single character object

Key features:
- Async HTTP client, lazily created or injected
- Wire payloads validated with Pydantic before conversion to entities
- Every failure returned as a ``Failure`` result, nothing raised
- No retries: a failed call is reported once, as is
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from character_catalog.config import settings
from character_catalog.dto.remote import ApiCharacter, ApiPageResponse
from character_catalog.entities import Character, CharacterPage, Failure, Result, Success
from character_catalog.errors import (
    CatalogError,
    DecodeError,
    HttpStatusError,
    InvalidRequestError,
    NotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)


class RickAndMortyApiSource:
    """HTTP implementation of the CharacterSource protocol.

    This class satisfies the CharacterSource protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        source = RickAndMortyApiSource.create()

        result = await source.fetch_by_id(1)
        if result.is_success:
            print(result.value.name)  # Rick Sanchez
        else:
            print(result.error.message)
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the catalog source.

        Args:
            base_url: Catalog API base URL. Defaults to settings.api_base_url.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            client: Pre-configured HTTP client (tests inject one with a mock transport).
        """
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._timeout = timeout or settings.http_timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "RickAndMortyApiSource":
        """Factory method to create RickAndMortyApiSource with defaults.

        Args:
            base_url: Catalog API URL. If None, uses settings.
            timeout: Request timeout in seconds. If None, uses settings.

        Returns:
            Configured RickAndMortyApiSource
        """
        return cls(base_url=base_url, timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_page(self, page: int) -> Result[CharacterPage]:
        """Fetch one page of characters.

        Args:
            page: Page number, starting at 1

        Returns:
            Success with the page (possibly with no results),
            or Failure with InvalidRequestError, TransportError,
            DecodeError, HttpStatusError or NotFoundError
        """
        if page < 1:
            return Failure(InvalidRequestError(f"page must be >= 1, got {page}"))

        outcome = await self._get_json(f"{self._base_url}/character", params={"page": page})
        if isinstance(outcome, CatalogError):
            return Failure(outcome)

        decoded = self._decode(ApiPageResponse, outcome, what="page")
        if isinstance(decoded, CatalogError):
            return Failure(decoded)

        logger.info("catalog fetch_page page=%s results=%d", page, len(decoded.results))
        return Success(decoded.to_entity(page))

    async def fetch_by_id(self, character_id: int) -> Result[Character]:
        """Fetch a single character.

        Args:
            character_id: The character id, starting at 1

        Returns:
            Success with the character, or Failure with the cause.
            An id unknown to the catalog yields Failure(NotFoundError).
        """
        if character_id < 1:
            return Failure(InvalidRequestError(f"character id must be >= 1, got {character_id}"))

        outcome = await self._get_json(f"{self._base_url}/character/{character_id}")
        if isinstance(outcome, CatalogError):
            return Failure(outcome)

        decoded = self._decode(ApiCharacter, outcome, what="character")
        if isinstance(decoded, CatalogError):
            return Failure(decoded)

        logger.info("catalog fetch_by_id id=%s", character_id)
        return Success(decoded.to_entity())

    async def is_available(self) -> bool:
        """Check if the catalog API answers with a valid page.

        Returns:
            True if the first page can be fetched, False otherwise
        """
        result = await self.fetch_page(1)
        return result.is_success

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Perform a GET and return the parsed JSON body or the error."""
        try:
            response = await self.client.get(url, params=params)
        except httpx.DecodingError as e:
            logger.warning("catalog decoding failure url=%s error=%s", url, e)
            return DecodeError(f"Response body could not be decoded: {e}")
        except httpx.RequestError as e:
            logger.warning("catalog transport failure url=%s error=%s", url, e)
            return TransportError(f"Catalog API unreachable: {e}")

        if not response.is_success:
            message = self._error_message(response)
            logger.warning(
                "catalog http failure url=%s status=%s message=%s",
                url,
                response.status_code,
                message,
            )
            if response.status_code == 404:
                return NotFoundError(message)
            return HttpStatusError(response.status_code, message)

        if not response.content:
            return DecodeError("Response body is null")

        try:
            return response.json()
        except ValueError as e:
            return DecodeError(f"Response body is not valid JSON: {e}")

    @staticmethod
    def _decode(model: type[BaseModel], payload: Any, what: str) -> Any:
        if payload is None:
            return DecodeError(f"{what.capitalize()} body is null")
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning("catalog decode failure what=%s errors=%d", what, e.error_count())
            return DecodeError(f"Malformed {what} payload: {e}")

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        # The catalog answers errors with {"error": "..."}
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("error"), str):
            return body["error"]
        return response.reason_phrase or "Unknown error"
