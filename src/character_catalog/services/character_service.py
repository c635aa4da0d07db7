"""Character service for cache-first reads.

This service orchestrates lookups by coordinating the local store
(cached characters) and the remote source (catalog API).
"""

import logging

from character_catalog.entities import Character, CharacterPage, Failure, Result, Success
from character_catalog.errors import InvalidRequestError, StoreError
from character_catalog.protocols import CharacterSource, CharacterStore

logger = logging.getLogger(__name__)

FIRST_PAGE = 1


class CharacterService:
    """Cache-first read-through over a store and a remote source.

    This service depends on PROTOCOLS, not concrete implementations:
    - CharacterStore: can be Redis, in-memory, etc.
    - CharacterSource: the catalog HTTP API or any stand-in

    Every read checks the store first. Only a miss (nothing cached)
    reaches the source, exactly once, and a successful remote result
    is written back before it is returned. Remote failures are returned
    as the very same Failure object: no retry, no stale fallback.
    A store outage is returned as Failure(StoreError).

    Example:
        ```python
        from character_catalog.repositories import (
            RedisCharacterStore,
            RickAndMortyApiSource,
        )
        from character_catalog.services import CharacterService

        service = CharacterService.create(
            store=RedisCharacterStore.create(),
            source=RickAndMortyApiSource.create(),
        )
        result = await service.get_character_by_id(1)
        ```
    """

    def __init__(self, store: CharacterStore, source: CharacterSource) -> None:
        """Initialize the character service.

        Args:
            store: Local character cache (required).
            source: Remote character source (required).
        """
        self._store = store
        self._source = source

    @classmethod
    def create(cls, store: CharacterStore, source: CharacterSource) -> "CharacterService":
        """Factory method to create CharacterService.

        Args:
            store: Local character cache.
            source: Remote character source.

        Returns:
            Configured CharacterService instance
        """
        return cls(store=store, source=source)

    async def get_characters(self) -> Result[list[Character]]:
        """Get every cached character, or the first remote page on a miss.

        Business logic:
        1. Read the whole store
        2. Non-empty: return it, the source is not called
        3. Empty: fetch page 1, write whatever came back (even nothing),
           return it; a remote Failure is returned unchanged
        4. A store outage at any step is a Failure carrying StoreError

        Returns:
            Success with the characters, or Failure
        """
        try:
            cached = self._store.read_all()
        except StoreError as e:
            return self._store_failure("get_characters", e)
        if cached:
            logger.info("get_characters cache hit count=%d", len(cached))
            return Success(cached)

        logger.info("get_characters cache miss, fetching page=%s", FIRST_PAGE)
        result = await self._source.fetch_page(FIRST_PAGE)
        if isinstance(result, Failure):
            logger.warning("get_characters remote failure error=%s", result.error.message)
            return result

        fetched = result.value
        try:
            self._store.write_all(fetched.results, page=FIRST_PAGE, info=fetched.info)
        except StoreError as e:
            return self._store_failure("get_characters", e)
        return Success(list(fetched.results))

    async def get_character_by_id(self, character_id: int) -> Result[Character]:
        """Get a character by id, cache first.

        An id that is neither cached nor known to the remote catalog is a
        Failure carrying NotFoundError, never Success(None).

        Args:
            character_id: The character id (>= 1)

        Returns:
            Success with the character, or Failure
        """
        if character_id < 1:
            return Failure(InvalidRequestError(f"character id must be >= 1, got {character_id}"))

        try:
            cached = self._store.read_by_id(character_id)
        except StoreError as e:
            return self._store_failure("get_character_by_id", e)
        if cached is not None:
            return Success(cached)

        result = await self._source.fetch_by_id(character_id)
        if isinstance(result, Failure):
            logger.warning(
                "get_character_by_id remote failure id=%s error=%s",
                character_id,
                result.error.message,
            )
            return result

        try:
            self._store.write_one(result.value)
        except StoreError as e:
            return self._store_failure("get_character_by_id", e)
        return result

    async def get_page(self, page: int) -> Result[CharacterPage]:
        """Get one page of characters, cache first.

        Args:
            page: Page number (>= 1)

        Returns:
            Success with the page, or Failure
        """
        if page < 1:
            return Failure(InvalidRequestError(f"page must be >= 1, got {page}"))

        try:
            cached = self._store.read_page(page)
        except StoreError as e:
            return self._store_failure("get_page", e)
        if cached is not None and cached.results:
            logger.info("get_page cache hit page=%s count=%d", page, len(cached.results))
            return Success(cached)

        result = await self._source.fetch_page(page)
        if isinstance(result, Failure):
            logger.warning("get_page remote failure page=%s error=%s", page, result.error.message)
            return result

        try:
            self._store.write_all(result.value.results, page=page, info=result.value.info)
        except StoreError as e:
            return self._store_failure("get_page", e)
        return result

    def search_cached(self, query: str) -> list[Character]:
        """Search cached characters by name (local only).

        Args:
            query: Case-insensitive substring; blank matches everything

        Returns:
            Matching characters ordered by name

        Raises:
            StoreError: If the store cannot be read
        """
        return self._store.search_by_name(query)

    def filter_cached(
        self,
        status: str | None = None,
        species: str | None = None,
    ) -> list[Character]:
        """Filter cached characters by status and/or species (local only).

        Raises:
            StoreError: If the store cannot be read
        """
        return self._store.filter_by(status=status, species=species)

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with store statistics
        """
        return self._store.get_stats()

    async def is_healthy(self) -> dict[str, bool]:
        """Check store and source health.

        Returns:
            Dictionary with ``store`` and ``source`` health flags
        """
        return {
            "store": self._store.health_check(),
            "source": await self._source.is_available(),
        }

    async def close(self) -> None:
        await self._source.close()

    @property
    def store(self) -> CharacterStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def source(self) -> CharacterSource:
        """Get the underlying source (for testing)."""
        return self._source

    @staticmethod
    def _store_failure(operation: str, error: StoreError) -> Failure:
        logger.warning("%s store failure error=%s", operation, error.message)
        return Failure(error)
