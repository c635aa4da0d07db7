"""Redis implementation of CharacterStore.

Keys (all under a configurable prefix):
    - ``{prefix}:character:{id}``: character JSON, same shape as the catalog API
    - ``{prefix}:characters``: sorted set of cached ids, scored by id
    - ``{prefix}:page:{n}``: list of member ids in page order
    - ``{prefix}:page:{n}:info``: pagination metadata JSON
    - ``{prefix}:pages``: set of page numbers that were written

Entries never expire and are never evicted. Redis failures surface as
``StoreError``.
"""

import functools
import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

import redis
from pydantic import ValidationError

from character_catalog.config import get_redis_client, settings
from character_catalog.dto.remote import ApiCharacter, ApiInfo
from character_catalog.entities import Character, CharacterPage, PageInfo
from character_catalog.errors import StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _redis_errors(method: Callable[..., T]) -> Callable[..., T]:
    """Re-raise redis-py failures from a store method as StoreError."""

    @functools.wraps(method)
    def wrapper(*args, **kwargs) -> T:
        try:
            return method(*args, **kwargs)
        except redis.RedisError as e:
            logger.warning("character_store redis failure op=%s error=%s", method.__name__, e)
            raise StoreError(f"Character store unavailable: {e}") from e

    return wrapper


class RedisCharacterStore:
    """Redis-backed character cache.

    This class satisfies the CharacterStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis character store.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Prefix for every key. Defaults to settings.cache_key_prefix.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.cache_key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisCharacterStore":
        """Factory method to create RedisCharacterStore with defaults.

        Args:
            key_prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisCharacterStore
        """
        return cls(key_prefix=key_prefix)

    @_redis_errors
    def read_all(self) -> list[Character]:
        ids = self._client.zrange(self._ids_key, 0, -1)
        characters = self._load_many([int(raw_id) for raw_id in ids])
        logger.info("character_store read_all count=%d", len(characters))
        return characters

    @_redis_errors
    def read_by_id(self, character_id: int) -> Character | None:
        raw = self._client.get(self._character_key(character_id))
        if raw is None:
            logger.info("character_store miss id=%s", character_id)
            return None

        logger.info("character_store hit id=%s", character_id)
        return self._decode(raw)

    @_redis_errors
    def write_all(
        self,
        characters: Sequence[Character],
        page: int,
        info: PageInfo | None = None,
    ) -> None:
        page_key = self._page_key(page)

        pipe = self._client.pipeline()
        for character in characters:
            self._stage_character(pipe, character)
        pipe.delete(page_key)
        if characters:
            pipe.rpush(page_key, *[character.id for character in characters])
        if info is not None:
            pipe.set(self._page_info_key(page), ApiInfo.from_entity(info).model_dump_json())
        pipe.sadd(self._pages_key, page)
        pipe.execute()

        logger.info("character_store write_all page=%s count=%d", page, len(characters))

    @_redis_errors
    def write_one(self, character: Character) -> None:
        pipe = self._client.pipeline()
        self._stage_character(pipe, character)
        pipe.execute()

        logger.info("character_store write_one id=%s", character.id)

    @_redis_errors
    def read_page(self, page: int) -> CharacterPage | None:
        if not self._client.sismember(self._pages_key, page):
            logger.info("character_store page miss page=%s", page)
            return None

        ids = self._client.lrange(self._page_key(page), 0, -1)
        raw_info = self._client.get(self._page_info_key(page))
        info = ApiInfo.model_validate_json(raw_info).to_entity() if raw_info else None

        return CharacterPage(
            page=page,
            info=info,
            results=self._load_many([int(raw_id) for raw_id in ids]),
        )

    def search_by_name(self, query: str) -> list[Character]:
        needle = query.strip().lower()
        matches = [c for c in self.read_all() if needle in c.name.lower()]
        return sorted(matches, key=lambda c: (c.name.lower(), c.id))

    def filter_by(self, status: str | None = None, species: str | None = None) -> list[Character]:
        matches = [
            c
            for c in self.read_all()
            if (status is None or c.status.lower() == status.lower())
            and (species is None or c.species.lower() == species.lower())
        ]
        return sorted(matches, key=lambda c: (c.name.lower(), c.id))

    @_redis_errors
    def count_all(self) -> int:
        result: int = self._client.zcard(self._ids_key)  # type: ignore[assignment]
        return result

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @_redis_errors
    def get_stats(self) -> dict:
        return {
            "backend": "redis",
            "key_prefix": self._prefix,
            "total_characters": self.count_all(),
            "cached_pages": self._client.scard(self._pages_key),
        }

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client

    def _stage_character(self, pipe, character: Character) -> None:
        pipe.set(
            self._character_key(character.id),
            ApiCharacter.from_entity(character).model_dump_json(),
        )
        pipe.zadd(self._ids_key, {str(character.id): character.id})

    def _load_many(self, ids: list[int]) -> list[Character]:
        if not ids:
            return []

        raws = self._client.mget([self._character_key(character_id) for character_id in ids])
        characters = []
        for character_id, raw in zip(ids, raws):
            if raw is None:
                # Indexed id without a payload
                logger.warning("character_store dangling id=%s", character_id)
                continue
            characters.append(self._decode(raw))
        return characters

    @staticmethod
    def _decode(raw: bytes | str) -> Character:
        try:
            return ApiCharacter.model_validate_json(raw).to_entity()
        except ValidationError:
            logger.exception("character_store corrupt payload")
            raise

    @property
    def _ids_key(self) -> str:
        return f"{self._prefix}:characters"

    @property
    def _pages_key(self) -> str:
        return f"{self._prefix}:pages"

    def _character_key(self, character_id: int) -> str:
        return f"{self._prefix}:character:{character_id}"

    def _page_key(self, page: int) -> str:
        return f"{self._prefix}:page:{page}"

    def _page_info_key(self, page: int) -> str:
        return f"{self._prefix}:page:{page}:info"
