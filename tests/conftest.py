"""
Shared fixtures: catalog payloads, entities and a scripted remote source.
"""

import fakeredis
import pytest

from character_catalog.dto.remote import ApiCharacter, ApiPageResponse
from character_catalog.entities import Failure, Success
from character_catalog.errors import NotFoundError
from character_catalog.repositories import InMemoryCharacterStore, RedisCharacterStore

API_ROOT = "https://rickandmortyapi.com/api"


def character_payload(character_id: int, name: str, **overrides) -> dict:
    """Build a character JSON object shaped like the catalog API's."""
    payload = {
        "id": character_id,
        "name": name,
        "status": "Alive",
        "species": "Human",
        "type": "",
        "gender": "Male",
        "origin": {"name": "Earth (C-137)", "url": f"{API_ROOT}/location/1"},
        "location": {"name": "Citadel of Ricks", "url": f"{API_ROOT}/location/3"},
        "image": f"{API_ROOT}/character/avatar/{character_id}.jpeg",
        "episode": [f"{API_ROOT}/episode/1", f"{API_ROOT}/episode/2"],
        "url": f"{API_ROOT}/character/{character_id}",
        "created": "2017-11-04T18:48:46.250Z",
    }
    payload.update(overrides)
    return payload


def page_payload(results: list[dict], page: int = 1, pages: int = 42) -> dict:
    """Build a page envelope JSON object shaped like the catalog API's."""
    return {
        "info": {
            "count": 826,
            "pages": pages,
            "next": f"{API_ROOT}/character?page={page + 1}" if page < pages else None,
            "prev": f"{API_ROOT}/character?page={page - 1}" if page > 1 else None,
        },
        "results": results,
    }


class FakeCharacterSource:
    """Scripted CharacterSource that records every call."""

    def __init__(self, pages: dict | None = None, characters: dict | None = None) -> None:
        self.pages = pages or {}
        self.characters = characters or {}
        self.failure: Failure | None = None
        self.page_calls: list[int] = []
        self.id_calls: list[int] = []
        self.closed = False

    async def fetch_page(self, page: int):
        self.page_calls.append(page)
        if self.failure is not None:
            return self.failure
        if page not in self.pages:
            return Failure(NotFoundError("There is nothing here"))
        return Success(self.pages[page])

    async def fetch_by_id(self, character_id: int):
        self.id_calls.append(character_id)
        if self.failure is not None:
            return self.failure
        if character_id not in self.characters:
            return Failure(NotFoundError("Character not found"))
        return Success(self.characters[character_id])

    async def is_available(self) -> bool:
        return self.failure is None

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def rick():
    return ApiCharacter.model_validate(character_payload(1, "Rick Sanchez")).to_entity()


@pytest.fixture
def morty():
    return ApiCharacter.model_validate(
        character_payload(2, "Morty Smith", episode=[f"{API_ROOT}/episode/1"])
    ).to_entity()


@pytest.fixture
def summer():
    return ApiCharacter.model_validate(
        character_payload(3, "Summer Smith", gender="Female", type=None)
    ).to_entity()


@pytest.fixture
def first_page():
    """Catalog page 1 holding Rick (id 1) and Morty (id 2)."""
    payload = page_payload(
        [
            character_payload(1, "Rick Sanchez"),
            character_payload(2, "Morty Smith", episode=[f"{API_ROOT}/episode/1"]),
        ]
    )
    return ApiPageResponse.model_validate(payload).to_entity(1)


def _fake_redis_store() -> RedisCharacterStore:
    client = fakeredis.FakeRedis(server=fakeredis.FakeServer())
    return RedisCharacterStore(redis_client=client, key_prefix="test_catalog")


@pytest.fixture
def fake_source():
    return FakeCharacterSource()


@pytest.fixture
def memory_store():
    return InMemoryCharacterStore()


@pytest.fixture
def redis_store():
    return _fake_redis_store()


@pytest.fixture(params=["memory", "redis"])
def store(request):
    """Every CharacterStore implementation, one test run each."""
    if request.param == "memory":
        return InMemoryCharacterStore()
    return _fake_redis_store()


@pytest.fixture
def down_redis_store():
    """Redis store whose server refuses every command."""
    server = fakeredis.FakeServer()
    server.connected = False
    client = fakeredis.FakeRedis(server=server)
    return RedisCharacterStore(redis_client=client, key_prefix="test_catalog")
