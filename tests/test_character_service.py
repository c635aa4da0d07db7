"""
Tests for the cache-first character service.
"""

import pytest

from character_catalog.entities import CharacterPage, Failure, PageInfo, Success
from character_catalog.errors import (
    InvalidRequestError,
    NotFoundError,
    StoreError,
    TransportError,
)
from character_catalog.repositories import InMemoryCharacterStore
from character_catalog.services import CharacterService


@pytest.fixture
def service(store, fake_source):
    return CharacterService.create(store=store, source=fake_source)


@pytest.mark.asyncio
async def test_get_characters_prefers_cache(service, store, fake_source, rick, morty):
    """Cached characters are returned without touching the remote source."""
    store.write_all([rick, morty], page=1)

    result = await service.get_characters()

    assert result == Success([rick, morty])
    assert fake_source.page_calls == []


@pytest.mark.asyncio
async def test_get_characters_fetches_first_page_on_miss(service, store, fake_source, first_page):
    """An empty cache falls back to page 1 and writes the result back."""
    fake_source.pages[1] = first_page

    result = await service.get_characters()

    assert result.is_success
    assert [c.id for c in result.value] == [1, 2]
    assert fake_source.page_calls == [1]
    assert store.read_all() == result.value
    assert store.read_page(1).info == first_page.info


@pytest.mark.asyncio
async def test_get_characters_then_by_id_uses_cache(service, fake_source, first_page):
    """Page 1 fetched once, then id 1 is served from the cache."""
    fake_source.pages[1] = first_page

    listing = await service.get_characters()
    detail = await service.get_character_by_id(1)

    assert len(listing.value) == 2
    assert detail == Success(first_page.results[0])
    assert fake_source.id_calls == []


@pytest.mark.asyncio
async def test_get_characters_propagates_same_failure(service, store, fake_source):
    failure = Failure(TransportError("Catalog API unreachable: connection refused"))
    fake_source.failure = failure

    result = await service.get_characters()

    assert result is failure
    assert store.read_all() == []


@pytest.mark.asyncio
async def test_get_characters_empty_remote_page_is_success(service, store, fake_source):
    fake_source.pages[1] = CharacterPage(page=1, info=PageInfo(count=0, pages=0), results=[])

    result = await service.get_characters()

    assert result == Success([])
    cached_page = store.read_page(1)
    assert cached_page is not None
    assert cached_page.results == []


@pytest.mark.asyncio
async def test_get_character_by_id_prefers_cache(service, store, fake_source, rick):
    store.write_one(rick)

    result = await service.get_character_by_id(1)

    assert result == Success(rick)
    assert fake_source.id_calls == []


@pytest.mark.asyncio
async def test_get_character_by_id_fetches_and_caches(service, store, fake_source, summer):
    fake_source.characters[3] = summer

    first = await service.get_character_by_id(3)
    second = await service.get_character_by_id(3)

    assert first == Success(summer)
    assert second == first
    assert fake_source.id_calls == [3]
    assert store.read_by_id(3) == summer


@pytest.mark.asyncio
async def test_get_character_by_id_unknown_is_not_found(service, store, fake_source):
    result = await service.get_character_by_id(9999)

    assert isinstance(result, Failure)
    assert isinstance(result.error, NotFoundError)
    assert result.error.status_code == 404
    assert store.read_by_id(9999) is None


@pytest.mark.asyncio
async def test_get_character_by_id_propagates_same_failure(service, fake_source):
    failure = Failure(TransportError("timed out"))
    fake_source.failure = failure

    result = await service.get_character_by_id(5)

    assert result is failure


@pytest.mark.asyncio
@pytest.mark.parametrize("character_id", [0, -3])
async def test_get_character_by_id_rejects_invalid_id(service, fake_source, character_id):
    result = await service.get_character_by_id(character_id)

    assert isinstance(result.error, InvalidRequestError)
    assert fake_source.id_calls == []


@pytest.mark.asyncio
async def test_get_page_prefers_cache(service, store, fake_source, rick, morty):
    info = PageInfo(count=826, pages=42, next="https://rickandmortyapi.com/api/character?page=3")
    store.write_all([morty, rick], page=2, info=info)

    result = await service.get_page(2)

    assert result == Success(CharacterPage(page=2, info=info, results=[morty, rick]))
    assert fake_source.page_calls == []


@pytest.mark.asyncio
async def test_get_page_fetches_on_miss(service, store, fake_source, first_page):
    fake_source.pages[1] = first_page

    result = await service.get_page(1)

    assert result == Success(first_page)
    assert store.read_page(1) == first_page


@pytest.mark.asyncio
async def test_get_page_out_of_range(service, fake_source):
    result = await service.get_page(43)

    assert isinstance(result.error, NotFoundError)
    assert fake_source.page_calls == [43]


@pytest.mark.asyncio
async def test_get_page_rejects_zero(service, fake_source):
    result = await service.get_page(0)

    assert isinstance(result.error, InvalidRequestError)
    assert fake_source.page_calls == []


def test_search_cached_is_local_only(service, store, fake_source, rick, morty, summer):
    store.write_all([rick, morty, summer], page=1)

    names = [c.name for c in service.search_cached("smith")]

    assert names == ["Morty Smith", "Summer Smith"]
    assert fake_source.page_calls == []


@pytest.mark.asyncio
async def test_is_healthy_reports_both_sides(service, fake_source):
    assert await service.is_healthy() == {"store": True, "source": True}

    fake_source.failure = Failure(TransportError("down"))
    assert await service.is_healthy() == {"store": True, "source": False}


@pytest.mark.asyncio
async def test_close_closes_source(service, fake_source):
    await service.close()

    assert fake_source.closed


def test_filter_cached_is_local_only(service, store, fake_source, rick, morty, summer):
    store.write_all([rick, morty, summer], page=1)

    alive_humans = service.filter_cached(status="Alive", species="Human")

    assert [c.name for c in alive_humans] == ["Morty Smith", "Rick Sanchez", "Summer Smith"]
    assert service.filter_cached(status="Dead") == []
    assert fake_source.page_calls == []


class WriteFailingStore(InMemoryCharacterStore):
    """In-memory store that reads fine but refuses every write."""

    def write_all(self, characters, page, info=None):
        raise StoreError("Character store unavailable: read-only")

    def write_one(self, character):
        raise StoreError("Character store unavailable: read-only")


@pytest.fixture
def down_service(down_redis_store, fake_source):
    return CharacterService.create(store=down_redis_store, source=fake_source)


@pytest.mark.asyncio
async def test_store_outage_is_failure_without_remote_call(down_service, fake_source, first_page):
    fake_source.pages[1] = first_page

    characters = await down_service.get_characters()
    character = await down_service.get_character_by_id(1)
    page = await down_service.get_page(1)

    for result in (characters, character, page):
        assert isinstance(result, Failure)
        assert isinstance(result.error, StoreError)
    assert fake_source.page_calls == []
    assert fake_source.id_calls == []


@pytest.mark.asyncio
async def test_write_back_failure_is_store_failure(fake_source, first_page, summer):
    fake_source.pages[1] = first_page
    fake_source.characters[3] = summer
    service = CharacterService.create(store=WriteFailingStore(), source=fake_source)

    for result in (
        await service.get_characters(),
        await service.get_character_by_id(3),
        await service.get_page(1),
    ):
        assert isinstance(result, Failure)
        assert result.error.message == "Character store unavailable: read-only"
    assert fake_source.page_calls == [1, 1]
    assert fake_source.id_calls == [3]


def test_local_reads_raise_store_error_on_outage(down_service):
    with pytest.raises(StoreError):
        down_service.search_cached("rick")
    with pytest.raises(StoreError):
        down_service.filter_cached(status="Alive")


@pytest.mark.asyncio
async def test_is_healthy_reports_store_outage(down_service):
    assert await down_service.is_healthy() == {"store": False, "source": True}
