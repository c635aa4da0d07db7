"""Response DTOs for API endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from character_catalog.entities import Character, CharacterLocation, PageInfo


class LocationItem(BaseModel):
    """Origin or location of a character."""

    name: str = Field(..., description="Name of the place")
    url: str = Field(..., description="API URL of the place (may be empty)")

    @classmethod
    def from_entity(cls, location: CharacterLocation) -> "LocationItem":
        return cls(name=location.name, url=location.url)


class CharacterResponse(BaseModel):
    """Response DTO for a single character."""

    id: int = Field(..., description="Unique character id", ge=1)
    name: str = Field(..., description="Character name")
    status: str = Field(..., description="Alive, Dead or unknown")
    species: str = Field(..., description="Species name")
    type: str | None = Field(None, description="Subspecies or variant")
    gender: str = Field(..., description="Character gender")
    origin: LocationItem
    location: LocationItem
    image: str = Field(..., description="Avatar URL")
    episode: list[str] = Field(default_factory=list, description="Episode URLs")
    episode_count: int = Field(..., description="Number of episodes", ge=0)
    url: str = Field(..., description="Canonical API URL")
    created: datetime = Field(..., description="Creation timestamp in the remote catalog")

    @classmethod
    def from_entity(cls, character: Character) -> "CharacterResponse":
        return cls(
            id=character.id,
            name=character.name,
            status=character.status,
            species=character.species,
            type=character.type,
            gender=character.gender,
            origin=LocationItem.from_entity(character.origin),
            location=LocationItem.from_entity(character.location),
            image=character.image,
            episode=list(character.episode),
            episode_count=character.episode_count,
            url=character.url,
            created=character.created,
        )


class CharacterListResponse(BaseModel):
    """Response DTO for a list of characters."""

    count: int = Field(..., description="Number of characters returned", ge=0)
    characters: list[CharacterResponse] = Field(default_factory=list)


class PageInfoItem(BaseModel):
    """Pagination metadata."""

    count: int = Field(..., description="Total characters in the catalog", ge=0)
    pages: int = Field(..., description="Total pages in the catalog", ge=0)
    next: str | None = Field(None, description="URL of the next page")
    prev: str | None = Field(None, description="URL of the previous page")

    @classmethod
    def from_entity(cls, info: PageInfo) -> "PageInfoItem":
        return cls(count=info.count, pages=info.pages, next=info.next, prev=info.prev)


class CharacterPageResponse(BaseModel):
    """Response DTO for one page of characters."""

    page: int = Field(..., description="Page number", ge=1)
    info: PageInfoItem | None = Field(None, description="Pagination metadata, if known")
    results: list[CharacterResponse] = Field(default_factory=list)


class StoreStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    backend: str = Field(..., description="Cache backend name")
    total_characters: int = Field(..., description="Number of cached characters", ge=0)
    cached_pages: int = Field(..., description="Number of cached pages", ge=0)
    key_prefix: str | None = Field(None, description="Key prefix (Redis backend only)")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    source_healthy: bool = Field(..., description="Whether the remote catalog is reachable")
