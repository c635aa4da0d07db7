"""Wire DTOs for the remote character catalog.

These Pydantic models validate the JSON returned by the catalog API.
A payload that fails validation is reported as a DecodeError by the
source; valid payloads are converted to entities with ``to_entity()``.
The Redis store reuses the same shape for the JSON it keeps per character.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from character_catalog.entities import Character, CharacterLocation, CharacterPage, PageInfo


class ApiLocation(BaseModel):
    """Origin or location sub-record ({name, url})."""

    name: str
    url: str

    def to_entity(self) -> CharacterLocation:
        return CharacterLocation(name=self.name, url=self.url)


class ApiCharacter(BaseModel):
    """Single character as returned by ``GET /character/{id}``."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="Unique character id", ge=1)
    name: str
    status: str
    species: str
    type: str | None = None
    gender: str
    origin: ApiLocation
    location: ApiLocation
    image: str
    episode: list[str] = Field(default_factory=list)
    url: str
    created: datetime

    @classmethod
    def from_entity(cls, character: Character) -> "ApiCharacter":
        return cls(
            id=character.id,
            name=character.name,
            status=character.status,
            species=character.species,
            type=character.type,
            gender=character.gender,
            origin=ApiLocation(name=character.origin.name, url=character.origin.url),
            location=ApiLocation(name=character.location.name, url=character.location.url),
            image=character.image,
            episode=list(character.episode),
            url=character.url,
            created=character.created,
        )

    def to_entity(self) -> Character:
        return Character(
            id=self.id,
            name=self.name,
            status=self.status,
            species=self.species,
            type=self.type,
            gender=self.gender,
            origin=self.origin.to_entity(),
            location=self.location.to_entity(),
            image=self.image,
            episode=tuple(self.episode),
            url=self.url,
            created=self.created,
        )


class ApiInfo(BaseModel):
    """Pagination envelope metadata."""

    count: int = Field(..., ge=0)
    pages: int = Field(..., ge=0)
    next: str | None = None
    prev: str | None = None

    @classmethod
    def from_entity(cls, info: PageInfo) -> "ApiInfo":
        return cls(count=info.count, pages=info.pages, next=info.next, prev=info.prev)

    def to_entity(self) -> PageInfo:
        return PageInfo(count=self.count, pages=self.pages, next=self.next, prev=self.prev)


class ApiPageResponse(BaseModel):
    """Page envelope as returned by ``GET /character?page={n}``."""

    model_config = ConfigDict(extra="ignore")

    info: ApiInfo
    results: list[ApiCharacter] = Field(default_factory=list)

    def to_entity(self, page: int) -> CharacterPage:
        return CharacterPage(
            page=page,
            info=self.info.to_entity(),
            results=[character.to_entity() for character in self.results],
        )
