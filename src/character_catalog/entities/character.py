"""Character domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CharacterLocation:
    """Named place a character comes from or was last seen at."""

    name: str
    url: str


@dataclass(frozen=True)
class Character:
    """Domain entity for a single catalog character.

    This is an internal representation used by services and repositories.
    For API contracts, use the DTO classes from the dto package.

    Attributes:
        id: Stable identifier, shared by the remote and cached copies
        name: Display name
        status: "Alive", "Dead" or "unknown"
        species: Species name
        type: Subspecies or variant, None when the API leaves it out
        gender: "Female", "Male", "Genderless" or "unknown"
        origin: Place of origin
        location: Last known location
        image: Avatar URL
        episode: URLs of the episodes the character appears in
        url: Canonical API URL of the character
        created: When the character was created in the remote catalog
    """

    id: int
    name: str
    status: str
    species: str
    type: str | None
    gender: str
    origin: CharacterLocation
    location: CharacterLocation
    image: str
    episode: tuple[str, ...]
    url: str
    created: datetime

    @property
    def episode_count(self) -> int:
        return len(self.episode)
