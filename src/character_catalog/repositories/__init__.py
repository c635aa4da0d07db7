"""Repository layer for data access.

This layer abstracts external dependencies (Redis, the catalog HTTP API)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (Redis → in-memory, live API → stub, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from character_catalog.protocols import CharacterSource, CharacterStore

from .memory_character_store import InMemoryCharacterStore
from .redis_character_store import RedisCharacterStore
from .rick_and_morty_source import RickAndMortyApiSource

__all__ = [
    "CharacterSource",
    "CharacterStore",
    "InMemoryCharacterStore",
    "RedisCharacterStore",
    "RickAndMortyApiSource",
]
