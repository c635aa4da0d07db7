"""Character Catalog - cache-first access to the Rick and Morty character API.

This package provides a layered architecture for cached catalog reads:

Layers:
    - protocols: Interface contracts (CharacterStore, CharacterSource)
    - repositories: Data access implementations (Redis, in-memory, HTTP)
    - services: Business logic (cache-first read-through)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (remote wire format and API contracts)
    - entities: Domain models and the Success/Failure result (internal)

Usage:
    ```python
    from character_catalog.repositories import InMemoryCharacterStore, RickAndMortyApiSource
    from character_catalog.services import CharacterService

    service = CharacterService.create(
        store=InMemoryCharacterStore(),
        source=RickAndMortyApiSource.create(),
    )
    result = await service.get_characters()
    ```

For HTTP API:
    ```python
    from character_catalog.api.app import app
    ```
"""

from character_catalog.config import get_redis_client, settings
from character_catalog.entities import (
    Character,
    CharacterLocation,
    CharacterPage,
    Failure,
    PageInfo,
    Result,
    Success,
)
from character_catalog.errors import (
    CatalogError,
    DecodeError,
    HttpStatusError,
    InvalidRequestError,
    NotFoundError,
    StoreError,
    TransportError,
)
from character_catalog.handlers import CharacterHandler
from character_catalog.protocols import CharacterSource, CharacterStore
from character_catalog.repositories import (
    InMemoryCharacterStore,
    RedisCharacterStore,
    RickAndMortyApiSource,
)
from character_catalog.services import CharacterService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CharacterStore",
    "CharacterSource",
    # Services (business logic)
    "CharacterService",
    # Handlers (HTTP)
    "CharacterHandler",
    # Repositories (data access)
    "RedisCharacterStore",
    "InMemoryCharacterStore",
    "RickAndMortyApiSource",
    # Entities (domain models)
    "Character",
    "CharacterLocation",
    "CharacterPage",
    "PageInfo",
    "Result",
    "Success",
    "Failure",
    # Errors
    "CatalogError",
    "InvalidRequestError",
    "TransportError",
    "DecodeError",
    "HttpStatusError",
    "NotFoundError",
    "StoreError",
]
