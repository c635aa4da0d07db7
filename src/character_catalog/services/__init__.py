"""Service layer for business logic.

This layer contains the cache-first read-through orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Store / Source
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from character_catalog.services import CharacterService

    service = CharacterService.create(store=store, source=source)
    result = await service.get_characters()
    ```
"""

from .character_service import CharacterService

__all__ = [
    "CharacterService",
]
