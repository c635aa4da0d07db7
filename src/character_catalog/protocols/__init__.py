"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, live API → stub, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from character_catalog.protocols import CharacterSource, CharacterStore

    # Type hints work with any implementation
    store: CharacterStore = RedisCharacterStore.create()  # works
    store: CharacterStore = InMemoryCharacterStore()      # also works
    ```
"""

from .character_source import CharacterSource
from .character_store import CharacterStore

__all__ = [
    "CharacterSource",
    "CharacterStore",
]
