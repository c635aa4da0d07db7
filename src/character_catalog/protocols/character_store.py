"""Character storage protocol.

Defines the interface for any local backend that keeps previously
fetched characters, keyed by character id.

Implementations can include:
- Redis (default)
- In-memory dictionaries (tests, ephemeral processes)
- SQLite or any other keyed store
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from character_catalog.entities import Character, CharacterPage, PageInfo


@runtime_checkable
class CharacterStore(Protocol):
    """Protocol for local character caches.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.

    Reads are snapshots taken at call time. Writes are upserts keyed by
    character id: the last write wins and nothing is ever evicted.
    A backend that cannot be reached raises StoreError.

    Example:
        ```python
        from character_catalog.protocols import CharacterStore

        # Type check passes for any matching implementation
        store: CharacterStore = RedisCharacterStore.create()
        store: CharacterStore = InMemoryCharacterStore()
        ```
    """

    def read_all(self) -> list[Character]:
        """Read every cached character.

        Returns:
            All cached characters, ordered by id ascending
        """
        ...

    def read_by_id(self, character_id: int) -> Character | None:
        """Read a single cached character.

        Args:
            character_id: The character id

        Returns:
            The cached character, or None if it was never written
        """
        ...

    def write_all(
        self,
        characters: Sequence[Character],
        page: int,
        info: PageInfo | None = None,
    ) -> None:
        """Upsert a page of characters.

        Args:
            characters: Characters in page order
            page: The page number they were fetched from
            info: Optional pagination metadata for the page
        """
        ...

    def write_one(self, character: Character) -> None:
        """Upsert a single character.

        Args:
            character: The character to store
        """
        ...

    def read_page(self, page: int) -> CharacterPage | None:
        """Read a previously written page.

        Args:
            page: The page number

        Returns:
            The page with its members in their original order,
            or None if the page was never written
        """
        ...

    def search_by_name(self, query: str) -> list[Character]:
        """Case-insensitive substring search over cached names.

        Args:
            query: Text to look for; a blank query matches everything

        Returns:
            Matching characters ordered by name
        """
        ...

    def filter_by(self, status: str | None = None, species: str | None = None) -> list[Character]:
        """Filter cached characters by status and/or species.

        Both comparisons are exact but case-insensitive. A criterion left
        as None is not applied, so no criteria returns every character.

        Args:
            status: Life status such as "Alive", "Dead" or "unknown"
            species: Species such as "Human" or "Alien"

        Returns:
            Matching characters ordered by name
        """
        ...

    def count_all(self) -> int:
        """Count cached characters.

        Returns:
            Total number of cached characters
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
