"""Remote character source protocol.

Defines the interface for anything that can fetch characters from the
remote catalog. Implementations report every failure as a ``Failure``
result instead of raising.
"""

from typing import Protocol, runtime_checkable

from character_catalog.entities import Character, CharacterPage, Result


@runtime_checkable
class CharacterSource(Protocol):
    """Protocol for remote character sources.

    Example:
        ```python
        from character_catalog.protocols import CharacterSource

        source: CharacterSource = RickAndMortyApiSource.create()
        result = await source.fetch_page(1)
        ```
    """

    async def fetch_page(self, page: int) -> Result[CharacterPage]:
        """Fetch one page of characters.

        Args:
            page: Page number, starting at 1

        Returns:
            Success with the page, or Failure with the cause
        """
        ...

    async def fetch_by_id(self, character_id: int) -> Result[Character]:
        """Fetch a single character.

        Args:
            character_id: The character id, starting at 1

        Returns:
            Success with the character, or Failure with the cause
        """
        ...

    async def is_available(self) -> bool:
        """Check if the remote catalog answers.

        Returns:
            True if reachable, False otherwise
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
