"""In-memory implementation of CharacterStore.

Keeps characters in plain dictionaries for the lifetime of the process.
Used by tests and when ``CACHE_BACKEND=memory``.
"""

import logging
from collections.abc import Sequence

from character_catalog.entities import Character, CharacterPage, PageInfo

logger = logging.getLogger(__name__)


class InMemoryCharacterStore:
    """Dictionary-backed character cache.

    This class satisfies the CharacterStore protocol through structural
    typing. There is no locking: concurrent writes to the same id are
    last-write-wins.
    """

    def __init__(self) -> None:
        self._characters: dict[int, Character] = {}
        self._pages: dict[int, list[int]] = {}
        self._page_info: dict[int, PageInfo] = {}

    def read_all(self) -> list[Character]:
        return [self._characters[key] for key in sorted(self._characters)]

    def read_by_id(self, character_id: int) -> Character | None:
        character = self._characters.get(character_id)
        logger.info(
            "character_store %s id=%s", "hit" if character is not None else "miss", character_id
        )
        return character

    def write_all(
        self,
        characters: Sequence[Character],
        page: int,
        info: PageInfo | None = None,
    ) -> None:
        for character in characters:
            self._characters[character.id] = character
        self._pages[page] = [character.id for character in characters]
        if info is not None:
            self._page_info[page] = info
        logger.info("character_store write_all page=%s count=%d", page, len(characters))

    def write_one(self, character: Character) -> None:
        self._characters[character.id] = character

    def read_page(self, page: int) -> CharacterPage | None:
        if page not in self._pages:
            return None
        return CharacterPage(
            page=page,
            info=self._page_info.get(page),
            results=[self._characters[key] for key in self._pages[page] if key in self._characters],
        )

    def search_by_name(self, query: str) -> list[Character]:
        needle = query.strip().lower()
        matches = [c for c in self._characters.values() if needle in c.name.lower()]
        return sorted(matches, key=lambda c: (c.name.lower(), c.id))

    def filter_by(self, status: str | None = None, species: str | None = None) -> list[Character]:
        matches = [
            c
            for c in self._characters.values()
            if (status is None or c.status.lower() == status.lower())
            and (species is None or c.species.lower() == species.lower())
        ]
        return sorted(matches, key=lambda c: (c.name.lower(), c.id))

    def count_all(self) -> int:
        return len(self._characters)

    def health_check(self) -> bool:
        return True

    def get_stats(self) -> dict:
        return {
            "backend": "memory",
            "total_characters": self.count_all(),
            "cached_pages": len(self._pages),
        }
