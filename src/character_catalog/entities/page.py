"""Character page domain entity."""

from dataclasses import dataclass, field

from .character import Character


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata returned alongside a page of characters.

    Attributes:
        count: Total number of characters in the catalog
        pages: Total number of pages
        next: URL of the next page, None on the last page
        prev: URL of the previous page, None on the first page
    """

    count: int
    pages: int
    next: str | None = None
    prev: str | None = None

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_prev(self) -> bool:
        return self.prev is not None


@dataclass(frozen=True)
class CharacterPage:
    """An ordered batch of characters plus its pagination context."""

    page: int
    info: PageInfo | None
    results: list[Character] = field(default_factory=list)
