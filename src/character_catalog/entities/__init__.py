"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No external dependencies
- Pure domain logic only
"""

from .character import Character, CharacterLocation
from .page import CharacterPage, PageInfo
from .result import Failure, Result, Success

__all__ = [
    "Character",
    "CharacterLocation",
    "CharacterPage",
    "PageInfo",
    "Result",
    "Success",
    "Failure",
]
