"""Data Transfer Objects for API contracts.

These Pydantic models define the external contracts: the JSON served by
the remote catalog (``remote``) and the JSON this service answers with
(``responses``). They are used for validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .remote import ApiCharacter, ApiInfo, ApiLocation, ApiPageResponse
from .responses import (
    CharacterListResponse,
    CharacterPageResponse,
    CharacterResponse,
    HealthCheckResponse,
    LocationItem,
    PageInfoItem,
    StoreStatsResponse,
)

__all__ = [
    "ApiCharacter",
    "ApiInfo",
    "ApiLocation",
    "ApiPageResponse",
    "CharacterResponse",
    "CharacterListResponse",
    "CharacterPageResponse",
    "LocationItem",
    "PageInfoItem",
    "StoreStatsResponse",
    "HealthCheckResponse",
]
