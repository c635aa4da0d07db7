"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Store / Source
    (HTTP)  -> (Business) -> (Data Access)
"""

from .character_handler import CharacterHandler, error_status

__all__ = [
    "CharacterHandler",
    "error_status",
]
