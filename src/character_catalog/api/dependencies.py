"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from character_catalog.config import configure_logging, settings
from character_catalog.handlers import CharacterHandler
from character_catalog.protocols import CharacterStore
from character_catalog.repositories import (
    InMemoryCharacterStore,
    RedisCharacterStore,
    RickAndMortyApiSource,
)
from character_catalog.services import CharacterService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> CharacterHandler:
    """Dependency injection for CharacterHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CharacterHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "character_handler", None)
    if handler is None:
        raise RuntimeError("CharacterHandler not initialized. Check lifespan setup.")
    return handler


def build_default_service() -> CharacterService:
    """Build the service from settings (Redis or in-memory store + catalog API)."""
    store: CharacterStore
    if settings.uses_redis:
        store = RedisCharacterStore.create()
    else:
        store = InMemoryCharacterStore()

    return CharacterService.create(store=store, source=RickAndMortyApiSource.create())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Service (business logic) - reused if pre-set on app.state, else built
       from settings and stored in app.state.character_service
    2. Handler (HTTP endpoints) - stored in app.state.character_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Removes the handler; a service built here is also closed and removed
    """
    configure_logging()

    service: CharacterService | None = getattr(app.state, "character_service", None)
    owns_service = service is None
    if service is None:
        service = build_default_service()

    app.state.character_service = service
    app.state.character_handler = CharacterHandler(character_service=service)

    logger.info(
        "character service initialized backend=%s source=%s",
        settings.cache_backend,
        settings.api_base_url,
    )

    yield

    del app.state.character_handler
    if owns_service:
        await service.close()
        del app.state.character_service
    logger.info("character service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CharacterHandler, Depends(get_handler)]
