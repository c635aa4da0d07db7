from typing import Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from character_catalog.api.dependencies import HandlerDep, lifespan
from character_catalog.config import configure_logging, settings
from character_catalog.dto import (
    CharacterListResponse,
    CharacterPageResponse,
    CharacterResponse,
    HealthCheckResponse,
    StoreStatsResponse,
)
from character_catalog.services import CharacterService

API_NAME = "Character Catalog API"
API_VERSION = "0.1.0"


def create_app(service: CharacterService | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        service: Pre-built service to serve. If None, the lifespan builds
            one from settings.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title=API_NAME,
        description="Cache-first access to the Rick and Morty character catalog",
        version=API_VERSION,
        lifespan=lifespan,
    )
    if service is not None:
        app.state.character_service = service

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": API_NAME,
            "version": API_VERSION,
            "description": "Cache-first access to the Rick and Morty character catalog",
            "endpoints": {
                "characters": "/characters",
                "search": "/characters/search",
                "filter": "/characters/filter",
                "pages": "/pages/{page}",
                "stats": "/stats",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/characters", response_model=CharacterListResponse)
    async def list_characters(handler: HandlerDep) -> CharacterListResponse:
        """Cached characters, or the first catalog page when nothing is cached."""
        return await handler.list_characters()

    @app.get("/characters/search", response_model=CharacterListResponse)
    async def search_characters(
        handler: HandlerDep,
        q: str = Query("", description="Case-insensitive name fragment"),
    ) -> CharacterListResponse:
        """Search cached characters by name."""
        return await handler.search(q)

    @app.get("/characters/filter", response_model=CharacterListResponse)
    async def filter_characters(
        handler: HandlerDep,
        status: str | None = Query(None, description="Life status, e.g. Alive"),
        species: str | None = Query(None, description="Species, e.g. Human"),
    ) -> CharacterListResponse:
        """Filter cached characters by status and species."""
        return await handler.filter_characters(status=status, species=species)

    @app.get("/characters/{character_id}", response_model=CharacterResponse)
    async def get_character(character_id: int, handler: HandlerDep) -> CharacterResponse:
        """Single character, cache first."""
        return await handler.get_character(character_id)

    @app.get("/pages/{page}", response_model=CharacterPageResponse)
    async def get_page(page: int, handler: HandlerDep) -> CharacterPageResponse:
        """One catalog page, cache first."""
        return await handler.get_page(page)

    @app.get("/stats", response_model=StoreStatsResponse)
    async def get_stats(handler: HandlerDep) -> StoreStatsResponse:
        """Cache statistics."""
        return await handler.get_stats()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(
        "character_catalog.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
