"""
FastAPI in-memory web API.

Serves the hero collection from an InMemoryHeroStore so the HTTP hero
store has a backend to talk to during development and tests.

Dependencies: fastapi, uvicorn, herodesk.api.routers
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from herodesk.boundary.store.base_store import HeroStore
from herodesk.boundary.store.memory_store import InMemoryHeroStore
from herodesk.configs import Settings, get_settings
from herodesk.observability import configure_logging, get_logger
from .routers import health_router, heroes_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    configure_logging(app.state.settings.log_level)
    logger.info("In-memory web API started", extra={"collection": app.state.collection_path})

    yield

    logger.info("In-memory web API stopped")


def create_app(
    store: HeroStore | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        store: Hero store to serve (defaults to a freshly seeded InMemoryHeroStore)
        settings: Application settings (defaults to environment settings)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()
    collection_path = "/" + settings.hero_api.collection_url

    app = FastAPI(
        title="Hero in-memory web API",
        description="Hero collection served from process memory",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.collection_path = collection_path
    app.state.hero_store = store if store is not None else InMemoryHeroStore()

    app.include_router(health_router)
    app.include_router(heroes_router, prefix=collection_path)

    return app


if __name__ == "__main__":
    server = get_settings().server
    uvicorn.run(
        "herodesk.api.main:create_app",
        factory=True,
        host=server.host,
        port=server.port,
    )
