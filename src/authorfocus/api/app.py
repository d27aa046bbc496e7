"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from authorfocus import __version__
from authorfocus.api.routes import authors_router, health_router, products_router
from authorfocus.config import AuthorFocusSettings, get_settings
from authorfocus.db.session import DatabaseManager
from authorfocus.log import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of the catalog database connection.
    """
    settings: AuthorFocusSettings = app.state.settings
    configure_logging(settings.log_level)

    logger.info("Initializing database connection...")
    database = DatabaseManager(settings.database_url, settings.database_echo)
    app.state.database = database
    app.state.db_engine = database.engine
    app.state.db_session_factory = database.session_factory

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")

    await database.close()

    logger.info("Application shutdown complete")


def create_app(
    settings: AuthorFocusSettings | None = None,
    *,
    title: str = "Authorfocus API",
    description: str = "Author rankings and same-author product lookups for book catalogs",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. If not provided, loaded from environment.
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(authors_router, prefix="/api/v1")
    app.include_router(products_router, prefix="/api/v1")

    return app


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("authorfocus.api.app:create_app", factory=True, host="0.0.0.0", port=8000)
