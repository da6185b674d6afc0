"""
Main Application - Main Layer

Entry point for the FastAPI application hosting the health query surface.
Run with ``uvicorn healthmesh.main.app:app``.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from healthmesh.main.config import get_settings
from healthmesh.main.container import app_lifespan, init_container
from healthmesh.presentation.controllers import health_router
from healthmesh.shared import configure_logging, get_logger, update_logging_from_settings

# Bootstrap logging from the environment until the settings are loaded
configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage container resources for the lifetime of the app."""
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.node.title,
        description=settings.node.description,
        version=settings.node.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(health_router)

    return app


app = create_app()
