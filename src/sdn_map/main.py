"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from sdn_map.core.config import Settings, get_settings
from sdn_map.core.logging import setup_logging
from sdn_map.lib.locator import ProvinceLocator


def load_locator(settings: Settings) -> ProvinceLocator:
    """Load the boundary dataset named in settings.

    A missing dataset file is not fatal: the service starts with an empty
    locator and every lookup reports unmatched.

    Raises:
        ValueError: If the file exists but is not a usable FeatureCollection.
    """
    path = settings.boundaries_file
    if not path.is_file():
        logger.warning(f"Boundary dataset not found at {path}; province lookups will be unmatched")
        return ProvinceLocator([])

    locator = ProvinceLocator.from_path(
        path,
        name_property=settings.boundary_name_property,
        english_name_property=settings.boundary_english_name_property,
    )
    logger.info(f"Loaded {len(locator)} province boundaries from {path}")
    return locator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Configure logging and load the boundary dataset once at startup."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)
    app.state.locator = load_locator(settings)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="SDN Map API",
        description="Thai province resolution, health-zone classification, and category colors for the SDN Map Portal",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    from sdn_map.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app
