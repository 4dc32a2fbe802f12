"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from sdn_map.api.middleware import SecurityHeadersMiddleware, setup_cors
from sdn_map.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from sdn_map.api.v1.categories import categories_router
    from sdn_map.api.v1.geocoding import geocoding_router
    from sdn_map.api.v1.provinces import provinces_router
    from sdn_map.api.v1.statistics import statistics_router
    from sdn_map.api.v1.zones import zones_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(provinces_router)
    root_router.include_router(zones_router)
    root_router.include_router(categories_router)
    root_router.include_router(geocoding_router)
    root_router.include_router(statistics_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)
