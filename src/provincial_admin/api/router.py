"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from provincial_admin.api.middleware import SecurityHeadersMiddleware, setup_cors
from provincial_admin.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from provincial_admin.api.v1.provincial_officials import provincial_officials_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(provincial_officials_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register CORS and security header middleware.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    app.add_middleware(SecurityHeadersMiddleware)
    setup_cors(app, settings)
