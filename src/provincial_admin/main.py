"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
the profile image static mount, and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from provincial_admin.core.config import get_settings
from provincial_admin.core.database import dispose_engine, init_engine
from provincial_admin.core.logging import setup_logging
from provincial_admin.lib.uploads.storage import LocalImageStorage


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: init engine on startup, dispose on shutdown."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)
    init_engine(settings.database_url, echo=False, schema=settings.database_schema)
    await LocalImageStorage(settings.official_upload_dir).ensure_directory()

    yield

    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Provincial Admin API",
        description="Administration of provincial officials and joint circulars",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register exception handlers
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    # Register middleware and routers
    from provincial_admin.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    # Profile images are public; the directory may not exist until the first upload.
    app.mount(
        settings.official_image_url_prefix,
        StaticFiles(directory=settings.official_upload_dir, check_dir=False),
        name="provincial-official-images",
    )

    return app
