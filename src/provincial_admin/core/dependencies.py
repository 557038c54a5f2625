"""FastAPI dependency injection for database sessions and file storage."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from provincial_admin.core.config import Settings, get_settings
from provincial_admin.core.database import get_session_factory
from provincial_admin.lib.uploads.storage import LocalImageStorage


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield an async database session with per-request lifecycle."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


def get_image_storage(settings: Annotated[Settings, Depends(get_settings)]) -> LocalImageStorage:
    """Return the profile image storage rooted at the configured upload directory."""
    return LocalImageStorage(settings.official_upload_dir)
