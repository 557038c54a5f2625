"""Shared test fixtures for async database, sessions, settings, and image storage."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from provincial_admin.core.config import Settings
from provincial_admin.lib.uploads.storage import ImageUpload, LocalImageStorage
from provincial_admin.models import Base

# Tiny image payloads. Uploads are checked by declared type and extension, not decoded.
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00\x1f\x15\xc4\x89"
    b"\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)
GIF_BYTES = b"GIF89a\x01\x00\x01\x00\x80\x00\x00\xff\xff\xff\x00\x00\x00!\xf9\x04\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Upload directory inside the test's temporary directory (not created yet)."""
    return tmp_path / "public" / "provincial_officials"


@pytest.fixture
def settings(upload_dir: Path) -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        database_url="sqlite+aiosqlite:///:memory:",
        official_upload_dir=str(upload_dir),
    )


@pytest.fixture
def storage(upload_dir: Path) -> LocalImageStorage:
    """Profile image storage rooted at the temporary upload directory."""
    return LocalImageStorage(upload_dir)


@pytest.fixture
def png_upload() -> ImageUpload:
    return ImageUpload(content=PNG_BYTES, filename="portrait.PNG", content_type="image/png")


@pytest.fixture
def jpeg_upload() -> ImageUpload:
    return ImageUpload(content=JPEG_BYTES, filename="headshot.jpeg", content_type="image/jpeg")


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, expire_on_commit=False)


@pytest.fixture
async def async_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    async with session_factory() as session:
        yield session
