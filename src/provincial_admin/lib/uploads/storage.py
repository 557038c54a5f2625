"""File storage for provincial official profile images.

Provides an ``ImageStorage`` Protocol and a ``LocalImageStorage``
implementation that writes files to a single flat, publicly served
directory using async I/O.  Stored names are a random 20-character
alphanumeric token followed by the original (lowercased) extension.
"""

import secrets
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import aiofiles
import aiofiles.os
from loguru import logger

from provincial_admin.lib.uploads.validators import extract_extension

STORED_NAME_LENGTH = 20

_TOKEN_ALPHABET = string.ascii_letters + string.digits


@dataclass(frozen=True)
class ImageUpload:
    """An uploaded image as received from the client.

    Attributes:
        content: Raw file bytes.
        filename: Original client-side filename (used for the extension only).
        content_type: Declared MIME type.
    """

    content: bytes
    filename: str
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)


def generate_stored_name(filename: str) -> str:
    """Build a random stored filename preserving the original extension.

    Collisions are not checked; with 62**20 possible tokens they are
    treated as impossible.

    Args:
        filename: Original filename.

    Returns:
        e.g. ``"aZ3kP0qLm9XbT2cV7wYe.png"``.
    """
    token = "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(STORED_NAME_LENGTH))
    return f"{token}{extract_extension(filename)}"


class ImageStorage(Protocol):
    """Abstract storage interface for profile images."""

    async def ensure_directory(self) -> None:
        """Create the storage directory if it does not exist."""
        ...

    async def save(self, content: bytes, filename: str) -> str:
        """Store ``content`` and return the generated stored name."""
        ...

    async def delete(self, stored_name: str) -> bool:
        """Delete a stored file, returning False if it was already absent."""
        ...

    async def exists(self, stored_name: str) -> bool:
        """Return whether a stored file is present."""
        ...


class LocalImageStorage:
    """Local filesystem implementation of ImageStorage.

    Files are stored flat under ``base_dir/{token}.{ext}``.

    Args:
        base_dir: The upload directory.
    """

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, stored_name: str) -> Path:
        """Resolve a stored name to its path inside the upload directory.

        Raises:
            ValueError: If the name is empty or contains path components.
        """
        if not stored_name or stored_name in {".", ".."} or "/" in stored_name or "\\" in stored_name:
            msg = f"Invalid stored image name: {stored_name!r}"
            raise ValueError(msg)
        return self._base_dir / stored_name

    async def ensure_directory(self) -> None:
        await aiofiles.os.makedirs(self._base_dir, exist_ok=True)

    async def save(self, content: bytes, filename: str) -> str:
        """Write ``content`` into the upload directory under a random name.

        Args:
            content: Raw file bytes.
            filename: Original filename (extension is preserved).

        Returns:
            The stored name (no directory components).
        """
        await self.ensure_directory()
        stored_name = generate_stored_name(filename)
        async with aiofiles.open(self.path_for(stored_name), "wb") as f:
            await f.write(content)
        logger.debug(f"Stored profile image {stored_name} ({len(content)} bytes)")
        return stored_name

    async def delete(self, stored_name: str) -> bool:
        """Remove a stored file.

        A missing file is not an error.

        Returns:
            True if a file was removed, False if it did not exist.
        """
        path = self.path_for(stored_name)
        if not await aiofiles.os.path.exists(path):
            logger.warning(f"Profile image {stored_name} already absent from {self._base_dir}")
            return False
        await aiofiles.os.remove(path)
        return True

    async def exists(self, stored_name: str) -> bool:
        return await aiofiles.os.path.isfile(self.path_for(stored_name))
