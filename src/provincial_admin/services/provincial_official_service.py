"""Provincial official service: form validation, listing, and CRUD with image files.

File and row changes are applied one after the other, never atomically: a
failure between the two can leave an orphaned image or a record pointing at
a missing file.  Such failures propagate to the caller unchanged.
"""

import uuid
from dataclasses import dataclass

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from provincial_admin.lib.uploads.storage import ImageStorage, ImageUpload
from provincial_admin.lib.uploads.validators import (
    DEFAULT_MAX_IMAGE_BYTES,
    get_allowed_extensions_display,
    validate_image_content_type,
    validate_image_extension,
    validate_image_size,
)
from provincial_admin.models.provincial_official import OFFICIAL_POSITIONS, ProvincialOfficial

MSG_CREATED = "Provincial official added successfully."
MSG_UPDATED = "Provincial official updated successfully."
MSG_DELETED = "Provincial official deleted successfully."


class OfficialValidationError(ValueError):
    """One or more form fields failed validation.

    Attributes:
        errors: Mapping of field name to its validation messages.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid provincial official data: {fields}")


@dataclass(frozen=True)
class OfficialForm:
    """Validated provincial official form input."""

    name: str
    position: str
    image: ImageUpload | None = None


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _filled(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def _image_errors(image: ImageUpload, max_image_bytes: int) -> list[str]:
    errors: list[str] = []
    if not image.content_type.lower().startswith("image/"):
        errors.append("The profile image field must be an image.")
    if not validate_image_content_type(image.content_type) or not validate_image_extension(image.filename):
        errors.append(f"The profile image field must be a file of type: {get_allowed_extensions_display()}.")
    if not validate_image_size(image.size, max_image_bytes):
        errors.append(f"The profile image field must not be greater than {max_image_bytes // 1024} kilobytes.")
    return errors


def validate_official_form(
    name: str | None,
    position: str | None,
    image: ImageUpload | None = None,
    *,
    max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
    strict_positions: bool = False,
) -> OfficialForm:
    """Validate raw form input for create and update.

    Text fields are trimmed before checking.  An upload with no filename
    and no content counts as "no file".

    Args:
        name: Display name (required).
        position: Office held (required).
        image: Optional uploaded profile image.
        max_image_bytes: Upper bound on the image size.
        strict_positions: Also require ``position`` to be a known office.

    Returns:
        The validated form.

    Raises:
        OfficialValidationError: With per-field messages if any check fails.
    """
    errors: dict[str, list[str]] = {}

    if image is not None and not image.filename and image.size == 0:
        image = None

    if not _filled(name):
        errors["name"] = ["The name field is required."]
    if not _filled(position):
        errors["position"] = ["The position field is required."]
    elif strict_positions and position.strip() not in OFFICIAL_POSITIONS:
        errors["position"] = ["The selected position is invalid."]
    if image is not None:
        image_errors = _image_errors(image, max_image_bytes)
        if image_errors:
            errors["profile_image"] = image_errors

    if errors:
        raise OfficialValidationError(errors)

    return OfficialForm(name=name.strip(), position=position.strip(), image=image)  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Read operations
# ---------------------------------------------------------------------------


async def list_officials(
    session: AsyncSession,
    *,
    position: str | None = None,
    search: str | None = None,
) -> list[ProvincialOfficial]:
    """List provincial officials with optional filters.

    Blank filters are ignored; filled ones are applied exactly as given,
    surrounding whitespace included.  No ordering is applied beyond the
    database default.

    Args:
        session: Database session.
        position: Exact match on position.
        search: Case-insensitive substring match on name.

    Returns:
        All matching officials.
    """
    query = select(ProvincialOfficial)

    if _filled(position):
        query = query.where(ProvincialOfficial.position == position)

    if _filled(search):
        # Escape SQL wildcard characters so user input is treated as a literal string.
        escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")  # type: ignore[union-attr]
        query = query.where(ProvincialOfficial.name.ilike(f"%{escaped}%", escape="\\"))

    result = await session.execute(query)
    officials = list(result.scalars().all())
    logger.info(f"Listed {len(officials)} provincial officials")
    return officials


async def get_official(session: AsyncSession, official_id: uuid.UUID) -> ProvincialOfficial | None:
    """Get a provincial official by ID, or None if it does not exist."""
    result = await session.execute(select(ProvincialOfficial).where(ProvincialOfficial.id == official_id))
    return result.scalar_one_or_none()


# ---------------------------------------------------------------------------
# Write operations
# ---------------------------------------------------------------------------


async def create_official(
    session: AsyncSession,
    storage: ImageStorage,
    form: OfficialForm,
) -> ProvincialOfficial:
    """Create a provincial official, storing the profile image if supplied.

    Args:
        session: Database session.
        storage: Profile image storage.
        form: Validated form input.

    Returns:
        The created ProvincialOfficial.
    """
    await storage.ensure_directory()

    profile_image: str | None = None
    if form.image is not None:
        profile_image = await storage.save(form.image.content, form.image.filename)

    official = ProvincialOfficial(name=form.name, position=form.position, profile_image=profile_image)
    session.add(official)
    await session.commit()
    await session.refresh(official)
    logger.info(f"Created provincial official {official.id} ({official.name}, {official.position})")
    return official


async def update_official(
    session: AsyncSession,
    storage: ImageStorage,
    official: ProvincialOfficial,
    form: OfficialForm,
    *,
    remove_image: bool = False,
) -> ProvincialOfficial:
    """Update a provincial official and reconcile its profile image.

    A new image replaces the owned one.  Without a new image,
    ``remove_image`` deletes the owned one.  Otherwise the image is kept.

    Args:
        session: Database session.
        storage: Profile image storage.
        official: The official to update.
        form: Validated form input.
        remove_image: Drop the current image when no new one is supplied.

    Returns:
        The updated ProvincialOfficial.
    """
    if form.image is not None:
        if official.profile_image:
            await storage.delete(official.profile_image)
        official.profile_image = await storage.save(form.image.content, form.image.filename)
    elif remove_image:
        if official.profile_image:
            await storage.delete(official.profile_image)
        official.profile_image = None

    official.name = form.name
    official.position = form.position
    await session.commit()
    await session.refresh(official)
    logger.info(f"Updated provincial official {official.id}")
    return official


async def delete_official(
    session: AsyncSession,
    storage: ImageStorage,
    official: ProvincialOfficial,
) -> None:
    """Delete a provincial official and its profile image file.

    Args:
        session: Database session.
        storage: Profile image storage.
        official: The official to delete.
    """
    if official.profile_image:
        await storage.delete(official.profile_image)

    official_id = official.id
    await session.delete(official)
    await session.commit()
    logger.info(f"Deleted provincial official {official_id}")
