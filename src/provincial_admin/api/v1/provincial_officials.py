"""Provincial officials admin API endpoints: list, create, update, delete."""

import uuid

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from provincial_admin.core.config import Settings, get_settings
from provincial_admin.core.dependencies import get_async_session, get_image_storage
from provincial_admin.lib.uploads.storage import ImageUpload, LocalImageStorage
from provincial_admin.models.provincial_official import OFFICIAL_POSITIONS, ProvincialOfficial
from provincial_admin.schemas.common import ErrorResponse, ValidationErrorResponse
from provincial_admin.schemas.provincial_official import (
    OfficialActionResponse,
    OfficialFilters,
    OfficialListResponse,
    ProvincialOfficialResponse,
)
from provincial_admin.services.provincial_official_service import (
    MSG_CREATED,
    MSG_DELETED,
    MSG_UPDATED,
    OfficialForm,
    OfficialValidationError,
    create_official,
    delete_official,
    get_official,
    list_officials,
    update_official,
    validate_official_form,
)

provincial_officials_router = APIRouter(prefix="/provincial-officials", tags=["provincial-officials"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_INVALID = {status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ValidationErrorResponse}}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _response_from_official(official: ProvincialOfficial, settings: Settings) -> ProvincialOfficialResponse:
    resp = ProvincialOfficialResponse.model_validate(official)
    if resp.profile_image:
        prefix = settings.official_image_url_prefix.rstrip("/")
        resp.profile_image_url = f"{prefix}/{resp.profile_image}"
    return resp


def _supplied_filters(**params: str | None) -> OfficialFilters:
    return OfficialFilters(**{key: value for key, value in params.items() if value is not None})


async def _read_upload(file: UploadFile | None) -> ImageUpload | None:
    if file is None:
        return None
    content = await file.read()
    return ImageUpload(
        content=content,
        filename=file.filename or "",
        content_type=file.content_type or "application/octet-stream",
    )


async def _validate_form(
    name: str | None,
    position: str | None,
    profile_image: UploadFile | None,
    settings: Settings,
) -> OfficialForm:
    upload = await _read_upload(profile_image)
    try:
        return validate_official_form(
            name,
            position,
            upload,
            max_image_bytes=settings.official_max_image_size_bytes,
            strict_positions=settings.official_strict_positions,
        )
    except OfficialValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[
                {"loc": ["body", field], "msg": message, "type": "value_error"}
                for field, messages in e.errors.items()
                for message in messages
            ],
        ) from e


async def _require_official(session: AsyncSession, official_id: uuid.UUID) -> ProvincialOfficial:
    official = await get_official(session, official_id)
    if official is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Provincial official not found")
    return official


# ---------------------------------------------------------------------------
# Read endpoints
# ---------------------------------------------------------------------------


@provincial_officials_router.get(
    "",
    response_model=OfficialListResponse,
)
async def list_officials_endpoint(
    position: str | None = Query(None, description="Exact position to filter by"),
    search: str | None = Query(None, description="Case-insensitive substring of the name"),
    session: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> OfficialListResponse:
    """List provincial officials with the echoed filters and the position list."""
    try:
        officials = await list_officials(session, position=position, search=search)
    except Exception as e:
        logger.error(f"Unexpected error listing provincial officials: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing provincial officials.",
        ) from e
    return OfficialListResponse(
        officials=[_response_from_official(o, settings) for o in officials],
        filters=_supplied_filters(search=search, position=position),
        positions=list(OFFICIAL_POSITIONS),
    )


@provincial_officials_router.get(
    "/{official_id}",
    response_model=ProvincialOfficialResponse,
    responses=_NOT_FOUND,
)
async def get_official_detail(
    official_id: uuid.UUID,
    session: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> ProvincialOfficialResponse:
    """Get a single provincial official."""
    official = await _require_official(session, official_id)
    return _response_from_official(official, settings)


# ---------------------------------------------------------------------------
# Write endpoints
# ---------------------------------------------------------------------------


@provincial_officials_router.post(
    "",
    response_model=OfficialActionResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
)
async def create_official_endpoint(
    name: str | None = Form(None),
    position: str | None = Form(None),
    profile_image: UploadFile | None = File(None),
    session: AsyncSession = Depends(get_async_session),
    storage: LocalImageStorage = Depends(get_image_storage),
    settings: Settings = Depends(get_settings),
) -> OfficialActionResponse:
    """Create a provincial official from a multipart form."""
    form = await _validate_form(name, position, profile_image, settings)
    official = await create_official(session, storage, form)
    return OfficialActionResponse(message=MSG_CREATED, official=_response_from_official(official, settings))


@provincial_officials_router.post(
    "/{official_id}",
    response_model=OfficialActionResponse,
    responses=_NOT_FOUND | _INVALID,
)
@provincial_officials_router.put(
    "/{official_id}",
    response_model=OfficialActionResponse,
    responses=_NOT_FOUND | _INVALID,
)
async def update_official_endpoint(
    request: Request,
    official_id: uuid.UUID,
    name: str | None = Form(None),
    position: str | None = Form(None),
    profile_image: UploadFile | None = File(None),
    remove_image: str | None = Form(None, description="Present with any value to clear the current image"),
    session: AsyncSession = Depends(get_async_session),
    storage: LocalImageStorage = Depends(get_image_storage),
    settings: Settings = Depends(get_settings),
) -> OfficialActionResponse:
    """Update a provincial official.

    A new ``profile_image`` replaces the current one; otherwise
    ``remove_image`` clears it.  Only the presence of ``remove_image`` counts,
    so an empty value still clears the image.
    """
    official = await _require_official(session, official_id)
    form = await _validate_form(name, position, profile_image, settings)
    # Empty form values arrive as None, so check the raw form for the key.
    remove = remove_image is not None or "remove_image" in await request.form()
    official = await update_official(session, storage, official, form, remove_image=remove)
    return OfficialActionResponse(message=MSG_UPDATED, official=_response_from_official(official, settings))


@provincial_officials_router.delete(
    "/{official_id}",
    response_model=OfficialActionResponse,
    responses=_NOT_FOUND,
)
async def delete_official_endpoint(
    official_id: uuid.UUID,
    session: AsyncSession = Depends(get_async_session),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> OfficialActionResponse:
    """Delete a provincial official and its profile image."""
    official = await _require_official(session, official_id)
    await delete_official(session, storage, official)
    return OfficialActionResponse(message=MSG_DELETED)
