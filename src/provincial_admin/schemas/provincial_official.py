"""Pydantic v2 schemas for provincial official operations."""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

# ---------------------------------------------------------------------------
# Read schemas
# ---------------------------------------------------------------------------


class ProvincialOfficialResponse(BaseModel):
    """A provincial official record."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    name: str
    position: str
    profile_image: str | None = None
    profile_image_url: str | None = Field(default=None, description="Public URL of the profile image, if any")
    created_at: datetime
    updated_at: datetime


class OfficialFilters(BaseModel):
    """Echo of the filters supplied to the list endpoint.

    Only parameters present on the request are serialized; an omitted
    filter is left out rather than echoed as null.
    """

    search: str | None = None
    position: str | None = None

    @model_serializer(mode="wrap")
    def _supplied_only(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if key in self.model_fields_set}


class OfficialListResponse(BaseModel):
    """Listing payload for the admin screen.

    ``positions`` is the fixed list of provincial offices for the filter
    and form drop-downs.
    """

    officials: list[ProvincialOfficialResponse]
    filters: OfficialFilters
    positions: list[str]


# ---------------------------------------------------------------------------
# Write results
# ---------------------------------------------------------------------------


class OfficialActionResponse(BaseModel):
    """Outcome of a create, update, or delete.

    The client decides how to present ``message`` (flash banner, toast,
    redirect to the listing).
    """

    success: bool = True
    message: str
    official: ProvincialOfficialResponse | None = None
