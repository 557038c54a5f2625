"""Common Pydantic v2 schemas shared across the API.

Documents the error bodies endpoints return so they appear in OpenAPI.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error message")


class ValidationErrorItem(BaseModel):
    """One per-field validation message, shaped like FastAPI's own 422 items."""

    loc: list[str] = Field(description="Location of the field, e.g. ['body', 'name']")
    msg: str = Field(description="Human-readable validation message")
    type: str = Field(default="value_error", description="Machine-readable error type")


class ValidationErrorResponse(BaseModel):
    """422 response body listing every failed field."""

    detail: list[ValidationErrorItem]
