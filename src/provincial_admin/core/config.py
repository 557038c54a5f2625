"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        description="Async SQLAlchemy connection string (postgresql+asyncpg://...)",
    )
    database_schema: str | None = Field(
        default=None,
        description="PostgreSQL schema for isolated environments (e.g., pr_42)",
    )

    @field_validator("database_schema")
    @classmethod
    def validate_database_schema(cls, v: str | None) -> str | None:
        if v is None:
            return None
        if not re.match(r"^[a-z_][a-z0-9_]{0,62}$", v):
            msg = "Invalid database_schema: must match ^[a-z_][a-z0-9_]{0,62}$"
            raise ValueError(msg)
        return v

    # Provincial officials
    official_upload_dir: str = Field(
        default="./public/provincial_officials",
        description="Directory for provincial official profile images (flat, publicly served)",
    )
    official_image_url_prefix: str = Field(
        default="/provincial_officials",
        description="URL path the profile image directory is served under",
    )
    official_max_image_size_kb: int = Field(
        default=5120,
        description="Maximum profile image size in kilobytes",
        gt=0,
    )
    official_strict_positions: bool = Field(
        default=False,
        description="Reject positions outside the fixed list of provincial offices",
    )

    @field_validator("official_image_url_prefix")
    @classmethod
    def validate_official_image_url_prefix(cls, v: str) -> str:
        if not v.startswith("/"):
            msg = "official_image_url_prefix must start with '/'"
            raise ValueError(msg)
        return v.rstrip("/") or "/"

    @property
    def official_max_image_size_bytes(self) -> int:
        """Maximum profile image size in bytes."""
        return self.official_max_image_size_kb * 1024

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()  # type: ignore[call-arg]
