"""ProvincialOfficial model: provincial officeholders shown on the public site.

Each record owns at most one profile image stored in the flat upload
directory.  The service layer deletes the owned file whenever the image is
replaced or the record is removed; the database does not know about files.
"""

import enum

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from provincial_admin.models.base import Base, TimestampMixin, UUIDMixin


class OfficialPosition(enum.StrEnum):
    """Provincial offices an official may hold, in display order."""

    GOVERNOR = "Governor"
    VICE_GOVERNOR = "Vice Governor"
    MEMBER_1ST_DISTRICT = "Member, 1st District"
    MEMBER_2ND_DISTRICT = "Member, 2nd District"
    MEMBER_3RD_DISTRICT = "Member, 3rd District"
    PCL_FEDERATION_PRESIDENT = "President PCL Bohol Federation"
    LIGA_NG_MGA_BARANGAY = "Liga ng mga Barangay"
    SK_FEDERATION_PRESIDENT = "SK Federation President"


OFFICIAL_POSITIONS: tuple[str, ...] = tuple(p.value for p in OfficialPosition)


class ProvincialOfficial(Base, UUIDMixin, TimestampMixin):
    """A provincial official with an optional profile image.

    Attributes:
        name: Display name.
        position: Office held; expected, not enforced, to be an OfficialPosition.
        profile_image: Stored filename in the upload directory, or None.
    """

    __tablename__ = "provincial_officials"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (Index("ix_provincial_officials_position", "position"),)
