"""JointCircular model: administrative circulars published on the site.

Storage shape only; nothing in this service creates or edits circulars.
``date`` is free text as supplied by the issuing office, not a DATE column.
"""

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from provincial_admin.models.base import Base, TimestampMixin, UUIDMixin


class JointCircular(Base, UUIDMixin, TimestampMixin):
    """A joint circular document record.

    Attributes:
        title: Circular title.
        link: Link to the circular's page.
        reference: Issuing office reference code, unique when present.
        date: Issue date as free text.
        download_link: Direct download URL.
        file: Stored filename of a locally kept copy.
    """

    __tablename__ = "joint_circulars"

    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    link: Mapped[str | None] = mapped_column(Text, nullable=True)
    reference: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date: Mapped[str | None] = mapped_column(String(255), nullable=True)
    download_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    file: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (UniqueConstraint("reference", name="uq_joint_circulars_reference"),)
