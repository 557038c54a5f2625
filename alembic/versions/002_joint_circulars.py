"""create joint_circulars table

Revision ID: 002
Revises: 001
Create Date: 2025-04-05

Storage for joint circular records.  ``reference`` is unique when present;
``date`` is free text.  Upgrade skips creation if the table already exists
and downgrade only drops it if present.  Offline SQL generation always
emits both statements.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import context, op
from sqlalchemy.dialects.postgresql import UUID

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

_TABLE = "joint_circulars"


def _table_exists() -> bool:
    # Offline (--sql) runs have no connection to inspect.
    if context.is_offline_mode():
        return False
    return _TABLE in sa.inspect(op.get_bind()).get_table_names()


def upgrade() -> None:
    if _table_exists():
        return
    op.create_table(
        _TABLE,
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.Text, nullable=True),
        sa.Column("link", sa.Text, nullable=True),
        sa.Column("reference", sa.String(255), nullable=True),
        sa.Column("date", sa.String(255), nullable=True),
        sa.Column("download_link", sa.Text, nullable=True),
        sa.Column("file", sa.String(255), nullable=True),
        # Timestamps
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("reference", name="uq_joint_circulars_reference"),
    )


def downgrade() -> None:
    if not context.is_offline_mode() and not _table_exists():
        return
    op.drop_table(_TABLE)
