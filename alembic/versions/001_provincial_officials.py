"""create provincial_officials table

Revision ID: 001
Revises: None
Create Date: 2025-04-05

Provincial officials shown on the public site, each with an optional
profile image stored on local disk (the column holds the stored filename).
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import UUID

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "provincial_officials",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("position", sa.String(255), nullable=False),
        sa.Column("profile_image", sa.String(255), nullable=True),
        # Timestamps
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_provincial_officials_position", "provincial_officials", ["position"])


def downgrade() -> None:
    op.drop_index("ix_provincial_officials_position", table_name="provincial_officials")
    op.drop_table("provincial_officials")
