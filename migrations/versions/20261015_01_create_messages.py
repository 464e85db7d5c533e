"""create messages table

Revision ID: 20261015_01
Revises: 20261001_01
Create Date: 2026-10-15 10:30:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261015_01"
down_revision = "20261001_01"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "messages",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("product_id", sa.String(length=36), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="not replied"),
        sa.Column("date_created", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_messages_product_id", "messages", ["product_id"])


def downgrade() -> None:
    op.drop_index("ix_messages_product_id", table_name="messages")
    op.drop_table("messages")
