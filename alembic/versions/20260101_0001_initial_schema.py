"""
Initial schema: Create users and blogs tables.

Revision ID: 0001
Revises:
Create Date: 2026-01-01

- users: blog owners, unique username
- blogs: blogs with a creator foreign key, title unique per creator
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# Revision identifiers, used by Alembic
revision: str = "0001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Apply schema changes for this revision."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "blogs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("creator_id", "title", name="uq_blogs_creator_title"),
    )
    op.create_index(op.f("ix_blogs_creator_id"), "blogs", ["creator_id"], unique=False)
    op.create_index(op.f("ix_blogs_title"), "blogs", ["title"], unique=False)


def downgrade() -> None:
    """Revert schema changes for this revision."""
    op.drop_index(op.f("ix_blogs_title"), table_name="blogs")
    op.drop_index(op.f("ix_blogs_creator_id"), table_name="blogs")
    op.drop_table("blogs")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
