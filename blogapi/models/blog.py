"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import DateTime, UniqueConstraint
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from blogapi.configs.settings import MAX_TITLE_LENGTH


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Ownership is a plain foreign key to `users.id`. Titles are unique per
    creator, not globally.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (UniqueConstraint("creator_id", "title", name="uq_blogs_creator_title"),)

    # Primary key
    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Blog ID",
    )

    # Foreign key to User
    creator_id: int = Field(
        sa_column=Column(
            "creator_id",
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Creator ID (foreign key to users.id)",
    )

    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False, index=True),
        description="Blog title (unique per creator)",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "creator_id": 1,
                "title": "Travel",
            },
        },
    )
