"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blogapi.configs.settings import MAX_USERNAME_LENGTH


class UserDB(SQLModel, table=True):
    """
    User database model.

    A user owns blogs through `BlogDB.creator_id`; the set of a user's blogs
    is always read back from the blogs table rather than kept on the user.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    # Primary key
    id: int | None = Field(
        default=None,
        primary_key=True,
        description="User ID",
    )

    # Required fields
    username: str = Field(
        sa_column=Column(String(MAX_USERNAME_LENGTH), unique=True, nullable=False, index=True),
        description="Username (unique)",
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
                "username": "alice",
            },
        },
    )
