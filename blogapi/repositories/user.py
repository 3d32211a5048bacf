"""User repository for database operations."""

from typing import cast

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from blogapi.models.user import UserDB
from blogapi.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """Repository for User database operations."""

    model = UserDB

    async def find_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()
