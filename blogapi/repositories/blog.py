"""Blog repository for database operations."""

from collections.abc import Iterable
from logging import getLogger

from sqlalchemy import select

from blogapi.configs import file_logger
from blogapi.models.blog import BlogDB
from blogapi.models.user import UserDB
from blogapi.repositories.base import BaseRepository

logger = file_logger(getLogger(__name__))


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Adds title and creator finders on top of `BaseRepository`.
    """

    model = BlogDB

    async def find_by_title(self, title: str) -> list[BlogDB]:
        """
        Get every blog with exactly this title, across all creators.

        Args:
            title: Blog title

        Returns:
            list[BlogDB]: Matching blogs (possibly empty)
        """
        result = await self.session.execute(
            # pyrefly: ignore [bad-argument-type]
            select(BlogDB).where(BlogDB.title == title).order_by(BlogDB.id),
        )
        blogs = list(result.scalars().all())
        logger.info(f"Found {len(blogs)} blogs titled '{title}'")
        return blogs

    async def find_by_creator(self, creator_id: int) -> list[BlogDB]:
        """
        Get all blogs owned by a user.

        Args:
            creator_id: ID of the owning user

        Returns:
            list[BlogDB]: The user's blogs
        """
        result = await self.session.execute(
            # pyrefly: ignore [bad-argument-type]
            select(BlogDB).where(BlogDB.creator_id == creator_id).order_by(BlogDB.id),
        )
        return list(result.scalars().all())

    async def find_by_creator_and_title(self, creator_id: int, title: str) -> BlogDB | None:
        """
        Get a user's blog by its title.

        Args:
            creator_id: ID of the owning user
            title: Blog title

        Returns:
            BlogDB | None: Blog if the user owns one with that title
        """
        result = await self.session.execute(
            select(BlogDB).where(
                # pyrefly: ignore [bad-argument-type]
                BlogDB.creator_id == creator_id,
                # pyrefly: ignore [bad-argument-type]
                BlogDB.title == title,
            ),
        )
        return result.scalar_one_or_none()

    async def find_creator_names(self, creator_ids: Iterable[int]) -> dict[int, str]:
        """
        Resolve creator IDs to usernames in one query.

        Args:
            creator_ids: IDs of the owning users

        Returns:
            dict[int, str]: Username keyed by user ID
        """
        ids = set(creator_ids)
        if not ids:
            return {}

        result = await self.session.execute(
            # pyrefly: ignore [missing-attribute]
            select(UserDB.id, UserDB.username).where(UserDB.id.in_(ids)),
        )
        return {user_id: username for user_id, username in result.all()}
