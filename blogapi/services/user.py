"""User lookup and registration service."""

from logging import getLogger
from typing import Protocol, runtime_checkable

from blogapi.configs import file_logger
from blogapi.errors.database import DuplicateEntryError
from blogapi.errors.user import UserAlreadyExistsError, UserNotFoundError
from blogapi.models import UserDB
from blogapi.repositories import BlogRepository, UserRepository
from blogapi.schemas.factory import UserModelFactory
from blogapi.schemas.user import UserModel

logger = file_logger(getLogger(__name__))


@runtime_checkable
class UserLookup(Protocol):
    """
    What the blog service needs to know about users.

    `BlogService` depends on this protocol only, never on the user routes or
    repository directly.
    """

    async def find_user_by_name(self, name: str) -> UserDB | None:
        """Resolve a username to a user, or None."""
        ...

    async def save_user(self, user: UserDB) -> UserDB:
        """Persist a user."""
        ...

    async def user_to_model(self, user: UserDB) -> UserModel:
        """Convert a user to its linked resource model."""
        ...


class UserService:
    """Service for user lookup, registration and representation."""

    def __init__(
        self,
        users: UserRepository,
        blogs: BlogRepository,
        factory: UserModelFactory,
    ) -> None:
        """
        Initialize the user service.

        Args:
            users: User repository
            blogs: Blog repository (to list the titles a user owns)
            factory: Request-bound user model factory
        """
        self.users = users
        self.blogs = blogs
        self.factory = factory

    async def find_user_by_name(self, name: str) -> UserDB | None:
        return await self.users.find_by_username(name)

    async def save_user(self, user: UserDB) -> UserDB:
        return await self.users.save(user)

    async def user_to_model(self, user: UserDB) -> UserModel:
        blogs = await self.blogs.find_by_creator(user.id)
        return self.factory.user_to_model(user, [blog.title for blog in blogs])

    async def get_user(self, name: str) -> UserModel:
        """
        Get a user's model by username.

        Raises:
            UserNotFoundError: If the username is unknown
        """
        user = await self.find_user_by_name(name)
        if user is None:
            raise UserNotFoundError
        return await self.user_to_model(user)

    async def list_users(self) -> list[UserModel]:
        return [await self.user_to_model(user) for user in await self.users.find_all()]

    async def create_user(self, name: str) -> UserModel:
        """
        Register a new username.

        Raises:
            UserAlreadyExistsError: If the username is taken
        """
        if await self.find_user_by_name(name) is not None:
            raise UserAlreadyExistsError

        try:
            user = await self.save_user(UserDB(username=name))
        except DuplicateEntryError as e:
            raise UserAlreadyExistsError from e

        logger.info(f"Created user '{name}' with id {user.id}")
        return self.factory.user_to_model(user, [])
