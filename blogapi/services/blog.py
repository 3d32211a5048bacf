"""
Blog service.

Holds the blog controller logic: resolve the owning user, check the
per-user title invariant, persist, and convert rows into linked models.
Every failure is raised as a typed error and mapped to an HTTP status by the
handlers registered in `blogapi.main`.
"""

from logging import getLogger

from blogapi.configs import file_logger
from blogapi.configs.settings import BLOG_TITLE_NOT_FOUND_MESSAGE
from blogapi.errors.blog import BlogAlreadyExistsError, BlogNotFoundError
from blogapi.errors.database import DuplicateEntryError
from blogapi.errors.user import UserNotFoundError
from blogapi.models import BlogDB, UserDB
from blogapi.repositories import BlogRepository
from blogapi.schemas.blog import BlogCollectionModel, BlogModel
from blogapi.schemas.factory import BlogModelFactory
from blogapi.schemas.user import UserModel
from blogapi.services.user import UserLookup

logger = file_logger(getLogger(__name__))


class BlogService:
    """Service for blog lookup, creation, rename and deletion."""

    def __init__(
        self,
        blogs: BlogRepository,
        users: UserLookup,
        factory: BlogModelFactory,
    ) -> None:
        """
        Initialize the blog service.

        Args:
            blogs: Blog repository
            users: User lookup collaborator
            factory: Request-bound blog model factory
        """
        self.blogs = blogs
        self.users = users
        self.factory = factory

    async def _require_user(self, user_name: str) -> UserDB:
        user = await self.users.find_user_by_name(user_name)
        if user is None:
            raise UserNotFoundError
        return user

    async def _require_blog(self, user: UserDB, title: str) -> BlogDB:
        blog = await self.blogs.find_by_creator_and_title(user.id, title)
        if blog is None:
            raise BlogNotFoundError(BLOG_TITLE_NOT_FOUND_MESSAGE)
        return blog

    async def _to_collection(self, blogs: list[BlogDB]) -> BlogCollectionModel:
        creators = await self.blogs.find_creator_names(blog.creator_id for blog in blogs)
        return self.factory.blogs_to_collection_model(blogs, creators)

    async def list_blogs(self) -> BlogCollectionModel:
        return await self._to_collection(await self.blogs.find_all())

    async def find_by_title(self, title: str) -> BlogCollectionModel:
        return await self._to_collection(await self.blogs.find_by_title(title))

    async def find_by_user(self, user_name: str) -> BlogCollectionModel:
        """
        List a user's blogs.

        Raises:
            UserNotFoundError: If the username is unknown
        """
        user = await self._require_user(user_name)
        blogs = await self.blogs.find_by_creator(user.id)
        return self.factory.blogs_to_collection_model(blogs, {user.id: user.username})

    async def get_blog(self, blog_id: int) -> BlogModel:
        """
        Get a blog by ID.

        Raises:
            BlogNotFoundError: If no blog has this ID
        """
        blog = await self.blogs.find_by_id(blog_id)
        if blog is None:
            raise BlogNotFoundError
        creators = await self.blogs.find_creator_names([blog.creator_id])
        return self.factory.blog_to_model(blog, creators[blog.creator_id])

    async def add_blog(self, user_name: str, title: str) -> BlogModel:
        """
        Create a blog for a user.

        Args:
            user_name: Owner's username
            title: Title of the new blog

        Returns:
            BlogModel: The created blog (its `self` link is the new resource URL)

        Raises:
            UserNotFoundError: If the username is unknown
            BlogAlreadyExistsError: If the user already owns a blog with this title
        """
        user = await self._require_user(user_name)
        if await self.blogs.find_by_creator_and_title(user.id, title) is not None:
            raise BlogAlreadyExistsError

        blog = BlogDB(creator_id=user.id, title=title)
        try:
            await self.users.save_user(user)
            blog = await self.blogs.save(blog)
        except DuplicateEntryError as e:
            raise BlogAlreadyExistsError from e

        logger.info(f"User '{user_name}' created blog {blog.id} '{title}'")
        return self.factory.blog_to_model(blog, user.username)

    async def rename_blog(self, user_name: str, old_name: str, new_name: str) -> BlogModel:
        """
        Rename one of a user's blogs. The blog keeps its ID.

        Raises:
            UserNotFoundError: If the username is unknown
            BlogNotFoundError: If the user owns no blog titled `old_name`
            BlogAlreadyExistsError: If the user already owns a blog titled `new_name`
        """
        user = await self._require_user(user_name)
        blog = await self._require_blog(user, old_name)
        if new_name != old_name and (
            await self.blogs.find_by_creator_and_title(user.id, new_name) is not None
        ):
            raise BlogAlreadyExistsError

        blog.title = new_name
        try:
            await self.users.save_user(user)
            blog = await self.blogs.save(blog)
        except DuplicateEntryError as e:
            raise BlogAlreadyExistsError from e

        logger.info(f"User '{user_name}' renamed blog {blog.id} '{old_name}' -> '{new_name}'")
        return self.factory.blog_to_model(blog, user.username)

    async def delete_blog(self, user_name: str, title: str) -> UserModel:
        """
        Delete one of a user's blogs.

        Returns:
            UserModel: The owner, without the deleted title

        Raises:
            UserNotFoundError: If the username is unknown
            BlogNotFoundError: If the user owns no blog titled `title`
        """
        user = await self._require_user(user_name)
        blog = await self._require_blog(user, title)

        user = await self.users.save_user(user)
        await self.blogs.delete(blog)

        logger.info(f"User '{user_name}' deleted blog {blog.id} '{title}'")
        return await self.users.user_to_model(user)
