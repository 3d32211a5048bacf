"""
Converters from database rows to hypermedia resource models.

Links are absolute URLs resolved against the incoming request, so a
factory is built per request (see `blogapi.dependencies`).

A blog row only stores its `creator_id`, while its model shows the
creator's username and links to the creator. The factories therefore take
the resolved username(s) next to the rows: `blog_to_model(blog, creator)`
and `blogs_to_collection_model(blogs, creators)`. Callers look them up
in one query with `BlogRepository.find_creator_names`, which keeps the
factories free of database access.
"""

from collections.abc import Mapping, Sequence

from fastapi import Request

from blogapi.models import BlogDB, UserDB
from blogapi.schemas.blog import BlogCollectionModel, BlogEmbedded, BlogModel
from blogapi.schemas.links import Link
from blogapi.schemas.user import UserModel
from blogapi.utils.helpers import format_datetime


class BlogModelFactory:
    """Builds `BlogModel` and `BlogCollectionModel` instances."""

    def __init__(self, request: Request) -> None:
        self.request = request

    def _url(self, name: str, **path_params: object) -> str:
        return str(self.request.url_for(name, **path_params))

    def blog_to_model(self, blog: BlogDB, creator: str) -> BlogModel:
        """
        Wrap a blog row with its navigation links.

        Args:
            blog: Persisted blog (its ID must be assigned)
            creator: Username of the blog's creator

        Returns:
            BlogModel: Linked blog model
        """
        return BlogModel(
            id=blog.id,
            title=blog.title,
            creator=creator,
            created_at=format_datetime(blog.created_at),
            updated_at=format_datetime(blog.updated_at),
            links={
                "self": Link(href=self._url("blogs_get_by_id", blog_id=blog.id)),
                "blogs": Link(href=self._url("blogs_get_all")),
                "creator": Link(href=self._url("users_get_by_name", user_name=creator)),
                "creatorBlogs": Link(href=self._url("blogs_get_by_user", user_name=creator)),
            },
        )

    def blogs_to_collection_model(
        self,
        blogs: Sequence[BlogDB],
        creators: Mapping[int, str],
    ) -> BlogCollectionModel:
        """
        Wrap blog rows into a linked collection.

        Args:
            blogs: Persisted blogs
            creators: Creator username keyed by user ID

        Returns:
            BlogCollectionModel: Collection whose `self` link is the request URL
        """
        return BlogCollectionModel(
            embedded=BlogEmbedded(
                blogs=[self.blog_to_model(blog, creators[blog.creator_id]) for blog in blogs],
            ),
            links={"self": Link(href=str(self.request.url))},
        )


class UserModelFactory:
    """Builds `UserModel` instances."""

    def __init__(self, request: Request) -> None:
        self.request = request

    def user_to_model(self, user: UserDB, blog_titles: Sequence[str]) -> UserModel:
        """
        Wrap a user row with its blog titles and navigation links.

        Args:
            user: Persisted user
            blog_titles: Titles of the blogs the user currently owns

        Returns:
            UserModel: Linked user model
        """
        url_for = self.request.url_for
        return UserModel(
            id=user.id,
            username=user.username,
            blogs=list(blog_titles),
            created_at=format_datetime(user.created_at),
            updated_at=format_datetime(user.updated_at),
            links={
                "self": Link(href=str(url_for("users_get_by_name", user_name=user.username))),
                "blogs": Link(href=str(url_for("blogs_get_by_user", user_name=user.username))),
                "users": Link(href=str(url_for("users_get_all"))),
            },
        )
