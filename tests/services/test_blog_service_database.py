# tests/services/test_blog_service_database.py
"""BlogService against a real in-memory database, for flush-time conflicts."""

from unittest.mock import MagicMock, patch

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from blogapi.errors import BlogAlreadyExistsError
from blogapi.models import BlogDB, UserDB
from blogapi.repositories import BlogRepository, UserRepository
from blogapi.services import BlogService, UserService


@pytest.fixture
async def blog_service(session: AsyncSession) -> BlogService:
    users = UserRepository(session)
    blogs = BlogRepository(session)
    alice = await users.save(UserDB(username="alice"))
    await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))
    await blogs.save(BlogDB(creator_id=alice.id, title="Cooking"))
    return BlogService(blogs, UserService(users, blogs, MagicMock()), MagicMock())


def _missing(title: str, repository: BlogRepository):  # noqa: ANN202
    """Make the duplicate check miss `title`, as if it were committed concurrently."""
    lookup = repository.find_by_creator_and_title

    async def find_by_creator_and_title(creator_id: int, wanted: str) -> BlogDB | None:
        if wanted == title:
            return None
        return await lookup(creator_id, wanted)

    return patch.object(repository, "find_by_creator_and_title", find_by_creator_and_title)


@pytest.mark.asyncio
async def test_rename_conflict_at_flush_is_already_exists(blog_service: BlogService) -> None:
    with (
        _missing("Cooking", blog_service.blogs),
        pytest.raises(BlogAlreadyExistsError) as exc_info,
    ):
        await blog_service.rename_blog("alice", "Travel", "Cooking")

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Error: User contains blog with the same name"


@pytest.mark.asyncio
async def test_add_conflict_at_flush_is_already_exists(blog_service: BlogService) -> None:
    with (
        _missing("Travel", blog_service.blogs),
        pytest.raises(BlogAlreadyExistsError),
    ):
        await blog_service.add_blog("alice", "Travel")
