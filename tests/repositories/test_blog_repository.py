# tests/repositories/test_blog_repository.py
"""Tests for BlogRepository and UserRepository on an in-memory database."""

import logging

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from blogapi.errors import DuplicateEntryError
from blogapi.models import BlogDB, UserDB
from blogapi.repositories import BlogRepository, UserRepository


@pytest.fixture
def users(session: AsyncSession) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
def blogs(session: AsyncSession) -> BlogRepository:
    return BlogRepository(session)


@pytest.fixture
async def alice(users: UserRepository) -> UserDB:
    return await users.save(UserDB(username="alice"))


@pytest.fixture
async def bob(users: UserRepository) -> UserDB:
    return await users.save(UserDB(username="bob"))


@pytest.mark.asyncio
async def test_save_assigns_id(blogs: BlogRepository, alice: UserDB) -> None:
    blog = await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))

    assert blog.id is not None
    assert blog.updated_at is None
    assert await blogs.find_by_id(blog.id) is blog


@pytest.mark.asyncio
async def test_save_existing_stamps_updated_at(blogs: BlogRepository, alice: UserDB) -> None:
    blog = await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))
    blog.title = "Adventures"

    saved = await blogs.save(blog)

    assert saved.id == blog.id
    assert saved.updated_at is not None
    assert await blogs.find_by_creator_and_title(alice.id, "Travel") is None
    assert await blogs.find_by_creator_and_title(alice.id, "Adventures") is saved


@pytest.mark.asyncio
async def test_find_by_title_spans_creators(
    blogs: BlogRepository,
    alice: UserDB,
    bob: UserDB,
) -> None:
    await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))
    await blogs.save(BlogDB(creator_id=bob.id, title="Travel"))
    await blogs.save(BlogDB(creator_id=bob.id, title="Cooking"))

    found = await blogs.find_by_title("Travel")

    assert [blog.creator_id for blog in found] == [alice.id, bob.id]
    assert await blogs.find_by_title("Nothing") == []


@pytest.mark.asyncio
async def test_find_by_creator(blogs: BlogRepository, alice: UserDB, bob: UserDB) -> None:
    await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))
    await blogs.save(BlogDB(creator_id=bob.id, title="Cooking"))

    found = await blogs.find_by_creator(alice.id)

    assert [blog.title for blog in found] == ["Travel"]


@pytest.mark.asyncio
async def test_duplicate_title_for_same_creator_rejected(
    blogs: BlogRepository,
    alice: UserDB,
) -> None:
    await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))

    with pytest.raises(DuplicateEntryError):
        await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))


@pytest.mark.asyncio
async def test_delete(blogs: BlogRepository, alice: UserDB) -> None:
    blog = await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))

    await blogs.delete(blog)

    assert await blogs.find_by_id(blog.id) is None
    assert await blogs.count() == 0


@pytest.mark.asyncio
async def test_find_all_and_creator_names(
    blogs: BlogRepository,
    alice: UserDB,
    bob: UserDB,
) -> None:
    await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))
    await blogs.save(BlogDB(creator_id=bob.id, title="Cooking"))

    found = await blogs.find_all()
    names = await blogs.find_creator_names(blog.creator_id for blog in found)

    assert [blog.title for blog in found] == ["Travel", "Cooking"]
    assert names == {alice.id: "alice", bob.id: "bob"}
    assert await blogs.find_creator_names([]) == {}


@pytest.mark.asyncio
async def test_find_by_username(users: UserRepository, alice: UserDB) -> None:
    assert await users.find_by_username("alice") is alice
    assert await users.find_by_username("ghost") is None


@pytest.mark.asyncio
async def test_duplicate_username_rejected(users: UserRepository, alice: UserDB) -> None:
    with pytest.raises(DuplicateEntryError):
        await users.save(UserDB(username="alice"))


@pytest.mark.asyncio
async def test_duplicate_detail_hides_driver_message(
    blogs: BlogRepository,
    alice: UserDB,
    caplog: pytest.LogCaptureFixture,
) -> None:
    await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))

    with (
        caplog.at_level(logging.WARNING, logger="blogapi.repositories.base"),
        pytest.raises(DuplicateEntryError) as exc_info,
    ):
        await blogs.save(BlogDB(creator_id=alice.id, title="Travel"))

    assert exc_info.value.detail == "A record with this value already exists"
    assert exc_info.value.status_code == 409
    assert "UNIQUE constraint failed" in caplog.text
