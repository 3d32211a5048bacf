# tests/services/conftest.py
"""Fixtures for service unit tests (collaborators are mocks)."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from blogapi.models import BlogDB, UserDB
from blogapi.services import BlogService


@pytest.fixture
def sample_user() -> UserDB:
    return UserDB(id=1, username="alice")


@pytest.fixture
def sample_blog(sample_user: UserDB) -> BlogDB:
    return BlogDB(id=10, creator_id=sample_user.id, title="Travel")


@pytest.fixture
def mock_blog_repo() -> AsyncMock:
    mock = AsyncMock()
    mock.find_by_creator_and_title.return_value = None
    mock.save.side_effect = lambda blog: blog
    return mock


@pytest.fixture
def mock_users(sample_user: UserDB) -> AsyncMock:
    mock = AsyncMock()
    mock.find_user_by_name.return_value = sample_user
    mock.save_user.side_effect = lambda user: user
    return mock


@pytest.fixture
def mock_factory() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(
    mock_blog_repo: AsyncMock,
    mock_users: AsyncMock,
    mock_factory: MagicMock,
) -> BlogService:
    return BlogService(mock_blog_repo, mock_users, mock_factory)
