"""Application dependencies."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.db import get_session
from blogapi.repositories import BlogRepository, UserRepository
from blogapi.schemas.factory import BlogModelFactory, UserModelFactory
from blogapi.services import BlogService, UserService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    """Resolve the `UserRepository` dependency (same session as the blog repository)."""
    return UserRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_user_service(
    request: Request,
    users: UserRepoDep,
    blogs: BlogRepoDep,
) -> UserService:
    return UserService(users, blogs, UserModelFactory(request))


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def get_blog_service(
    request: Request,
    blogs: BlogRepoDep,
    users: UserServiceDep,
) -> BlogService:
    """
    Resolve the `BlogService` dependency.

    The user service is injected as the blog service's `UserLookup`.
    """
    return BlogService(blogs, users, BlogModelFactory(request))


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
