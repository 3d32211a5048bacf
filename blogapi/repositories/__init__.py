"""Repository layer for database operations."""

from blogapi.repositories.blog import BlogRepository
from blogapi.repositories.user import UserRepository

__all__ = ["BlogRepository", "UserRepository"]
