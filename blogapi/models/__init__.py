"""Database models for the application."""

from blogapi.models.blog import BlogDB
from blogapi.models.user import UserDB

__all__ = ["BlogDB", "UserDB"]
