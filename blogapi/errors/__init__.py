from blogapi.errors.base import BaseAppError, create_exception_handler
from blogapi.errors.blog import (
    BlogAlreadyExistsError,
    BlogError,
    BlogNotFoundError,
    blog_exception_handler,
)
from blogapi.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    database_exception_handler,
)
from blogapi.errors.user import (
    UserAlreadyExistsError,
    UserError,
    UserNotFoundError,
    user_exception_handler,
)
from blogapi.errors.validation import format_validation_errors, validation_exception_handler

__all__ = [
    "BaseAppError",
    "BlogAlreadyExistsError",
    "BlogError",
    "BlogNotFoundError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "UserAlreadyExistsError",
    "UserError",
    "UserNotFoundError",
    "blog_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "format_validation_errors",
    "user_exception_handler",
    "validation_exception_handler",
]
