from logging import getLogger

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from blogapi.configs import file_logger
from blogapi.configs.settings import BLOG_ALREADY_EXISTS_MESSAGE, BLOG_NOT_FOUND_MESSAGE
from blogapi.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class BlogError(BaseAppError):
    """Base exception for blog errors."""


class BlogNotFoundError(BlogError):
    """Exception raised when a blog id or a user's blog title does not exist."""

    def __init__(self, detail: str = BLOG_NOT_FOUND_MESSAGE) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class BlogAlreadyExistsError(BlogError):
    """Exception raised when a user already owns a blog with the requested title."""

    def __init__(self, detail: str = BLOG_ALREADY_EXISTS_MESSAGE) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


blog_exception_handler = create_exception_handler(logger)
