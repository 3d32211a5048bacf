from logging import getLogger

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from blogapi.configs import file_logger
from blogapi.configs.settings import USER_NOT_FOUND_MESSAGE
from blogapi.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserError(BaseAppError):
    """Base exception for user errors."""


class UserNotFoundError(UserError):
    """Exception raised when a username cannot be resolved."""

    def __init__(self, detail: str = USER_NOT_FOUND_MESSAGE) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class UserAlreadyExistsError(UserError):
    """Exception raised when registering a username that is already taken."""

    def __init__(self, detail: str = "Error: User name already exists") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


user_exception_handler = create_exception_handler(logger)
