from collections.abc import Awaitable, Callable
from logging import Logger

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blogapi.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[PlainTextResponse]]:
    """
    Create a standardized exception handler for the application.

    Every handled error answers with its status code and its message as a
    plain-text body.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> PlainTextResponse:
        # Default values
        status_code = HTTP_500_INTERNAL_SERVER_ERROR
        detail = "Internal Server Error"

        # Extract from custom exception if available
        if isinstance(exc, BaseAppError):
            status_code = exc.status_code
            detail = exc.detail

        logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")

        return PlainTextResponse(content=detail, status_code=status_code)

    return handler
