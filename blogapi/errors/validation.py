"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.status import HTTP_400_BAD_REQUEST

from blogapi.configs import file_logger
from blogapi.utils.helpers import host

logger = file_logger(getLogger(__name__))


def format_validation_errors(exc: RequestValidationError) -> str:
    """
    Flatten validation errors into one line of text.

    Args:
        exc: The validation error raised by FastAPI.

    Returns:
        str: e.g. ``"Invalid request: query.userName: Field required"``.
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error.get("loc", []))
        parts.append(f"{location}: {error.get('msg', 'Invalid value')}")
    return "Invalid request: " + "; ".join(parts)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> PlainTextResponse:
    """
    Report missing or malformed request parameters as a 400 plain-text message.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        PlainTextResponse describing every invalid parameter.
    """
    detail = format_validation_errors(cast(RequestValidationError, exc))

    logger.warning(f"{detail} for ip: {host(request)} at endpoint {request.url.path}")

    return PlainTextResponse(content=detail, status_code=HTTP_400_BAD_REQUEST)
