"""Rate limiter configuration using slowapi."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from blogapi.configs import LimiterConfig, file_logger
from blogapi.utils.helpers import host

logger = file_logger(getLogger(__name__))


def get_identifier(request: Request) -> str:
    """
    Get unique identifier for rate limiting.

    Uses API key from header if available, otherwise falls back to IP address.

    Args:
        request: FastAPI request object.

    Returns:
        Unique identifier string.
    """
    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"apikey:{api_key}"

    remote_address = get_remote_address(request)
    return f"ip:{remote_address}"


def read_limit(key: str) -> str:
    """Limit for read endpoints, higher for API-key clients."""
    return "60/minute" if key.startswith("apikey") else "20/minute"


def write_limit(key: str) -> str:
    """Limit for write endpoints, higher for API-key clients."""
    return "20/minute" if key.startswith("apikey") else "5/minute"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=get_identifier)


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> PlainTextResponse:
    """
    Handle rate limit exceeded exceptions.

    Args:
        request: FastAPI request object.
        exc: RateLimitExceeded exception.

    Returns:
        Plain-text 429 response naming the exceeded limit.
    """
    http_exc = cast(RateLimitExceeded, exc)
    detail = f"Rate limit exceeded: {http_exc.detail}"
    logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")
    return PlainTextResponse(content=detail, status_code=HTTP_429_TOO_MANY_REQUESTS)
