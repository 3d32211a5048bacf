from blogapi.managers.rate_limiter import (
    get_identifier,
    limiter,
    rate_limit_exceeded_handler,
    read_limit,
    write_limit,
)

__all__ = [
    "get_identifier",
    "limiter",
    "rate_limit_exceeded_handler",
    "read_limit",
    "write_limit",
]
