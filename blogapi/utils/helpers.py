from collections.abc import MutableMapping
from datetime import datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return today's date as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(DATE_FORMAT)


def format_datetime(value: datetime | None, default: str = "No updates") -> str:
    """
    Format a stored timestamp for a response body.

    Args:
        value: Timestamp read from the database (may be naive on SQLite).
        default: Text returned when there is no timestamp.

    Returns:
        str: Local time formatted with `DATE_FORMAT`.
    """
    if value is None:
        return default
    return value.astimezone().strftime(DATE_FORMAT)


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary
