"""Core application modules."""

from blogapi.db.database import (
    async_session_maker,
    check_db,
    close_db,
    engine,
    engine_kwargs,
    get_session,
    init_db,
    transaction,
)

__all__ = [
    "async_session_maker",
    "check_db",
    "close_db",
    "engine",
    "engine_kwargs",
    "get_session",
    "init_db",
    "transaction",
]
