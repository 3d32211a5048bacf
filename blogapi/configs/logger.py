"""File logging helpers shared by every module."""

from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from blogapi.configs.settings import settings

_MAX_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5


def file_logger(logger: Logger) -> Logger:
    """
    Attach the rotating JSON file handler to `logger` when file logging is enabled.

    Args:
        logger: Logger to decorate (usually `getLogger(__name__)`).

    Returns:
        The same logger, for inline use at module level.
    """
    if not settings.LOG_TO_FILE:
        return logger

    log_file = Path(settings.LOG_FILE)
    if any(
        isinstance(h, RotatingFileHandler) and Path(h.baseFilename) == log_file.resolve()
        for h in logger.handlers
    ):
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT)
    handler.setLevel(INFO)
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger
