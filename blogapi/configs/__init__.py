from blogapi.configs.logger import file_logger
from blogapi.configs.settings import LimiterConfig, Settings, settings

__all__ = [
    "LimiterConfig",
    "Settings",
    "file_logger",
    "settings",
]
