from app.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    UNAUTHORIZED_MESSAGE,
    LimiterConfig,
    file_logger,
    settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "UNAUTHORIZED_MESSAGE",
    "LimiterConfig",
    "file_logger",
    "settings",
]
