"""Configuration module for safe-upload."""

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogFormat,
    LoggingConfig,
)
from .settings import UploadSettings, get_upload_settings

__all__ = [
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogFormat",
    "LoggingConfig",
    "UploadSettings",
    "get_upload_settings",
]
