"""Centralized logging configuration for safe-upload.

Provides consistent, configurable logging for the upload pipeline and the
HTTP adapter with environment-based control over verbosity and format.
"""

import logging
import logging.config
import os
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


_FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def _resolve_level(value: str) -> str:
    try:
        return LogLevel(value.upper()).value
    except ValueError:
        return LogLevel.INFO.value


def _resolve_format(value: str) -> LogFormat:
    try:
        return LogFormat(value.lower())
    except ValueError:
        return LogFormat.SIMPLE


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "PIL",
        "multipart",
        "python_multipart",
        "httpx",
        "httpcore",
    ]

    _configured = False

    @classmethod
    def configure(cls, force: bool = False) -> None:
        """Configure logging based on environment variables.

        Reads ``SAFE_UPLOAD_LOG_LEVEL`` and ``SAFE_UPLOAD_LOG_FORMAT``. Calling
        this more than once is a no-op unless ``force`` is set.
        """
        if cls._configured and not force:
            return

        log_level = _resolve_level(os.getenv("SAFE_UPLOAD_LOG_LEVEL", "INFO"))
        log_format = _resolve_format(os.getenv("SAFE_UPLOAD_LOG_FORMAT", "simple"))

        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": _FORMAT_STRINGS[log_format],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": log_level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        logging.config.dictConfig(logging_config)
        cls._configured = True

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={log_level}, format={log_format.value}")

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a configured logger for the given module name.

        Args:
            name: Module name (usually __name__)

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)


def setup_logging(force: bool = False) -> None:
    """Setup logging configuration from environment variables.

    This is the main entry point for configuring logging in an application.
    It should be called once at application startup.
    """
    LoggingConfig.configure(force=force)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger."""
    return LoggingConfig.get_logger(name)
