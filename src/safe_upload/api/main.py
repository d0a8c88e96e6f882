"""Safe upload API main entry point."""

import uvicorn

from ..config import LoggingConfig, get_upload_settings, setup_logging
from .app import create_app


def main() -> None:
    """Run the application."""
    setup_logging()
    logger = LoggingConfig.get_logger(__name__)

    settings = get_upload_settings()
    app = create_app(settings)

    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info" if settings.is_production else "debug",
        access_log=True,
    )


if __name__ == "__main__":
    main()
