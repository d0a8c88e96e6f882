"""Safe upload API application.

FastAPI application wiring settings, policy, transport and the upload
command together.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from ..__version__ import __version__
from ..application.commands import create_upload_file_command
from ..config import UploadSettings, get_upload_settings
from ..core.entities import UploadPolicy
from ..infrastructure.transport import SpooledUploadRegistry
from .exception_handlers import register_exception_handlers
from .routers import create_upload_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[UploadSettings] = None,
    registry: Optional[SpooledUploadRegistry] = None
) -> FastAPI:
    """Create the upload API.

    Args:
        settings: Upload settings; read from the environment when omitted
        registry: Spool registry; built from settings when omitted. A
            supplied registry stays open on shutdown and belongs to the caller

    Returns:
        Configured FastAPI application

    Raises:
        ConfigurationError: If the settings do not describe a usable policy
    """
    settings = settings or get_upload_settings()
    policy = UploadPolicy.from_settings(settings)
    owns_registry = registry is None
    if owns_registry:
        registry = SpooledUploadRegistry(
            spool_directory=settings.spool_directory,
            chunk_size=settings.spool_chunk_size,
        )
    command = create_upload_file_command(origin_verifier=registry, policy=policy)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info(f"Storing uploads in {policy.destination_directory}")
        yield
        if owns_registry:
            registry.close()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Validates uploaded files and stores them safely",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
    )
    app.state.upload_policy = policy
    app.state.upload_registry = registry

    register_exception_handlers(app)
    app.include_router(create_upload_router(command, registry))

    logger.info(f"Created {settings.app_name} API")
    return app
