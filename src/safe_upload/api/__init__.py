"""HTTP API for safe uploads."""

from .app import create_app
from .models import UploadError, UploadResponse
from .routers import create_upload_router

__all__ = [
    "create_app",
    "create_upload_router",
    "UploadError",
    "UploadResponse",
]
