"""Exception handlers for the upload API.

Turns library errors that escape the upload command into the standard
error body instead of an unformatted 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import SafeUploadError, create_error_response, get_http_status_code

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register safe-upload exception handlers on ``app``."""

    @app.exception_handler(SafeUploadError)
    async def safe_upload_error_handler(request: Request, exc: SafeUploadError):
        """Handle library errors."""
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"Upload request failed: {exc.message}")
        return JSONResponse(status_code=status_code, content=create_error_response(exc))
