"""Upload router.

ONLY the HTTP surface - receives a multipart upload, hands it to the upload
command and reports the outcome.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from fastapi import APIRouter, File, Form, UploadFile, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ..application.commands import UploadFileCommand
from ..core.entities import UploadCandidate
from ..core.value_objects import TransportError
from ..infrastructure.transport import SpooledUploadRegistry
from .models import UploadResponse

logger = logging.getLogger(__name__)


def _receive(
    registry: SpooledUploadRegistry,
    upload: UploadFile,
    name: Optional[str]
) -> Tuple[UploadCandidate, Optional[Path]]:
    """Spool an upload and describe it as a candidate."""
    if not upload.filename:
        candidate = UploadCandidate.from_transport(
            claimed_name="",
            claimed_content_type=upload.content_type,
            reported_size=0,
            transport_error=TransportError.NO_FILE,
        )
        return candidate, None

    try:
        location, size = registry.spool(upload.file)
    except OSError as e:
        logger.error(f"Could not spool upload {upload.filename!r}: {e}")
        candidate = UploadCandidate.from_transport(
            claimed_name=upload.filename,
            claimed_content_type=upload.content_type,
            reported_size=0,
            transport_error=TransportError.CANT_WRITE,
        )
        return candidate, None

    candidate = UploadCandidate.from_transport(
        claimed_name=upload.filename,
        claimed_content_type=upload.content_type,
        reported_size=size,
        temporary_location=location,
        desired_base_name=name,
    )
    return candidate, location


def create_upload_router(
    command: UploadFileCommand,
    registry: SpooledUploadRegistry,
    prefix: str = ""
) -> APIRouter:
    """Create the upload router.

    Args:
        command: Runs the validation pipeline
        registry: Spools request bodies and vouches for their origin
        prefix: Optional route prefix

    Returns:
        Router exposing ``POST /uploads``
    """
    router = APIRouter(prefix=prefix, tags=["Uploads"])

    @router.post(
        "/uploads",
        response_model=UploadResponse,
        response_model_exclude_none=True,
        status_code=status.HTTP_201_CREATED,
        summary="Upload a file",
        description="Validate an uploaded file against the upload policy and store it",
        responses={
            400: {"model": UploadResponse, "description": "Transport failure or unsafe name"},
            409: {"model": UploadResponse, "description": "Requested name already taken"},
            413: {"model": UploadResponse, "description": "File size out of bounds"},
            415: {"model": UploadResponse, "description": "Disallowed type or not an image"},
            422: {"model": UploadResponse, "description": "Image dimensions out of bounds"},
            500: {"model": UploadResponse, "description": "File could not be stored"},
        },
    )
    async def upload_file(
        file: UploadFile = File(..., description="The file to upload"),
        name: Optional[str] = Form(None, description="Base name to store the file under"),
    ) -> JSONResponse:
        """Upload a single file."""
        candidate, location = await run_in_threadpool(_receive, registry, file, name)
        try:
            outcome = await run_in_threadpool(command.execute, candidate)
        finally:
            if location is not None:
                await run_in_threadpool(registry.discard, location)
            await file.close()

        response = UploadResponse.from_outcome(outcome)
        return JSONResponse(
            status_code=outcome.http_status,
            content=response.model_dump(exclude_none=True),
        )

    return router
