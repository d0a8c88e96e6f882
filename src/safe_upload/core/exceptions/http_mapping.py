"""HTTP status code mapping for upload rejections.

Maps each rejection reason, and the exception classes that carry one, to
the status an HTTP adapter should answer with.
"""

from typing import Dict

from ..value_objects import RejectionReason
from .upload_rejected import UploadRejected


REASON_STATUS_MAP: Dict[RejectionReason, int] = {
    # 400 Bad Request
    RejectionReason.TRANSPORT_ERROR: 400,
    RejectionReason.INVALID_NAME: 400,
    RejectionReason.UNTRUSTED_SOURCE: 400,

    # 409 Conflict
    RejectionReason.DESTINATION_EXISTS: 409,

    # 413 Content Too Large
    RejectionReason.SIZE_OUT_OF_BOUNDS: 413,

    # 415 Unsupported Media Type
    RejectionReason.DISALLOWED_TYPE: 415,
    RejectionReason.NOT_AN_IMAGE: 415,

    # 422 Unprocessable Entity
    RejectionReason.DIMENSION_OUT_OF_BOUNDS: 422,

    # 500 Internal Server Error
    RejectionReason.PERSISTENCE_FAILED: 500,
    RejectionReason.UNKNOWN_FAILURE: 500,
}


def get_status_for_reason(reason: RejectionReason) -> int:
    """Get HTTP status code for a rejection reason."""
    return REASON_STATUS_MAP.get(reason, 500)


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    if isinstance(exception, UploadRejected):
        return get_status_for_reason(exception.reason)
    return 500
