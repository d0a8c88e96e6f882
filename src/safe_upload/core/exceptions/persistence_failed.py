"""Persistence failure exceptions.

ONLY relocation failures - moving the validated file into the destination
directory did not succeed.
"""

from typing import Any, Dict, Optional

from ..value_objects import RejectionReason
from .upload_rejected import UploadRejected


class PersistenceFailed(UploadRejected):
    """Raised when the move failed and the environment explains why.

    ``hint`` is the human-readable diagnosis of the destination directory.
    """

    reason = RejectionReason.PERSISTENCE_FAILED
    default_error_code = "PERSISTENCE_FAILED"

    def __init__(
        self,
        hint: str,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        enhanced_details["hint"] = hint

        super().__init__(message=hint, details=enhanced_details)
        self.hint = hint


class UnknownUploadFailure(UploadRejected):
    """Raised when an operation failed and no diagnosis is available."""

    reason = RejectionReason.UNKNOWN_FAILURE
    default_error_code = "UNKNOWN_FAILURE"

    def __init__(
        self,
        message: str = "Unknown error occurred, please try later",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message=message, details=details)
