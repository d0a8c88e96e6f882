"""Disallowed file type exception.

ONLY disallowed type - the claimed name or claimed content type falls
outside the configured allow-set.
"""

from typing import AbstractSet, Any, Dict, Optional

from ..value_objects import RejectionReason
from .upload_rejected import UploadRejected


class DisallowedFileType(UploadRejected):
    """Raised when a candidate's claimed type is not allowed.

    The message lists the allowed extensions so clients can correct the
    upload.
    """

    reason = RejectionReason.DISALLOWED_TYPE
    default_error_code = "DISALLOWED_FILE_TYPE"

    def __init__(
        self,
        attempted: str,
        claimed_name: str,
        allowed: AbstractSet[str],
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        allowed_sorted = sorted(allowed)
        enhanced_details = details or {}
        enhanced_details["attempted"] = attempted
        enhanced_details["claimed_name"] = claimed_name
        enhanced_details["allowed"] = allowed_sorted

        super().__init__(
            message=message or (
                "This is not an allowed file type. "
                f"Please only upload ({', '.join(allowed_sorted)}) file types"
            ),
            details=enhanced_details
        )
        self.attempted = attempted
        self.claimed_name = claimed_name
        self.allowed = frozenset(allowed)
