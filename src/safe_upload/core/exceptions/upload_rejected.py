"""Upload rejected exception.

ONLY the rejection base - every pipeline stage signals a refusal by raising
a subclass, which the upload command turns into a ``Rejected`` outcome.
"""

from typing import Any, Dict, Optional

from ..value_objects import RejectionReason
from .base import SafeUploadError


class UploadRejected(SafeUploadError):
    """Base class for all candidate rejections.

    Subclasses set ``reason`` and ``default_error_code``; the message and
    details are specific to each failure.
    """

    reason: RejectionReason = RejectionReason.UNKNOWN_FAILURE
    default_error_code: str = "UPLOAD_REJECTED"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code or self.default_error_code,
            details=details
        )
