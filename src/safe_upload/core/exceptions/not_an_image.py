"""Not an image exception.

ONLY image decoding - the policy requires image content and the bytes did
not decode as one.
"""

from typing import Any, Dict, Optional

from ..value_objects import RejectionReason
from .upload_rejected import UploadRejected


class NotAnImage(UploadRejected):
    """Raised when the candidate's bytes cannot be decoded as an image."""

    reason = RejectionReason.NOT_AN_IMAGE
    default_error_code = "NOT_AN_IMAGE"

    def __init__(
        self,
        message: str = "This file is not a valid image",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message=message, details=details)
