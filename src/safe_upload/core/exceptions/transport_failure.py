"""Transport failure exception.

ONLY transport failure - the transport reported that the file did not
arrive intact, so nothing else is checked.
"""

from typing import Any, Dict, Optional

from ..value_objects import RejectionReason, TransportError
from .upload_rejected import UploadRejected


class TransportFailure(UploadRejected):
    """Raised when the upload transport reported an error code."""

    reason = RejectionReason.TRANSPORT_ERROR
    default_error_code = "TRANSPORT_ERROR"

    def __init__(
        self,
        message: str,
        code: TransportError,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        enhanced_details["transport_error"] = code.name
        enhanced_details["transport_error_code"] = int(code)

        super().__init__(message=message, details=enhanced_details)
        self.code = code
