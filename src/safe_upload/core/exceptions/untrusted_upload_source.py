"""Untrusted upload source exception.

ONLY origin checks - the temporary location was not produced by the upload
transport, so it is never moved.
"""

import os

from ..value_objects import RejectionReason
from .upload_rejected import UploadRejected


class UntrustedUploadSource(UploadRejected):
    """Raised when the temporary location is not a genuine transport upload."""

    reason = RejectionReason.UNTRUSTED_SOURCE
    default_error_code = "UNTRUSTED_UPLOAD_SOURCE"

    def __init__(self, location: str):
        super().__init__(
            message="The uploaded file could not be verified as a genuine upload",
            details={"temporary_name": os.path.basename(location)}
        )
        self.location = location
