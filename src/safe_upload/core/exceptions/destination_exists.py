"""Destination exists exception.

ONLY name collisions - the requested file name is already taken in the
destination directory and is never overwritten.
"""

from ..value_objects import RejectionReason
from .upload_rejected import UploadRejected


class DestinationExists(UploadRejected):
    """Raised when a caller-chosen final name already exists."""

    reason = RejectionReason.DESTINATION_EXISTS
    default_error_code = "DESTINATION_EXISTS"

    def __init__(self, final_name: str):
        super().__init__(
            message=f"A file named {final_name!r} already exists",
            details={"final_name": final_name}
        )
        self.final_name = final_name
