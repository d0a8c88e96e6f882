"""File size out of bounds exception.

ONLY size bounds - the reported byte count is outside the configured range.
"""

from ..value_objects import FileSizeBounds, RejectionReason
from .upload_rejected import UploadRejected


class FileSizeOutOfBounds(UploadRejected):
    """Raised when the reported size is below the minimum or above the maximum."""

    reason = RejectionReason.SIZE_OUT_OF_BOUNDS
    default_error_code = "FILE_SIZE_OUT_OF_BOUNDS"

    def __init__(self, size: int, bounds: FileSizeBounds):
        super().__init__(
            message=f"File size must be between {bounds.describe()}",
            details={
                "size": size,
                "min": bounds.min_size,
                "max": bounds.max_size,
            }
        )
        self.size = size
        self.bounds = bounds
