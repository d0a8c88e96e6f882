"""Unsafe file name exception.

ONLY naming - the caller-supplied base name cannot be used as a single
file name inside the destination directory.
"""

from ..value_objects import RejectionReason
from .upload_rejected import UploadRejected


class UnsafeFileName(UploadRejected):
    """Raised when a desired base name is empty, traverses or is otherwise unsafe."""

    reason = RejectionReason.INVALID_NAME
    default_error_code = "UNSAFE_FILE_NAME"

    def __init__(self, base_name: str, problem: str):
        super().__init__(
            message=f"Invalid file name: {problem}",
            details={"desired_base_name": base_name, "problem": problem}
        )
        self.base_name = base_name
        self.problem = problem
