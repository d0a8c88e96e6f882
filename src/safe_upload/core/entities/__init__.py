"""Upload core entities."""

from .upload_policy import UploadPolicy
from .upload_candidate import UploadCandidate
from .validation_outcome import ValidationOutcome, Accepted, Rejected

__all__ = [
    "UploadPolicy",
    "UploadCandidate",
    "ValidationOutcome",
    "Accepted",
    "Rejected",
]
