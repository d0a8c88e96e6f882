"""File size validator.

ONLY file size validation - checks the transport-reported byte count
against the policy's inclusive bounds.

Following maximum separation architecture - one file = one purpose.
"""

import logging

from ...core.entities import UploadCandidate, UploadPolicy
from ...core.exceptions import FileSizeOutOfBounds

logger = logging.getLogger(__name__)


class FileSizeValidator:
    """File size validation service."""

    def validate(self, candidate: UploadCandidate, policy: UploadPolicy) -> None:
        """Validate file size constraints.

        Does nothing when the policy has no size bounds.

        Raises:
            FileSizeOutOfBounds: If the reported size is outside the bounds
        """
        bounds = policy.file_size_bounds
        if bounds is None:
            return

        if not bounds.contains(candidate.reported_size):
            logger.debug("Size %d outside %s", candidate.reported_size, bounds)
            raise FileSizeOutOfBounds(size=candidate.reported_size, bounds=bounds)
