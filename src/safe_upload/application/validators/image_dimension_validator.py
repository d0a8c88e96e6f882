"""Image dimension validator.

ONLY image dimension validation - decodes the candidate's header, then
checks each axis against its bound and guards against degenerate images.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Optional

from ...core.entities import UploadCandidate, UploadPolicy
from ...core.exceptions import ImageDimensionsOutOfBounds, NotAnImage
from ...core.protocols import ImageInspector
from ...core.value_objects import ImageDimensions

logger = logging.getLogger(__name__)


class ImageDimensionValidator:
    """Image dimension validation service.

    Width is compared with ``max_width`` and height with ``max_height``.
    Images one pixel wide or high are treated as corrupt.
    """

    def __init__(self, inspector: ImageInspector):
        """Initialize image dimension validator.

        Args:
            inspector: Decoder used to read dimensions from stored bytes
        """
        self._inspector = inspector

    def validate(self, candidate: UploadCandidate, policy: UploadPolicy) -> Optional[ImageDimensions]:
        """Validate a candidate's pixel dimensions.

        Returns:
            Decoded dimensions, or None when the policy does not require
            image content

        Raises:
            NotAnImage: If the bytes cannot be decoded as an image
            ImageDimensionsOutOfBounds: If the image is too large or degenerate
        """
        if not policy.requires_image_content:
            return None

        if candidate.temporary_location is None:
            raise NotAnImage("No file content was received")

        dimensions = self._inspector.read_dimensions(candidate.temporary_location)
        bounds = policy.image_dimension_bounds

        if bounds is not None and not bounds.contains(dimensions):
            raise ImageDimensionsOutOfBounds(
                message=(
                    f"Image must be at most {bounds.max_width} pixels wide "
                    f"and {bounds.max_height} pixels in height"
                ),
                dimensions=dimensions,
                bounds=bounds,
            )

        if dimensions.is_degenerate():
            raise ImageDimensionsOutOfBounds(
                message="This file is either too small or corrupted to be an image file",
                dimensions=dimensions,
                bounds=bounds,
            )

        logger.debug("Decoded %s image for %r", dimensions, candidate.claimed_name)
        return dimensions
