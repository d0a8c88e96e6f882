"""Image dimensions out of bounds exception.

ONLY pixel bounds - the decoded image is larger than allowed or too small
to be a real image.
"""

from typing import Optional

from ..value_objects import ImageDimensionBounds, ImageDimensions, RejectionReason
from .upload_rejected import UploadRejected


class ImageDimensionsOutOfBounds(UploadRejected):
    """Raised when decoded dimensions exceed the bounds or are degenerate."""

    reason = RejectionReason.DIMENSION_OUT_OF_BOUNDS
    default_error_code = "IMAGE_DIMENSIONS_OUT_OF_BOUNDS"

    def __init__(
        self,
        message: str,
        dimensions: ImageDimensions,
        bounds: Optional[ImageDimensionBounds] = None
    ):
        details = {
            "width": dimensions.width,
            "height": dimensions.height,
        }
        if bounds is not None:
            details["max_width"] = bounds.max_width
            details["max_height"] = bounds.max_height

        super().__init__(message=message, details=details)
        self.dimensions = dimensions
        self.bounds = bounds
