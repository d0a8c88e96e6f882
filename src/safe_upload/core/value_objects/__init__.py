"""Upload value objects.

Immutable value objects that encapsulate upload-related rules
and provide type safety with validation.

Following maximum separation architecture - one value object per file.
"""

from .rejection_reason import RejectionReason
from .transport_error import TransportError
from .mime_type import MimeType
from .file_extension import FileExtension
from .file_size_bounds import FileSizeBounds, format_human_readable
from .image_dimensions import ImageDimensions, ImageDimensionBounds
from .safe_file_name import SafeFileName

__all__ = [
    "RejectionReason",
    "TransportError",
    "MimeType",
    "FileExtension",
    "FileSizeBounds",
    "format_human_readable",
    "ImageDimensions",
    "ImageDimensionBounds",
    "SafeFileName",
]
