"""Upload validators.

One validator per pipeline stage, each handling exactly one concern.

Following maximum separation architecture - one file = one purpose.
"""

from .transport_error_validator import TransportErrorValidator
from .file_type_validator import FileTypeValidator
from .file_size_validator import FileSizeValidator
from .image_dimension_validator import ImageDimensionValidator

__all__ = [
    "TransportErrorValidator",
    "FileTypeValidator",
    "FileSizeValidator",
    "ImageDimensionValidator",
]
