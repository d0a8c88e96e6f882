"""Exceptions module for safe-upload.

The base error, the configuration error raised at policy construction, and
one rejection exception per way a candidate can be refused.
"""

from .base import (
    SafeUploadError,
    ConfigurationError,
    get_http_status_code,
    create_error_response,
)
from .upload_rejected import UploadRejected
from .transport_failure import TransportFailure
from .disallowed_file_type import DisallowedFileType
from .file_size_out_of_bounds import FileSizeOutOfBounds
from .not_an_image import NotAnImage
from .image_dimensions_out_of_bounds import ImageDimensionsOutOfBounds
from .unsafe_file_name import UnsafeFileName
from .untrusted_upload_source import UntrustedUploadSource
from .destination_exists import DestinationExists
from .persistence_failed import PersistenceFailed, UnknownUploadFailure
from .http_mapping import REASON_STATUS_MAP, get_status_for_reason

__all__ = [
    # Base
    "SafeUploadError",
    "ConfigurationError",
    "get_http_status_code",
    "create_error_response",

    # Rejections
    "UploadRejected",
    "TransportFailure",
    "DisallowedFileType",
    "FileSizeOutOfBounds",
    "NotAnImage",
    "ImageDimensionsOutOfBounds",
    "UnsafeFileName",
    "UntrustedUploadSource",
    "DestinationExists",
    "PersistenceFailed",
    "UnknownUploadFailure",

    # HTTP mapping
    "REASON_STATUS_MAP",
    "get_status_for_reason",
]
