"""Safe-Upload - validation and safe persistence of uploaded files.

Checks each uploaded file against a caller-supplied policy (transport
status, file type, size, image content and dimensions) and moves it into
the destination directory under a safe, collision-free name. The HTTP
surface lives in ``safe_upload.api``.
"""

from .__version__ import __version__

# Configuration
from .config import (
    UploadSettings,
    get_upload_settings,
    setup_logging,
    get_logger,
)

# Core
from .core import (
    # Value Objects
    RejectionReason,
    TransportError,
    MimeType,
    FileExtension,
    FileSizeBounds,
    ImageDimensions,
    ImageDimensionBounds,
    SafeFileName,

    # Entities
    UploadPolicy,
    UploadCandidate,
    ValidationOutcome,
    Accepted,
    Rejected,

    # Exceptions
    SafeUploadError,
    ConfigurationError,
    UploadRejected,
)

# Application
from .application import UploadFileCommand, create_upload_file_command

# Infrastructure
from .infrastructure import PillowImageInspector, SpooledUploadRegistry

__all__ = [
    "__version__",

    # Configuration
    "UploadSettings",
    "get_upload_settings",
    "setup_logging",
    "get_logger",

    # Value Objects
    "RejectionReason",
    "TransportError",
    "MimeType",
    "FileExtension",
    "FileSizeBounds",
    "ImageDimensions",
    "ImageDimensionBounds",
    "SafeFileName",

    # Entities
    "UploadPolicy",
    "UploadCandidate",
    "ValidationOutcome",
    "Accepted",
    "Rejected",

    # Exceptions
    "SafeUploadError",
    "ConfigurationError",
    "UploadRejected",

    # Application
    "UploadFileCommand",
    "create_upload_file_command",

    # Infrastructure
    "PillowImageInspector",
    "SpooledUploadRegistry",
]
