"""Upload core.

Value objects, entities, exceptions and collaborator protocols shared by
every stage of the pipeline.
"""

from .value_objects import *
from .exceptions import *
from .entities import *
from .protocols import *

__all__ = [
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

    # Protocols
    "ImageInspector",
    "UploadOriginVerifier",
    "TransportErrorDescriber",
    "EnvironmentDiagnostics",
]
