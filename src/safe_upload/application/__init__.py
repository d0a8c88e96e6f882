"""Application layer: validators, services and the upload command."""

from .commands import UploadFileCommand, create_upload_file_command
from .services import DirectoryDiagnostics, FileNamer, FileRelocator, TransportErrorMessages
from .validators import (
    FileSizeValidator,
    FileTypeValidator,
    ImageDimensionValidator,
    TransportErrorValidator,
)

__all__ = [
    "UploadFileCommand",
    "create_upload_file_command",
    "DirectoryDiagnostics",
    "FileNamer",
    "FileRelocator",
    "TransportErrorMessages",
    "FileSizeValidator",
    "FileTypeValidator",
    "ImageDimensionValidator",
    "TransportErrorValidator",
]
