"""Upload commands."""

from .upload_file import UploadFileCommand, create_upload_file_command

__all__ = [
    "UploadFileCommand",
    "create_upload_file_command",
]
