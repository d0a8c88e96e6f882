"""Upload services.

Naming, relocation, diagnostics and transport error text used by the
upload command.
"""

from .transport_error_messages import TransportErrorMessages, DEFAULT_MESSAGES
from .directory_diagnostics import DirectoryDiagnostics
from .file_namer import FileNamer
from .file_relocator import FileRelocator

__all__ = [
    "TransportErrorMessages",
    "DEFAULT_MESSAGES",
    "DirectoryDiagnostics",
    "FileNamer",
    "FileRelocator",
]
