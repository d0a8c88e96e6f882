"""Transport error messages.

ONLY error text - the default human-readable messages for transport
error codes.
"""

from typing import Dict, Mapping, Optional

from ...core.value_objects import TransportError

DEFAULT_MESSAGES: Dict[TransportError, str] = {
    TransportError.OK: "The file was uploaded successfully",
    TransportError.INI_SIZE: "File is larger than the size allowed by the server",
    TransportError.FORM_SIZE: "File is larger than the size allowed by the form",
    TransportError.PARTIAL: "File could not be fully uploaded. Please try again later",
    TransportError.NO_FILE: "File is not found",
    TransportError.NO_TMP_DIR: "Can't write to disk, as per server configuration",
    TransportError.CANT_WRITE: "Failed to write the uploaded file to disk",
    TransportError.EXTENSION: "A server extension has halted this file upload process",
    TransportError.UNKNOWN: "File upload failed for an unknown reason. Please try again later",
}


class TransportErrorMessages:
    """Default ``TransportErrorDescriber`` with overridable texts."""

    def __init__(self, overrides: Optional[Mapping[TransportError, str]] = None):
        self._messages = dict(DEFAULT_MESSAGES)
        if overrides:
            self._messages.update(overrides)

    def describe(self, code: TransportError) -> str:
        """Get the message for a transport error code."""
        return self._messages.get(code, f"{code.name} ({int(code)})")
