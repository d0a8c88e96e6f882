"""Image inspector protocol.

ONLY image decoding contract - reads pixel dimensions from stored bytes
without trusting anything the client claimed.

Following maximum separation architecture - one file = one purpose.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from ..value_objects import ImageDimensions


@runtime_checkable
class ImageInspector(Protocol):
    """Decodes enough of a file to report its dimensions."""

    def read_dimensions(self, path: Path) -> ImageDimensions:
        """Read image dimensions from a file.

        Args:
            path: Location of the candidate's bytes

        Returns:
            Decoded width and height

        Raises:
            NotAnImage: If the bytes are not a decodable image
        """
        ...
