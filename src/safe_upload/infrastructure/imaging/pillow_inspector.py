"""Pillow image inspector.

ONLY image decoding - opens a file with Pillow and reports its pixel
dimensions, turning every decoder failure into ``NotAnImage``.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image, UnidentifiedImageError

from ...core.exceptions import NotAnImage
from ...core.value_objects import ImageDimensions

logger = logging.getLogger(__name__)


class PillowImageInspector:
    """``ImageInspector`` backed by Pillow.

    Only the image header is parsed; pixel data is never loaded.
    """

    def __init__(self, formats: Optional[Sequence[str]] = None):
        """Initialize Pillow inspector.

        Args:
            formats: Pillow format names to try (e.g. ``["PNG", "JPEG"]``);
                all registered decoders when omitted
        """
        self._formats = tuple(formats) if formats else None

    def read_dimensions(self, path: Path) -> ImageDimensions:
        """Read width and height of the image stored at ``path``.

        Raises:
            NotAnImage: If no decoder recognizes the file
        """
        try:
            with Image.open(path, formats=self._formats) as image:
                width, height = image.size
        except Image.DecompressionBombError as e:
            logger.warning("Refused oversized image %s: %s", path, e)
            raise NotAnImage(
                "Image is too large to be processed",
                details={"decoder_error": type(e).__name__}
            ) from e
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            logger.debug("Could not decode %s as an image: %s", path, e)
            raise NotAnImage(details={"decoder_error": type(e).__name__}) from e

        return ImageDimensions(width, height)
