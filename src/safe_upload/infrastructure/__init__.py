"""Infrastructure adapters for image decoding and upload transport."""

from .imaging import PillowImageInspector
from .transport import SpooledUploadRegistry

__all__ = [
    "PillowImageInspector",
    "SpooledUploadRegistry",
]
