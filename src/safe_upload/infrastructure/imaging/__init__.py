"""Image decoding adapters."""

from .pillow_inspector import PillowImageInspector

__all__ = ["PillowImageInspector"]
