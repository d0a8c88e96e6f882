"""Upload transport adapters."""

from .spooled_upload_registry import SpooledUploadRegistry

__all__ = ["SpooledUploadRegistry"]
