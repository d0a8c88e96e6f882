"""Utility functions for safe-upload."""

from .uuid import generate_uuid_v7, generate_token

__all__ = [
    "generate_uuid_v7",
    "generate_token",
]
