"""File namer service.

ONLY naming - produces the final file name from either a caller-chosen
base name or a generated token, always ending in the verified extension.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Callable

from ...core.exceptions import UnsafeFileName
from ...core.value_objects import FileExtension, SafeFileName
from ...utils import generate_token


class FileNamer:
    """Builds safe destination names."""

    def __init__(self, token_factory: Callable[[], str] = generate_token):
        """Initialize file namer.

        Args:
            token_factory: Source of unique tokens for generated names
        """
        self._token_factory = token_factory

    def build(self, extension: FileExtension, desired_base_name: str) -> SafeFileName:
        """Name a file after a caller-supplied base name.

        Raises:
            UnsafeFileName: If the base name is empty, contains a path
                separator or ``..`` segment, or is otherwise unsafe
        """
        try:
            return SafeFileName.from_base_name(desired_base_name, extension)
        except ValueError as e:
            raise UnsafeFileName(base_name=str(desired_base_name), problem=str(e)) from e

    def generate(self, extension: FileExtension) -> SafeFileName:
        """Name a file with a fresh unique token."""
        token = self._token_factory()
        try:
            return SafeFileName(f"{token}{extension.suffix}")
        except ValueError as e:
            raise UnsafeFileName(base_name=token, problem=str(e)) from e
