"""Upload policy entity.

ONLY upload policy - the caller-supplied rules every candidate is checked
against: allowed types, size bounds, image requirements and destination.

Following maximum separation architecture - one file = one purpose.
"""

import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

from ..exceptions import ConfigurationError
from ..value_objects import FileExtension, FileSizeBounds, ImageDimensionBounds


@dataclass(frozen=True)
class UploadPolicy:
    """Immutable upload policy.

    A policy is validated when it is built, so a missing or read-only
    destination directory fails here rather than on the first upload.
    The ``with_*`` methods return adjusted copies; the original is never
    changed, which makes one policy safe to share between concurrent calls.

    ``requires_image_content`` is the explicit switch for image decoding.
    Dimension bounds are only meaningful when it is set.
    """

    allowed_extensions: FrozenSet[str]
    destination_directory: Path
    file_size_bounds: Optional[FileSizeBounds] = None
    image_dimension_bounds: Optional[ImageDimensionBounds] = None
    requires_image_content: bool = False

    def __post_init__(self):
        """Normalize and validate the policy."""
        object.__setattr__(self, "allowed_extensions", self._normalize_extensions(self.allowed_extensions))
        object.__setattr__(self, "destination_directory", self._validate_directory(self.destination_directory))

        if self.file_size_bounds is not None and not isinstance(self.file_size_bounds, FileSizeBounds):
            raise ConfigurationError("file_size_bounds must be a FileSizeBounds instance")

        if self.image_dimension_bounds is not None:
            if not isinstance(self.image_dimension_bounds, ImageDimensionBounds):
                raise ConfigurationError("image_dimension_bounds must be an ImageDimensionBounds instance")
            if not self.requires_image_content:
                raise ConfigurationError(
                    "image_dimension_bounds requires requires_image_content=True"
                )

    @staticmethod
    def _normalize_extensions(extensions: Iterable[str]) -> FrozenSet[str]:
        if isinstance(extensions, str) or extensions is None:
            raise ConfigurationError("allowed_extensions must be a collection of strings")

        normalized = set()
        for extension in extensions:
            try:
                value = FileExtension(extension).value
            except ValueError as e:
                raise ConfigurationError(str(e), details={"extension": repr(extension)}) from e
            if not value:
                raise ConfigurationError("allowed_extensions cannot contain empty values")
            normalized.add(value)

        if not normalized:
            raise ConfigurationError("allowed_extensions cannot be empty")
        return frozenset(normalized)

    @staticmethod
    def _validate_directory(directory: Union[str, os.PathLike]) -> Path:
        if directory is None:
            raise ConfigurationError("destination_directory is required")

        path = Path(directory).expanduser().resolve()
        if not path.is_dir():
            raise ConfigurationError(
                f"Destination directory does not exist: {path}",
                details={"destination_directory": str(path)}
            )
        if not os.access(path, os.W_OK | os.X_OK):
            raise ConfigurationError(
                f"Destination directory is not writable: {path}",
                details={"destination_directory": str(path)}
            )
        return path

    @classmethod
    def create(
        cls,
        allowed_extensions: Iterable[str],
        destination_directory: Union[str, os.PathLike],
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
        max_width: Optional[int] = None,
        max_height: Optional[int] = None,
        requires_image_content: Optional[bool] = None
    ) -> "UploadPolicy":
        """Build a policy from plain values.

        Size bounds apply when either size is given; a missing minimum is
        zero and a missing maximum is unbounded. Dimension bounds need both
        maxima and imply ``requires_image_content`` unless it is passed
        explicitly.
        """
        size_bounds = None
        if min_size is not None or max_size is not None:
            size_bounds = cls._build_size_bounds(min_size or 0, sys.maxsize if max_size is None else max_size)

        dimension_bounds = None
        if max_width is not None or max_height is not None:
            if max_width is None or max_height is None:
                raise ConfigurationError("Both max_width and max_height are required for dimension bounds")
            dimension_bounds = cls._build_dimension_bounds(max_width, max_height)

        if requires_image_content is None:
            requires_image_content = dimension_bounds is not None

        return cls(
            allowed_extensions=allowed_extensions,
            destination_directory=Path(destination_directory),
            file_size_bounds=size_bounds,
            image_dimension_bounds=dimension_bounds,
            requires_image_content=requires_image_content,
        )

    @classmethod
    def from_settings(cls, settings) -> "UploadPolicy":
        """Build a policy from ``UploadSettings``."""
        return cls.create(
            allowed_extensions=settings.allowed_extension_set,
            destination_directory=settings.destination_directory,
            min_size=settings.min_file_size,
            max_size=settings.max_file_size,
            max_width=settings.max_image_width,
            max_height=settings.max_image_height,
            requires_image_content=settings.requires_image_content or settings.has_dimension_bounds,
        )

    @staticmethod
    def _build_size_bounds(min_size: int, max_size: int) -> FileSizeBounds:
        try:
            return FileSizeBounds(min_size, max_size)
        except ValueError as e:
            raise ConfigurationError(f"Invalid file size bounds: {e}") from e

    @staticmethod
    def _build_dimension_bounds(max_width: int, max_height: int) -> ImageDimensionBounds:
        try:
            return ImageDimensionBounds(max_width, max_height)
        except ValueError as e:
            raise ConfigurationError(f"Invalid image dimension bounds: {e}") from e

    # Fluent overrides

    def with_allowed_extensions(self, extensions: Iterable[str]) -> "UploadPolicy":
        """Copy with a different allow-set."""
        return replace(self, allowed_extensions=extensions)

    def with_file_size(self, min_size: int, max_size: int) -> "UploadPolicy":
        """Copy with inclusive size bounds in bytes."""
        return replace(self, file_size_bounds=self._build_size_bounds(min_size, max_size))

    def without_file_size(self) -> "UploadPolicy":
        """Copy with no size enforcement."""
        return replace(self, file_size_bounds=None)

    def with_image_dimensions(self, max_width: int, max_height: int) -> "UploadPolicy":
        """Copy that requires image content within the given maxima."""
        return replace(
            self,
            image_dimension_bounds=self._build_dimension_bounds(max_width, max_height),
            requires_image_content=True,
        )

    def with_image_content_required(self) -> "UploadPolicy":
        """Copy that requires image content, keeping any dimension bounds."""
        return replace(self, requires_image_content=True)

    def without_image_validation(self) -> "UploadPolicy":
        """Copy that no longer decodes candidates as images."""
        return replace(self, image_dimension_bounds=None, requires_image_content=False)

    def with_destination_directory(self, directory: Union[str, os.PathLike]) -> "UploadPolicy":
        """Copy that stores accepted files in another directory."""
        return replace(self, destination_directory=Path(directory))

    def is_allowed(self, value: str) -> bool:
        """Check a raw extension or subtype against the allow-set."""
        return bool(value) and FileExtension.normalize(value) in self.allowed_extensions
