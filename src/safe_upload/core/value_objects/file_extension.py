"""File extension value object.

ONLY file extension - represents a case-normalized extension derived from
a claimed filename.

Following maximum separation architecture - one file = one purpose.
"""

import re
from dataclasses import dataclass

_PATH_SEPARATORS = re.compile(r"[\\/]")


@dataclass(frozen=True)
class FileExtension:
    """File extension value object.

    Stored lower-cased and without the leading dot. An empty value means
    the name carried no extension at all.
    """

    value: str

    def __post_init__(self):
        """Normalize the extension."""
        if not isinstance(self.value, str):
            raise ValueError(f"FileExtension must be a string, got {type(self.value).__name__}")

        normalized = self.normalize(self.value)
        if _PATH_SEPARATORS.search(normalized) or "\x00" in normalized:
            raise ValueError(f"Invalid file extension: {self.value!r}")

        object.__setattr__(self, "value", normalized)

    @staticmethod
    def normalize(value: str) -> str:
        """Strip whitespace and a leading dot, then lower-case."""
        normalized = value.strip().lower()
        if normalized.startswith("."):
            normalized = normalized[1:]
        return normalized

    @classmethod
    def from_filename(cls, filename: str) -> "FileExtension":
        """Extract the extension from the last component of a filename.

        Both ``/`` and ``\\`` are treated as separators, so
        ``"dir.png/evil"`` has no extension. The text after the final dot is
        the extension; a name without a dot, or ending in one, yields an
        empty extension.
        """
        basename = _PATH_SEPARATORS.split(filename or "")[-1]
        if "." not in basename:
            return cls("")
        return cls(basename.rsplit(".", 1)[-1])

    @property
    def suffix(self) -> str:
        """The extension with a leading dot (e.g. ``.png``)."""
        return f".{self.value}" if self.value else ""

    def __str__(self) -> str:
        return self.suffix

    def __repr__(self) -> str:
        return f"FileExtension('{self.value}')"
