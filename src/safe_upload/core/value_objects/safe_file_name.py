"""Safe file name value object.

ONLY destination file name - represents a single path component that is
safe to create inside a managed upload directory.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from pathlib import Path

from .file_extension import FileExtension


@dataclass(frozen=True)
class SafeFileName:
    """Safe destination file name.

    Security features:
    - Exactly one path component (no ``/``, ``\\`` or NUL)
    - No ``.`` or ``..`` names and no hidden (dot-leading) files
    - No control or shell-hostile characters
    - No reserved device names
    - Bounded length
    """

    value: str

    MAX_FILENAME_LENGTH = 255
    FORBIDDEN_CHARS = frozenset({'/', '\\', '\0', '<', '>', ':', '"', '|', '?', '*'})
    RESERVED_NAMES = frozenset({
        'CON', 'PRN', 'AUX', 'NUL',
        'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
        'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'
    })

    def __post_init__(self):
        """Validate the file name."""
        if not isinstance(self.value, str):
            raise ValueError(f"SafeFileName must be a string, got {type(self.value).__name__}")

        name = self.value
        if not name or not name.strip():
            raise ValueError("File name cannot be empty")

        forbidden = self.FORBIDDEN_CHARS.intersection(name)
        if forbidden:
            raise ValueError(
                f"File name contains forbidden characters: {', '.join(repr(c) for c in sorted(forbidden))}"
            )

        for char in name:
            if ord(char) < 32 or ord(char) == 127:
                raise ValueError(f"File name contains control character: {char!r}")

        if name.startswith('.'):
            # Covers '.', '..' and hidden files alike
            raise ValueError(f"File name cannot start with a dot: {name!r}")

        if name.endswith(' ') or name.endswith('.'):
            raise ValueError(f"File name cannot end with space or dot: {name!r}")

        if name.split('.')[0].upper() in self.RESERVED_NAMES:
            raise ValueError(f"Reserved file name not allowed: {name!r}")

        if len(name) > self.MAX_FILENAME_LENGTH:
            raise ValueError(f"File name too long: {len(name)} > {self.MAX_FILENAME_LENGTH}")

    @classmethod
    def from_base_name(cls, base_name: str, extension: FileExtension) -> "SafeFileName":
        """Build ``base_name + extension`` after validating the base name.

        The base name is attacker-controlled, so it is rejected rather than
        silently rewritten when it is unsafe.

        Raises:
            ValueError: If the resulting name is not a safe single component
        """
        if not isinstance(base_name, str):
            raise ValueError(f"Base name must be a string, got {type(base_name).__name__}")
        if not base_name.strip():
            raise ValueError("Base name cannot be empty or whitespace")
        if base_name in ('.', '..') or '..' in base_name.replace('\\', '/').split('/'):
            raise ValueError("Path traversal not allowed: contains '..' component")
        return cls(f"{base_name}{extension.suffix}")

    def join_to(self, directory: Path) -> Path:
        """Join this name onto a directory and confirm confinement.

        Raises:
            ValueError: If the joined path would escape ``directory``
        """
        root = Path(directory).resolve()
        target = root / self.value
        if target.parent != root or target.name != self.value:
            raise ValueError(f"File name {self.value!r} escapes {root}")
        return target

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"SafeFileName('{self.value}')"
