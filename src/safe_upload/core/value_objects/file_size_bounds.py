"""File size bounds value object.

ONLY file size bounds - represents the inclusive byte range an upload must
fall inside, with human-readable formatting for messages.

Following maximum separation architecture - one file = one purpose.
"""

import math
from dataclasses import dataclass

UNIT_NAMES = ['B', 'KB', 'MB', 'GB', 'TB', 'PB']


def format_human_readable(size: int, precision: int = 2) -> str:
    """Format a byte count with appropriate units (e.g. ``'4.88 MB'``)."""
    if size <= 0:
        return "0 B"

    unit_index = min(int(math.log(size) / math.log(1024)), len(UNIT_NAMES) - 1)
    size_in_unit = size / (1024 ** unit_index)
    unit_name = UNIT_NAMES[unit_index]

    if size_in_unit == int(size_in_unit):
        return f"{int(size_in_unit)} {unit_name}"
    return f"{size_in_unit:.{precision}f} {unit_name}"


@dataclass(frozen=True)
class FileSizeBounds:
    """Inclusive size range in bytes.

    Both ends are inclusive: ``min_size <= size <= max_size``.
    """

    min_size: int
    max_size: int

    def __post_init__(self):
        """Validate bounds."""
        for name in ("min_size", "max_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} cannot be negative: {value}")

        if self.min_size > self.max_size:
            raise ValueError(f"min_size ({self.min_size}) exceeds max_size ({self.max_size})")

    def contains(self, size: int) -> bool:
        """Check if a byte count lies within the bounds."""
        return self.min_size <= size <= self.max_size

    def describe(self) -> str:
        """Human-readable range used in rejection messages."""
        return f"{format_human_readable(self.min_size)} and {format_human_readable(self.max_size)}"

    def __str__(self) -> str:
        return f"{self.min_size}..{self.max_size} bytes"
