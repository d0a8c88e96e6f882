"""Image dimension value objects.

ONLY image dimensions - the decoded pixel size of an image and the maximum
size a policy allows.
"""

from dataclasses import dataclass


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")


@dataclass(frozen=True)
class ImageDimensions:
    """Decoded width and height in pixels."""

    width: int
    height: int

    def __post_init__(self):
        _require_int("width", self.width)
        _require_int("height", self.height)
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Image dimensions cannot be negative: {self.width}x{self.height}")

    def is_degenerate(self) -> bool:
        """True when either side is one pixel or less."""
        return self.width <= 1 or self.height <= 1

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class ImageDimensionBounds:
    """Maximum width and height in pixels, each checked on its own axis."""

    max_width: int
    max_height: int

    def __post_init__(self):
        _require_int("max_width", self.max_width)
        _require_int("max_height", self.max_height)
        if self.max_width <= 0 or self.max_height <= 0:
            raise ValueError(
                f"Maximum image dimensions must be positive: {self.max_width}x{self.max_height}"
            )

    def contains(self, dimensions: ImageDimensions) -> bool:
        """Check width against max_width and height against max_height."""
        return dimensions.width <= self.max_width and dimensions.height <= self.max_height

    def __str__(self) -> str:
        return f"{self.max_width}x{self.max_height}"
