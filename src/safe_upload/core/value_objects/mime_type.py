"""MIME type value object.

ONLY MIME type - represents a parsed ``category/subtype`` content type as
claimed by an upload client.

Following maximum separation architecture - one file = one purpose.
"""

import re
from dataclasses import dataclass

# RFC 6838 restricted-name, lower-cased before matching
_RESTRICTED_NAME = r"[a-z0-9][a-z0-9!#$&^_.+\-]{0,126}"
MIME_PATTERN = re.compile(rf"^({_RESTRICTED_NAME})/({_RESTRICTED_NAME})$")


@dataclass(frozen=True)
class MimeType:
    """MIME type value object.

    Holds the two halves of a ``category/subtype`` content type. Parameters
    such as ``; charset=utf-8`` are dropped by ``parse`` and never take part
    in type decisions.

    Only ``parse`` should be used on untrusted input; direct construction
    validates the halves but assumes they are already split.
    """

    category: str
    subtype: str

    def __post_init__(self):
        """Validate and normalize the category and subtype."""
        if not isinstance(self.category, str) or not isinstance(self.subtype, str):
            raise ValueError("MIME type parts must be strings")

        category = self.category.strip().lower()
        subtype = self.subtype.strip().lower()
        if not MIME_PATTERN.match(f"{category}/{subtype}"):
            raise ValueError(f"Invalid MIME type format: {self.category}/{self.subtype}")

        object.__setattr__(self, "category", category)
        object.__setattr__(self, "subtype", subtype)

    @classmethod
    def parse(cls, value: str) -> "MimeType":
        """Parse a raw content-type header value.

        Raises:
            ValueError: If the value is not shaped like ``category/subtype``
        """
        if not isinstance(value, str):
            raise ValueError(f"MIME type must be a string, got {type(value).__name__}")

        base = value.partition(";")[0]
        normalized = base.strip().lower()
        match = MIME_PATTERN.match(normalized)
        if not match:
            raise ValueError(f"Invalid MIME type format: {value!r}")

        return cls(match.group(1), match.group(2))

    def __str__(self) -> str:
        return f"{self.category}/{self.subtype}"

    def __repr__(self) -> str:
        return f"MimeType('{self}')"
