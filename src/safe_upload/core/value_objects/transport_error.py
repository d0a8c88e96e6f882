"""Transport error value object.

ONLY transport error codes - the status a multipart transport reports for
a received file, before any validation runs.
"""

from enum import IntEnum


class TransportError(IntEnum):
    """Transport-level upload status codes.

    The numeric values match the conventional multipart upload error codes
    so transports that already speak them can pass the integer through.
    Code 5 is unassigned. Any integer without a member of its own, code 5
    included, is carried as ``UNKNOWN`` so it is still treated as a failure.
    """

    OK = 0
    INI_SIZE = 1
    FORM_SIZE = 2
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8
    UNKNOWN = -1

    @property
    def is_error(self) -> bool:
        """True for every code except OK."""
        return self is not TransportError.OK

    @classmethod
    def from_code(cls, code: int) -> "TransportError":
        """Create TransportError from a raw integer code.

        Raises:
            ValueError: If ``code`` is not an integer
        """
        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError(f"Transport error code must be an integer, got {code!r}")
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN
