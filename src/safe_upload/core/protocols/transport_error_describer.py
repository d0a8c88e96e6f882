"""Transport error describer protocol.

ONLY error text contract - maps a transport error code to a message a
user can read.
"""

from typing import Protocol, runtime_checkable

from ..value_objects import TransportError


@runtime_checkable
class TransportErrorDescriber(Protocol):
    """Turns transport error codes into human-readable text."""

    def describe(self, code: TransportError) -> str:
        ...
