"""Upload origin verifier protocol.

ONLY origin contract - confirms a temporary location was produced by the
upload transport and is not an arbitrary local path.

Following maximum separation architecture - one file = one purpose.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class UploadOriginVerifier(Protocol):
    """Vouches for temporary files created by an upload transport."""

    def is_genuine_upload(self, path: Path) -> bool:
        """Check that ``path`` was received by the transport.

        Must return False, never raise, for unknown or unreadable paths.
        """
        ...
