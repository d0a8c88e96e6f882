"""Environment diagnostics protocol.

ONLY diagnosis contract - explains, after a failed relocation, what is
wrong with the destination directory.

Following maximum separation architecture - one file = one purpose.
"""

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentDiagnostics(Protocol):
    """Inspects a directory for reasons an upload could not be stored."""

    def diagnose(self, directory: Path) -> Optional[str]:
        """Describe a problem with ``directory``.

        Only consulted on the failure path.

        Returns:
            A human-readable hint, or None when nothing is visibly wrong
        """
        ...
