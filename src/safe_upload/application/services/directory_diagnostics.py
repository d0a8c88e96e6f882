"""Directory diagnostics service.

ONLY environment diagnosis - after a failed relocation, looks at the
destination directory for a reason a person can act on.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class DirectoryDiagnostics:
    """Default ``EnvironmentDiagnostics`` for local directories.

    Hints never include the directory path, since they may be shown to
    the uploading client; the path is logged instead.
    """

    def __init__(self, min_free_bytes: int = 1):
        """Initialize directory diagnostics.

        Args:
            min_free_bytes: Free space below which the disk is reported full
        """
        self._min_free_bytes = min_free_bytes

    def diagnose(self, directory: Path) -> Optional[str]:
        """Describe what prevents writing into ``directory``, if anything."""
        if not os.path.isdir(directory):
            logger.error("Upload directory %s is missing or not a directory", directory)
            return "Please make sure the upload directory exists and is a valid directory"

        if not os.access(directory, os.W_OK | os.X_OK):
            logger.error("Upload directory %s is not writable", directory)
            return "Sorry, the server does not have permission to store uploaded files"

        try:
            free = shutil.disk_usage(directory).free
        except OSError as e:
            logger.warning("Could not read disk usage for %s: %s", directory, e)
            return None

        if free < self._min_free_bytes:
            logger.error("Upload directory %s has %d bytes free", directory, free)
            return "There is not enough free disk space to store the uploaded file"

        return None
