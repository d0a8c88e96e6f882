"""Spooled upload registry.

ONLY upload transport - writes incoming upload streams into a private spool
directory and remembers which temporary files it created, so the pipeline
can check a location's origin before moving it.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import BinaryIO, Optional, Set, Tuple, Union

logger = logging.getLogger(__name__)


class SpooledUploadRegistry:
    """Transport-side owner of temporary upload files.

    Implements ``UploadOriginVerifier``: a path is genuine only if this
    registry spooled it, it still sits directly inside the spool directory,
    and it is a regular file rather than a symlink. Safe to share between
    threads.
    """

    def __init__(
        self,
        spool_directory: Optional[Union[str, os.PathLike]] = None,
        chunk_size: int = 1024 * 1024
    ):
        """Initialize registry.

        Args:
            spool_directory: Where temporary files are written; a private
                temporary directory is created when omitted
            chunk_size: Bytes copied per read while spooling
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")

        if spool_directory is None:
            self._directory = Path(tempfile.mkdtemp(prefix="safe-upload-"))
            self._owns_directory = True
        else:
            self._directory = Path(spool_directory).expanduser()
            self._directory.mkdir(parents=True, exist_ok=True)
            self._owns_directory = False

        self._directory = self._directory.resolve()
        self._chunk_size = chunk_size
        self._lock = threading.Lock()
        self._paths: Set[Path] = set()

    @property
    def directory(self) -> Path:
        return self._directory

    def spool(self, stream: BinaryIO, chunk_size: Optional[int] = None) -> Tuple[Path, int]:
        """Copy ``stream`` into a new temporary file.

        Args:
            stream: Readable binary stream with the uploaded bytes
            chunk_size: Overrides the registry chunk size for this call

        Returns:
            The temporary path and the number of bytes written
        """
        fd, name = tempfile.mkstemp(prefix="upload-", suffix=".tmp", dir=self._directory)
        path = Path(name)
        chunk_size = chunk_size or self._chunk_size
        size = 0
        try:
            with os.fdopen(fd, "wb") as out:
                while True:
                    chunk = stream.read(chunk_size)
                    if not chunk:
                        break
                    out.write(chunk)
                    size += len(chunk)
        except BaseException:
            path.unlink(missing_ok=True)
            raise

        with self._lock:
            self._paths.add(path)

        logger.debug("Spooled %d bytes to %s", size, path.name)
        return path, size

    def is_genuine_upload(self, path: Path) -> bool:
        """Check that ``path`` is a live temporary file created by this registry."""
        try:
            candidate = Path(path)
            if candidate.is_symlink() or not candidate.is_file():
                return False
            resolved = candidate.resolve(strict=True)
        except (OSError, ValueError, TypeError):
            return False

        if resolved.parent != self._directory:
            return False

        with self._lock:
            return resolved in self._paths

    def discard(self, path: Path) -> None:
        """Forget ``path`` and delete it if it is still in the spool."""
        path = Path(path)
        with self._lock:
            if path not in self._paths:
                return
            self._paths.discard(path)

        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove spooled file %s: %s", path.name, e)

    def close(self) -> None:
        """Discard every outstanding file and remove an owned spool directory."""
        with self._lock:
            outstanding = list(self._paths)

        for path in outstanding:
            self.discard(path)

        if self._owns_directory:
            try:
                self._directory.rmdir()
            except OSError as e:
                logger.warning("Could not remove spool directory %s: %s", self._directory, e)

    def __enter__(self) -> "SpooledUploadRegistry":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
