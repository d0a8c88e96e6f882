"""File relocator service.

ONLY relocation - moves a validated temporary file into the destination
directory atomically and without ever replacing an existing file.

Following maximum separation architecture - one file = one purpose.
"""

import errno
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from ...core.value_objects import SafeFileName

logger = logging.getLogger(__name__)

# link() failures that mean "cannot hard-link here", not "cannot write here"
_LINK_UNSUPPORTED = frozenset({
    errno.EXDEV,
    errno.EPERM,
    errno.ENOTSUP,
    errno.EOPNOTSUPP,
    errno.EMLINK,
})


def _default_file_mode() -> int:
    # umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class FileRelocator:
    """Atomic, exclusive file relocation.

    The target is created with ``link()``, which fails with
    ``FileExistsError`` if the name is taken, so two concurrent uploads can
    never overwrite each other. When the source cannot be linked (another
    filesystem, or no hard-link support) the bytes are first copied to a
    hidden file in the destination directory, flushed to disk, and that file
    is linked into place. The target name never shows partial content.

    Stored files get the permissions a freshly created file would get
    (``0o666`` masked by the process umask) rather than the owner-only mode
    of the temporary file.
    """

    def __init__(self, chunk_size: int = 1024 * 1024, file_mode: Optional[int] = None):
        self._chunk_size = chunk_size
        self._file_mode = _default_file_mode() if file_mode is None else file_mode

    def relocate(self, source: Path, directory: Path, file_name: SafeFileName) -> Path:
        """Move ``source`` to ``directory/file_name``.

        Returns:
            Absolute path of the stored file

        Raises:
            FileExistsError: If the target name already exists
            OSError: If the file could not be stored
        """
        target = file_name.join_to(directory)

        try:
            # Mode is set before linking so the target never appears with the temp mode
            os.chmod(source, self._file_mode)
            os.link(source, target)
        except FileExistsError:
            raise
        except OSError as e:
            if e.errno not in _LINK_UNSUPPORTED:
                raise
            logger.debug("Hard link unavailable (%s), copying %s into place", e.strerror, source)
            self._copy_then_link(source, target)

        try:
            os.unlink(source)
        except OSError as e:
            # Target is complete; the transport removes leftovers on discard
            logger.warning("Stored %s but could not remove source %s: %s", target.name, source, e)

        return target

    def _copy_then_link(self, source: Path, target: Path) -> None:
        fd, staging_name = tempfile.mkstemp(prefix=".upload-", suffix=".part", dir=target.parent)
        staging = Path(staging_name)
        try:
            with os.fdopen(fd, "wb") as out, open(source, "rb") as src:
                shutil.copyfileobj(src, out, self._chunk_size)
                os.fchmod(out.fileno(), self._file_mode)
                out.flush()
                os.fsync(out.fileno())
            os.link(staging, target)
        finally:
            staging.unlink(missing_ok=True)
