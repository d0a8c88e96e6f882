"""Upload file command.

ONLY file upload - runs one candidate through transport, type, size and
image checks, names it, verifies its origin and moves it into the
destination directory.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from ...core.entities import Accepted, Rejected, UploadCandidate, UploadPolicy, ValidationOutcome
from ...core.exceptions import (
    ConfigurationError,
    DestinationExists,
    PersistenceFailed,
    UnknownUploadFailure,
    UnsafeFileName,
    UntrustedUploadSource,
    UploadRejected,
)
from ...core.protocols import (
    EnvironmentDiagnostics,
    ImageInspector,
    TransportErrorDescriber,
    UploadOriginVerifier,
)
from ...core.value_objects import FileExtension, SafeFileName
from ..services import DirectoryDiagnostics, FileNamer, FileRelocator, TransportErrorMessages
from ..validators import (
    FileSizeValidator,
    FileTypeValidator,
    ImageDimensionValidator,
    TransportErrorValidator,
)

logger = logging.getLogger(__name__)


class UploadFileCommand:
    """Command for validating and storing one uploaded file.

    Stages run in a fixed order and the first failure wins:

    1. transport error
    2. file type (name extension and content subtype must both be allowed)
    3. file size
    4. image content and dimensions (only when the policy asks for them)
    5. naming, origin verification and exclusive relocation

    Every failure is returned as a ``Rejected`` outcome. Nothing reaches
    the destination directory unless all stages pass. The command holds no
    per-call state, so one instance can serve concurrent uploads.
    """

    def __init__(
        self,
        origin_verifier: UploadOriginVerifier,
        policy: Optional[UploadPolicy] = None,
        image_inspector: Optional[ImageInspector] = None,
        transport_error_describer: Optional[TransportErrorDescriber] = None,
        diagnostics: Optional[EnvironmentDiagnostics] = None,
        namer: Optional[FileNamer] = None,
        relocator: Optional[FileRelocator] = None,
        max_name_attempts: int = 5
    ):
        """Initialize upload file command.

        Args:
            origin_verifier: Confirms a temporary location came from the transport
            policy: Default policy, used when ``execute`` is not given one
            image_inspector: Reads pixel dimensions; Pillow when omitted
            transport_error_describer: Texts for transport error codes
            diagnostics: Explains relocation failures
            namer: Builds final file names
            relocator: Moves files into the destination
            max_name_attempts: Generated names tried before giving up
        """
        if max_name_attempts < 1:
            raise ConfigurationError("max_name_attempts must be at least 1")

        if image_inspector is None:
            from ...infrastructure.imaging import PillowImageInspector
            image_inspector = PillowImageInspector()

        self.policy = policy
        self.origin_verifier = origin_verifier
        self.diagnostics = diagnostics or DirectoryDiagnostics()
        self.namer = namer or FileNamer()
        self.relocator = relocator or FileRelocator()
        self.max_name_attempts = max_name_attempts

        self._transport_validator = TransportErrorValidator(
            transport_error_describer or TransportErrorMessages()
        )
        self._type_validator = FileTypeValidator()
        self._size_validator = FileSizeValidator()
        self._dimension_validator = ImageDimensionValidator(image_inspector)

    def execute(self, candidate: UploadCandidate, policy: Optional[UploadPolicy] = None) -> ValidationOutcome:
        """Validate a candidate and store it if every check passes.

        Args:
            candidate: The received file
            policy: Overrides the command's default policy for this call

        Returns:
            ``Accepted`` with the final name, or ``Rejected`` with a reason

        Raises:
            ConfigurationError: If no policy is available
        """
        policy = policy or self.policy
        if policy is None:
            raise ConfigurationError("No upload policy configured")

        try:
            self._transport_validator.validate(candidate)
            extension = self._type_validator.reconcile(candidate, policy)
            self._size_validator.validate(candidate, policy)
            dimensions = self._dimension_validator.validate(candidate, policy)
            file_name, destination = self._persist(candidate, policy, extension)

        except UploadRejected as e:
            logger.warning(
                "Upload of %r rejected (%s, %s): %s",
                candidate.claimed_name, e.reason.value, e.error_code, e.message
            )
            return Rejected.from_exception(e)

        except Exception as e:
            logger.exception("Unexpected error while processing upload of %r", candidate.claimed_name)
            return Rejected.from_exception(
                UnknownUploadFailure(details={"error_type": type(e).__name__})
            )

        logger.info(
            "Stored upload %r as %s (%d bytes)",
            candidate.claimed_name, file_name.value, candidate.reported_size
        )
        return Accepted(
            final_name=file_name.value,
            destination_path=destination,
            extension=extension.value,
            size=candidate.reported_size,
            dimensions=dimensions,
        )

    def _persist(
        self,
        candidate: UploadCandidate,
        policy: UploadPolicy,
        extension: FileExtension
    ) -> Tuple[SafeFileName, Path]:
        desired = candidate.desired_base_name
        file_name = self.namer.build(extension, desired) if desired is not None else None

        source = candidate.temporary_location
        if source is None or not self.origin_verifier.is_genuine_upload(source):
            raise UntrustedUploadSource(str(source or ""))

        if file_name is not None:
            try:
                return file_name, self._relocate(source, policy, file_name)
            except FileExistsError as e:
                raise DestinationExists(file_name.value) from e

        for attempt in range(1, self.max_name_attempts + 1):
            file_name = self.namer.generate(extension)
            try:
                return file_name, self._relocate(source, policy, file_name)
            except FileExistsError:
                logger.warning(
                    "Generated name %s already exists (attempt %d of %d)",
                    file_name.value, attempt, self.max_name_attempts
                )

        raise UnknownUploadFailure(
            "Could not find a free file name, please try later",
            details={"attempts": self.max_name_attempts}
        )

    def _relocate(self, source: Path, policy: UploadPolicy, file_name: SafeFileName) -> Path:
        directory = policy.destination_directory
        try:
            return self.relocator.relocate(source, directory, file_name)
        except FileExistsError:
            raise
        except ValueError as e:
            raise UnsafeFileName(base_name=file_name.value, problem=str(e)) from e
        except OSError as e:
            logger.error("Could not move upload into %s: %s", directory, e)
            hint = self.diagnostics.diagnose(directory)
            if hint:
                raise PersistenceFailed(hint, details={"errno": e.errno}) from e
            raise UnknownUploadFailure(details={"errno": e.errno}) from e


def create_upload_file_command(
    origin_verifier: UploadOriginVerifier,
    policy: Optional[UploadPolicy] = None,
    image_inspector: Optional[ImageInspector] = None,
    transport_error_describer: Optional[TransportErrorDescriber] = None,
    diagnostics: Optional[EnvironmentDiagnostics] = None,
    max_name_attempts: int = 5
) -> UploadFileCommand:
    """Create upload file command with dependencies."""
    return UploadFileCommand(
        origin_verifier=origin_verifier,
        policy=policy,
        image_inspector=image_inspector,
        transport_error_describer=transport_error_describer,
        diagnostics=diagnostics,
        max_name_attempts=max_name_attempts,
    )
