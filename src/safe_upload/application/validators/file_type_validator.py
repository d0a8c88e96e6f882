"""File type validator.

ONLY type reconciliation - derives an extension from the claimed filename
and a subtype from the claimed content type, and requires both to be in
the policy's allow-set.

Following maximum separation architecture - one file = one purpose.
"""

import logging

from ...core.entities import UploadCandidate, UploadPolicy
from ...core.exceptions import DisallowedFileType
from ...core.value_objects import FileExtension, MimeType

logger = logging.getLogger(__name__)


class FileTypeValidator:
    """File type reconciliation service.

    Client-reported extensions and content types often disagree for
    legitimate files (``photo.jpg`` sent as ``image/jpeg``), so the two
    are not compared with each other. Each must independently belong to
    the allow-set. The extension taken from the name is the one that
    survives into the final file name; the content type never does.
    """

    def reconcile(self, candidate: UploadCandidate, policy: UploadPolicy) -> FileExtension:
        """Validate the claimed type of a candidate.

        Args:
            candidate: Candidate carrying the claimed name and content type
            policy: Policy holding the allow-set

        Returns:
            The name-derived extension, normalized

        Raises:
            DisallowedFileType: If either derived value is outside the allow-set
                or the content type is not shaped like ``category/subtype``
        """
        extension = self._extension_from_name(candidate)
        subtype = self._subtype_from_content_type(candidate, policy)

        if not policy.is_allowed(extension.value) or not policy.is_allowed(subtype):
            logger.debug(
                "Type mismatch: extension=%r subtype=%r allowed=%s",
                extension.value, subtype, sorted(policy.allowed_extensions)
            )
            raise self._disallowed(candidate, policy)

        return extension

    def _extension_from_name(self, candidate: UploadCandidate) -> FileExtension:
        try:
            return FileExtension.from_filename(candidate.claimed_name)
        except ValueError:
            return FileExtension("")

    def _subtype_from_content_type(self, candidate: UploadCandidate, policy: UploadPolicy) -> str:
        try:
            return MimeType.parse(candidate.claimed_content_type).subtype
        except ValueError as e:
            raise self._disallowed(candidate, policy) from e

    @staticmethod
    def _disallowed(candidate: UploadCandidate, policy: UploadPolicy) -> DisallowedFileType:
        return DisallowedFileType(
            attempted=candidate.claimed_content_type,
            claimed_name=candidate.claimed_name,
            allowed=policy.allowed_extensions,
        )
