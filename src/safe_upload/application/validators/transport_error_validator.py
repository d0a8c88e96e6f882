"""Transport error validator.

ONLY transport status - stops a candidate whose transfer already failed,
before anything looks at its name, type or bytes.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Optional

from ...core.entities import UploadCandidate
from ...core.exceptions import TransportFailure
from ...core.protocols import TransportErrorDescriber
from ...core.value_objects import TransportError

logger = logging.getLogger(__name__)


class TransportErrorValidator:
    """Rejects candidates the transport flagged as failed.

    The error code is carried forward unchanged; turning it into text is
    left to the optional describer.
    """

    def __init__(self, describer: Optional[TransportErrorDescriber] = None):
        """Initialize transport error validator.

        Args:
            describer: Maps error codes to messages; without one the code
                name and number are used as the message
        """
        self._describer = describer

    def validate(self, candidate: UploadCandidate) -> None:
        """Check the transport status of a candidate.

        Raises:
            TransportFailure: If the transport reported any error
        """
        code = candidate.transport_error
        if not code.is_error:
            return

        logger.debug("Transport reported %s for %r", code.name, candidate.claimed_name)
        raise TransportFailure(message=self._message_for(code), code=code)

    def _message_for(self, code: TransportError) -> str:
        if self._describer is None:
            return f"{code.name} ({int(code)})"
        return self._describer.describe(code)
