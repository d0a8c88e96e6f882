"""Upload candidate entity.

ONLY upload candidate - the normalized description of one received file,
as handed over by the upload transport.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..value_objects import TransportError


@dataclass(frozen=True)
class UploadCandidate:
    """One submitted file awaiting validation.

    ``claimed_name`` and ``claimed_content_type`` come from the client and
    are never trusted on their own. ``temporary_location`` stays owned by
    the transport until the pipeline either relocates it or gives up.
    """

    # Required fields (no defaults)
    claimed_name: str
    claimed_content_type: str
    reported_size: int

    # Optional fields (with defaults)
    transport_error: TransportError = TransportError.OK
    temporary_location: Optional[Path] = None
    desired_base_name: Optional[str] = None

    def __post_init__(self):
        """Coerce transport-provided values into their typed forms."""
        if not isinstance(self.transport_error, TransportError):
            object.__setattr__(self, "transport_error", TransportError.from_code(self.transport_error))

        if self.temporary_location is not None and not isinstance(self.temporary_location, Path):
            object.__setattr__(self, "temporary_location", Path(self.temporary_location))

        if isinstance(self.reported_size, bool) or not isinstance(self.reported_size, int):
            raise ValueError(f"reported_size must be an integer, got {type(self.reported_size).__name__}")

        object.__setattr__(self, "claimed_name", self.claimed_name or "")
        object.__setattr__(self, "claimed_content_type", self.claimed_content_type or "")

    @classmethod
    def from_transport(
        cls,
        claimed_name: Optional[str],
        claimed_content_type: Optional[str],
        reported_size: int,
        temporary_location: Optional[Union[str, Path]] = None,
        transport_error: Union[TransportError, int] = TransportError.OK,
        desired_base_name: Optional[str] = None
    ) -> "UploadCandidate":
        """Create a candidate from raw transport values."""
        return cls(
            claimed_name=claimed_name or "",
            claimed_content_type=claimed_content_type or "",
            reported_size=reported_size,
            transport_error=transport_error,
            temporary_location=temporary_location,
            desired_base_name=desired_base_name or None,
        )
