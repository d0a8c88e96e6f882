"""Validation outcome entities.

ONLY pipeline results - every candidate ends in exactly one ``Accepted`` or
one ``Rejected`` value, never anything in between.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional

from ..exceptions import UploadRejected, get_status_for_reason
from ..value_objects import ImageDimensions, RejectionReason


class ValidationOutcome:
    """Common base for ``Accepted`` and ``Rejected``."""

    accepted: ClassVar[bool]

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class Accepted(ValidationOutcome):
    """The candidate passed every stage and now lives in the destination."""

    accepted: ClassVar[bool] = True

    final_name: str
    destination_path: Path
    extension: str
    size: int
    dimensions: Optional[ImageDimensions] = None

    @property
    def http_status(self) -> int:
        return 201

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation; the absolute path is left out."""
        data: Dict[str, Any] = {
            "accepted": True,
            "final_name": self.final_name,
            "extension": self.extension,
            "size": self.size,
        }
        if self.dimensions is not None:
            data["width"] = self.dimensions.width
            data["height"] = self.dimensions.height
        return data


@dataclass(frozen=True)
class Rejected(ValidationOutcome):
    """The candidate was turned away; nothing reached the destination."""

    accepted: ClassVar[bool] = False

    reason: RejectionReason
    message: str
    error_code: str
    details: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_exception(cls, exc: UploadRejected) -> "Rejected":
        """Build a rejection from the exception a stage raised."""
        return cls(
            reason=exc.reason,
            message=exc.message,
            error_code=exc.error_code,
            details=dict(exc.details),
        )

    @property
    def http_status(self) -> int:
        """HTTP status an adapter should answer with."""
        return get_status_for_reason(self.reason)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accepted": False,
            "reason": self.reason.value,
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            },
        }
