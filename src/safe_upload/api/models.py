"""Upload API models.

ONLY response shapes - pydantic models for the upload endpoint.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..core.entities import ValidationOutcome


class UploadError(BaseModel):
    """Error block of a rejected upload."""

    code: str = Field(..., description="Stable machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    details: Dict[str, Any] = Field(default_factory=dict)


class UploadResponse(BaseModel):
    """Result of one upload."""

    accepted: bool = Field(..., description="Whether the file was stored")

    # Accepted uploads
    final_name: Optional[str] = Field(None, description="File name in the destination directory")
    extension: Optional[str] = Field(None, description="Verified lower-case extension")
    size: Optional[int] = Field(None, description="Size in bytes")
    width: Optional[int] = Field(None, description="Image width in pixels")
    height: Optional[int] = Field(None, description="Image height in pixels")

    # Rejected uploads
    reason: Optional[str] = Field(None, description="Rejection reason")
    error: Optional[UploadError] = None

    @classmethod
    def from_outcome(cls, outcome: ValidationOutcome) -> "UploadResponse":
        return cls(**outcome.to_dict())
