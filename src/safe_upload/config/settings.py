"""
Upload settings for safe-upload.

Environment-driven defaults for the upload policy and the HTTP adapter,
loaded with pydantic-settings.
"""
from functools import lru_cache
from typing import FrozenSet, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class UploadSettings(BaseSettings):
    """Upload settings read from ``SAFE_UPLOAD_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SAFE_UPLOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="safe-upload")
    environment: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Policy
    destination_directory: str = Field(default="./uploads")
    allowed_extensions: str = Field(default="png,jpg,jpeg,gif")
    min_file_size: Optional[int] = Field(default=None, ge=0)
    max_file_size: Optional[int] = Field(default=None, ge=0)
    requires_image_content: bool = Field(default=False)
    max_image_width: Optional[int] = Field(default=None, gt=0)
    max_image_height: Optional[int] = Field(default=None, gt=0)

    # Transport
    spool_directory: Optional[str] = Field(default=None)
    spool_chunk_size: int = Field(default=1024 * 1024, gt=0)

    @field_validator("allowed_extensions")
    @classmethod
    def _strip_extensions(cls, value: str) -> str:
        return value.strip()

    @property
    def allowed_extension_set(self) -> FrozenSet[str]:
        """Allowed extensions parsed from the comma-separated setting."""
        return frozenset(
            item.strip() for item in self.allowed_extensions.split(",") if item.strip()
        )

    @property
    def has_dimension_bounds(self) -> bool:
        """True when both maximum image dimensions are configured."""
        return self.max_image_width is not None and self.max_image_height is not None

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


@lru_cache(maxsize=1)
def get_upload_settings() -> UploadSettings:
    """Get cached upload settings.

    Returns:
        Cached UploadSettings instance
    """
    return UploadSettings()
