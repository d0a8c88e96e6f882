"""Pytest configuration and fixtures for safe-upload tests."""

import io
import pytest
from PIL import Image, PngImagePlugin

from safe_upload.core.entities import UploadCandidate, UploadPolicy
from safe_upload.infrastructure.transport import SpooledUploadRegistry


def make_png(width: int, height: int, padding: int = 256) -> bytes:
    """Encode a solid PNG; a text chunk pads tiny images past size minimums."""
    info = PngImagePlugin.PngInfo()
    info.add_text("comment", "x" * padding)
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), (200, 30, 30)).save(buffer, format="PNG", pnginfo=info)
    return buffer.getvalue()


def make_jpeg(width: int, height: int) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), (30, 30, 200)).save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def destination_dir(tmp_path):
    """Empty destination directory."""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def registry(tmp_path):
    """Spool registry writing into a per-test directory."""
    with SpooledUploadRegistry(tmp_path / "spool", chunk_size=4096) as registry:
        yield registry


@pytest.fixture
def basic_policy(destination_dir):
    """Policy allowing png and jpg with no bounds and no image decoding."""
    return UploadPolicy.create(
        allowed_extensions={"png", "jpg"},
        destination_directory=destination_dir,
    )


@pytest.fixture
def image_policy(destination_dir):
    """png/jpg, 100 B - 5 MB, at most 4000x4000 pixels."""
    return UploadPolicy.create(
        allowed_extensions={"png", "jpg"},
        destination_directory=destination_dir,
        min_size=100,
        max_size=5_000_000,
        max_width=4000,
        max_height=4000,
    )


@pytest.fixture
def png_factory():
    """Factory for PNG bytes of any size."""
    return make_png


@pytest.fixture
def photo_png():
    """800x600 PNG bytes."""
    return make_png(800, 600)


@pytest.fixture
def tiny_png():
    """1x1 PNG bytes, padded above 100 bytes."""
    return make_png(1, 1)


@pytest.fixture
def wide_png():
    """5000x100 PNG bytes."""
    return make_png(5000, 100)


@pytest.fixture
def photo_jpeg():
    """640x480 JPEG bytes."""
    return make_jpeg(640, 480)


@pytest.fixture
def spooled_candidate(registry):
    """Factory spooling bytes through the registry and describing them."""

    def factory(
        data: bytes,
        claimed_name: str = "photo.png",
        claimed_content_type: str = "image/png",
        desired_base_name=None,
    ) -> UploadCandidate:
        location, size = registry.spool(io.BytesIO(data))
        return UploadCandidate(
            claimed_name=claimed_name,
            claimed_content_type=claimed_content_type,
            reported_size=size,
            temporary_location=location,
            desired_base_name=desired_base_name,
        )

    return factory

