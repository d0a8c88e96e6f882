"""Unit tests for the spool registry transport."""

import io
import os

import pytest

from safe_upload.infrastructure.transport import SpooledUploadRegistry


class _FailingStream:
    def __init__(self):
        self.reads = 0

    def read(self, size):
        self.reads += 1
        if self.reads > 1:
            raise ConnectionResetError("client went away")
        return b"partial"


class TestSpooling:
    """Test writing streams to temporary files."""

    def test_spool_writes_stream(self, registry):
        data = b"a" * 10_000
        path, size = registry.spool(io.BytesIO(data))

        assert size == len(data)
        assert path.read_bytes() == data
        assert path.parent == registry.directory

    def test_spool_empty_stream(self, registry):
        path, size = registry.spool(io.BytesIO(b""))
        assert size == 0
        assert path.exists()

    def test_chunk_size_override(self, registry, mocker):
        stream = mocker.Mock()
        stream.read.side_effect = [b"abc", b""]

        registry.spool(stream, chunk_size=3)

        stream.read.assert_called_with(3)

    def test_failed_spool_leaves_nothing_behind(self, registry):
        with pytest.raises(ConnectionResetError):
            registry.spool(_FailingStream())
        assert list(registry.directory.iterdir()) == []

    def test_invalid_chunk_size(self, tmp_path):
        with pytest.raises(ValueError):
            SpooledUploadRegistry(tmp_path, chunk_size=0)

    def test_private_directory_removed_on_close(self):
        registry = SpooledUploadRegistry()
        directory = registry.directory
        registry.spool(io.BytesIO(b"data"))

        registry.close()

        assert not directory.exists()


class TestOriginVerification:
    """Test that only registry-created files count as genuine uploads."""

    def test_spooled_file_is_genuine(self, registry):
        path, _ = registry.spool(io.BytesIO(b"data"))
        assert registry.is_genuine_upload(path)

    def test_unregistered_file_in_spool_is_not_genuine(self, registry):
        planted = registry.directory / "upload-planted.tmp"
        planted.write_bytes(b"data")
        assert not registry.is_genuine_upload(planted)

    def test_file_outside_spool_is_not_genuine(self, registry, tmp_path):
        outside = tmp_path / "elsewhere.tmp"
        outside.write_bytes(b"data")
        assert not registry.is_genuine_upload(outside)

    def test_symlink_is_not_genuine(self, registry, tmp_path):
        path, _ = registry.spool(io.BytesIO(b"data"))
        link = registry.directory / "link.tmp"
        os.symlink(path, link)
        assert not registry.is_genuine_upload(link)

    def test_replaced_by_symlink_is_not_genuine(self, registry, tmp_path):
        path, _ = registry.spool(io.BytesIO(b"data"))
        secret = tmp_path / "secret.txt"
        secret.write_text("secret")
        path.unlink()
        os.symlink(secret, path)
        assert not registry.is_genuine_upload(path)

    def test_missing_file_is_not_genuine(self, registry):
        path, _ = registry.spool(io.BytesIO(b"data"))
        path.unlink()
        assert not registry.is_genuine_upload(path)

    @pytest.mark.parametrize("value", [None, "", "/dev/null"])
    def test_junk_locations(self, registry, value):
        assert not registry.is_genuine_upload(value)

    def test_discard_forgets_and_removes(self, registry):
        path, _ = registry.spool(io.BytesIO(b"data"))

        registry.discard(path)

        assert not path.exists()
        assert not registry.is_genuine_upload(path)

    def test_discard_ignores_foreign_paths(self, registry, tmp_path):
        foreign = tmp_path / "keep.txt"
        foreign.write_text("keep")

        registry.discard(foreign)

        assert foreign.exists()

    def test_discard_after_relocation(self, registry):
        path, _ = registry.spool(io.BytesIO(b"data"))
        path.unlink()
        registry.discard(path)
        assert not registry.is_genuine_upload(path)


def test_registry_is_an_origin_verifier(registry):
    from safe_upload.core.protocols import UploadOriginVerifier

    assert isinstance(registry, UploadOriginVerifier)
