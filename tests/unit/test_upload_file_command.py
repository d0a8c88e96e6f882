"""Unit tests for the upload file command."""

import errno
import itertools
import logging
from pathlib import Path

import pytest

from safe_upload.application.commands import UploadFileCommand, create_upload_file_command
from safe_upload.application.services import FileNamer
from safe_upload.core.entities import Accepted, Rejected, UploadCandidate
from safe_upload.core.exceptions import ConfigurationError
from safe_upload.core.value_objects import ImageDimensions, RejectionReason, TransportError


def _listing(directory: Path):
    return sorted(p.name for p in directory.iterdir())


@pytest.fixture
def command(registry, image_policy):
    """Command wired with the Pillow inspector and the test registry."""
    return create_upload_file_command(origin_verifier=registry, policy=image_policy)


class TestAcceptedUploads:
    """Test candidates that pass every stage."""

    def test_photo_with_desired_name(self, command, spooled_candidate, photo_png, destination_dir):
        candidate = spooled_candidate(photo_png, desired_base_name="photo")

        outcome = command.execute(candidate)

        assert isinstance(outcome, Accepted)
        assert outcome.accepted is True
        assert outcome.final_name == "photo.png"
        assert outcome.extension == "png"
        assert outcome.size == len(photo_png)
        assert outcome.dimensions == ImageDimensions(800, 600)
        assert outcome.destination_path == destination_dir.resolve() / "photo.png"
        assert outcome.destination_path.read_bytes() == photo_png
        assert not candidate.temporary_location.exists()

    def test_photo_with_generated_name(self, command, spooled_candidate, photo_png, destination_dir):
        outcome = command.execute(spooled_candidate(photo_png))

        assert isinstance(outcome, Accepted)
        assert outcome.final_name.endswith(".png")
        assert len(outcome.final_name) == len("0" * 32 + ".png")
        assert _listing(destination_dir) == [outcome.final_name]
        assert (destination_dir / outcome.final_name).read_bytes() == photo_png

    def test_final_extension_is_lower_cased_name_extension(self, command, spooled_candidate, photo_png):
        candidate = spooled_candidate(photo_png, claimed_name="PHOTO.JPG", claimed_content_type="image/png")

        outcome = command.execute(candidate)

        assert outcome.extension == "jpg"
        assert outcome.final_name.endswith(".jpg")

    def test_jpeg_upload(self, command, spooled_candidate, photo_jpeg):
        candidate = spooled_candidate(photo_jpeg, claimed_name="cat.jpg", claimed_content_type="image/jpg")
        outcome = command.execute(candidate)
        assert outcome.dimensions == ImageDimensions(640, 480)

    def test_no_image_decoding_when_not_required(self, registry, basic_policy, spooled_candidate, mocker):
        inspector = mocker.Mock()
        command = UploadFileCommand(origin_verifier=registry, policy=basic_policy, image_inspector=inspector)

        outcome = command.execute(spooled_candidate(b"not really an image"))

        assert outcome.accepted
        assert outcome.dimensions is None
        inspector.read_dimensions.assert_not_called()

    def test_accept_is_logged(self, command, spooled_candidate, photo_png, caplog):
        with caplog.at_level(logging.INFO, logger="safe_upload"):
            outcome = command.execute(spooled_candidate(photo_png, desired_base_name="logged"))

        assert outcome.accepted
        assert "logged.png" in caplog.text

    def test_to_dict_hides_absolute_path(self, command, spooled_candidate, photo_png, destination_dir):
        data = command.execute(spooled_candidate(photo_png, desired_base_name="photo")).to_dict()

        assert data == {
            "accepted": True,
            "final_name": "photo.png",
            "extension": "png",
            "size": len(photo_png),
            "width": 800,
            "height": 600,
        }
        assert str(destination_dir) not in str(data)


class TestRejectedUploads:
    """Test each rejection path and that nothing reaches the destination."""

    @pytest.mark.parametrize("code", [c for c in TransportError if c.is_error])
    def test_transport_error(self, command, spooled_candidate, photo_png, destination_dir, code):
        candidate = spooled_candidate(photo_png)
        candidate = UploadCandidate(
            claimed_name=candidate.claimed_name,
            claimed_content_type=candidate.claimed_content_type,
            reported_size=candidate.reported_size,
            temporary_location=candidate.temporary_location,
            transport_error=code,
        )

        outcome = command.execute(candidate)

        assert isinstance(outcome, Rejected)
        assert outcome.reason is RejectionReason.TRANSPORT_ERROR
        assert outcome.http_status == 400
        assert _listing(destination_dir) == []

    def test_transport_error_message(self, command):
        candidate = UploadCandidate("photo.png", "image/png", 0, transport_error=TransportError.INI_SIZE)
        outcome = command.execute(candidate)
        assert outcome.message == "File is larger than the size allowed by the server"

    @pytest.mark.parametrize("code", [5, 99])
    def test_unassigned_transport_code(self, command, spooled_candidate, photo_png, destination_dir, code):
        spooled = spooled_candidate(photo_png)
        candidate = UploadCandidate.from_transport(
            "photo.png", "image/png", len(photo_png),
            temporary_location=spooled.temporary_location,
            transport_error=code,
        )

        outcome = command.execute(candidate)

        assert candidate.transport_error is TransportError.UNKNOWN
        assert outcome.reason is RejectionReason.TRANSPORT_ERROR
        assert outcome.http_status == 400
        assert outcome.message == "File upload failed for an unknown reason. Please try again later"
        assert _listing(destination_dir) == []

    def test_disallowed_type(self, command, spooled_candidate, destination_dir):
        candidate = spooled_candidate(
            b"MZ" + b"\x00" * 200, claimed_name="evil.exe", claimed_content_type="application/octet-stream"
        )

        outcome = command.execute(candidate)

        assert outcome.reason is RejectionReason.DISALLOWED_TYPE
        assert outcome.http_status == 415
        assert outcome.message == "This is not an allowed file type. Please only upload (jpg, png) file types"
        assert _listing(destination_dir) == []

    def test_size_checked_before_decode(self, registry, image_policy, mocker, tmp_path):
        inspector = mocker.Mock()
        command = UploadFileCommand(origin_verifier=registry, policy=image_policy, image_inspector=inspector)
        candidate = UploadCandidate(
            "photo.png", "image/png", 10_000_000, temporary_location=tmp_path / "upload.tmp"
        )

        outcome = command.execute(candidate)

        assert outcome.reason is RejectionReason.SIZE_OUT_OF_BOUNDS
        assert outcome.http_status == 413
        inspector.read_dimensions.assert_not_called()

    def test_degenerate_image(self, command, spooled_candidate, tiny_png, destination_dir):
        outcome = command.execute(spooled_candidate(tiny_png))

        assert outcome.reason is RejectionReason.DIMENSION_OUT_OF_BOUNDS
        assert outcome.message == "This file is either too small or corrupted to be an image file"
        assert _listing(destination_dir) == []

    def test_image_too_wide(self, command, spooled_candidate, wide_png):
        outcome = command.execute(spooled_candidate(wide_png))

        assert outcome.reason is RejectionReason.DIMENSION_OUT_OF_BOUNDS
        assert outcome.http_status == 422
        assert outcome.details["width"] == 5000

    def test_not_an_image(self, command, spooled_candidate, destination_dir):
        outcome = command.execute(spooled_candidate(b"\x89PNG but not really" * 10))

        assert outcome.reason is RejectionReason.NOT_AN_IMAGE
        assert outcome.http_status == 415
        assert _listing(destination_dir) == []

    @pytest.mark.parametrize("base_name", [
        "../../etc/passwd",
        "..",
        "sub/dir",
        "..\\..\\windows",
        ".htaccess",
        "",
        "   ",
    ])
    def test_unsafe_desired_name(self, command, spooled_candidate, photo_png, destination_dir, tmp_path, base_name):
        candidate = spooled_candidate(photo_png, desired_base_name=base_name)

        outcome = command.execute(candidate)

        assert outcome.reason is RejectionReason.INVALID_NAME
        assert outcome.http_status == 400
        assert _listing(destination_dir) == []
        assert candidate.temporary_location.exists()
        assert not (tmp_path / "etc").exists()

    def test_untrusted_source(self, command, photo_png, tmp_path, destination_dir):
        planted = tmp_path / "planted.png"
        planted.write_bytes(photo_png)
        candidate = UploadCandidate("photo.png", "image/png", len(photo_png), temporary_location=planted)

        outcome = command.execute(candidate)

        assert outcome.reason is RejectionReason.UNTRUSTED_SOURCE
        assert str(tmp_path) not in str(outcome.details)
        assert planted.exists()
        assert _listing(destination_dir) == []

    def test_same_desired_name_twice_fails_explicitly(self, command, spooled_candidate, photo_png, png_factory, destination_dir):
        first = command.execute(spooled_candidate(photo_png, desired_base_name="avatar"))
        second_bytes = png_factory(640, 480)
        second = command.execute(spooled_candidate(second_bytes, desired_base_name="avatar"))

        assert first.accepted
        assert second.reason is RejectionReason.DESTINATION_EXISTS
        assert second.http_status == 409
        assert (destination_dir / "avatar.png").read_bytes() == photo_png

    def test_rejection_is_logged(self, command, caplog):
        candidate = UploadCandidate("evil.exe", "application/x-msdownload", 10)
        with caplog.at_level(logging.WARNING, logger="safe_upload"):
            command.execute(candidate)
        assert "disallowed_type" in caplog.text
        assert "'evil.exe'" in caplog.text


class TestNameCollisions:
    """Test regeneration of colliding generated names."""

    def test_generated_collision_is_retried(self, registry, image_policy, spooled_candidate, photo_png, destination_dir):
        (destination_dir / "taken.png").write_bytes(b"existing")
        tokens = iter(["taken", "taken", "fresh"])
        command = UploadFileCommand(
            origin_verifier=registry,
            policy=image_policy,
            namer=FileNamer(token_factory=lambda: next(tokens)),
        )

        outcome = command.execute(spooled_candidate(photo_png))

        assert outcome.final_name == "fresh.png"
        assert (destination_dir / "taken.png").read_bytes() == b"existing"

    def test_gives_up_after_max_attempts(self, registry, image_policy, spooled_candidate, photo_png, destination_dir):
        (destination_dir / "taken.png").write_bytes(b"existing")
        counter = itertools.count()

        def token():
            next(counter)
            return "taken"

        command = UploadFileCommand(
            origin_verifier=registry,
            policy=image_policy,
            namer=FileNamer(token_factory=token),
            max_name_attempts=3,
        )

        outcome = command.execute(spooled_candidate(photo_png))

        assert outcome.reason is RejectionReason.UNKNOWN_FAILURE
        assert next(counter) == 3
        assert _listing(destination_dir) == ["taken.png"]

    def test_max_attempts_must_be_positive(self, registry):
        with pytest.raises(ConfigurationError):
            UploadFileCommand(origin_verifier=registry, max_name_attempts=0)


class TestPersistenceFailures:
    """Test relocation failures and diagnostics."""

    @pytest.fixture
    def failing_relocator(self, mocker):
        relocator = mocker.Mock()
        relocator.relocate.side_effect = OSError(errno.EACCES, "Permission denied")
        return relocator

    def test_diagnosed_failure(self, registry, image_policy, spooled_candidate, photo_png, failing_relocator, mocker):
        diagnostics = mocker.Mock()
        diagnostics.diagnose.return_value = "Sorry, the server does not have permission to store uploaded files"
        command = UploadFileCommand(
            origin_verifier=registry,
            policy=image_policy,
            diagnostics=diagnostics,
            relocator=failing_relocator,
        )

        outcome = command.execute(spooled_candidate(photo_png))

        assert outcome.reason is RejectionReason.PERSISTENCE_FAILED
        assert outcome.http_status == 500
        assert outcome.message == "Sorry, the server does not have permission to store uploaded files"
        diagnostics.diagnose.assert_called_once_with(image_policy.destination_directory)

    def test_undiagnosed_failure(self, registry, image_policy, spooled_candidate, photo_png, failing_relocator, mocker):
        diagnostics = mocker.Mock()
        diagnostics.diagnose.return_value = None
        command = UploadFileCommand(
            origin_verifier=registry,
            policy=image_policy,
            diagnostics=diagnostics,
            relocator=failing_relocator,
        )

        outcome = command.execute(spooled_candidate(photo_png))

        assert outcome.reason is RejectionReason.UNKNOWN_FAILURE
        assert outcome.message == "Unknown error occurred, please try later"

    def test_diagnostics_not_consulted_on_success(self, registry, image_policy, spooled_candidate, photo_png, mocker):
        diagnostics = mocker.Mock()
        command = UploadFileCommand(origin_verifier=registry, policy=image_policy, diagnostics=diagnostics)

        assert command.execute(spooled_candidate(photo_png)).accepted
        diagnostics.diagnose.assert_not_called()

    def test_unexpected_exception_becomes_unknown_failure(self, registry, image_policy, spooled_candidate, photo_png, mocker, caplog):
        inspector = mocker.Mock()
        inspector.read_dimensions.side_effect = RuntimeError("decoder crashed")
        command = UploadFileCommand(origin_verifier=registry, policy=image_policy, image_inspector=inspector)

        with caplog.at_level(logging.ERROR, logger="safe_upload"):
            outcome = command.execute(spooled_candidate(photo_png))

        assert outcome.reason is RejectionReason.UNKNOWN_FAILURE
        assert outcome.details == {"error_type": "RuntimeError"}
        assert "decoder crashed" in caplog.text


class TestPolicyHandling:
    """Test per-call policy overrides."""

    def test_per_call_policy_override(self, command, image_policy, spooled_candidate, photo_png):
        gif_only = image_policy.with_allowed_extensions({"gif"})

        outcome = command.execute(spooled_candidate(photo_png), policy=gif_only)

        assert outcome.reason is RejectionReason.DISALLOWED_TYPE
        assert command.policy is image_policy

    def test_override_does_not_leak_into_next_call(self, command, image_policy, spooled_candidate, photo_png):
        command.execute(spooled_candidate(photo_png), policy=image_policy.without_image_validation())
        assert command.execute(spooled_candidate(photo_png)).dimensions == ImageDimensions(800, 600)

    def test_missing_policy_is_a_configuration_error(self, registry):
        command = UploadFileCommand(origin_verifier=registry)
        with pytest.raises(ConfigurationError):
            command.execute(UploadCandidate("photo.png", "image/png", 10))

    def test_candidate_rejected_before_filesystem_access(self, command, destination_dir):
        candidate = UploadCandidate("photo.png", "image/png", 1, transport_error=TransportError.PARTIAL)
        assert command.execute(candidate).reason is RejectionReason.TRANSPORT_ERROR
        assert _listing(destination_dir) == []
