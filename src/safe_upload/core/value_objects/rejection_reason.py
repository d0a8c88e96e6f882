"""Rejection reason value object.

ONLY rejection reason - the closed set of ways an upload candidate can be
turned away by the pipeline.
"""

from enum import Enum


class RejectionReason(str, Enum):
    """Why a candidate was rejected."""

    TRANSPORT_ERROR = "transport_error"
    DISALLOWED_TYPE = "disallowed_type"
    SIZE_OUT_OF_BOUNDS = "size_out_of_bounds"
    NOT_AN_IMAGE = "not_an_image"
    DIMENSION_OUT_OF_BOUNDS = "dimension_out_of_bounds"
    INVALID_NAME = "invalid_name"
    UNTRUSTED_SOURCE = "untrusted_source"
    DESTINATION_EXISTS = "destination_exists"
    PERSISTENCE_FAILED = "persistence_failed"
    UNKNOWN_FAILURE = "unknown_failure"

    def __str__(self) -> str:
        return self.value
